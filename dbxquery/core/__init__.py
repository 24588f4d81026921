"""Core components."""

from .context import QueryContext
from .enums import ErrorClass, FieldType, ResourceKind
from .exceptions import (
    ClientAcquisitionError,
    ConfigurationError,
    DataSourceError,
    QueryCancelledError,
    QueryValidationError,
    RemoteAPIError,
    UnknownResourceKindError,
)
from .timeutil import EPOCH, from_epoch_millis, to_epoch_millis

__all__ = [
    "QueryContext",
    "ErrorClass",
    "FieldType",
    "ResourceKind",
    "DataSourceError",
    "ConfigurationError",
    "QueryValidationError",
    "UnknownResourceKindError",
    "ClientAcquisitionError",
    "RemoteAPIError",
    "QueryCancelledError",
    "EPOCH",
    "from_epoch_millis",
    "to_epoch_millis",
]
