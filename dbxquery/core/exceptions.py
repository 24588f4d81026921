"""Custom exception hierarchy.

Every exception carries the ErrorClass its query outcome is reported with, so
the router converts failures into outcomes without a lookup table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .enums import ErrorClass

if TYPE_CHECKING:
    from .enums import ResourceKind


class DataSourceError(Exception):
    """Base exception for all library errors."""

    error_class: ErrorClass = ErrorClass.INTERNAL


class ConfigurationError(DataSourceError):
    """Data source settings are missing or invalid."""

    pass


class QueryValidationError(DataSourceError):
    """Query payload or resource parameters could not be parsed.

    Raised before any remote call is made. ``field`` names the offending
    payload field when it is known.
    """

    error_class = ErrorClass.BAD_REQUEST

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        resource_kind: ResourceKind | str | None = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.resource_kind = resource_kind


class UnknownResourceKindError(QueryValidationError):
    """Resource kind tag is not registered."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"unknown resource kind: {value!r}",
            field="resourceType",
            resource_kind=value,
        )
        self.value = value


class ClientAcquisitionError(DataSourceError):
    """Authenticated workspace client could not be obtained."""

    pass


class RemoteAPIError(DataSourceError):
    """Error returned by (or while talking to) the Databricks REST API."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        error_code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_code = error_code


class QueryCancelledError(RemoteAPIError):
    """Query context was cancelled or its deadline passed."""

    pass
