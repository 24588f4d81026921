"""Core enumerations shared by every resource kind.

Architecture:
    String enums keep wire values (query payloads, serialized frames, error
    outcomes) identical to the enum value, so no separate mapping tables are
    needed between the dashboard payload and the routing layer.

Key Types:
    - ResourceKind: Which Databricks listing endpoint a query targets
    - ErrorClass: Classification attached to every failed query outcome
    - FieldType: Column types used by tabular frames
"""

from enum import Enum
from typing import Optional

from .timeutil import EPOCH


class ResourceKind(str, Enum):
    """Closed set of resource kinds a query can target.

    Unknown tags are a validation error, never a default.
    """

    JOB_RUNS = "job_runs"
    PIPELINES = "pipelines"
    PIPELINE_UPDATES = "pipeline_updates"

    @classmethod
    def from_str(cls, value: str) -> Optional["ResourceKind"]:
        """Get resource kind from its tag. Returns None if no match."""
        try:
            return cls(value)
        except ValueError:
            return None


class ErrorClass(str, Enum):
    """Classification of a failed query outcome."""

    BAD_REQUEST = "bad_request"
    INTERNAL = "internal"

    @property
    def status_code(self) -> int:
        """HTTP-like status code for this class."""
        return 400 if self is ErrorClass.BAD_REQUEST else 500


class FieldType(str, Enum):
    """Column types supported by tabular frames."""

    TIME = "time"
    STRING = "string"
    INT32 = "int32"
    INT64 = "int64"

    @property
    def zero_value(self) -> object:
        """Value a column of this type receives when the source value is absent."""
        if self is FieldType.TIME:
            return EPOCH
        if self is FieldType.STRING:
            return ""
        return 0
