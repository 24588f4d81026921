"""Per-sub-query outcomes and the keyed batch response."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..core.enums import ErrorClass
from ..core.exceptions import DataSourceError
from .frame import Frame


@dataclass(frozen=True)
class QueryOutcome:
    """Either exactly one frame or one classified error."""

    frame: Frame | None = None
    error_class: ErrorClass | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        if (self.frame is None) == (self.error_class is None):
            raise ValueError("QueryOutcome needs exactly one of frame or error_class")

    @classmethod
    def success(cls, frame: Frame) -> QueryOutcome:
        return cls(frame=frame)

    @classmethod
    def failure(cls, error_class: ErrorClass, message: str) -> QueryOutcome:
        return cls(error_class=error_class, message=message)

    @classmethod
    def from_error(cls, error: DataSourceError, context: str | None = None) -> QueryOutcome:
        """Build a failure outcome classified by the exception's error class."""
        message = f"{context}: {error}" if context else str(error)
        return cls.failure(error.error_class, message)

    @property
    def ok(self) -> bool:
        return self.frame is not None

    def to_dict(self) -> dict[str, Any]:
        if self.frame is not None:
            return {"frame": self.frame.model_dump(mode="json")}
        return {"error_class": self.error_class.value, "message": self.message}


@dataclass
class QueryDataResponse:
    """Outcomes keyed by sub-query ref id."""

    responses: dict[str, QueryOutcome] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.responses)

    def __getitem__(self, ref_id: str) -> QueryOutcome:
        return self.responses[ref_id]

    def to_dict(self) -> dict[str, Any]:
        return {ref_id: outcome.to_dict() for ref_id, outcome in self.responses.items()}
