"""Inbound query models.

A batch request carries several DataQuery entries. Each entry's opaque JSON
payload is parsed into an immutable QueryDescriptor; the resource-specific
``resourceParams`` blob stays untyped here and is validated later by the
resource kind's own params model (see ``parse_params``).
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..core.enums import ResourceKind
from ..core.exceptions import QueryValidationError
from ..core.timeutil import to_epoch_millis

DEFAULT_RESULT_CAP = 200

ParamsT = TypeVar("ParamsT", bound=BaseModel)


class TimeRange(BaseModel):
    """Ambient dashboard time range."""

    from_: datetime | None = Field(default=None, alias="from")
    to: datetime | None = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def is_set(self) -> bool:
        """True only when both bounds are present and non-zero."""
        if self.from_ is None or self.to is None:
            return False
        return to_epoch_millis(self.from_) != 0 and to_epoch_millis(self.to) != 0


class QueryDescriptor(BaseModel):
    """Parsed query payload for one sub-query."""

    resource_type: str = Field(default="", alias="resourceType")
    resource_params: dict[str, Any] | None = Field(default=None, alias="resourceParams")
    limit: int | None = Field(default=None, gt=0)
    query_text: str | None = Field(default=None, alias="queryText")
    time_range: TimeRange | None = Field(default=None, exclude=True)

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @property
    def resource_kind(self) -> ResourceKind | None:
        return ResourceKind.from_str(self.resource_type)

    @property
    def max_items(self) -> int:
        """Result cap for this query."""
        return self.limit if self.limit is not None else DEFAULT_RESULT_CAP

    @classmethod
    def parse(
        cls,
        payload: str | bytes | dict[str, Any] | None,
        *,
        time_range: TimeRange | None = None,
    ) -> QueryDescriptor:
        """Parse a raw query payload.

        Args:
            payload: JSON text/bytes or an already-decoded mapping
            time_range: Ambient time range of the request

        Returns:
            Immutable QueryDescriptor

        Raises:
            QueryValidationError: If the payload is not a valid query object
        """
        if payload is None or payload == "" or payload == b"":
            raise QueryValidationError("invalid query payload: empty", field="payload")
        try:
            if isinstance(payload, (str, bytes, bytearray)):
                descriptor = cls.model_validate_json(payload)
            else:
                descriptor = cls.model_validate(payload)
        except ValidationError as e:
            raise _to_query_error("invalid query payload", e) from e
        return descriptor.model_copy(update={"time_range": time_range})


class DataQuery(BaseModel):
    """One named sub-query of a batch request."""

    ref_id: str
    payload: str | bytes | dict[str, Any] | None = None
    time_range: TimeRange | None = None

    model_config = ConfigDict(frozen=True)


class QueryDataRequest(BaseModel):
    """Batch of sub-queries, processed in order."""

    queries: list[DataQuery] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


def parse_params(
    model: type[ParamsT],
    raw: dict[str, Any] | None,
    *,
    resource_kind: ResourceKind,
) -> ParamsT:
    """Validate a resource params blob against a resource kind's params model.

    A missing blob validates as an empty object, so models with only optional
    fields accept it and models with required fields reject it.
    """
    try:
        return model.model_validate(raw or {})
    except ValidationError as e:
        raise _to_query_error(
            f"invalid {resource_kind.value} params", e, resource_kind=resource_kind
        ) from e


def _to_query_error(
    prefix: str,
    error: ValidationError,
    *,
    resource_kind: ResourceKind | None = None,
) -> QueryValidationError:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or None
    detail = first.get("msg", str(error))
    message = f"{prefix}: {field}: {detail}" if field else f"{prefix}: {detail}"
    return QueryValidationError(message, field=field, resource_kind=resource_kind)
