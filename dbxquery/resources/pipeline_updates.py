"""Pipeline updates resource, backed by ``GET /api/2.0/pipelines/{id}/updates``."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import FieldType, ResourceKind
from ..core.timeutil import from_epoch_millis
from ..models.frame import Frame
from ..models.query import TimeRange
from ..models.requests import PIPELINE_UPDATES_PAGE_LIMIT, ListUpdatesRequest
from ..models.resources import UpdateInfo
from ..runtime.fetcher import PagedIterator
from ..runtime.registry import ResourceClient, ResourceHandler

FRAME_NAME = "pipeline updates"

SCHEMA: tuple[tuple[str, FieldType], ...] = (
    ("Creation Time", FieldType.TIME),
    ("Update Id", FieldType.STRING),
    ("Pipeline Id", FieldType.STRING),
    ("Cause", FieldType.STRING),
    ("State", FieldType.STRING),
)


class PipelineUpdatesParams(BaseModel):
    """Resource params accepted for pipeline update queries."""

    pipeline_id: str = Field(..., alias="pipelineId", min_length=1)

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


def build_request(
    params: PipelineUpdatesParams, _time_range: TimeRange | None
) -> ListUpdatesRequest:
    # an unknown pipeline id surfaces as a remote error
    return ListUpdatesRequest(
        pipeline_id=params.pipeline_id,
        max_results=PIPELINE_UPDATES_PAGE_LIMIT,
    )


def open_listing(client: ResourceClient, request: ListUpdatesRequest) -> PagedIterator[UpdateInfo]:
    return client.list_updates(request)


def build_frame(updates: Sequence[UpdateInfo]) -> Frame:
    """Project pipeline updates into a frame, keeping fetch order."""
    return Frame.from_rows(
        FRAME_NAME,
        SCHEMA,
        (
            (
                from_epoch_millis(u.creation_time),
                u.update_id,
                u.pipeline_id,
                u.cause,
                u.state,
            )
            for u in updates
        ),
    )


HANDLER = ResourceHandler(
    kind=ResourceKind.PIPELINE_UPDATES,
    params_model=PipelineUpdatesParams,
    build_request=build_request,
    open_listing=open_listing,
    build_frame=build_frame,
)
