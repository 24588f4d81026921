"""Pipelines resource, backed by ``GET /api/2.0/pipelines``."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from ..core.enums import FieldType, ResourceKind
from ..models.frame import Frame
from ..models.query import TimeRange
from ..models.requests import ListPipelinesRequest
from ..models.resources import PipelineStateInfo
from ..runtime.fetcher import PagedIterator
from ..runtime.registry import ResourceClient, ResourceHandler

FRAME_NAME = "pipelines"

SCHEMA: tuple[tuple[str, FieldType], ...] = (
    ("Pipeline Id", FieldType.STRING),
    ("Pipeline Name", FieldType.STRING),
    ("State", FieldType.STRING),
)


class PipelineParams(BaseModel):
    """Resource params accepted for pipeline queries."""

    filter: str | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


def build_request(params: PipelineParams, _time_range: TimeRange | None) -> ListPipelinesRequest:
    # filter expression is validated by the API, not here
    return ListPipelinesRequest(filter=params.filter or None)


def open_listing(
    client: ResourceClient, request: ListPipelinesRequest
) -> PagedIterator[PipelineStateInfo]:
    return client.list_pipelines(request)


def build_frame(pipelines: Sequence[PipelineStateInfo]) -> Frame:
    """Project pipelines into a frame, keeping fetch order."""
    return Frame.from_rows(
        FRAME_NAME,
        SCHEMA,
        ((p.pipeline_id, p.name, p.state) for p in pipelines),
    )


HANDLER = ResourceHandler(
    kind=ResourceKind.PIPELINES,
    params_model=PipelineParams,
    build_request=build_request,
    open_listing=open_listing,
    build_frame=build_frame,
)
