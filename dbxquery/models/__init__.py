"""Data models for queries, requests, API records and frames.

Architecture:
    Pydantic v2 models, frozen so that descriptors, requests, records and
    frames cannot change after construction. Outcomes are plain frozen
    dataclasses since they are never validated from external input.

Model Categories:
    - Inbound: DataQuery, QueryDataRequest, QueryDescriptor, TimeRange
    - Requests: ListRunsRequest, ListPipelinesRequest, ListUpdatesRequest
    - Records: BaseRun, PipelineStateInfo, UpdateInfo
    - Outbound: Frame, FrameField, QueryOutcome, QueryDataResponse
"""

from .frame import Frame, FrameField
from .outcome import QueryDataResponse, QueryOutcome
from .query import (
    DEFAULT_RESULT_CAP,
    DataQuery,
    QueryDataRequest,
    QueryDescriptor,
    TimeRange,
    parse_params,
)
from .requests import (
    JOB_RUNS_PAGE_LIMIT,
    PIPELINE_UPDATES_PAGE_LIMIT,
    PIPELINES_PAGE_LIMIT,
    ListPipelinesRequest,
    ListRunsRequest,
    ListUpdatesRequest,
)
from .resources import BaseRun, PipelineStateInfo, RunState, RunStatus, UpdateInfo

__all__ = [
    "DEFAULT_RESULT_CAP",
    "DataQuery",
    "QueryDataRequest",
    "QueryDescriptor",
    "TimeRange",
    "parse_params",
    "JOB_RUNS_PAGE_LIMIT",
    "PIPELINES_PAGE_LIMIT",
    "PIPELINE_UPDATES_PAGE_LIMIT",
    "ListRunsRequest",
    "ListPipelinesRequest",
    "ListUpdatesRequest",
    "BaseRun",
    "RunState",
    "RunStatus",
    "PipelineStateInfo",
    "UpdateInfo",
    "Frame",
    "FrameField",
    "QueryOutcome",
    "QueryDataResponse",
]
