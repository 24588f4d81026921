"""Job runs resource: params, request builder and frame projector.

Backed by ``GET /api/2.1/jobs/runs/list``.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import FieldType, ResourceKind
from ..core.exceptions import QueryValidationError
from ..core.timeutil import from_epoch_millis, to_epoch_millis
from ..models.frame import Frame
from ..models.query import TimeRange
from ..models.requests import JOB_RUNS_PAGE_LIMIT, ListRunsRequest
from ..models.resources import BaseRun
from ..runtime.fetcher import PagedIterator
from ..runtime.registry import ResourceClient, ResourceHandler

FRAME_NAME = "Databricks Job Runs"

SCHEMA: tuple[tuple[str, FieldType], ...] = (
    ("Start Time", FieldType.TIME),
    ("End Time", FieldType.TIME),
    ("Job ID", FieldType.STRING),
    ("Run ID", FieldType.STRING),
    ("Run Name", FieldType.STRING),
    ("Description", FieldType.STRING),
    ("Attempt Number", FieldType.INT32),
    ("Status", FieldType.STRING),
    ("Queue Duration (milliseconds)", FieldType.INT64),
    ("Run Duration (milliseconds)", FieldType.INT64),
    ("Run URL", FieldType.STRING),
)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


class JobRunParams(BaseModel):
    """Resource params accepted for job run queries."""

    job_id: str = Field(default="", alias="jobId")
    active_only: bool = Field(default=False, alias="activeOnly")
    completed_only: bool = Field(default=False, alias="completedOnly")
    run_type: str = Field(default="", alias="runType")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


def parse_job_id(value: str) -> int:
    """Parse a job id as a base-10 signed 64-bit integer.

    Raises:
        QueryValidationError: If the value is not a decimal integer in range
    """
    if not _DECIMAL_RE.fullmatch(value):
        raise QueryValidationError(
            f"invalid jobId {value!r}: not a base-10 integer",
            field="jobId",
            resource_kind=ResourceKind.JOB_RUNS,
        )
    job_id = int(value)
    if not _INT64_MIN <= job_id <= _INT64_MAX:
        raise QueryValidationError(
            f"invalid jobId {value!r}: out of range",
            field="jobId",
            resource_kind=ResourceKind.JOB_RUNS,
        )
    return job_id


def build_request(params: JobRunParams, time_range: TimeRange | None) -> ListRunsRequest:
    """Build a runs listing request from query params and the dashboard time range.

    The time range becomes a start-time filter only when both bounds are set;
    a half-open range applies no time filter at all.
    """
    job_id = parse_job_id(params.job_id) if params.job_id else None

    start_time_from = start_time_to = None
    if time_range is not None and time_range.is_set:
        start_time_from = to_epoch_millis(time_range.from_)
        start_time_to = to_epoch_millis(time_range.to)

    return ListRunsRequest(
        limit=JOB_RUNS_PAGE_LIMIT,
        job_id=job_id,
        active_only=params.active_only,
        completed_only=params.completed_only,
        run_type=params.run_type or None,
        start_time_from=start_time_from,
        start_time_to=start_time_to,
    )


def open_listing(client: ResourceClient, request: ListRunsRequest) -> PagedIterator[BaseRun]:
    return client.list_runs(request)


def build_frame(runs: Sequence[BaseRun]) -> Frame:
    """Project job runs into a frame sorted ascending by start time.

    The sort is stable: runs with equal start times keep their fetch order.
    """
    ordered = sorted(runs, key=lambda run: run.start_time)
    return Frame.from_rows(
        FRAME_NAME,
        SCHEMA,
        (
            (
                from_epoch_millis(run.start_time),
                from_epoch_millis(run.end_time),
                str(run.job_id),
                str(run.run_id),
                run.run_name,
                run.description,
                run.attempt_number,
                run.status.state if run.status else "",
                run.queue_duration,
                run.run_duration,
                run.run_page_url,
            )
            for run in ordered
        ),
    )


HANDLER = ResourceHandler(
    kind=ResourceKind.JOB_RUNS,
    params_model=JobRunParams,
    build_request=build_request,
    open_listing=open_listing,
    build_frame=build_frame,
)
