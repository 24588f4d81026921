"""Typed listing requests, one per resource kind.

Requests are frozen once built. ``to_query_params`` renders them in the
query-string form the Databricks REST API expects; unset filters are omitted
rather than sent as empty values.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Per-page sizes are fixed by the remote protocol and independent of the
# caller's result cap.
JOB_RUNS_PAGE_LIMIT = 25  # max page size of jobs/runs/list
PIPELINES_PAGE_LIMIT = 100
PIPELINE_UPDATES_PAGE_LIMIT = 100


def _flag(value: bool) -> str:
    return "true" if value else "false"


class ListRunsRequest(BaseModel):
    """Request for ``GET /api/2.1/jobs/runs/list``."""

    limit: int = Field(default=JOB_RUNS_PAGE_LIMIT, gt=0)
    job_id: int | None = None
    active_only: bool = False
    completed_only: bool = False
    run_type: str | None = None
    start_time_from: int | None = None
    start_time_to: int | None = None

    model_config = ConfigDict(frozen=True)

    def to_query_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {"limit": self.limit}
        if self.job_id is not None:
            params["job_id"] = self.job_id
        if self.active_only:
            params["active_only"] = _flag(self.active_only)
        if self.completed_only:
            params["completed_only"] = _flag(self.completed_only)
        if self.run_type:
            params["run_type"] = self.run_type
        if self.start_time_from is not None:
            params["start_time_from"] = self.start_time_from
        if self.start_time_to is not None:
            params["start_time_to"] = self.start_time_to
        return params


class ListPipelinesRequest(BaseModel):
    """Request for ``GET /api/2.0/pipelines``."""

    filter: str | None = None
    max_results: int = Field(default=PIPELINES_PAGE_LIMIT, gt=0)

    model_config = ConfigDict(frozen=True)

    def to_query_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {"max_results": self.max_results}
        if self.filter:
            params["filter"] = self.filter
        return params


class ListUpdatesRequest(BaseModel):
    """Request for ``GET /api/2.0/pipelines/{pipeline_id}/updates``."""

    pipeline_id: str
    max_results: int = Field(default=PIPELINE_UPDATES_PAGE_LIMIT, gt=0)

    model_config = ConfigDict(frozen=True)

    def to_query_params(self) -> dict[str, Any]:
        return {"max_results": self.max_results}
