"""Databricks REST API result items.

These models mirror the JSON objects returned by the listing endpoints. Every
field defaults to its zero value and unknown fields are ignored, so a record
missing an attribute still projects into a complete frame row.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class ResultItem(BaseModel):
    """Base for API result records."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # explicit JSON nulls fall back to the field default
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class RunStatus(ResultItem):
    state: str = ""


class RunState(ResultItem):
    life_cycle_state: str = ""
    result_state: str = ""
    state_message: str = ""


class BaseRun(ResultItem):
    """Job run record (``runs[]`` of jobs/runs/list). Times are epoch ms."""

    job_id: int = 0
    run_id: int = 0
    run_name: str = ""
    description: str = ""
    attempt_number: int = 0
    start_time: int = 0
    end_time: int = 0
    queue_duration: int = 0
    run_duration: int = 0
    run_page_url: str = ""
    run_type: str = ""
    status: RunStatus | None = None
    state: RunState | None = None


class PipelineStateInfo(ResultItem):
    """Pipeline record (``statuses[]`` of pipelines list)."""

    pipeline_id: str = ""
    name: str = ""
    state: str = ""
    cluster_id: str = ""
    creator_user_name: str = ""
    health: str = ""


class UpdateInfo(ResultItem):
    """Pipeline update record (``updates[]`` of pipeline updates list)."""

    update_id: str = ""
    pipeline_id: str = ""
    creation_time: int = 0
    cause: str = ""
    state: str = ""
    cluster_id: str = ""
    full_refresh: bool = False
