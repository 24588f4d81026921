"""Resource registration utilities.

This module provides utilities for registering the built-in resource kinds
with a ResourceRegistry.
"""

from __future__ import annotations

from dbxquery.resources import (
    JOB_RUNS_HANDLER,
    PIPELINE_UPDATES_HANDLER,
    PIPELINES_HANDLER,
)
from dbxquery.runtime.registry import ResourceRegistry

__all__ = [
    "register_job_runs",
    "register_pipelines",
    "register_pipeline_updates",
    "register_all",
]


def register_job_runs(registry: ResourceRegistry) -> None:
    registry.register(JOB_RUNS_HANDLER)


def register_pipelines(registry: ResourceRegistry) -> None:
    registry.register(PIPELINES_HANDLER)


def register_pipeline_updates(registry: ResourceRegistry) -> None:
    registry.register(PIPELINE_UPDATES_HANDLER)


def register_all(registry: ResourceRegistry) -> None:
    """Register every built-in resource kind.

    Args:
        registry: Registry to populate
    """
    register_job_runs(registry)
    register_pipelines(registry)
    register_pipeline_updates(registry)
