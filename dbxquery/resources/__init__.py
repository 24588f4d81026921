"""Built-in resource kinds.

Each module defines the kind's params model, request builder, listing opener
and frame projector, and exposes them as a module-level ``HANDLER``.
"""

from .job_runs import HANDLER as JOB_RUNS_HANDLER
from .pipeline_updates import HANDLER as PIPELINE_UPDATES_HANDLER
from .pipelines import HANDLER as PIPELINES_HANDLER

__all__ = [
    "JOB_RUNS_HANDLER",
    "PIPELINES_HANDLER",
    "PIPELINE_UPDATES_HANDLER",
]
