"""Databricks REST API paths and client defaults."""

from __future__ import annotations

from urllib.parse import quote

JOBS_RUNS_LIST_PATH = "/api/2.1/jobs/runs/list"
PIPELINES_LIST_PATH = "/api/2.0/pipelines"
CURRENT_USER_PATH = "/api/2.0/preview/scim/v2/Me"

# OAuth machine-to-machine (service principal) token endpoint
OIDC_TOKEN_PATH = "/oidc/v1/token"
OAUTH_SCOPE = "all-apis"
# Refresh tokens this many seconds before they expire
TOKEN_EXPIRY_LEEWAY = 60
DEFAULT_TOKEN_LIFETIME = 3600

DEFAULT_TIMEOUT = 30.0


def pipeline_updates_path(pipeline_id: str) -> str:
    """Path of the updates listing for one pipeline."""
    return f"{PIPELINES_LIST_PATH}/{quote(pipeline_id, safe='')}/updates"
