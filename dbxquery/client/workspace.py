"""Databricks workspace client exposing paged listings per resource kind.

Architecture:
    The WorkspaceClient binds an HTTPClient and a TokenSource to one
    workspace. Each ``list_*`` method returns a RestPagedIterator whose page
    fetcher renders the typed request into query params, follows
    ``next_page_token`` and validates records into result models. Nothing is
    fetched until the iterator is pulled.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..core.context import QueryContext
from ..core.exceptions import ClientAcquisitionError, RemoteAPIError
from ..models.requests import ListPipelinesRequest, ListRunsRequest, ListUpdatesRequest
from ..models.resources import BaseRun, PipelineStateInfo, UpdateInfo
from .auth import OAuthTokenSource, TokenSource
from .config import DataSourceSettings
from .constants import (
    CURRENT_USER_PATH,
    JOBS_RUNS_LIST_PATH,
    PIPELINES_LIST_PATH,
    pipeline_updates_path,
)
from .http import HTTPClient
from .listing import Page, RestPagedIterator

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", bound=BaseModel)


class WorkspaceClient:
    """Authenticated client for one Databricks workspace."""

    def __init__(
        self,
        settings: DataSourceSettings,
        *,
        http: HTTPClient | None = None,
        token_source: TokenSource | None = None,
    ) -> None:
        self.settings = settings
        self._http = http or HTTPClient(settings.workspace, timeout=settings.timeout)
        self._token_source = token_source or OAuthTokenSource(
            self._http,
            client_id=settings.client_id,
            client_secret=settings.client_secret.get_secret_value(),
        )

    @property
    def host(self) -> str:
        return self.settings.workspace

    async def get(
        self, ctx: QueryContext, path: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Authenticated GET returning the decoded JSON object."""
        token = await self._token_source.token(ctx)
        return await self._http.request_json(
            ctx,
            "GET",
            path,
            params=params,
            headers={"Authorization": f"Bearer {token}"},
        )

    def list_runs(self, request: ListRunsRequest) -> RestPagedIterator[BaseRun]:
        async def fetch_page(ctx: QueryContext, page_token: str | None) -> Page[BaseRun]:
            params = _with_token(request.to_query_params(), page_token)
            payload = await self.get(ctx, JOBS_RUNS_LIST_PATH, params)
            runs = _parse_items(BaseRun, payload.get("runs"), JOBS_RUNS_LIST_PATH)
            # jobs API signals the last page with has_more=false
            next_token = payload.get("next_page_token") if payload.get("has_more") else None
            return Page(items=runs, next_page_token=next_token)

        return RestPagedIterator(fetch_page)

    def list_pipelines(
        self, request: ListPipelinesRequest
    ) -> RestPagedIterator[PipelineStateInfo]:
        async def fetch_page(ctx: QueryContext, page_token: str | None) -> Page[PipelineStateInfo]:
            params = _with_token(request.to_query_params(), page_token)
            payload = await self.get(ctx, PIPELINES_LIST_PATH, params)
            statuses = _parse_items(PipelineStateInfo, payload.get("statuses"), PIPELINES_LIST_PATH)
            return Page(items=statuses, next_page_token=payload.get("next_page_token"))

        return RestPagedIterator(fetch_page)

    def list_updates(self, request: ListUpdatesRequest) -> RestPagedIterator[UpdateInfo]:
        path = pipeline_updates_path(request.pipeline_id)

        async def fetch_page(ctx: QueryContext, page_token: str | None) -> Page[UpdateInfo]:
            payload = await self.get(ctx, path, _with_token(request.to_query_params(), page_token))
            updates = _parse_items(UpdateInfo, payload.get("updates"), path)
            return Page(items=updates, next_page_token=payload.get("next_page_token"))

        return RestPagedIterator(fetch_page)

    async def current_user(self, ctx: QueryContext) -> dict[str, Any]:
        """Identity of the authenticated principal."""
        return await self.get(ctx, CURRENT_USER_PATH)

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> WorkspaceClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


def create_workspace_client(settings: DataSourceSettings) -> WorkspaceClient:
    """Create a client authenticating as the configured service principal.

    Raises:
        ClientAcquisitionError: If client id or secret is missing
    """
    if not settings.has_credentials:
        raise ClientAcquisitionError(
            "authentication is missing: client id and secret are required"
        )
    logger.debug("Creating workspace client", extra={"workspace": settings.workspace})
    return WorkspaceClient(settings)


def _with_token(params: dict[str, Any], page_token: str | None) -> dict[str, Any]:
    if page_token:
        params["page_token"] = page_token
    return params


def _parse_items(model: type[ItemT], raw: Any, path: str) -> list[ItemT]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise RemoteAPIError(f"GET {path}: expected a list of records")
    try:
        return [model.model_validate(item) for item in raw]
    except ValidationError as e:
        detail = e.errors()[0].get("msg")
        raise RemoteAPIError(f"GET {path}: unexpected record shape: {detail}") from e
