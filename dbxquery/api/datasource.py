"""Data source facade: batch query execution and health checks.

Architecture:
    DataSource is the high-level entry point a dashboard backend calls. It
    owns the settings and one lazily-created WorkspaceClient shared read-only
    by every sub-query of a batch, and delegates each sub-query to the
    QueryRouter.

Design Decisions:
    - Sequential sub-queries in caller order; each gets exactly one outcome
    - Client factory injection for testability
    - Health check reports problems as results, never raises

See Also:
    - QueryRouter: Executes one sub-query
    - WorkspaceClient: Remote listing capability
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from ..client.config import DataSourceSettings
from ..client.workspace import WorkspaceClient, create_workspace_client
from ..core.context import QueryContext
from ..core.enums import ErrorClass
from ..core.exceptions import ClientAcquisitionError, DataSourceError
from ..models.outcome import QueryDataResponse, QueryOutcome
from ..models.query import QueryDataRequest
from ..runtime.registry import ResourceClient, ResourceRegistry
from ..runtime.router import ClientFactory, QueryRouter

logger = logging.getLogger(__name__)


class HealthStatus(str, Enum):
    OK = "ok"
    ERROR = "error"


@dataclass(frozen=True)
class HealthCheckResult:
    status: HealthStatus
    message: str

    @property
    def ok(self) -> bool:
        return self.status is HealthStatus.OK


class DataSource:
    """Databricks data source answering batches of resource queries."""

    def __init__(
        self,
        settings: DataSourceSettings | None = None,
        *,
        client_factory: ClientFactory | None = None,
        registry: ResourceRegistry | None = None,
    ) -> None:
        """Initialize the data source.

        Args:
            settings: Workspace settings (None when they failed to load)
            client_factory: Optional async client factory (defaults to a
                cached WorkspaceClient built from settings)
            registry: Optional resource registry (defaults to global singleton)
        """
        self.settings = settings
        self._client: WorkspaceClient | None = None
        self._router = QueryRouter(
            client_factory=client_factory or self._get_client,
            registry=registry,
        )

    async def query_data(
        self,
        request: QueryDataRequest,
        ctx: QueryContext | None = None,
    ) -> QueryDataResponse:
        """Execute every sub-query of a batch.

        Failures are isolated per sub-query: the response always holds one
        outcome per submitted ref id.
        """
        ctx = ctx or QueryContext.background()
        response = QueryDataResponse()
        for query in request.queries:
            try:
                outcome = await self._router.route(ctx, query)
            except Exception as e:
                logger.exception("Unhandled error in query", extra={"ref_id": query.ref_id})
                outcome = QueryOutcome.failure(ErrorClass.INTERNAL, f"unexpected error: {e}")
            response.responses[query.ref_id] = outcome
        return response

    async def check_health(self, ctx: QueryContext | None = None) -> HealthCheckResult:
        """Verify settings, credentials and API access."""
        ctx = ctx or QueryContext.background()
        if self.settings is None:
            return HealthCheckResult(HealthStatus.ERROR, "Unable to load settings")
        if not self.settings.has_credentials:
            return HealthCheckResult(HealthStatus.ERROR, "Authentication is missing")

        try:
            client = await self._get_client(ctx)
            await client.current_user(ctx)
        except DataSourceError as e:
            return HealthCheckResult(HealthStatus.ERROR, f"Error: {e}")
        return HealthCheckResult(HealthStatus.OK, "Data source is working")

    async def _get_client(self, ctx: QueryContext) -> ResourceClient:
        ctx.check()
        if self._client is None:
            if self.settings is None:
                raise ClientAcquisitionError("load plugin settings: no settings configured")
            self._client = create_workspace_client(self.settings)
        return self._client

    async def dispose(self) -> None:
        """Release the shared workspace client."""
        if self._client is not None:
            await self._client.close()
            self._client = None

    async def __aenter__(self) -> DataSource:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.dispose()
