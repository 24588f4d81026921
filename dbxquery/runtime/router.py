"""Query router turning one sub-query into one outcome.

The QueryRouter is the central coordinator that:
1. Parses the query payload and resolves its resource kind
2. Validates resource params and builds the typed listing request
3. Acquires the authenticated workspace client
4. Drains the listing with the result cap and projects the frame

Request Flow:
    Validating: payload, kind, params, request. Failures are bad-request
    outcomes and happen before any client acquisition or network call.
    Executing: client, listing, bounded fetch, projection. Failures are
    internal outcomes. Partial results are never returned.

See Also:
    - ResourceRegistry: Maps resource kinds to handlers
    - fetch_with_limit: Bounded fetch shared by all kinds
    - DataSource: Batch facade that calls the router per sub-query
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from ..core.context import QueryContext
from ..core.exceptions import DataSourceError, QueryValidationError
from ..models.outcome import QueryOutcome
from ..models.query import DataQuery, QueryDescriptor
from .fetcher import fetch_with_limit
from .registry import ResourceClient, ResourceRegistry, get_resource_registry
from .telemetry import log_query_failed, log_query_routed

logger = logging.getLogger(__name__)

ClientFactory = Callable[[QueryContext], Awaitable[ResourceClient]]


class QueryRouter:
    """Routes sub-queries through validation, fetch and projection."""

    def __init__(
        self,
        *,
        client_factory: ClientFactory,
        registry: ResourceRegistry | None = None,
    ) -> None:
        """Initialize the router.

        Args:
            client_factory: Async callable returning the authenticated client
            registry: Optional resource registry (defaults to global singleton)
        """
        self._client_factory = client_factory
        self._registry = registry or get_resource_registry()

    async def route(self, ctx: QueryContext, query: DataQuery) -> QueryOutcome:
        """Execute one sub-query.

        Args:
            ctx: Query context for cancellation and deadline
            query: Sub-query with its raw payload and ambient time range

        Returns:
            Success outcome with one frame, or a classified failure outcome
        """
        ref_id = query.ref_id

        # Validating
        try:
            descriptor = QueryDescriptor.parse(query.payload, time_range=query.time_range)
        except QueryValidationError as e:
            return self._failed(ref_id, None, e, "failed to parse query")

        kind_tag = descriptor.resource_type
        try:
            handler = self._registry.resolve(kind_tag)
            params = handler.parse_params(descriptor.resource_params)
            request = handler.build_request(params, descriptor.time_range)
        except QueryValidationError as e:
            return self._failed(ref_id, kind_tag, e, "failed to build request")

        log_query_routed(
            ref_id=ref_id,
            resource_kind=kind_tag,
            max_items=descriptor.max_items,
            request=request.to_query_params(),
        )

        # Executing
        try:
            client = await self._client_factory(ctx)
        except DataSourceError as e:
            return self._failed(ref_id, kind_tag, e, "failed to get databricks client")

        try:
            iterator = handler.open_listing(client, request)
            items = await fetch_with_limit(ctx, iterator, descriptor.max_items)
        except DataSourceError as e:
            return self._failed(ref_id, kind_tag, e, f"failed to fetch {kind_tag}")

        frame = handler.build_frame(items)
        logger.debug(
            "Query completed",
            extra={"ref_id": ref_id, "resource_kind": kind_tag, "rows": frame.row_count},
        )
        return QueryOutcome.success(frame)

    def _failed(
        self,
        ref_id: str,
        kind_tag: str | None,
        error: DataSourceError,
        context: str,
    ) -> QueryOutcome:
        outcome = QueryOutcome.from_error(error, context)
        log_query_failed(
            ref_id=ref_id,
            resource_kind=kind_tag,
            error_class=error.error_class.value,
            error_message=outcome.message or "",
        )
        return outcome
