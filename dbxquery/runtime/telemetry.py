"""Structured logging for fetch and routing operations.

This module provides telemetry hooks for the query pipeline, emitting
structured logs with snake_case event names and context in ``extra``.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


def log_query_routed(
    *,
    ref_id: str | None,
    resource_kind: str,
    max_items: int,
    request: dict[str, Any],
) -> None:
    """Log a validated query about to be executed.

    Args:
        ref_id: Sub-query identifier
        resource_kind: Resource kind tag
        max_items: Result cap for the query
        request: Query-string form of the typed listing request
    """
    logger.info(
        "query_routed",
        extra={
            "ref_id": ref_id,
            "resource_kind": resource_kind,
            "max_items": max_items,
            "request": request,
        },
    )


def log_query_failed(
    *,
    ref_id: str | None,
    resource_kind: str | None,
    error_class: str,
    error_message: str,
) -> None:
    """Log a query that ended with an error outcome."""
    logger.warning(
        "query_failed",
        extra={
            "ref_id": ref_id,
            "resource_kind": resource_kind,
            "error_class": error_class,
            "error_message": error_message,
        },
    )


def log_fetch_completed(
    *,
    items_fetched: int,
    max_items: int,
    exhausted: bool,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a bounded fetch.

    Args:
        items_fetched: Number of items returned
        max_items: Cap the fetch ran with
        exhausted: Whether the iterator ran out before the cap was reached
        latency_ms: Latency in milliseconds (optional)
    """
    logger.info(
        "fetch_completed",
        extra={
            "items_fetched": items_fetched,
            "max_items": max_items,
            "exhausted": exhausted,
            "latency_ms": latency_ms,
        },
    )


def log_fetch_error(
    *,
    items_discarded: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log an aborted bounded fetch.

    Args:
        items_discarded: Items pulled before the failure, dropped with it
        error_type: Exception type name
        error_message: Error message
    """
    logger.error(
        "fetch_error",
        extra={
            "items_discarded": items_discarded,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
