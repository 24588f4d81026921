"""Bounded fetch over paged iterators.

This module provides the PagedIterator protocol every remote listing
implements and ``fetch_with_limit``, the single draining algorithm shared by
all resource kinds.
"""

from __future__ import annotations

from time import perf_counter
from typing import Protocol, TypeVar, runtime_checkable

from ..core.context import QueryContext
from .telemetry import log_fetch_completed, log_fetch_error

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class PagedIterator(Protocol[T_co]):
    """Pull-based cursor over a paged remote result set.

    Implementations fetch remote pages lazily: ``has_next`` may load the next
    page when the current one is used up, ``next`` returns one item. Both
    raise on failure, including QueryCancelledError for a cancelled context.
    """

    async def has_next(self, ctx: QueryContext) -> bool: ...

    async def next(self, ctx: QueryContext) -> T_co: ...


async def fetch_with_limit(
    ctx: QueryContext,
    iterator: PagedIterator[T],
    max_items: int,
) -> list[T]:
    """Fetch at most ``max_items`` items from a paged iterator.

    The cap is checked before ``has_next`` so no page is requested once the
    cap is reached. Calls are strictly sequential.

    Args:
        ctx: Query context observed by every iterator call
        iterator: Source iterator
        max_items: Result cap (must be positive)

    Returns:
        Exactly ``min(max_items, available)`` items, in iterator order

    Raises:
        ValueError: If max_items is not positive
        Exception: Whatever the iterator raised; items pulled so far are discarded
    """
    if max_items <= 0:
        raise ValueError(f"max_items must be positive, got {max_items}")

    result: list[T] = []
    exhausted = False
    start = perf_counter()
    try:
        while len(result) < max_items:
            if not await iterator.has_next(ctx):
                exhausted = True
                break
            result.append(await iterator.next(ctx))
    except Exception as e:
        log_fetch_error(
            items_discarded=len(result),
            error_type=type(e).__name__,
            error_message=str(e),
        )
        raise

    log_fetch_completed(
        items_fetched=len(result),
        max_items=max_items,
        exhausted=exhausted,
        latency_ms=(perf_counter() - start) * 1000.0,
    )
    return result
