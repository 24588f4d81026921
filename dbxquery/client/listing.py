"""Cursor-based paged iterator over REST listing endpoints.

Databricks listing endpoints return one page per call plus an opaque
``next_page_token``. RestPagedIterator turns a page-fetch callable into the
PagedIterator protocol, loading a page only when its buffer is empty and the
server announced more.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from ..core.context import QueryContext
from ..core.exceptions import RemoteAPIError

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a listing.

    Attributes:
        items: Items on this page
        next_page_token: Cursor of the next page (None on the last page)
    """

    items: list[T] = field(default_factory=list)
    next_page_token: str | None = None


PageFetcher = Callable[[QueryContext, str | None], Awaitable[Page[T]]]


class RestPagedIterator(Generic[T]):
    """Lazy page-by-page iterator."""

    def __init__(self, fetch_page: PageFetcher[T]) -> None:
        """Initialize iterator.

        Args:
            fetch_page: Async callable taking the context and the page token
                (None for the first page) and returning a Page
        """
        self._fetch_page = fetch_page
        self._buffer: deque[T] = deque()
        self._page_token: str | None = None
        self._exhausted = False
        self.pages_fetched = 0

    async def has_next(self, ctx: QueryContext) -> bool:
        ctx.check()
        # pages may legitimately be empty while still carrying a cursor
        while not self._buffer:
            if self._exhausted:
                return False
            await self._load_page(ctx)
        return True

    async def next(self, ctx: QueryContext) -> T:
        """Return the next item.

        Raises:
            StopAsyncIteration: If the listing is exhausted
        """
        if not await self.has_next(ctx):
            raise StopAsyncIteration
        return self._buffer.popleft()

    async def _load_page(self, ctx: QueryContext) -> None:
        ctx.check()
        page = await self._fetch_page(ctx, self._page_token)
        self.pages_fetched += 1
        self._buffer.extend(page.items)

        next_token = page.next_page_token or None
        if next_token is not None and next_token == self._page_token:
            raise RemoteAPIError(f"pagination cursor repeated: {next_token!r}")
        self._page_token = next_token
        if next_token is None:
            self._exhausted = True
