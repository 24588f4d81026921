"""Shared fixtures for unit tests."""

from __future__ import annotations

from typing import Any

import pytest

from dbxquery.core import QueryContext, RemoteAPIError


class FakePagedIterator:
    """In-memory PagedIterator that records calls and can fail on demand."""

    def __init__(
        self,
        items: list[Any],
        *,
        fail_on_next: int | None = None,
        error: Exception | None = None,
    ) -> None:
        self.items = list(items)
        self.position = 0
        self.fail_on_next = fail_on_next
        self.error = error or RemoteAPIError("remote listing failed", status_code=500)
        self.has_next_calls = 0
        self.next_calls = 0

    async def has_next(self, ctx: QueryContext) -> bool:
        ctx.check()
        self.has_next_calls += 1
        return self.position < len(self.items)

    async def next(self, ctx: QueryContext) -> Any:
        ctx.check()
        self.next_calls += 1
        if self.fail_on_next is not None and self.next_calls == self.fail_on_next:
            raise self.error
        item = self.items[self.position]
        self.position += 1
        return item


@pytest.fixture
def ctx() -> QueryContext:
    return QueryContext.background()


@pytest.fixture
def fake_iterator():
    """Factory building FakePagedIterator instances."""
    return FakePagedIterator
