"""Cancellation and deadline signal threaded through every blocking call.

Architecture:
    A QueryContext is created once per batch and passed explicitly to client
    acquisition, paged iterators and HTTP calls. Blocking operations call
    ``check()`` before doing work and use ``remaining()`` as their timeout, so
    a cancelled or expired context fails the in-flight call fast with
    QueryCancelledError instead of relying on a polling loop.
"""

from __future__ import annotations

from time import monotonic

from .exceptions import QueryCancelledError


class QueryContext:
    """Cooperative cancellation signal with an optional deadline."""

    def __init__(self, *, timeout: float | None = None) -> None:
        """Initialize context.

        Args:
            timeout: Seconds from now until the deadline (None = no deadline)
        """
        self._deadline = monotonic() + timeout if timeout is not None else None
        self._cancelled = False
        self._reason: str | None = None

    @classmethod
    def background(cls) -> QueryContext:
        """Context that is never cancelled and has no deadline."""
        return cls()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def expired(self) -> bool:
        return self._deadline is not None and monotonic() >= self._deadline

    @property
    def done(self) -> bool:
        return self._cancelled or self.expired

    def cancel(self, reason: str = "query cancelled") -> None:
        """Signal cancellation. Idempotent; the first reason wins."""
        if not self._cancelled:
            self._cancelled = True
            self._reason = reason

    def remaining(self) -> float | None:
        """Seconds left until the deadline, or None when there is no deadline."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - monotonic())

    def check(self) -> None:
        """Raise QueryCancelledError if the context is cancelled or expired."""
        if self._cancelled:
            raise QueryCancelledError(self._reason or "query cancelled")
        if self.expired:
            raise QueryCancelledError("query deadline exceeded")
