"""Epoch-millisecond helpers.

The Databricks REST API reports every timestamp as integer milliseconds since
the Unix epoch. Frames expose timezone-aware UTC datetimes instead.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def from_epoch_millis(value: int | None) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime (``None`` -> epoch)."""
    return EPOCH + timedelta(milliseconds=value or 0)


def to_epoch_millis(value: datetime) -> int:
    """Convert a datetime to epoch milliseconds. Naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return (value - EPOCH) // timedelta(milliseconds=1)
