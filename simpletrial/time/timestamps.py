"""
SimpleTrial Time — Timestamp Helpers
======================================
Pure functions over epoch-millisecond timestamps.
All functions take explicit arguments — no hidden clock access.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

MILLIS_PER_DAY = 24 * 3600 * 1000

# A factor reports NOT_AVAILABLE when it holds no usable timestamp.
NOT_AVAILABLE: Optional[int] = None


def is_valid_timestamp(value: Any) -> bool:
    """True for a non-negative int that is not a bool."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def days_to_millis(days: int) -> int:
    return days * MILLIS_PER_DAY


def to_datetime(timestamp: int) -> datetime:
    """Convert epoch milliseconds to a UTC-aware datetime."""
    seconds, millis = divmod(timestamp, 1000)
    return datetime.fromtimestamp(seconds, tz=timezone.utc).replace(
        microsecond=millis * 1000
    )


def from_datetime(dt: datetime) -> int:
    """Convert a timezone-aware datetime to epoch milliseconds."""
    if dt.tzinfo is None:
        raise ValueError("from_datetime requires timezone-aware datetime.")
    delta = dt - datetime(1970, 1, 1, tzinfo=timezone.utc)
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000
