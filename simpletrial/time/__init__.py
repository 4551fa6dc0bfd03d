"""
SimpleTrial Time — Public API
===============================
Explicit clock protocol and epoch-millisecond helpers.
"""

from simpletrial.time.clock import (
    Clock,
    FixedClock,
    SystemClock,
    get_default_clock,
    now_ms,
    set_default_clock,
)
from simpletrial.time.timestamps import (
    MILLIS_PER_DAY,
    NOT_AVAILABLE,
    days_to_millis,
    from_datetime,
    is_valid_timestamp,
    to_datetime,
)

__all__ = [
    "Clock",
    "FixedClock",
    "SystemClock",
    "get_default_clock",
    "set_default_clock",
    "now_ms",
    "MILLIS_PER_DAY",
    "NOT_AVAILABLE",
    "days_to_millis",
    "from_datetime",
    "is_valid_timestamp",
    "to_datetime",
]
