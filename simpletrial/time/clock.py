"""
SimpleTrial Time — Explicit Clock Protocol
============================================
Doctrine: NO time.time() inside reconciliation logic.
"Now" is passed explicitly to the reconciler and the trial
clock; only the host-facing facade reads it from a Clock.

All clocks speak epoch milliseconds, the unit every factor
persists.
"""

from __future__ import annotations

import time
from typing import Protocol


# ══════════════════════════════════════════════════════════════
# CLOCK PROTOCOL
# ══════════════════════════════════════════════════════════════

class Clock(Protocol):
    """Injectable time source."""

    def now_ms(self) -> int:
        """Return current time in milliseconds since the epoch."""
        ...  # pragma: no cover


# ══════════════════════════════════════════════════════════════
# IMPLEMENTATIONS
# ══════════════════════════════════════════════════════════════

class SystemClock:
    """Production clock — real wall-clock time."""

    def now_ms(self) -> int:
        return time.time_ns() // 1_000_000


class FixedClock:
    """
    Test clock — returns a fixed timestamp.

    Usage:
        clock = FixedClock(1_700_000_000_000)
        assert clock.now_ms() == 1_700_000_000_000
    """

    def __init__(self, fixed_ms: int) -> None:
        if fixed_ms < 0:
            raise ValueError(f"FixedClock requires a non-negative timestamp, got {fixed_ms}.")
        self._fixed_ms = fixed_ms

    def now_ms(self) -> int:
        return self._fixed_ms

    def advance(self, millis: int) -> None:
        """Advance the fixed time (useful for multi-step test scenarios)."""
        self._fixed_ms += millis


# ══════════════════════════════════════════════════════════════
# DEFAULT CLOCK
# ══════════════════════════════════════════════════════════════

_default_clock: Clock = SystemClock()


def set_default_clock(clock: Clock) -> None:
    """Override the default clock (testing only)."""
    global _default_clock
    _default_clock = clock


def get_default_clock() -> Clock:
    """Get the current default clock."""
    return _default_clock


def now_ms() -> int:
    """Convenience: get current time from default clock."""
    return _default_clock.now_ms()
