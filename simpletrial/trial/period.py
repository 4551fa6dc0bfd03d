"""
SimpleTrial — Trial Clock
===========================
Pure functions of (start, duration, now). No hidden clock access.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from simpletrial.time.timestamps import to_datetime


@dataclass(frozen=True)
class TrialClock:
    """
    Trial period [start_timestamp, start_timestamp + duration_ms).

    Invariant: duration_ms >= 0 (enforced at construction).
    """

    start_timestamp: int
    duration_ms: int

    def __post_init__(self) -> None:
        if self.duration_ms < 0:
            raise ValueError(
                f"TrialClock duration must be >= 0, got {self.duration_ms}."
            )

    @property
    def end_timestamp(self) -> int:
        return self.start_timestamp + self.duration_ms

    def is_finished(self, now_ms: int) -> bool:
        """True once `now_ms` reaches the end of the trial (inclusive)."""
        return now_ms >= self.end_timestamp

    def start_date(self) -> int:
        return self.start_timestamp

    def start_datetime(self) -> datetime:
        return to_datetime(self.start_timestamp)

    def remaining_ms(self, now_ms: int) -> int:
        """Milliseconds left in the trial, 0 once finished."""
        return max(self.end_timestamp - now_ms, 0)
