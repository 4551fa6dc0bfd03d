"""
SimpleTrial Factors - In-Memory Factor
========================================
Deterministic factor used in tests and bootstrap.
"""

from __future__ import annotations

from typing import Optional

from simpletrial.factors.base import BaseTrialFactor
from simpletrial.time.timestamps import NOT_AVAILABLE, is_valid_timestamp


class InMemoryTrialFactor(BaseTrialFactor):
    """
    Holds a single timestamp in memory.

    Every persisted value is appended to `persisted`, so tests can
    assert on fan-out without a mocking library.
    """

    def __init__(self, timestamp: Optional[int] = NOT_AVAILABLE):
        self._timestamp = timestamp
        self.persisted: list[int] = []

    def read_timestamp(self) -> Optional[int]:
        if not is_valid_timestamp(self._timestamp):
            return NOT_AVAILABLE
        return self._timestamp

    def persist_timestamp(self, timestamp: int) -> None:
        self._timestamp = timestamp
        self.persisted.append(timestamp)

    def clear(self) -> None:
        """Forget the stored value, as if the user wiped this store."""
        self._timestamp = NOT_AVAILABLE

    def __repr__(self) -> str:
        return f"InMemoryTrialFactor(timestamp={self._timestamp!r})"
