"""
SimpleTrial — Trial Start Reconciler
======================================
Reduces N independent factors to one canonical trial start
timestamp and writes it back to all of them.

Reconciliation:
1. read_timestamp() on every factor, once
2. Drop NOT_AVAILABLE (and anything that is not a valid timestamp)
3. Nothing left → canonical = now
4. Otherwise → canonical = oldest value (oldest wins)
5. persist_timestamp(canonical) on every factor, in list order

Step 5 runs regardless of what a factor reported: fresh factors are
backfilled and divergent ones overwritten, so all factors converge and
a second reconciliation yields the same value.

This module does NOT:
- Catch factor exceptions (factors must not raise)
- Clamp overrides
- Re-read factors after construction
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from simpletrial.factors.base import TrialFactor
from simpletrial.time.timestamps import NOT_AVAILABLE, is_valid_timestamp

logger = logging.getLogger("simpletrial.reconciler")


def reduce_timestamps(readings: Sequence[Optional[int]], now_ms: int) -> int:
    """
    Oldest valid reading, or `now_ms` when there is none.
    Order-independent.
    """
    valid = [r for r in readings if is_valid_timestamp(r)]
    if not valid:
        return now_ms
    return min(valid)


class TrialReconciler:
    """
    Holds the canonical trial start for its lifetime.

    Usage:
        reconciler = TrialReconciler([db_factor, file_factor], now_ms=clock.now_ms())
        reconciler.start_timestamp
    """

    def __init__(self, factors: Sequence[TrialFactor], now_ms: int):
        self._factors: Tuple[TrialFactor, ...] = tuple(factors)
        self._start_timestamp = reduce_timestamps(self._read_all(), now_ms)

        logger.info(
            f"Reconciled trial start {self._start_timestamp} "
            f"from {len(self._factors)} factors (now={now_ms})"
        )
        self._persist_all()

    @property
    def factors(self) -> Tuple[TrialFactor, ...]:
        return self._factors

    @property
    def start_timestamp(self) -> int:
        return self._start_timestamp

    def override(self, timestamp: int) -> None:
        """
        Replace the canonical trial start and persist it to every factor.
        Earlier and later values are both accepted as given.
        """
        logger.info(
            f"Overriding trial start {self._start_timestamp} → {timestamp}"
        )
        self._start_timestamp = timestamp
        self._persist_all()

    def _read_all(self) -> list[Optional[int]]:
        readings: list[Optional[int]] = []
        for factor in self._factors:
            value = factor.read_timestamp()
            if value is not NOT_AVAILABLE and not is_valid_timestamp(value):
                logger.warning(
                    f"Factor {factor!r} returned invalid timestamp {value!r}; "
                    f"treating as not available"
                )
                value = NOT_AVAILABLE
            logger.debug(f"Factor {factor!r} read {value!r}")
            readings.append(value)
        return readings

    def _persist_all(self) -> None:
        for factor in self._factors:
            factor.persist_timestamp(self._start_timestamp)
