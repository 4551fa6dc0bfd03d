"""
SimpleTrial — Host-Facing Trial
=================================
The trial starts when the application is installed (or first seen by
any factor), not when the user first opens it.

SimpleTrial reconciles all configured factors once at construction,
then answers questions against the injected clock. Back up whatever
store your persisting factors use, otherwise a reinstall followed by
wiping local data restarts the trial.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Union

from simpletrial.time.clock import Clock, get_default_clock
from simpletrial.time.timestamps import from_datetime, to_datetime
from simpletrial.trial.config import TrialConfig
from simpletrial.trial.period import TrialClock
from simpletrial.trial.reconciler import TrialReconciler


class SimpleTrial:
    def __init__(self, config: TrialConfig, clock: Optional[Clock] = None):
        self.config = config
        self._clock = clock or get_default_clock()
        self._reconciler = TrialReconciler(config.factors, now_ms=self._clock.now_ms())
        self._period = TrialClock(self._reconciler.start_timestamp, config.duration_ms)

    @property
    def trial_start_timestamp(self) -> int:
        return self._period.start_date()

    def is_trial_period_finished(self) -> bool:
        return self._period.is_finished(self._clock.now_ms())

    def trial_start_date(self) -> datetime:
        return self._period.start_datetime()

    def trial_end_date(self) -> datetime:
        return to_datetime(self._period.end_timestamp)

    def remaining_ms(self) -> int:
        return self._period.remaining_ms(self._clock.now_ms())

    def update_trial_start_date(self, start: Union[datetime, int]) -> None:
        """
        Manually override the trial start. The new value is persisted
        to every factor.
        """
        timestamp = from_datetime(start) if isinstance(start, datetime) else start
        self._reconciler.override(timestamp)
        self._period = TrialClock(timestamp, self.config.duration_ms)
