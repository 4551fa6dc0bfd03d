"""
Tests for simpletrial.trial.period — TrialClock.
"""

from datetime import datetime, timezone

import pytest

from simpletrial.time.timestamps import MILLIS_PER_DAY
from simpletrial.trial.period import TrialClock


START = 1_700_000_000_000


class TestTrialClock:
    def test_active_before_end(self):
        clock = TrialClock(START, 7 * MILLIS_PER_DAY)
        assert not clock.is_finished(START)
        assert not clock.is_finished(START + 7 * MILLIS_PER_DAY - 1)

    def test_finished_at_end_inclusive(self):
        clock = TrialClock(START, 7 * MILLIS_PER_DAY)
        assert clock.is_finished(START + 7 * MILLIS_PER_DAY)
        assert clock.is_finished(START + 8 * MILLIS_PER_DAY)

    def test_zero_duration_finishes_immediately(self):
        clock = TrialClock(START, 0)
        assert clock.is_finished(START)

    def test_is_pure(self):
        clock = TrialClock(START, 10)
        assert [clock.is_finished(START + 5) for _ in range(3)] == [False] * 3

    def test_start_date_is_unchanged(self):
        assert TrialClock(123, 10).start_date() == 123

    def test_start_datetime(self):
        clock = TrialClock(1_000, 0)
        assert clock.start_datetime() == datetime(1970, 1, 1, 0, 0, 1, tzinfo=timezone.utc)

    def test_rejects_negative_duration(self):
        with pytest.raises(ValueError, match="duration"):
            TrialClock(START, -1)


class TestRemaining:
    def test_remaining_while_active(self):
        clock = TrialClock(START, 1_000)
        assert clock.remaining_ms(START + 400) == 600

    def test_remaining_after_end_is_zero(self):
        clock = TrialClock(START, 1_000)
        assert clock.remaining_ms(START + 5_000) == 0

    def test_end_timestamp(self):
        assert TrialClock(START, 1_000).end_timestamp == START + 1_000
