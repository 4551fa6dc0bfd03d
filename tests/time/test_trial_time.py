"""
Tests for simpletrial.time — Clock protocol and timestamp helpers.
"""

from datetime import datetime, timedelta, timezone

import pytest

from simpletrial.time.clock import (
    FixedClock,
    SystemClock,
    get_default_clock,
    now_ms,
    set_default_clock,
)
from simpletrial.time.timestamps import (
    MILLIS_PER_DAY,
    days_to_millis,
    from_datetime,
    is_valid_timestamp,
    to_datetime,
)


# ── Clock Tests ──────────────────────────────────────────────

class TestSystemClock:
    def test_returns_epoch_millis(self):
        value = SystemClock().now_ms()
        assert isinstance(value, int)
        assert value > 1_600_000_000_000

    def test_time_advances(self):
        clock = SystemClock()
        t1 = clock.now_ms()
        t2 = clock.now_ms()
        assert t2 >= t1


class TestFixedClock:
    def test_returns_fixed_time(self):
        clock = FixedClock(1_000)
        assert clock.now_ms() == 1_000
        assert clock.now_ms() == 1_000

    def test_rejects_negative(self):
        with pytest.raises(ValueError, match="non-negative"):
            FixedClock(-1)

    def test_advance(self):
        clock = FixedClock(1_000)
        clock.advance(500)
        assert clock.now_ms() == 1_500


class TestDefaultClock:
    def test_set_and_get_default(self):
        original = get_default_clock()
        set_default_clock(FixedClock(42))
        try:
            assert now_ms() == 42
        finally:
            set_default_clock(original)


# ── Timestamp Helpers ────────────────────────────────────────

class TestIsValidTimestamp:
    @pytest.mark.parametrize("value", [0, 1, 1_700_000_000_000, 2**63 - 1])
    def test_valid(self, value):
        assert is_valid_timestamp(value)

    @pytest.mark.parametrize("value", [None, -1, True, False, 1.0, "5"])
    def test_invalid(self, value):
        assert not is_valid_timestamp(value)


class TestConversions:
    def test_days_to_millis(self):
        assert days_to_millis(2) == 2 * MILLIS_PER_DAY == 172_800_000

    def test_to_datetime(self):
        assert to_datetime(1_500) == datetime(1970, 1, 1, 0, 0, 1, 500_000, tzinfo=timezone.utc)

    def test_from_datetime(self):
        dt = datetime(2025, 6, 1, tzinfo=timezone.utc)
        assert from_datetime(dt) == 1_748_736_000_000

    def test_from_datetime_honours_offset(self):
        plus_two = timezone(timedelta(hours=2))
        dt = datetime(2025, 6, 1, 2, 0, tzinfo=plus_two)
        assert from_datetime(dt) == 1_748_736_000_000

    def test_from_datetime_rejects_naive(self):
        with pytest.raises(ValueError, match="timezone-aware"):
            from_datetime(datetime(2025, 1, 1))

    def test_millis_survive_conversion(self):
        assert from_datetime(to_datetime(1_748_736_000_123)) == 1_748_736_000_123
