"""
Tests for simpletrial.factors.install_time — read-only install time factor.
"""

import os

from simpletrial.factors.install_time import InstallTimeTrialFactor
from simpletrial.time.timestamps import NOT_AVAILABLE


class TestInstallTimeTrialFactor:
    def test_reports_path_time_in_millis(self, tmp_path):
        marker = tmp_path / "installed"
        marker.write_text("")
        os.utime(marker, (1_600_000_000, 1_600_000_000))

        value = InstallTimeTrialFactor(marker).read_timestamp()

        assert isinstance(value, int)
        if not hasattr(os.stat(marker), "st_birthtime"):
            assert value == 1_600_000_000_000

    def test_missing_path_is_unavailable(self, tmp_path):
        factor = InstallTimeTrialFactor(tmp_path / "missing")
        assert factor.read_timestamp() is NOT_AVAILABLE

    def test_none_path_is_unavailable(self):
        assert InstallTimeTrialFactor(None).read_timestamp() is NOT_AVAILABLE

    def test_persist_is_noop(self, tmp_path):
        marker = tmp_path / "installed"
        marker.write_text("")
        factor = InstallTimeTrialFactor(marker)
        before = factor.read_timestamp()

        factor.persist_timestamp(1)

        assert factor.read_timestamp() == before
        assert marker.read_text() == ""

    def test_value_is_stable(self, tmp_path):
        factor = InstallTimeTrialFactor(tmp_path)
        assert factor.read_timestamp() == factor.read_timestamp()


class TestForDistribution:
    def test_unknown_distribution_is_unavailable(self):
        factor = InstallTimeTrialFactor.for_distribution("no-such-distribution-xyz")
        assert factor.read_timestamp() is NOT_AVAILABLE

    def test_installed_distribution_reports_time(self):
        factor = InstallTimeTrialFactor.for_distribution("pytest")
        value = factor.read_timestamp()
        assert isinstance(value, int)
        assert value > 0
