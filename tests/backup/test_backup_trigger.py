"""
Tests for simpletrial.backup — fire-and-forget backup triggers.
"""

import threading

from simpletrial.backup.trigger import NullBackupTrigger, ThreadedBackupTrigger


class TestNullBackupTrigger:
    def test_does_nothing(self):
        assert NullBackupTrigger().data_changed() is None


class TestThreadedBackupTrigger:
    def test_runs_callback_in_background(self):
        ran = threading.Event()
        seen = []

        def callback():
            seen.append(threading.current_thread().name)
            ran.set()

        trigger = ThreadedBackupTrigger(callback)
        trigger.data_changed()

        assert ran.wait(timeout=5)
        assert seen == ["simpletrial-backup"]

    def test_does_not_wait_for_callback(self):
        release = threading.Event()
        trigger = ThreadedBackupTrigger(lambda: release.wait(timeout=5))

        trigger.data_changed()  # returns while callback is still blocked

        release.set()
        trigger.join(timeout=5)

    def test_callback_failure_is_logged_not_raised(self, caplog):
        def callback():
            raise OSError("backup target offline")

        trigger = ThreadedBackupTrigger(callback)
        with caplog.at_level("ERROR", logger="simpletrial.backup"):
            trigger.data_changed()
            trigger.join(timeout=5)

        assert "backup target offline" in caplog.text

    def test_each_request_runs_callback(self):
        calls = []
        lock = threading.Lock()

        def callback():
            with lock:
                calls.append(1)

        trigger = ThreadedBackupTrigger(callback)
        for _ in range(3):
            trigger.data_changed()
        trigger.join(timeout=5)

        assert len(calls) == 3
