"""
SimpleTrial Backup — Backup Trigger
=====================================
Requests a backup of a factor's backing store after it changed.

Dispatch behavior:
1. Factor persists successfully
2. Factor calls data_changed() once
3. Trigger starts the backup in the background
4. Failures are logged, never raised

The caller never waits for, nor learns, the outcome.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Protocol

logger = logging.getLogger("simpletrial.backup")


# ══════════════════════════════════════════════════════════════
# PROTOCOL
# ══════════════════════════════════════════════════════════════

class BackupTrigger(Protocol):
    def data_changed(self) -> None:
        """Request a best-effort backup. Must return immediately."""
        ...  # pragma: no cover


# ══════════════════════════════════════════════════════════════
# IMPLEMENTATIONS
# ══════════════════════════════════════════════════════════════

class NullBackupTrigger:
    """No backup mechanism configured."""

    def data_changed(self) -> None:
        return None


class ThreadedBackupTrigger:
    """
    Runs `callback` on a daemon thread for every request.

    Usage:
        trigger = ThreadedBackupTrigger(lambda: shutil.copy(db, backup_dir))
        trigger.data_changed()
    """

    def __init__(self, callback: Callable[[], object]):
        self._callback = callback
        self._threads: list[threading.Thread] = []
        self._lock = threading.Lock()

    def data_changed(self) -> None:
        thread = threading.Thread(
            target=self._run,
            name="simpletrial-backup",
            daemon=True,
        )
        with self._lock:
            self._threads = [t for t in self._threads if t.is_alive()]
            self._threads.append(thread)
        thread.start()

    def _run(self) -> None:
        callback_name = getattr(self._callback, "__qualname__", str(self._callback))
        try:
            self._callback()
            logger.debug(f"Backup completed via {callback_name}")
        except Exception as exc:
            logger.error(
                f"Backup failed via {callback_name}: {exc}",
                exc_info=True,
            )

    def join(self, timeout: float | None = None) -> None:
        """Wait for pending backups (tests and shutdown only)."""
        with self._lock:
            pending = list(self._threads)
        for thread in pending:
            thread.join(timeout)
