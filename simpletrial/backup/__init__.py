"""
SimpleTrial Backup — Public API
=================================
Fire-and-forget backup requests issued by persisting factors.
"""

from simpletrial.backup.trigger import (
    BackupTrigger,
    NullBackupTrigger,
    ThreadedBackupTrigger,
)

__all__ = [
    "BackupTrigger",
    "NullBackupTrigger",
    "ThreadedBackupTrigger",
]
