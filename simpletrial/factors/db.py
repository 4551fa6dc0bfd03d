"""
SimpleTrial Factors - DB-backed Key-Value Factor
==================================================
Stores the trial start timestamp in a (namespace, name) slot of the
simpletrial.store table and optionally requests a backup after every
successful write.

The table is lost when the application's data is wiped. A backup
restored on reinstall brings it back, so wiping both the data and the
backup is the only way to permanently remove the stored value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from django.db import DatabaseError, transaction

from simpletrial.backup.trigger import BackupTrigger, NullBackupTrigger
from simpletrial.factors.base import BaseTrialFactor
from simpletrial.time.timestamps import NOT_AVAILABLE, is_valid_timestamp

logger = logging.getLogger("simpletrial.factors")

DEFAULT_NAMESPACE = "simple_trial"
DEFAULT_ENTRY_NAME = "trial_start"


@dataclass(frozen=True)
class DbTrialFactorConfig:
    """
    Where the DB factor keeps its value. With the defaults the
    timestamp lives in slot simple_trial:trial_start and a backup is
    requested after each write.
    """

    namespace: str = DEFAULT_NAMESPACE
    name: str = DEFAULT_ENTRY_NAME
    trigger_backup: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.namespace, str) or not self.namespace.strip():
            raise ValueError("DbTrialFactorConfig namespace must be a non-empty string.")
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("DbTrialFactorConfig name must be a non-empty string.")


class DbTrialFactor(BaseTrialFactor):
    def __init__(
        self,
        config: Optional[DbTrialFactorConfig] = None,
        backup: Optional[BackupTrigger] = None,
    ):
        self.config = config or DbTrialFactorConfig()
        self._backup = backup or NullBackupTrigger()

    def read_timestamp(self) -> Optional[int]:
        from simpletrial.store.models import TrialTimestampEntry

        try:
            value = (
                TrialTimestampEntry.objects.filter(
                    namespace=self.config.namespace,
                    name=self.config.name,
                )
                .values_list("value", flat=True)
                .first()
            )
        except DatabaseError as exc:
            logger.warning(
                f"Cannot read trial slot {self._slot()}: {exc}"
            )
            return NOT_AVAILABLE

        if value is None:
            return NOT_AVAILABLE
        if not is_valid_timestamp(value):
            logger.debug(f"Ignoring invalid value in {self._slot()}: {value}")
            return NOT_AVAILABLE
        return value

    def persist_timestamp(self, timestamp: int) -> None:
        from simpletrial.store.models import TrialTimestampEntry

        try:
            with transaction.atomic():
                TrialTimestampEntry.objects.update_or_create(
                    namespace=self.config.namespace,
                    name=self.config.name,
                    defaults={"value": timestamp},
                )
        except (DatabaseError, OverflowError) as exc:
            logger.warning(
                f"Cannot persist trial slot {self._slot()}: {exc}"
            )
            return

        if self.config.trigger_backup:
            self._backup.data_changed()

    def _slot(self) -> str:
        return f"{self.config.namespace}:{self.config.name}"

    def __repr__(self) -> str:
        return f"DbTrialFactor(slot={self._slot()!r})"
