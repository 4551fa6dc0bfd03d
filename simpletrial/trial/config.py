"""
SimpleTrial — Trial Configuration
===================================
Immutable configuration: an ordered factor list and a trial length.

Built once, then handed to SimpleTrial. Hosts running Django can
derive it from the SIMPLE_TRIAL setting with load_trial_config().
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Tuple

from simpletrial.backup.trigger import BackupTrigger
from simpletrial.factors.base import TrialFactor
from simpletrial.factors.db import DbTrialFactor, DbTrialFactorConfig
from simpletrial.factors.file import FileTrialFactor
from simpletrial.factors.install_time import InstallTimeTrialFactor
from simpletrial.time.timestamps import days_to_millis
from simpletrial.trial.errors import TrialConfigurationError

logger = logging.getLogger("simpletrial.config")

DEFAULT_TRIAL_DURATION_DAYS = 14

SETTINGS_NAME = "SIMPLE_TRIAL"

_SETTINGS_DEFAULTS: dict[str, Any] = {
    "DURATION_DAYS": DEFAULT_TRIAL_DURATION_DAYS,
    "DB_NAMESPACE": "simple_trial",
    "DB_NAME": "trial_start",
    "TRIGGER_BACKUP": True,
    "FILE_PATH": None,
    "INSTALL_PATH": None,
}


# ══════════════════════════════════════════════════════════════
# TRIAL CONFIG
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class TrialConfig:
    """
    Invariants (enforced at construction):
    - at least one factor
    - every factor implements read_timestamp and persist_timestamp
    - duration_days is a non-negative int
    """

    factors: Tuple[TrialFactor, ...]
    duration_days: int = DEFAULT_TRIAL_DURATION_DAYS

    def __post_init__(self) -> None:
        factors = tuple(self.factors)
        object.__setattr__(self, "factors", factors)

        if not factors:
            raise TrialConfigurationError("factors", "at least one factor is required.")
        for factor in factors:
            if not isinstance(factor, TrialFactor):
                raise TrialConfigurationError(
                    "factors",
                    f"{factor!r} must implement read_timestamp and persist_timestamp.",
                )
        if isinstance(self.duration_days, bool) or not isinstance(self.duration_days, int):
            raise TrialConfigurationError(
                "duration_days", f"must be an int, got {self.duration_days!r}."
            )
        if self.duration_days < 0:
            raise TrialConfigurationError(
                "duration_days", f"must be >= 0, got {self.duration_days}."
            )

    @property
    def duration_ms(self) -> int:
        return days_to_millis(self.duration_days)


# ══════════════════════════════════════════════════════════════
# DJANGO SETTINGS LOADER
# ══════════════════════════════════════════════════════════════

def _read_settings(overrides: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    if overrides is None:
        from django.conf import settings

        overrides = getattr(settings, SETTINGS_NAME, {}) or {}

    unknown = sorted(set(overrides) - set(_SETTINGS_DEFAULTS))
    if unknown:
        raise TrialConfigurationError(
            SETTINGS_NAME, f"unknown keys {', '.join(unknown)}."
        )
    merged = dict(_SETTINGS_DEFAULTS)
    merged.update(overrides)
    return merged


def _build_factors(
    options: Mapping[str, Any], backup: Optional[BackupTrigger]
) -> Tuple[TrialFactor, ...]:
    factors: list[TrialFactor] = []
    if options["INSTALL_PATH"]:
        factors.append(InstallTimeTrialFactor(options["INSTALL_PATH"]))

    try:
        db_config = DbTrialFactorConfig(
            namespace=options["DB_NAMESPACE"],
            name=options["DB_NAME"],
            trigger_backup=bool(options["TRIGGER_BACKUP"]),
        )
    except ValueError as exc:
        raise TrialConfigurationError(SETTINGS_NAME, str(exc)) from exc
    factors.append(DbTrialFactor(db_config, backup=backup))

    if options["FILE_PATH"]:
        factors.append(FileTrialFactor(options["FILE_PATH"]))
    return tuple(factors)


def load_trial_config(
    factors: Optional[Sequence[TrialFactor]] = None,
    *,
    backup: Optional[BackupTrigger] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> TrialConfig:
    """
    Build a TrialConfig from settings.SIMPLE_TRIAL.

    Args:
        factors:   Explicit factor list; skips factor construction.
        backup:    BackupTrigger handed to the DB factor.
        overrides: Use this mapping instead of Django settings.

    Default factor order: install time, DB, file.
    """
    options = _read_settings(overrides)
    if factors is None:
        factors = _build_factors(options, backup)

    config = TrialConfig(
        factors=tuple(factors),
        duration_days=options["DURATION_DAYS"],
    )
    logger.debug(
        f"Loaded trial config: {len(config.factors)} factors, "
        f"{config.duration_days} days"
    )
    return config
