"""
SimpleTrial — Trial Periods Without User Accounts
====================================================
Determines when a trial started from several independent factors,
keeps the oldest value and writes it back to every factor so the
trial survives reinstalls and partial data loss.
"""

from simpletrial.factors import (
    BaseTrialFactor,
    DbTrialFactor,
    DbTrialFactorConfig,
    FileTrialFactor,
    InMemoryTrialFactor,
    InstallTimeTrialFactor,
    TrialFactor,
)
from simpletrial.time import NOT_AVAILABLE, FixedClock, SystemClock
from simpletrial.trial import (
    DEFAULT_TRIAL_DURATION_DAYS,
    SimpleTrial,
    TrialClock,
    TrialConfig,
    TrialConfigurationError,
    TrialReconciler,
    load_trial_config,
)

__all__ = [
    "NOT_AVAILABLE",
    "FixedClock",
    "SystemClock",
    "TrialFactor",
    "BaseTrialFactor",
    "DbTrialFactor",
    "DbTrialFactorConfig",
    "FileTrialFactor",
    "InMemoryTrialFactor",
    "InstallTimeTrialFactor",
    "DEFAULT_TRIAL_DURATION_DAYS",
    "SimpleTrial",
    "TrialClock",
    "TrialConfig",
    "TrialConfigurationError",
    "TrialReconciler",
    "load_trial_config",
]
