"""
SimpleTrial Trial — Public API
================================
Reconciliation of trial start factors and the trial period.
"""

from simpletrial.trial.config import (
    DEFAULT_TRIAL_DURATION_DAYS,
    TrialConfig,
    load_trial_config,
)
from simpletrial.trial.errors import TrialConfigurationError
from simpletrial.trial.period import TrialClock
from simpletrial.trial.reconciler import TrialReconciler, reduce_timestamps
from simpletrial.trial.simple_trial import SimpleTrial

__all__ = [
    "DEFAULT_TRIAL_DURATION_DAYS",
    "TrialConfig",
    "load_trial_config",
    "TrialConfigurationError",
    "TrialClock",
    "TrialReconciler",
    "reduce_timestamps",
    "SimpleTrial",
]
