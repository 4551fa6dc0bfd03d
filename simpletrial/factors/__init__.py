"""
SimpleTrial Factors — Public API
==================================
Independent sources of the trial start timestamp.
"""

from simpletrial.factors.base import BaseTrialFactor, TrialFactor
from simpletrial.factors.db import DbTrialFactor, DbTrialFactorConfig
from simpletrial.factors.file import FileTrialFactor
from simpletrial.factors.install_time import InstallTimeTrialFactor
from simpletrial.factors.memory import InMemoryTrialFactor

__all__ = [
    "TrialFactor",
    "BaseTrialFactor",
    "DbTrialFactor",
    "DbTrialFactorConfig",
    "FileTrialFactor",
    "InstallTimeTrialFactor",
    "InMemoryTrialFactor",
]
