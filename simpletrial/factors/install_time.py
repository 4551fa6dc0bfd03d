"""
SimpleTrial Factors - Install Time Factor
===========================================
Read-only factor reporting when a path was first created on disk.

Point it at the application's install directory or a marker file
written by the installer. The value resets when the application is
reinstalled but stays constant across in-place upgrades that keep
the directory. This factor cannot persist.
"""

from __future__ import annotations

import logging
import os
from importlib import metadata
from pathlib import Path
from typing import Optional, Union

from simpletrial.factors.base import BaseTrialFactor
from simpletrial.time.timestamps import NOT_AVAILABLE

logger = logging.getLogger("simpletrial.factors")


class InstallTimeTrialFactor(BaseTrialFactor):
    def __init__(self, path: Optional[Union[str, os.PathLike]]):
        self.path = Path(path) if path is not None else None

    @classmethod
    def for_distribution(cls, distribution_name: str) -> "InstallTimeTrialFactor":
        """
        Factor tracking the install time of an installed distribution,
        via its metadata directory. Unknown distributions yield a factor
        that always reports NOT_AVAILABLE.
        """
        try:
            dist = metadata.distribution(distribution_name)
        except metadata.PackageNotFoundError:
            logger.warning(f"Distribution '{distribution_name}' is not installed")
            return cls(None)

        located = dist.locate_file("")
        files = dist.files or []
        for entry in files:
            if entry.name == "METADATA":
                located = dist.locate_file(entry).parent
                break
        return cls(os.fspath(located))

    def read_timestamp(self) -> Optional[int]:
        if self.path is None:
            return NOT_AVAILABLE
        try:
            st = os.stat(self.path)
        except OSError:
            return NOT_AVAILABLE

        birth = getattr(st, "st_birthtime", None)
        if birth is not None:
            seconds = birth
        else:
            seconds = min(st.st_mtime, st.st_ctime)
        if seconds < 0:
            return NOT_AVAILABLE
        return int(seconds * 1000)

    def __repr__(self) -> str:
        path = str(self.path) if self.path is not None else None
        return f"InstallTimeTrialFactor(path={path!r})"
