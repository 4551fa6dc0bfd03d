"""
SimpleTrial Factors - Flat File Factor
========================================
Stores the trial start timestamp as a single line of text.

The file may live outside the application's private data
directory so it survives reinstallation. As long as the process
cannot read or write the location, this factor does nothing:
reads report NOT_AVAILABLE and writes are dropped.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

from simpletrial.factors.base import BaseTrialFactor
from simpletrial.time.timestamps import NOT_AVAILABLE, is_valid_timestamp

logger = logging.getLogger("simpletrial.factors")


class FileTrialFactor(BaseTrialFactor):
    def __init__(self, path: Union[str, os.PathLike]):
        self.path = Path(path)

    def read_timestamp(self) -> Optional[int]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                line = f.readline()
        except FileNotFoundError:
            return NOT_AVAILABLE
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(f"Cannot read trial file {self.path}: {exc}")
            return NOT_AVAILABLE

        try:
            value = int(line.strip())
        except ValueError:
            logger.debug(f"Ignoring corrupt trial file {self.path}: {line!r}")
            return NOT_AVAILABLE

        if not is_valid_timestamp(value):
            logger.debug(f"Ignoring negative timestamp in {self.path}: {value}")
            return NOT_AVAILABLE
        return value

    def persist_timestamp(self, timestamp: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(str(timestamp))
        except OSError as exc:
            logger.warning(f"Cannot persist trial file {self.path}: {exc}")

    def __repr__(self) -> str:
        return f"FileTrialFactor(path={str(self.path)!r})"
