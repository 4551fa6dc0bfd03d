"""
SimpleTrial – Django Settings (Development & Tests Only)
=========================================================
Django serves as the persistence container for the DB factor.
Host applications add "simpletrial.store" to their own
INSTALLED_APPS and define SIMPLE_TRIAL there instead.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "simpletrial.store",
]

# ── Database ──────────────────────────────────────────────────
# SQLite for development. Production DB configured by the host.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("SIMPLE_TRIAL_DB", BASE_DIR / "db.sqlite3"),
    }
}

# ── Trial ─────────────────────────────────────────────────────
# Keys: DURATION_DAYS, DB_NAMESPACE, DB_NAME, TRIGGER_BACKUP,
# FILE_PATH, INSTALL_PATH. Unset keys fall back to defaults.
SIMPLE_TRIAL = {
    "DURATION_DAYS": int(os.environ.get("SIMPLE_TRIAL_DURATION_DAYS", "14")),
}

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {"class": "logging.StreamHandler"},
    },
    "loggers": {
        "simpletrial": {
            "handlers": ["console"],
            "level": os.environ.get("SIMPLE_TRIAL_LOG_LEVEL", "INFO"),
        },
    },
}

# ── Internationalization ──────────────────────────────────────
TIME_ZONE = "UTC"
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
