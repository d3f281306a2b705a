"""Library configuration — loads .env, then overrides from settings.json."""

import json
import os
from pathlib import Path

from dotenv import load_dotenv

from workshop_queue.utils.constants import JOB_VIEWS, SORT_MODES

# Find the project root (where .env lives)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
load_dotenv(_PROJECT_ROOT / ".env")

# Runtime settings file for in-app configuration
_SETTINGS_FILE = _PROJECT_ROOT / "data" / "settings.json"


def _load_settings() -> dict:
    """Load saved runtime settings from JSON file."""
    if _SETTINGS_FILE.exists():
        try:
            return json.loads(_SETTINGS_FILE.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError):
            pass
    return {}


def _save_settings(settings: dict):
    """Persist runtime settings to JSON file."""
    _SETTINGS_FILE.parent.mkdir(parents=True, exist_ok=True)
    _SETTINGS_FILE.write_text(
        json.dumps(settings, indent=2), encoding="utf-8"
    )


# Load saved settings once at import time
_runtime = _load_settings()


class Config:
    """Central configuration: .env defaults, settings.json overrides."""

    # Paths
    PROJECT_ROOT: Path = _PROJECT_ROOT

    # Work order list defaults (settings.json overrides .env)
    DEFAULT_SORT_MODE: str = _runtime.get(
        "default_sort_mode",
        os.getenv("DEFAULT_SORT_MODE", "priority"),
    )
    DEFAULT_JOB_VIEW: str = _runtime.get(
        "default_job_view",
        os.getenv("DEFAULT_JOB_VIEW", "active"),
    )

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def update_queue_settings(cls, sort_mode: str, job_view: str):
        """Update the work order list defaults and persist to disk."""
        if sort_mode not in SORT_MODES:
            raise ValueError(
                f"Unknown sort mode '{sort_mode}' "
                f"(expected one of: {', '.join(SORT_MODES)})"
            )
        if job_view not in JOB_VIEWS:
            raise ValueError(
                f"Unknown job view '{job_view}' "
                f"(expected one of: {', '.join(JOB_VIEWS)})"
            )
        cls.DEFAULT_SORT_MODE = sort_mode
        cls.DEFAULT_JOB_VIEW = job_view

        settings = _load_settings()
        settings["default_sort_mode"] = sort_mode
        settings["default_job_view"] = job_view
        _save_settings(settings)
