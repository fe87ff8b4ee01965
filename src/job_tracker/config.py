# src/job_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing read at import time beyond the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "JOBTRACK"

STORAGE_BACKENDS = ("sqlite", "json")

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _default_storage_file(backend: str) -> str:
    return "store.json" if backend == "json" else "store.sqlite3"


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data (ignored by git) ----
    data_dir: Path
    storage_backend: str
    storage_path: Path
    storage_key: str

    # ---- Default view ----
    default_sort_field: str
    default_sort_direction: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "job-tracker").strip() or "job-tracker"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/job-tracker"))
        storage_backend = _env(_k("STORAGE_BACKEND"), "sqlite").strip().lower() or "sqlite"
        storage_path = _env_path(_k("STORAGE_PATH"), data_dir / _default_storage_file(storage_backend))
        storage_key = _env(_k("STORAGE_KEY"), "job-tracker-apps").strip() or "job-tracker-apps"

        default_sort_field = _env(_k("DEFAULT_SORT_FIELD"), "dateApplied").strip()
        default_sort_direction = _env(_k("DEFAULT_SORT_DIRECTION"), "desc").strip().lower()

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            storage_backend=storage_backend,
            storage_path=storage_path,
            storage_key=storage_key,
            default_sort_field=default_sort_field,
            default_sort_direction=default_sort_direction,
        )


def get_settings() -> Settings:
    return Settings.from_env()
