# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from job_tracker.applications.app_store import ApplicationStore

from .fakes import RecordingPersistence


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap.

    We intentionally use a SimpleNamespace rather than reading the real environment,
    to keep unit tests isolated and deterministic.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="job-tracker-test",
        log_level="DEBUG",
        data_dir=data_dir,
        storage_backend="sqlite",
        storage_path=data_dir / "store.sqlite3",
        storage_key="job-tracker-apps",
        default_sort_field="dateApplied",
        default_sort_direction="desc",
    )


@pytest.fixture()
def persistence() -> RecordingPersistence:
    return RecordingPersistence()


@pytest.fixture()
def store(persistence: RecordingPersistence) -> ApplicationStore:
    return ApplicationStore.open(persistence)
