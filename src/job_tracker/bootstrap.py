# src/job_tracker/bootstrap.py

"""
Composition root.

- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the key-value backend, slot adapter and store into a TrackerSession.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .applications.app_query import Query
from .applications.app_store import ApplicationStore
from .config import STORAGE_BACKENDS, get_settings
from .core.ports import KeyValueStore
from .core.session import TrackerSession
from .logging_setup import level_from_name, setup_logging
from .storage.kv_store import JsonFileKeyValueStore, SqliteKeyValueStore
from .storage.slot import DEFAULT_SLOT_KEY, ApplicationSlot

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def create_kv_store(settings) -> KeyValueStore:
    backend = str(getattr(settings, "storage_backend", "sqlite")).lower()
    path = Path(settings.storage_path)
    if backend == "sqlite":
        return SqliteKeyValueStore(path)
    if backend == "json":
        return JsonFileKeyValueStore(path)
    raise ValueError(f"unknown storage backend {backend!r}; expected one of {', '.join(STORAGE_BACKENDS)}")


def default_query(settings) -> Query:
    """Initial view from settings; bad values fall back to the built-in default."""
    try:
        return Query.from_dict(
            {
                "sortField": getattr(settings, "default_sort_field", "dateApplied"),
                "sortDirection": getattr(settings, "default_sort_direction", "desc"),
            }
        )
    except ValueError:
        logger.warning("Invalid default sort settings; using dateApplied/desc")
        return Query()


def create_tracker(*, settings=None, kv: KeyValueStore | None = None) -> TrackerSession:
    """
    Build a ready TrackerSession.

    Settings are injectable for tests; if None, falls back to get_settings().
    The store loads exactly once here and writes the normalised state back.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if kv is None:
        kv = create_kv_store(settings)
    slot = ApplicationSlot(kv, getattr(settings, "storage_key", DEFAULT_SLOT_KEY))
    store = ApplicationStore.open(slot)

    return TrackerSession(settings=settings, store=store, query=default_query(settings))


def start(*, settings=None) -> TrackerSession:
    """Configure logging from settings, then build the session. For embedding in a UI process."""
    if settings is None:
        settings = get_settings()
    log_file = setup_logging(
        log_dir=settings.data_dir,
        console_level=level_from_name(settings.log_level),
    )
    logger.info("Starting %s (log file %s)", settings.app_name, log_file)
    return create_tracker(settings=settings)
