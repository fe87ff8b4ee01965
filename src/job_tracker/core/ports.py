# src/job_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The store depends on Protocols instead of concrete storage.
This keeps backends swappable and makes testing easier.
"""

from collections.abc import Sequence
from typing import Protocol

from ..applications.app_models import ApplicationRecord


class KeyValueStore(Protocol):
    """
    Out-of-process string key-value storage.

    Implementations raise PersistenceError when the backend is unavailable.
    """

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...
    def delete(self, key: str) -> None: ...


class RecordPersistence(Protocol):
    """Load/save the full record list. Both calls fail soft."""

    def load(self) -> list[ApplicationRecord]: ...
    def save(self, records: Sequence[ApplicationRecord]) -> None: ...
