# src/job_tracker/core/errors.py

from __future__ import annotations

"""
Error kinds raised by the core.

ValidationError and NotFoundError propagate to the presentation layer.
PersistenceError is raised by storage backends and recovered locally by the slot adapter.
"""

from collections.abc import Iterable


class TrackerError(Exception):
    """Base class for job tracker errors."""


class ValidationError(TrackerError, ValueError):
    def __init__(self, message: str, *, fields: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.fields: tuple[str, ...] = tuple(fields)


class NotFoundError(TrackerError, KeyError):
    def __init__(self, record_id: str) -> None:
        super().__init__(record_id)
        self.record_id = record_id

    def __str__(self) -> str:
        return f"application not found: {self.record_id!r}"


class PersistenceError(TrackerError):
    """Key-value backend could not read or write."""
