# src/job_tracker/storage/slot.py

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

from ..applications.app_models import ApplicationRecord
from ..core.ports import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_SLOT_KEY = "job-tracker-apps"


def decode_records(raw: str) -> list[ApplicationRecord]:
    """
    Parse a persisted JSON array into records (best-effort).

    Non-object elements are skipped. Ids are kept as stored here;
    blank or duplicate ids are re-minted by the store.
    """
    data = json.loads(raw)
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array, got {type(data).__name__}")

    out: list[ApplicationRecord] = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            logger.warning("Skipping non-object application at index=%d", i)
            continue
        out.append(ApplicationRecord.from_dict(item))
    return out


def encode_records(records: Sequence[ApplicationRecord]) -> str:
    payload: list[dict[str, Any]] = [r.to_dict() for r in records]
    return json.dumps(payload, ensure_ascii=False)


class ApplicationSlot:
    """
    Persistence adapter: the full application list lives as one JSON array
    under a single key of a key-value store.

    Both operations fail soft: load() degrades to an empty list,
    save() logs and leaves the previously stored value in place.
    """

    def __init__(self, kv: KeyValueStore, key: str = DEFAULT_SLOT_KEY) -> None:
        self._kv = kv
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[ApplicationRecord]:
        try:
            raw = self._kv.get(self._key)
        except Exception:
            logger.exception("Failed to read slot key=%s; starting empty", self._key)
            return []

        if raw is None:
            logger.info("Slot key=%s is empty; starting with no applications", self._key)
            return []

        try:
            records = decode_records(raw)
        except (ValueError, TypeError, RecursionError):
            # json.JSONDecodeError is a ValueError; deeply nested arrays hit RecursionError
            logger.warning("Discarding malformed payload in slot key=%s", self._key, exc_info=True)
            return []

        logger.info("Loaded %d applications from slot key=%s", len(records), self._key)
        return records

    def save(self, records: Sequence[ApplicationRecord]) -> None:
        try:
            self._kv.set(self._key, encode_records(records))
        except Exception:
            logger.exception("Failed to save %d applications to slot key=%s", len(records), self._key)
            return
        logger.debug("Saved %d applications to slot key=%s", len(records), self._key)
