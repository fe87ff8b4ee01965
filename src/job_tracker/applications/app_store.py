# src/job_tracker/applications/app_store.py

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Iterable, Iterator
from dataclasses import replace

from ..core.errors import NotFoundError, ValidationError
from ..core.ports import RecordPersistence
from .app_models import ApplicationDraft, ApplicationRecord

logger = logging.getLogger(__name__)


def _uuid_id() -> str:
    return uuid.uuid4().hex


class ApplicationStore:
    """
    Owns the canonical list of job applications.

    - insertion order is creation order; edits keep a record in place
    - ids are minted here and never reused, even after deletion
    - every successful mutation writes the full list through `persistence`

    Records are frozen dataclasses, so callers never hold a mutable reference
    into the store.
    """

    def __init__(
        self,
        persistence: RecordPersistence,
        records: Iterable[ApplicationRecord] = (),
        *,
        id_factory: Callable[[], str] = _uuid_id,
    ) -> None:
        self._persistence = persistence
        self._new_id = id_factory
        self._records: list[ApplicationRecord] = []
        self._seen_ids: set[str] = set()

        for rec in records:
            if not rec.id or rec.id in self._seen_ids:
                fresh = self._mint_id()
                logger.warning("Re-keying application with blank/duplicate id=%r -> %s", rec.id, fresh)
                rec = replace(rec, id=fresh)
            else:
                self._seen_ids.add(rec.id)
            self._records.append(rec)

    @classmethod
    def open(cls, persistence: RecordPersistence, **kwargs) -> ApplicationStore:
        """
        Load once from persistence, then write the normalised list back.

        This is the only place load() is called; the store is ready on return.
        """
        store = cls(persistence, persistence.load(), **kwargs)
        store._persist()
        logger.info("ApplicationStore ready total=%d", len(store))
        return store

    # ---- helpers ----

    def _mint_id(self) -> str:
        while True:
            rid = self._new_id()
            if rid and rid not in self._seen_ids:
                self._seen_ids.add(rid)
                return rid
            logger.debug("id factory returned a used id=%r; retrying", rid)

    def _index_of(self, record_id: str) -> int:
        for i, rec in enumerate(self._records):
            if rec.id == record_id:
                return i
        return -1

    def _persist(self) -> None:
        # Fire-and-forget: the adapter swallows and logs its own failures.
        self._persistence.save(list(self._records))

    @staticmethod
    def _validate(draft: ApplicationDraft) -> None:
        missing = draft.missing_required()
        if missing:
            raise ValidationError(f"required fields missing: {', '.join(missing)}", fields=missing)

    # ---- public API ----

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ApplicationRecord]:
        return iter(list(self._records))

    def count(self) -> int:
        return len(self._records)

    def list(self) -> list[ApplicationRecord]:
        return list(self._records)

    def get(self, record_id: str) -> ApplicationRecord:
        idx = self._index_of(record_id)
        if idx < 0:
            raise NotFoundError(record_id)
        return self._records[idx]

    def create(self, draft: ApplicationDraft) -> str:
        self._validate(draft)
        rid = self._mint_id()
        self._records.append(ApplicationRecord.from_draft(rid, draft))
        logger.debug("Application created id=%s company=%s role=%s", rid, draft.company_name, draft.role)
        self._persist()
        return rid

    def update(self, record_id: str, draft: ApplicationDraft) -> None:
        idx = self._index_of(record_id)
        if idx < 0:
            raise NotFoundError(record_id)
        self._validate(draft)
        self._records[idx] = ApplicationRecord.from_draft(record_id, draft)
        logger.debug("Application updated id=%s status=%s", record_id, draft.status.value)
        self._persist()

    def delete(self, record_id: str) -> None:
        idx = self._index_of(record_id)
        if idx < 0:
            logger.debug("Delete of unknown id=%s ignored", record_id)
            return
        del self._records[idx]
        logger.debug("Application deleted id=%s", record_id)
        self._persist()
