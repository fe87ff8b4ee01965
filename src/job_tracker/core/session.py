# src/job_tracker/core/session.py

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..applications.app_models import ApplicationDraft, ApplicationRecord, Status
from ..applications.app_query import Query, group_by_status, run_query
from ..applications.app_store import ApplicationStore
from ..applications.app_summary import Summary, summarize

logger = logging.getLogger(__name__)

DraftLike = ApplicationDraft | Mapping[str, Any]


def _as_draft(draft: DraftLike) -> ApplicationDraft:
    if isinstance(draft, ApplicationDraft):
        return draft
    return ApplicationDraft.from_dict(draft)


@dataclass
class TrackerSession:
    """
    What a UI talks to.

    Intents: submit_new / submit_edit / remove / set_query.
    Read-backs: records / visible / board / summary.

    Store errors (ValidationError, NotFoundError) propagate unchanged.
    """

    # Settings kept on the session for easy access by the UI layer.
    settings: object
    store: ApplicationStore
    query: Query = field(default_factory=Query)

    # ---- intents ----

    def submit_new(self, draft: DraftLike) -> str:
        return self.store.create(_as_draft(draft))

    def submit_edit(self, record_id: str, draft: DraftLike) -> None:
        self.store.update(record_id, _as_draft(draft))

    def remove(self, record_id: str) -> None:
        self.store.delete(record_id)

    def set_query(self, query: Query | Mapping[str, Any]) -> Query:
        self.query = query if isinstance(query, Query) else Query.from_dict(query)
        logger.debug("Query set %s", self.query.to_dict())
        return self.query

    # ---- read-backs ----

    def records(self) -> list[ApplicationRecord]:
        return self.store.list()

    def visible(self) -> list[ApplicationRecord]:
        return run_query(self.store.list(), self.query)

    def board(self) -> dict[Status, list[ApplicationRecord]]:
        return group_by_status(self.visible())

    def summary(self) -> Summary:
        return summarize(self.store.list())
