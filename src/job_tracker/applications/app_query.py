# src/job_tracker/applications/app_query.py

from __future__ import annotations

"""
Derived views over the application list.

Everything here is a pure function of (records, query): nothing mutates
the input sequence or the records in it.
"""

import unicodedata
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from ..core.errors import ValidationError
from .app_models import ApplicationRecord, Status

STATUS_ALL = "All"


class SortField(StrEnum):
    DATE_APPLIED = "dateApplied"
    COMPANY_NAME = "companyName"
    STATUS = "status"
    PRIORITY = "priority"

    @property
    def attr(self) -> str:
        return _SORT_ATTRS[self]


_SORT_ATTRS = {
    SortField.DATE_APPLIED: "date_applied",
    SortField.COMPANY_NAME: "company_name",
    SortField.STATUS: "status",
    SortField.PRIORITY: "priority",
}


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True, slots=True)
class Query:
    status_filter: Status | str = STATUS_ALL
    search_text: str = ""
    sort_field: SortField = SortField.DATE_APPLIED
    sort_direction: SortDirection = SortDirection.DESC

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Query:
        """Build from camelCase (UI) or snake_case keys. Unknown enum values raise ValidationError."""

        def pick(camel: str, snake: str, default: Any) -> Any:
            if camel in data:
                return data[camel]
            return data.get(snake, default)

        raw_filter = str(pick("statusFilter", "status_filter", STATUS_ALL) or STATUS_ALL)
        raw_field = pick("sortField", "sort_field", SortField.DATE_APPLIED)
        raw_dir = pick("sortDirection", "sort_direction", SortDirection.DESC)

        status_filter: Status | str
        if raw_filter == STATUS_ALL:
            status_filter = STATUS_ALL
        else:
            status_filter = Status.parse(raw_filter)
            if not status_filter.is_known:
                raise ValidationError(f"unknown status filter: {raw_filter!r}", fields=["statusFilter"])

        try:
            sort_field = SortField(raw_field)
        except ValueError:
            raise ValidationError(f"unknown sort field: {raw_field!r}", fields=["sortField"]) from None
        try:
            sort_direction = SortDirection(str(raw_dir).lower())
        except ValueError:
            raise ValidationError(f"unknown sort direction: {raw_dir!r}", fields=["sortDirection"]) from None

        return cls(
            status_filter=status_filter,
            search_text=str(pick("searchText", "search_text", "") or ""),
            sort_field=sort_field,
            sort_direction=sort_direction,
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "statusFilter": str(self.status_filter),
            "searchText": self.search_text,
            "sortField": self.sort_field.value,
            "sortDirection": self.sort_direction.value,
        }


def collation_key(value: str | None) -> tuple[str, str, str]:
    """
    Locale-style sort key.

    Primary: letters without accents or case. Then accents, then case (lowercase first).
    """
    s = value or ""
    decomposed = unicodedata.normalize("NFKD", s)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    return (base, s.casefold(), s.swapcase())


def filter_by_status(records: Sequence[ApplicationRecord], status_filter: Status | str) -> list[ApplicationRecord]:
    if status_filter == STATUS_ALL:
        return list(records)
    return [r for r in records if r.status == status_filter]


def filter_by_text(records: Sequence[ApplicationRecord], search_text: str) -> list[ApplicationRecord]:
    if not search_text:
        return list(records)
    needle = search_text.casefold()
    return [
        r
        for r in records
        if needle in (r.company_name or "").casefold() or needle in (r.role or "").casefold()
    ]


def sort_records(
    records: Sequence[ApplicationRecord],
    field: SortField,
    direction: SortDirection,
) -> list[ApplicationRecord]:
    # sorted() is stable for reverse=True as well, so ties keep insertion order both ways.
    return sorted(
        records,
        key=lambda r: collation_key(r.value_of(field.attr)),
        reverse=direction is SortDirection.DESC,
    )


def run_query(records: Sequence[ApplicationRecord], query: Query) -> list[ApplicationRecord]:
    """Status filter -> text filter -> sort, in that order."""
    out = filter_by_status(records, query.status_filter)
    out = filter_by_text(out, query.search_text)
    return sort_records(out, query.sort_field, query.sort_direction)


def group_by_status(records: Sequence[ApplicationRecord]) -> dict[Status, list[ApplicationRecord]]:
    """
    Board columns: one entry per known status, in board order, each keeping input order.

    Records with an unrecognised status land in no column.
    """
    board: dict[Status, list[ApplicationRecord]] = {s: [] for s in Status.known()}
    for r in records:
        column = board.get(r.status)
        if column is not None:
            column.append(r)
    return board
