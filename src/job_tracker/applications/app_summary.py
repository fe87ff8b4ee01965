# src/job_tracker/applications/app_summary.py

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .app_models import ApplicationRecord, Status


@dataclass(frozen=True, slots=True)
class Summary:
    total: int
    counts_by_status: dict[Status, int] = field(default_factory=dict)
    # records whose status is not one of the known values (counted in total only)
    unknown: int = 0

    def to_dict(self) -> dict[str, object]:
        return {
            "total": self.total,
            "countsByStatus": {s.value: n for s, n in self.counts_by_status.items()},
        }


def summarize(records: Sequence[ApplicationRecord]) -> Summary:
    counts = {s: 0 for s in Status.known()}
    unknown = 0
    for r in records:
        if r.status in counts:
            counts[r.status] += 1
        else:
            unknown += 1
    return Summary(total=len(records), counts_by_status=counts, unknown=unknown)
