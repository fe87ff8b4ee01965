# tests/test_app_summary.py

from __future__ import annotations

from job_tracker.applications.app_models import ApplicationRecord, Status
from job_tracker.applications.app_summary import summarize


def _with_statuses(*statuses: Status) -> list[ApplicationRecord]:
    return [ApplicationRecord(id=str(i), company_name="C", role="R", status=s) for i, s in enumerate(statuses)]


def test_counts_per_status_with_zeros() -> None:
    summary = summarize(_with_statuses(Status.APPLIED, Status.APPLIED, Status.ACCEPTED))

    assert summary.total == 3
    assert summary.counts_by_status == {
        Status.APPLIED: 2,
        Status.INTERVIEWING: 0,
        Status.ACCEPTED: 1,
        Status.REJECTED: 0,
    }
    assert summary.to_dict() == {
        "total": 3,
        "countsByStatus": {"Applied": 2, "Interviewing": 0, "Accepted": 1, "Rejected": 0},
    }


def test_empty_list() -> None:
    summary = summarize([])
    assert summary.total == 0
    assert set(summary.counts_by_status.values()) == {0}
    assert len(summary.counts_by_status) == 4


def test_unknown_status_counts_in_total_only() -> None:
    summary = summarize(_with_statuses(Status.UNKNOWN, Status.REJECTED))
    assert summary.total == 2
    assert summary.unknown == 1
    assert summary.counts_by_status[Status.REJECTED] == 1
    assert Status.UNKNOWN not in summary.counts_by_status
