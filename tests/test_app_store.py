# tests/test_app_store.py

from __future__ import annotations

import pytest

from job_tracker.applications.app_models import ApplicationRecord, Priority, Status
from job_tracker.applications.app_store import ApplicationStore
from job_tracker.core.errors import NotFoundError, ValidationError

from .fakes import RecordingPersistence, make_draft


def test_open_loads_once_then_saves_once(persistence: RecordingPersistence) -> None:
    store = ApplicationStore.open(persistence)
    assert persistence.loads == 1
    assert len(persistence.saves) == 1
    assert store.list() == []


def test_create_appends_and_returns_fresh_id(store: ApplicationStore) -> None:
    ids = set()
    for i in range(5):
        before = len(store.list())
        rid = store.create(make_draft(company=f"C{i}"))
        assert len(store.list()) == before + 1
        assert rid not in ids
        ids.add(rid)

    assert [r.company_name for r in store.list()] == ["C0", "C1", "C2", "C3", "C4"]
    assert {r.id for r in store.list()} == ids


@pytest.mark.parametrize(
    ("company", "role", "missing"),
    [
        ("", "SWE", ["companyName"]),
        ("Google", "", ["role"]),
        ("   ", "SWE", ["companyName"]),
        ("", "", ["companyName", "role"]),
    ],
)
def test_create_rejects_missing_required_fields(
    store: ApplicationStore,
    persistence: RecordingPersistence,
    company: str,
    role: str,
    missing: list[str],
) -> None:
    store.create(make_draft())
    snapshot = store.list()
    saves = len(persistence.saves)

    with pytest.raises(ValidationError) as ei:
        store.create(make_draft(company=company, role=role))

    assert list(ei.value.fields) == missing
    assert store.list() == snapshot
    assert len(persistence.saves) == saves


def test_update_replaces_fields_and_keeps_id_and_position(store: ApplicationStore) -> None:
    first = store.create(make_draft(company="A"))
    second = store.create(make_draft(company="B"))

    store.update(
        first,
        make_draft(company="A2", role="PM", status=Status.INTERVIEWING, priority=Priority.HIGH, notes="call Tue"),
    )

    records = store.list()
    assert len(records) == 2
    assert [r.id for r in records] == [first, second]
    updated = records[0]
    assert updated.company_name == "A2"
    assert updated.role == "PM"
    assert updated.status is Status.INTERVIEWING
    assert updated.priority is Priority.HIGH
    assert updated.notes == "call Tue"


def test_update_replaces_all_fields_not_merge(store: ApplicationStore) -> None:
    rid = store.create(make_draft(notes="old", salary_range="100-120k"))
    store.update(rid, make_draft())
    rec = store.get(rid)
    assert rec.notes == ""
    assert rec.salary_range == ""


def test_update_missing_id_raises_and_leaves_store(store: ApplicationStore, persistence: RecordingPersistence) -> None:
    store.create(make_draft())
    snapshot = store.list()
    saves = len(persistence.saves)

    with pytest.raises(NotFoundError) as ei:
        store.update("nope", make_draft(company="X"))

    assert ei.value.record_id == "nope"
    assert store.list() == snapshot
    assert len(persistence.saves) == saves


def test_update_validates_draft(store: ApplicationStore) -> None:
    rid = store.create(make_draft())
    with pytest.raises(ValidationError):
        store.update(rid, make_draft(role=""))
    assert store.get(rid).role == "Engineer"


def test_delete_is_idempotent(store: ApplicationStore, persistence: RecordingPersistence) -> None:
    keep = store.create(make_draft(company="keep"))
    gone = store.create(make_draft(company="gone"))

    store.delete(gone)
    after_first = store.list()
    saves = len(persistence.saves)

    store.delete(gone)

    assert store.list() == after_first
    assert [r.id for r in after_first] == [keep]
    assert len(persistence.saves) == saves


def test_every_mutation_writes_full_list(store: ApplicationStore, persistence: RecordingPersistence) -> None:
    a = store.create(make_draft(company="A"))
    assert [r.id for r in persistence.last_saved] == [a]

    b = store.create(make_draft(company="B"))
    assert [r.id for r in persistence.last_saved] == [a, b]

    store.update(a, make_draft(company="A*"))
    assert persistence.last_saved[0].company_name == "A*"

    store.delete(a)
    assert [r.id for r in persistence.last_saved] == [b]

    store.delete(b)
    assert persistence.last_saved == []


def test_ids_are_not_reused_after_delete() -> None:
    ids = iter(["x", "x", "y"])
    store = ApplicationStore(RecordingPersistence(), id_factory=lambda: next(ids))

    first = store.create(make_draft())
    store.delete(first)
    second = store.create(make_draft())

    assert first == "x"
    assert second == "y"


def test_blank_and_duplicate_loaded_ids_are_rekeyed() -> None:
    loaded = [
        ApplicationRecord(id="dup", company_name="A", role="r"),
        ApplicationRecord(id="dup", company_name="B", role="r"),
        ApplicationRecord(id="", company_name="C", role="r"),
    ]
    store = ApplicationStore.open(RecordingPersistence(loaded))

    records = store.list()
    assert [r.company_name for r in records] == ["A", "B", "C"]
    assert records[0].id == "dup"
    assert len({r.id for r in records}) == 3
    assert all(r.id for r in records)


def test_rekeyed_record_keeps_unrecognised_status_text() -> None:
    loaded = [
        ApplicationRecord(id="dup", company_name="A", role="r"),
        ApplicationRecord.from_dict({"id": "dup", "companyName": "B", "role": "r", "status": "Offer"}),
    ]
    persistence = RecordingPersistence(loaded)
    ApplicationStore.open(persistence)

    rekeyed = persistence.last_saved[1]
    assert rekeyed.id != "dup"
    assert rekeyed.status is Status.UNKNOWN
    assert rekeyed.to_dict()["status"] == "Offer"


def test_get_unknown_raises(store: ApplicationStore) -> None:
    with pytest.raises(NotFoundError):
        store.get("missing")


def test_list_returns_a_copy(store: ApplicationStore) -> None:
    store.create(make_draft())
    listing = store.list()
    listing.clear()
    assert len(store) == 1
