# tests/test_resource_store.py

from concurrent.futures import ThreadPoolExecutor

import pytest
from pydantic import ValidationError

from resource_store_api.app.core.errors import StoreIntegrityError
from resource_store_api.app.schemas.resource import Resource
from resource_store_api.app.services.resource_store import ResourceStore


def test_seed_resources_get_sequential_ids(store):
    records = store.list()
    assert [(r.id, r.data) for r in records] == [(1, "Resource 1"), (2, "Resource 2")]
    assert len(store) == 2


def test_empty_store():
    store = ResourceStore()
    assert store.list() == []
    assert len(store) == 0
    assert store.append("first").id == 1


def test_append_assigns_next_id(store):
    record = store.append("Resource 3")
    assert record.id == 3
    assert record.data == "Resource 3"
    assert store.list()[-1] == record


def test_list_returns_independent_snapshot(store):
    snapshot = store.list()
    snapshot.clear()
    store.append("later")

    assert len(snapshot) == 0
    assert len(store.list()) == 3


def test_list_is_idempotent_without_appends(store):
    assert store.list() == store.list()


def test_snapshot_does_not_see_later_appends(store):
    before = store.list()
    store.append("after")
    assert len(before) == 2
    assert store.list()[:2] == before


def test_records_are_frozen(store):
    record = store.list()[0]
    with pytest.raises(ValidationError):
        record.data = "changed"
    assert store.list()[0].data == "Resource 1"


def test_store_is_generic_over_payload():
    store: ResourceStore[dict] = ResourceStore([{"name": "a"}])
    store.append({"name": "b"})
    assert [r.data["name"] for r in store.list()] == ["a", "b"]


def test_concurrent_appends_get_distinct_sequential_ids(store):
    n = 500
    with ThreadPoolExecutor(max_workers=32) as pool:
        records = list(pool.map(store.append, [f"payload {i}" for i in range(n)]))

    ids = sorted(r.id for r in records)
    assert ids == list(range(3, n + 3))

    listed = store.list()
    assert len(listed) == n + 2
    # Position in the sequence matches the id handed out.
    assert [r.id for r in listed] == list(range(1, n + 3))
    assert {r.data for r in listed[2:]} == {f"payload {i}" for i in range(n)}


def test_concurrent_lists_and_appends_see_consistent_prefixes(store):
    def reader(_):
        snapshot = store.list()
        return [r.id for r in snapshot]

    with ThreadPoolExecutor(max_workers=16) as pool:
        writes = [pool.submit(store.append, i) for i in range(200)]
        reads = list(pool.map(reader, range(200)))
        for f in writes:
            f.result()

    for ids in reads:
        assert ids == list(range(1, len(ids) + 1))
    assert len(store) == 202


def test_integrity_failure_leaves_store_usable(store):
    # Corrupt the tail so the next append detects the broken invariant.
    store._records.append(Resource(id=7, data="bogus"))

    with pytest.raises(StoreIntegrityError) as exc_info:
        store.append("rejected")

    assert exc_info.value.code == "store_integrity"
    assert not store._lock.locked()
    assert len(store.list()) == 3
    assert "rejected" not in [r.data for r in store.list()]

    # Repairing the tail makes appends work again.
    store._records.pop()
    assert store.append("accepted").id == 3
