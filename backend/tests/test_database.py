from datetime import date

import pytest
from pymongo.errors import DuplicateKeyError

from models import Observation


def test_upsert_creates_record_without_weight(store):
    record = store.upsert("2024-01-02", True)

    assert record.date == date(2024, 1, 2)
    assert record.worked_out is True
    assert record.weight is None
    assert record.created_at == record.updated_at
    assert "weight" not in store.collection.find_one({"date": "2024-01-02"})


def test_upsert_keeps_weight_when_not_supplied(store):
    first = store.upsert("2024-01-01", True, 181.5)

    second = store.upsert("2024-01-01", False)

    assert second.worked_out is False
    assert second.weight == 181.5
    assert second.created_at == first.created_at
    assert second.updated_at >= first.updated_at


def test_upsert_overwrites_weight_when_supplied(store):
    store.upsert("2024-01-01", True, 181.5)

    record = store.upsert("2024-01-01", True, 179.0)

    assert record.weight == 179.0


def test_upsert_with_none_clears_weight(store):
    store.upsert("2024-01-01", True, 181.5)

    record = store.upsert("2024-01-01", True, None)

    assert record.weight is None
    assert store.get("2024-01-01").weight is None


def test_one_document_per_date(store):
    store.upsert("2024-01-01", True)
    store.upsert("2024-01-01", False)

    assert store.collection.count_documents({}) == 1
    with pytest.raises(DuplicateKeyError):
        store.collection.insert_one({"date": "2024-01-01", "worked_out": True})


def test_get_missing_returns_none(store):
    assert store.get("2024-01-01") is None


def test_get_all_is_sorted(store):
    for day in ["2024-01-03", "2024-01-01", "2024-01-02"]:
        store.upsert(day, True)

    assert [r.date.isoformat() for r in store.get_all()] == ["2024-01-01", "2024-01-02", "2024-01-03"]


def test_get_in_range_is_inclusive(store):
    for day in ["2023-12-31", "2024-01-01", "2024-01-15", "2024-01-31", "2024-02-01"]:
        store.upsert(day, True)

    records = store.get_in_range("2024-01-01", "2024-01-31")

    assert [r.date.isoformat() for r in records] == ["2024-01-01", "2024-01-15", "2024-01-31"]


def test_observations_snapshot(store):
    store.upsert("2024-01-01", True, 180.0)
    store.upsert("2024-01-02", False)

    assert store.observations() == {
        "2024-01-01": Observation(worked_out=True, weight=180.0),
        "2024-01-02": Observation(worked_out=False),
    }
