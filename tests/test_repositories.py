from datetime import datetime

import pytest

from agrimarket.core.errors import ImmutableRecord, InvalidInput


def make_listing(store, **overrides):
    data = {
        "user_id": 1,
        "crop_type_id": 1,
        "quantity": 10,
        "price": 20,
        "quality": "A",
        "location": "Pune",
        "created_at": datetime(2024, 1, 1),
    }
    data.update(overrides)
    return store.listings.create(data)


def test_ids_increment_in_creation_order(any_store):
    rice = any_store.crop_types.create({"name": "Rice"})
    wheat = any_store.crop_types.create({"name": "Wheat"})

    assert (rice.id, wheat.id) == (1, 2)
    assert [c.name for c in any_store.crop_types.list()] == ["Rice", "Wheat"]


def test_get_missing_returns_none(any_store):
    assert any_store.users.get(42) is None


def test_update_applies_changes(any_store):
    listing = make_listing(any_store)
    updated = any_store.listings.update(listing.id, {"price": 35.5, "is_active": False})

    assert updated.price == 35.5
    assert updated.is_active is False
    assert any_store.listings.get(listing.id).price == 35.5
    assert any_store.listings.get(listing.id).quantity == 10


def test_update_missing_returns_none(any_store):
    assert any_store.listings.update(99, {"price": 1}) is None


def test_update_rejects_invalid_values(any_store):
    listing = make_listing(any_store)
    with pytest.raises(InvalidInput):
        any_store.listings.update(listing.id, {"price": -1})
    assert any_store.listings.get(listing.id).price == 20


def test_price_history_is_append_only(any_store):
    entry = any_store.price_history.create({
        "crop_type_id": 1,
        "location": "Pune",
        "price": 12.0,
        "quality": "B",
        "recorded_date": datetime(2024, 1, 1),
    })
    with pytest.raises(ImmutableRecord):
        any_store.price_history.update(entry.id, {"price": 99.0})
    assert any_store.price_history.get(entry.id).price == 12.0


@pytest.mark.parametrize("bad", [{"price": 0}, {"quality": "D"}])
def test_price_history_rejects_bad_records(any_store, bad):
    data = {
        "crop_type_id": 1,
        "location": "Pune",
        "price": 12.0,
        "quality": "B",
        "recorded_date": datetime(2024, 1, 1),
    }
    data.update(bad)
    with pytest.raises(InvalidInput):
        any_store.price_history.create(data)
    assert any_store.price_history.list() == []


def test_memory_store_hands_out_copies(empty_store):
    crop = empty_store.crop_types.create({"name": "Rice"})
    crop.name = "Changed"
    listed = empty_store.crop_types.list()
    listed[0].name = "Changed again"

    assert empty_store.crop_types.get(crop.id).name == "Rice"
