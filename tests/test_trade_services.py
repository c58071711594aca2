import pytest

from agrimarket.core.errors import InvalidInput, RecordNotFound
from agrimarket.schemas import BarterOfferCreate, BidCreate, ListingCreate, ListingUpdate
from agrimarket.services.marketplace.barter_service import (
    create_barter_offer,
    list_barter_offers,
    update_barter_offer_status,
)
from agrimarket.services.marketplace.trade_service import (
    create_listing,
    get_listing,
    list_bids_for_listing,
    list_listings,
    list_listings_for_user,
    list_price_history,
    place_bid,
    update_bid_status,
    update_listing,
)


def test_listings_are_enriched(seeded_store):
    listings = list_listings(seeded_store)
    first = listings[0]

    assert first.crop_type.name == "Rice"
    assert first.seller.name == "Rajesh Kumar"
    assert first.seller.location == "Nashik"
    assert first.bid_count == 0


def test_create_listing_by_crop_name(seeded_store):
    listing = create_listing(seeded_store, ListingCreate(
        user_id=2, crop_type_name="ONION", quantity=80, price=18, quality="B", location="Pune",
    ))
    assert listing.crop_type_id == 5
    assert listing.is_active is True
    assert get_listing(seeded_store, listing.id).crop_type.name == "Onion"


def test_create_listing_unknown_crop(seeded_store):
    with pytest.raises(InvalidInput):
        create_listing(seeded_store, ListingCreate(
            user_id=2, crop_type_name="Kiwi", quantity=1, price=1, quality="A", location="Pune",
        ))


def test_create_listing_without_crop(seeded_store):
    with pytest.raises(InvalidInput):
        create_listing(seeded_store, ListingCreate(
            user_id=2, quantity=1, price=1, quality="A", location="Pune",
        ))


def test_update_listing_only_touches_sent_fields(seeded_store):
    updated = update_listing(seeded_store, 1, ListingUpdate(price=45))
    assert updated.price == 45
    assert updated.description == "Premium Basmati Rice"


def test_user_listings_skip_seller(seeded_store):
    mine = list_listings_for_user(seeded_store, 2)
    assert len(mine) == 1
    assert mine[0].seller is None
    assert mine[0].crop_type.name == "Tomato"


def test_bid_lifecycle(seeded_store):
    bid = place_bid(seeded_store, 1, BidCreate(user_id=4, amount=40, quantity=20))
    assert bid.status == "pending"

    bids = list_bids_for_listing(seeded_store, 1)
    assert len(bids) == 1
    assert bids[0].user.name == "Mohan Patel"
    assert get_listing(seeded_store, 1).bid_count == 1

    accepted = update_bid_status(seeded_store, bid.id, "accepted")
    assert accepted.status == "accepted"


def test_bid_on_missing_listing(seeded_store):
    with pytest.raises(RecordNotFound):
        place_bid(seeded_store, 99, BidCreate(user_id=4, amount=10))
    with pytest.raises(RecordNotFound):
        list_bids_for_listing(seeded_store, 99)


def test_bid_on_inactive_listing(seeded_store):
    update_listing(seeded_store, 2, ListingUpdate(is_active=False))
    with pytest.raises(InvalidInput):
        place_bid(seeded_store, 2, BidCreate(user_id=4, amount=10))


def test_bid_quantity_above_listing(seeded_store):
    with pytest.raises(InvalidInput):
        place_bid(seeded_store, 2, BidCreate(user_id=4, amount=10, quantity=500))


def test_price_history_filters(seeded_store):
    assert len(list_price_history(seeded_store)) == 900
    assert len(list_price_history(seeded_store, crop_type_id=1)) == 90
    assert len(list_price_history(seeded_store, crop_type_id=1, location="Pune")) == 18
    assert list_price_history(seeded_store, crop_type_id=1, location="pune") == []


def test_barter_offers(seeded_store):
    offer = create_barter_offer(seeded_store, BarterOfferCreate(
        offer_user_id=1, receiver_user_id=2,
        offer_crop_type_id=1, offer_quantity=10,
        receiver_crop_type_id=3, receiver_quantity=25,
    ))
    assert offer.status == "pending"

    for user_id in (1, 2):
        views = list_barter_offers(seeded_store, user_id=user_id)
        assert [v.id for v in views] == [offer.id]
    assert list_barter_offers(seeded_store, user_id=3) == []

    view = list_barter_offers(seeded_store)[0]
    assert view.offer_user.name == "Rajesh Kumar"
    assert view.receiver_user.name == "Anita Singh"
    assert view.offer_crop_type.name == "Rice"
    assert view.receiver_crop_type.name == "Tomato"

    assert update_barter_offer_status(seeded_store, offer.id, "rejected").status == "rejected"
    assert update_barter_offer_status(seeded_store, 99, "rejected") is None


def test_barter_with_self(seeded_store):
    with pytest.raises(InvalidInput):
        create_barter_offer(seeded_store, BarterOfferCreate(
            offer_user_id=1, receiver_user_id=1,
            offer_crop_type_id=1, offer_quantity=1,
            receiver_crop_type_id=2, receiver_quantity=1,
        ))
