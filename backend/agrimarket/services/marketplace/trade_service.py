# backend/agrimarket/services/marketplace/trade_service.py

"""
Marketplace Trading Service

Concepts:
 - listings: a seller lists a quantity of a crop type at a quality / location
 - bids: buyers place offers on active listings
 - bid status: pending -> accepted / rejected (decided by the seller side)
 - reads come back enriched with crop type name, seller and bid count
"""

import logging
from datetime import datetime
from typing import List, Optional

from agrimarket.core.errors import InvalidInput, RecordNotFound
from agrimarket.repositories import RecordStore
from agrimarket.schemas import (
    Bid,
    BidCreate,
    BidView,
    Listing,
    ListingCreate,
    ListingUpdate,
    ListingView,
    PriceHistory,
)
from agrimarket.services.marketplace.catalog_service import (
    crop_type_map,
    resolve_crop_type_id,
    user_map,
)

logger = logging.getLogger("agrimarket.trade")


def _now():
    return datetime.utcnow()


def _bid_counts(store: RecordStore):
    counts = {}
    for b in store.bids.list():
        counts[b.listing_id] = counts.get(b.listing_id, 0) + 1
    return counts


def _enrich_listings(store: RecordStore, listings: List[Listing], with_seller: bool = True) -> List[ListingView]:
    crops = crop_type_map(store)
    sellers = user_map(store) if with_seller else {}
    counts = _bid_counts(store)
    return [
        ListingView(
            **l.model_dump(),
            crop_type=crops.get(l.crop_type_id),
            seller=sellers.get(l.user_id),
            bid_count=counts.get(l.id, 0),
        )
        for l in listings
    ]


# -------------------------
# Listings
# -------------------------
def create_listing(store: RecordStore, payload: ListingCreate) -> Listing:
    crop_type_id = payload.crop_type_id
    if not crop_type_id and payload.crop_type_name:
        crop_type_id = resolve_crop_type_id(store, payload.crop_type_name)
    if not crop_type_id:
        raise InvalidInput("Missing required fields: cropTypeId or cropTypeName")

    data = payload.model_dump(exclude={"crop_type_id", "crop_type_name"})
    data["crop_type_id"] = crop_type_id
    data["created_at"] = _now()
    listing = store.listings.create(data)
    logger.info(f"Listing {listing.id} created by user {listing.user_id}")
    return listing


def list_listings(store: RecordStore) -> List[ListingView]:
    return _enrich_listings(store, store.listings.list())


def get_listing(store: RecordStore, listing_id: int) -> Optional[ListingView]:
    listing = store.listings.get(listing_id)
    if listing is None:
        return None
    return _enrich_listings(store, [listing])[0]


def update_listing(store: RecordStore, listing_id: int, payload: ListingUpdate) -> Optional[Listing]:
    # an explicit null means "leave as is"
    changes = {k: v for k, v in payload.model_dump(exclude_unset=True).items() if v is not None}
    return store.listings.update(listing_id, changes)


def list_listings_for_user(store: RecordStore, user_id: int) -> List[ListingView]:
    owned = [l for l in store.listings.list() if l.user_id == user_id]
    return _enrich_listings(store, owned, with_seller=False)


# -------------------------
# Bids
# -------------------------
def place_bid(store: RecordStore, listing_id: int, payload: BidCreate) -> Bid:
    listing = store.listings.get(listing_id)
    if listing is None:
        raise RecordNotFound("Listing not found")
    if not listing.is_active:
        raise InvalidInput("Listing is not active")
    if payload.quantity is not None and payload.quantity > listing.quantity:
        raise InvalidInput("Bid quantity exceeds listed quantity")

    bid = store.bids.create({
        **payload.model_dump(),
        "listing_id": listing_id,
        "status": "pending",
        "created_at": _now(),
    })
    logger.info(f"Bid {bid.id} placed on listing {listing_id}")
    return bid


def list_bids_for_listing(store: RecordStore, listing_id: int) -> List[BidView]:
    if store.listings.get(listing_id) is None:
        raise RecordNotFound("Listing not found")
    bidders = user_map(store)
    return [
        BidView(**b.model_dump(), user=bidders.get(b.user_id))
        for b in store.bids.list()
        if b.listing_id == listing_id
    ]


def list_bids_for_user(store: RecordStore, user_id: int) -> List[Bid]:
    return [b for b in store.bids.list() if b.user_id == user_id]


def update_bid_status(store: RecordStore, bid_id: int, status: str) -> Optional[Bid]:
    return store.bids.update(bid_id, {"status": status})


# -------------------------
# Price history
# -------------------------
def list_price_history(
    store: RecordStore,
    crop_type_id: Optional[int] = None,
    location: Optional[str] = None,
) -> List[PriceHistory]:
    items = store.price_history.list()
    if crop_type_id is not None:
        items = [h for h in items if h.crop_type_id == crop_type_id]
    if location:
        items = [h for h in items if h.location == location]
    return items
