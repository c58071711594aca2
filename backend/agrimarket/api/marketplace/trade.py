# backend/agrimarket/api/marketplace/trade.py

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional, List

from agrimarket.api.deps import get_store
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
    StatusUpdate,
)
from agrimarket.services.marketplace.trade_service import (
    create_listing,
    list_listings,
    get_listing,
    update_listing,
    place_bid,
    list_bids_for_listing,
    update_bid_status,
    list_price_history,
)

router = APIRouter(tags=["marketplace-trade"])


# ---------- Listings ----------
@router.get("/listings", response_model=List[ListingView])
def api_list_listings(store: RecordStore = Depends(get_store)):
    return list_listings(store)


@router.get("/listings/{listing_id}", response_model=ListingView)
def api_get_listing(listing_id: int, store: RecordStore = Depends(get_store)):
    res = get_listing(store, listing_id)
    if res is None:
        raise HTTPException(status_code=404, detail="Listing not found")
    return res


@router.post("/listings", response_model=Listing, status_code=201)
def api_create_listing(req: ListingCreate, store: RecordStore = Depends(get_store)):
    return create_listing(store, req)


@router.patch("/listings/{listing_id}", response_model=Listing)
def api_update_listing(listing_id: int, req: ListingUpdate, store: RecordStore = Depends(get_store)):
    res = update_listing(store, listing_id, req)
    if res is None:
        raise HTTPException(status_code=404, detail="Listing not found")
    return res


# ---------- Bids ----------
@router.get("/listings/{listing_id}/bids", response_model=List[BidView])
def api_list_bids(listing_id: int, store: RecordStore = Depends(get_store)):
    return list_bids_for_listing(store, listing_id)


@router.post("/listings/{listing_id}/bids", response_model=Bid, status_code=201)
def api_place_bid(listing_id: int, req: BidCreate, store: RecordStore = Depends(get_store)):
    return place_bid(store, listing_id, req)


@router.put("/bids/{bid_id}/status", response_model=Bid)
def api_update_bid_status(bid_id: int, req: StatusUpdate, store: RecordStore = Depends(get_store)):
    res = update_bid_status(store, bid_id, req.status)
    if res is None:
        raise HTTPException(status_code=404, detail="Bid not found")
    return res


# ---------- Price history ----------
@router.get("/price-history", response_model=List[PriceHistory])
def api_price_history(
    crop_type_id: Optional[int] = Query(None, alias="cropTypeId"),
    location: Optional[str] = None,
    store: RecordStore = Depends(get_store),
):
    return list_price_history(store, crop_type_id=crop_type_id, location=location)
