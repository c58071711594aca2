# backend/agrimarket/api/marketplace/barter.py

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional, List

from agrimarket.api.deps import get_store
from agrimarket.repositories import RecordStore
from agrimarket.schemas import BarterOffer, BarterOfferCreate, BarterOfferView, StatusUpdate
from agrimarket.services.marketplace.barter_service import (
    create_barter_offer,
    list_barter_offers,
    update_barter_offer_status,
)

router = APIRouter(tags=["marketplace-barter"])


@router.get("/barter-offers", response_model=List[BarterOfferView])
def api_list_barter_offers(
    user_id: Optional[int] = Query(None, alias="userId"),
    store: RecordStore = Depends(get_store),
):
    return list_barter_offers(store, user_id=user_id)


@router.post("/barter-offers", response_model=BarterOffer, status_code=201)
def api_create_barter_offer(req: BarterOfferCreate, store: RecordStore = Depends(get_store)):
    return create_barter_offer(store, req)


@router.put("/barter-offers/{offer_id}/status", response_model=BarterOffer)
def api_update_barter_offer_status(offer_id: int, req: StatusUpdate, store: RecordStore = Depends(get_store)):
    res = update_barter_offer_status(store, offer_id, req.status)
    if res is None:
        raise HTTPException(status_code=404, detail="Barter offer not found")
    return res
