# backend/agrimarket/api/marketplace/catalog.py

from fastapi import APIRouter, Depends, HTTPException
from typing import List

from agrimarket.api.deps import get_store
from agrimarket.repositories import RecordStore
from agrimarket.schemas import Bid, CropType, ListingView, User
from agrimarket.services.marketplace.catalog_service import get_user, list_crop_types
from agrimarket.services.marketplace.trade_service import list_bids_for_user, list_listings_for_user

router = APIRouter(tags=["marketplace-catalog"])


@router.get("/crop-types", response_model=List[CropType])
def api_crop_types(store: RecordStore = Depends(get_store)):
    return list_crop_types(store)


@router.get("/users/{user_id}", response_model=User)
def api_get_user(user_id: int, store: RecordStore = Depends(get_store)):
    user = get_user(store, user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.get("/users/{user_id}/listings", response_model=List[ListingView])
def api_user_listings(user_id: int, store: RecordStore = Depends(get_store)):
    if get_user(store, user_id) is None:
        raise HTTPException(status_code=404, detail="User not found")
    return list_listings_for_user(store, user_id)


@router.get("/users/{user_id}/bids", response_model=List[Bid])
def api_user_bids(user_id: int, store: RecordStore = Depends(get_store)):
    if get_user(store, user_id) is None:
        raise HTTPException(status_code=404, detail="User not found")
    return list_bids_for_user(store, user_id)
