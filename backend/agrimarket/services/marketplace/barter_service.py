# backend/agrimarket/services/marketplace/barter_service.py

"""Crop-for-crop exchange offers between two users."""

import logging
from datetime import datetime
from typing import List, Optional

from agrimarket.core.errors import InvalidInput
from agrimarket.repositories import RecordStore
from agrimarket.schemas import BarterOffer, BarterOfferCreate, BarterOfferView
from agrimarket.services.marketplace.catalog_service import crop_type_map, user_map

logger = logging.getLogger("agrimarket.barter")


def create_barter_offer(store: RecordStore, payload: BarterOfferCreate) -> BarterOffer:
    if payload.offer_user_id == payload.receiver_user_id:
        raise InvalidInput("Cannot barter with yourself")

    offer = store.barter_offers.create({
        **payload.model_dump(),
        "status": "pending",
        "created_at": datetime.utcnow(),
    })
    logger.info(f"Barter offer {offer.id} from user {offer.offer_user_id} to user {offer.receiver_user_id}")
    return offer


def list_barter_offers(store: RecordStore, user_id: Optional[int] = None) -> List[BarterOfferView]:
    offers = store.barter_offers.list()
    if user_id is not None:
        offers = [o for o in offers if user_id in (o.offer_user_id, o.receiver_user_id)]

    users = user_map(store)
    crops = crop_type_map(store)
    return [
        BarterOfferView(
            **o.model_dump(),
            offer_user=users.get(o.offer_user_id),
            receiver_user=users.get(o.receiver_user_id),
            offer_crop_type=crops.get(o.offer_crop_type_id),
            receiver_crop_type=crops.get(o.receiver_crop_type_id),
        )
        for o in offers
    ]


def update_barter_offer_status(store: RecordStore, offer_id: int, status: str) -> Optional[BarterOffer]:
    return store.barter_offers.update(offer_id, {"status": status})
