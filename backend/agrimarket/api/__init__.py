# backend/agrimarket/api/__init__.py

from fastapi import APIRouter

from agrimarket.api import chat
from agrimarket.api.marketplace import barter, catalog, prediction, trade

router = APIRouter()


@router.get("/health")
def health_check():
    return {"status": "ok"}


router.include_router(catalog.router)
router.include_router(trade.router)
router.include_router(barter.router)
router.include_router(prediction.router)
router.include_router(chat.router)
