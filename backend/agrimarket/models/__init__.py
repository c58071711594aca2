from .marketplace import (
    UserRow,
    CropTypeRow,
    ListingRow,
    BidRow,
    BarterOfferRow,
    PriceHistoryRow,
)
from ..core.database import Base

__all__ = [
    "UserRow",
    "CropTypeRow",
    "ListingRow",
    "BidRow",
    "BarterOfferRow",
    "PriceHistoryRow",
    "Base",
]
