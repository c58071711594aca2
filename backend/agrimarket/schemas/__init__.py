from .marketplace import (
    QualityGrade,
    User,
    CropType,
    Listing,
    Bid,
    BarterOffer,
    PriceHistory,
    ListingCreate,
    ListingUpdate,
    BidCreate,
    BarterOfferCreate,
    StatusUpdate,
    PricePredictionRequest,
    ChatMessage,
    CropTypeRef,
    UserRef,
    ListingView,
    BidView,
    BarterOfferView,
    PricePrediction,
    ForecastDataset,
    DemandGroups,
    ForecastReport,
    ChatReply,
)

__all__ = [
    "QualityGrade",
    "User",
    "CropType",
    "Listing",
    "Bid",
    "BarterOffer",
    "PriceHistory",
    "ListingCreate",
    "ListingUpdate",
    "BidCreate",
    "BarterOfferCreate",
    "StatusUpdate",
    "PricePredictionRequest",
    "ChatMessage",
    "CropTypeRef",
    "UserRef",
    "ListingView",
    "BidView",
    "BarterOfferView",
    "PricePrediction",
    "ForecastDataset",
    "DemandGroups",
    "ForecastReport",
    "ChatReply",
]
