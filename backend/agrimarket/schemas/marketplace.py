# backend/agrimarket/schemas/marketplace.py

from typing import Optional, List, Literal
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


QualityGrade = Literal["A", "B", "C"]
OfferStatus = Literal["pending", "accepted", "rejected"]
DecisionStatus = Literal["accepted", "rejected"]


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ============================================================
# RECORDS (what the store holds)
# ============================================================

class User(CamelModel):
    id: int
    username: str
    name: str
    location: str
    phone_number: Optional[str] = None
    role: str = "farmer"


class CropType(CamelModel):
    id: int
    name: str


class Listing(CamelModel):
    id: int
    user_id: int
    crop_type_id: int
    quantity: float = Field(gt=0)
    price: float = Field(gt=0)
    quality: QualityGrade
    description: Optional[str] = None
    location: str
    harvested_date: Optional[datetime] = None
    delivery_available: bool = False
    delivery_radius: Optional[int] = None
    is_verified: bool = False
    is_active: bool = True
    image_url: Optional[str] = None
    created_at: datetime


class Bid(CamelModel):
    id: int
    listing_id: int
    user_id: int
    amount: float = Field(gt=0)
    quantity: Optional[float] = None
    message: Optional[str] = None
    status: OfferStatus = "pending"
    created_at: datetime


class BarterOffer(CamelModel):
    id: int
    offer_user_id: int
    receiver_user_id: int
    offer_crop_type_id: int
    offer_quantity: float = Field(gt=0)
    receiver_crop_type_id: int
    receiver_quantity: float = Field(gt=0)
    message: Optional[str] = None
    status: OfferStatus = "pending"
    created_at: datetime


class PriceHistory(CamelModel):
    id: int
    crop_type_id: int
    location: str
    price: float = Field(gt=0)
    quality: QualityGrade
    recorded_date: datetime


# ============================================================
# PAYLOADS
# ============================================================

class ListingCreate(CamelModel):
    user_id: int
    crop_type_id: Optional[int] = None
    crop_type_name: Optional[str] = None
    quantity: float = Field(gt=0)
    price: float = Field(gt=0)
    quality: QualityGrade
    description: Optional[str] = None
    location: str = Field(min_length=1)
    harvested_date: Optional[datetime] = None
    delivery_available: bool = False
    delivery_radius: Optional[int] = Field(default=None, ge=0)
    is_verified: bool = False
    is_active: bool = True
    image_url: Optional[str] = None


class ListingUpdate(CamelModel):
    quantity: Optional[float] = Field(default=None, gt=0)
    price: Optional[float] = Field(default=None, gt=0)
    quality: Optional[QualityGrade] = None
    description: Optional[str] = None
    location: Optional[str] = Field(default=None, min_length=1)
    delivery_available: Optional[bool] = None
    delivery_radius: Optional[int] = Field(default=None, ge=0)
    is_active: Optional[bool] = None
    image_url: Optional[str] = None


class BidCreate(CamelModel):
    user_id: int
    amount: float = Field(gt=0)
    quantity: Optional[float] = Field(default=None, gt=0)
    message: Optional[str] = None


class BarterOfferCreate(CamelModel):
    offer_user_id: int
    receiver_user_id: int
    offer_crop_type_id: int
    offer_quantity: float = Field(gt=0)
    receiver_crop_type_id: int
    receiver_quantity: float = Field(gt=0)
    message: Optional[str] = None


class StatusUpdate(CamelModel):
    status: DecisionStatus


class PricePredictionRequest(CamelModel):
    # all optional here; the service reports what is missing
    crop_type_id: Optional[int] = None
    crop_type_name: Optional[str] = None
    location: Optional[str] = None
    quality: Optional[str] = None


class ChatMessage(CamelModel):
    message: str = Field(min_length=1)


# ============================================================
# RESPONSES
# ============================================================

class CropTypeRef(CamelModel):
    id: int
    name: str


class UserRef(CamelModel):
    id: int
    name: str
    location: str


class ListingView(Listing):
    crop_type: Optional[CropTypeRef] = None
    seller: Optional[UserRef] = None
    bid_count: int = 0


class BidView(Bid):
    user: Optional[UserRef] = None


class BarterOfferView(BarterOffer):
    offer_user: Optional[UserRef] = None
    receiver_user: Optional[UserRef] = None
    offer_crop_type: Optional[CropTypeRef] = None
    receiver_crop_type: Optional[CropTypeRef] = None


class PricePrediction(CamelModel):
    min_price: float
    max_price: float
    price_range: str
    average_price: float
    market_comparison: Literal["above", "below"]


class ForecastDataset(CamelModel):
    crop_id: int
    crop_name: str
    data: List[int]


class DemandGroups(CamelModel):
    high: List[str]
    moderate: List[str]
    low: List[str]


class ForecastReport(CamelModel):
    labels: List[str]
    datasets: List[ForecastDataset]
    demand_groups: DemandGroups


class ChatReply(CamelModel):
    response: str
