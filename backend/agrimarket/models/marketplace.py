# backend/agrimarket/models/marketplace.py

from sqlalchemy import (
    Column, String, Integer, Float, ForeignKey, DateTime,
    Text, Boolean
)
from datetime import datetime

from agrimarket.core.database import Base


class UserRow(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String, nullable=False, unique=True, index=True)
    name = Column(String, nullable=False)
    location = Column(String, nullable=False)
    phone_number = Column(String, nullable=True)
    role = Column(String, nullable=False, default="farmer")   # farmer / buyer


class CropTypeRow(Base):
    __tablename__ = "crop_types"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False, unique=True)


class ListingRow(Base):
    __tablename__ = "listings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    crop_type_id = Column(Integer, ForeignKey("crop_types.id"), nullable=False, index=True)
    quantity = Column(Float, nullable=False)
    price = Column(Float, nullable=False)
    quality = Column(String(1), nullable=False)
    description = Column(Text, nullable=True)
    location = Column(String, nullable=False)
    harvested_date = Column(DateTime, nullable=True)
    delivery_available = Column(Boolean, default=False)
    delivery_radius = Column(Integer, nullable=True)   # km
    is_verified = Column(Boolean, default=False)
    is_active = Column(Boolean, default=True)
    image_url = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)


class BidRow(Base):
    __tablename__ = "bids"

    id = Column(Integer, primary_key=True, autoincrement=True)
    listing_id = Column(Integer, ForeignKey("listings.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    amount = Column(Float, nullable=False)   # offered price per unit
    quantity = Column(Float, nullable=True)
    message = Column(Text, nullable=True)
    status = Column(String, default="pending")   # pending, accepted, rejected
    created_at = Column(DateTime, default=datetime.utcnow)


class BarterOfferRow(Base):
    __tablename__ = "barter_offers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    offer_user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    receiver_user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    offer_crop_type_id = Column(Integer, ForeignKey("crop_types.id"), nullable=False)
    offer_quantity = Column(Float, nullable=False)
    receiver_crop_type_id = Column(Integer, ForeignKey("crop_types.id"), nullable=False)
    receiver_quantity = Column(Float, nullable=False)
    message = Column(Text, nullable=True)
    status = Column(String, default="pending")   # pending, accepted, rejected
    created_at = Column(DateTime, default=datetime.utcnow)


class PriceHistoryRow(Base):
    __tablename__ = "price_history"

    id = Column(Integer, primary_key=True, autoincrement=True)
    crop_type_id = Column(Integer, ForeignKey("crop_types.id"), nullable=False, index=True)
    location = Column(String, nullable=False, index=True)
    price = Column(Float, nullable=False)
    quality = Column(String(1), nullable=False)
    recorded_date = Column(DateTime, nullable=False, default=datetime.utcnow)
