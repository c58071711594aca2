# backend/agrimarket/services/marketplace/seed_service.py

import calendar
import logging
import random
from datetime import datetime, timedelta
from typing import Optional

from agrimarket.repositories import RecordStore
from agrimarket.services.marketplace.catalog_service import find_crop_type_by_name, find_user_by_username
from agrimarket.services.marketplace.price_prediction_service import QUALITY_GRADES, quality_bonus

logger = logging.getLogger("agrimarket.seed")

# ------------------------------------------------------------
# CONFIG
# ------------------------------------------------------------
CROP_TYPES = [
    "Rice", "Wheat", "Tomato", "Potato", "Onion",
    "Green Chillies", "Eggplant", "Cauliflower", "Cabbage", "Carrots",
]

USERS = [
    {"username": "farmer1", "name": "Rajesh Kumar", "location": "Nashik", "phone_number": "+911234567890", "role": "farmer"},
    {"username": "farmer2", "name": "Anita Singh", "location": "Pune", "phone_number": "+911234567891", "role": "farmer"},
    {"username": "farmer3", "name": "Suresh Kumar", "location": "Nagpur", "phone_number": "+911234567892", "role": "farmer"},
    {"username": "buyer1", "name": "Mohan Patel", "location": "Mumbai", "phone_number": "+911234567893", "role": "buyer"},
]

# (seller username, crop name, days since harvest, listing fields)
LISTINGS = [
    ("farmer1", "Rice", 14, {
        "quantity": 100, "price": 42, "quality": "A", "description": "Premium Basmati Rice",
        "location": "Nashik", "delivery_available": True, "delivery_radius": 50,
        "image_url": "https://images.unsplash.com/photo-1586201375761-83865001e8ac",
    }),
    ("farmer2", "Tomato", 3, {
        "quantity": 50, "price": 25, "quality": "A", "description": "Fresh Tomatoes",
        "location": "Pune", "delivery_available": True, "delivery_radius": 30,
        "image_url": "https://images.unsplash.com/photo-1518977676601-b53f82aba655",
    }),
    ("farmer3", "Wheat", 30, {
        "quantity": 200, "price": 32, "quality": "B", "description": "Organic Wheat",
        "location": "Nagpur", "delivery_available": False,
        "image_url": "https://images.unsplash.com/photo-1508747703725-719777637510",
    }),
]

PRICE_LOCATIONS = ["Pune", "Nashik", "Nagpur", "Mumbai", "Ahmednagar"]
HISTORY_MONTHS = 6
MIN_SEED_PRICE = 5.0


def months_ago(moment: datetime, months: int) -> datetime:
    """Same day-of-month `months` earlier, clamped to the length of the target month."""
    total = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(total, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def seed_price(crop_index: int, quality: str, rng: random.Random) -> float:
    """Base price rises with crop index and quality, plus up to +/-5 of noise; never below 5."""
    base = 15 + crop_index * 2 + quality_bonus(quality)
    return max(MIN_SEED_PRICE, base + rng.uniform(-5, 5))


def seed_sample_data(store: RecordStore, rng: Optional[random.Random] = None, now: Optional[datetime] = None) -> dict:
    """
    Load the sample marketplace. Skips everything when crop types are
    already present so a persistent database is only seeded once.
    """
    rng = rng or random.Random()
    now = now or datetime.utcnow()

    if store.crop_types.list():
        logger.info("Sample data already present, skipping seed")
        return {"crop_types": 0, "users": 0, "listings": 0, "price_history": 0}

    crops = [store.crop_types.create({"name": name}) for name in CROP_TYPES]

    users = 0
    for u in USERS:
        store.users.create(u)
        users += 1

    listings = 0
    for username, crop_name, days, fields in LISTINGS:
        seller = find_user_by_username(store, username)
        crop = find_crop_type_by_name(store, crop_name)
        store.listings.create({
            **fields,
            "user_id": seller.id,
            "crop_type_id": crop.id,
            "harvested_date": now - timedelta(days=days),
            "is_verified": True,
            "is_active": True,
            "created_at": now,
        })
        listings += 1

    history = 0
    for index, crop in enumerate(crops, start=1):
        for location in PRICE_LOCATIONS:
            for quality in QUALITY_GRADES:
                for month in range(HISTORY_MONTHS):
                    store.price_history.create({
                        "crop_type_id": crop.id,
                        "location": location,
                        "price": seed_price(index, quality, rng),
                        "quality": quality,
                        "recorded_date": months_ago(now, month),
                    })
                    history += 1

    totals = {"crop_types": len(crops), "users": users, "listings": listings, "price_history": history}
    logger.info(f"Sample data seeded: {totals}")
    return totals
