# backend/agrimarket/services/marketplace/price_prediction_service.py

"""
Price prediction from PriceHistory

Algorithm:
 - history for the exact crop type + location (location is case-sensitive)
 - keep entries of the requested quality grade
 - nothing left -> fixed fallback 20 + quality bonus (A=10, B=5, else 0)
 - otherwise average the 3 most recent prices and apply a +/-5% jitter
   drawn from the injected random source (simulated model variance)

The API answer is built by build_price_prediction: rounded average, a
+/-10% range, a display label and a market comparison from a pluggable
strategy.
"""

import logging
import random
from typing import Optional

from agrimarket.core.errors import InvalidInput
from agrimarket.repositories import RecordStore
from agrimarket.schemas import PricePrediction, PricePredictionRequest
from agrimarket.services.marketplace.catalog_service import resolve_crop_type_id
from agrimarket.services.marketplace.strategies import ComparisonStrategy, CoinFlipComparison

logger = logging.getLogger("agrimarket.prediction")

QUALITY_BONUS = {"A": 10, "B": 5}
QUALITY_GRADES = ("A", "B", "C")
FALLBACK_BASE_PRICE = 20
RECENT_WINDOW = 3
JITTER_LOW = 0.95
JITTER_HIGH = 1.05
RANGE_LOW_FACTOR = 0.9
RANGE_HIGH_FACTOR = 1.1


def quality_bonus(quality: str) -> int:
    return QUALITY_BONUS.get(quality, 0)


def format_amount(value: float) -> str:
    """90.0 -> '90', 22.5 -> '22.5'"""
    return f"{value:.2f}".rstrip("0").rstrip(".")


def price_range_label(min_price: float, max_price: float, currency_symbol: str) -> str:
    return f"{currency_symbol}{format_amount(min_price)}-{format_amount(max_price)}"


class PricePredictor:
    def __init__(self, store: RecordStore, rng: Optional[random.Random] = None):
        self.store = store
        self.rng = rng or random.Random()

    def draw_jitter(self) -> float:
        return self.rng.uniform(JITTER_LOW, JITTER_HIGH)

    def predict_price(self, crop_type_id: int, location: str, quality: str, jitter: Optional[float] = None) -> float:
        """
        Estimated unit price, not rounded. Pass `jitter` to pin the
        variance factor (1.0 gives the plain recent average).
        """
        history = [
            h for h in self.store.price_history.list()
            if h.crop_type_id == crop_type_id and h.location == location
        ]
        matching = [h for h in history if h.quality == quality]

        if not matching:
            fallback = float(FALLBACK_BASE_PRICE + quality_bonus(quality))
            logger.info(
                f"No price history for crop_type={crop_type_id} location={location} quality={quality}; "
                f"using fallback {fallback}"
            )
            return fallback

        matching.sort(key=lambda h: h.recorded_date, reverse=True)
        recent = matching[:RECENT_WINDOW]
        avg_recent = sum(h.price for h in recent) / len(recent)

        factor = self.draw_jitter() if jitter is None else jitter
        return avg_recent * factor


def build_price_prediction(
    price: float,
    crop_type_id: int,
    location: str,
    quality: str,
    comparison: ComparisonStrategy,
    currency_symbol: str = "₹",
) -> PricePrediction:
    average = round(price, 2)
    min_price = round(average * RANGE_LOW_FACTOR, 2)
    max_price = round(average * RANGE_HIGH_FACTOR, 2)
    return PricePrediction(
        min_price=min_price,
        max_price=max_price,
        price_range=price_range_label(min_price, max_price, currency_symbol),
        average_price=average,
        market_comparison=comparison.compare(crop_type_id, location, quality, average),
    )


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def predict_for_request(
    store: RecordStore,
    predictor: PricePredictor,
    req: PricePredictionRequest,
    comparison: Optional[ComparisonStrategy] = None,
    currency_symbol: str = "₹",
) -> PricePrediction:
    """
    Resolve the request (crop type id wins over name), validate it and
    build the API answer.
    """
    crop_type_id = req.crop_type_id
    if not crop_type_id and not _is_blank(req.crop_type_name):
        crop_type_id = resolve_crop_type_id(store, req.crop_type_name)

    missing = [
        name for name, value in (
            ("cropTypeId", crop_type_id),
            ("location", req.location),
            ("quality", req.quality),
        )
        if _is_blank(value) or value == 0
    ]
    if missing:
        raise InvalidInput(f"Missing required fields: {', '.join(missing)}")

    if req.quality not in QUALITY_GRADES:
        raise InvalidInput(f"Invalid quality grade: {req.quality}")

    price = predictor.predict_price(crop_type_id, req.location, req.quality)
    return build_price_prediction(
        price,
        crop_type_id,
        req.location,
        req.quality,
        comparison or CoinFlipComparison(predictor.rng),
        currency_symbol=currency_symbol,
    )
