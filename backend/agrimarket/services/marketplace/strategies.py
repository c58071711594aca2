# backend/agrimarket/services/marketplace/strategies.py

"""
Pluggable stand-ins for the parts of pricing/forecasting that are not real
models yet. Services take these as constructor arguments so a trained model
can replace a stub without touching the callers.

 - ComparisonStrategy: is a predicted price above or below the market?
 - CropSelectionStrategy: which crops get a forecast curve?
"""

import random
from typing import List, Literal, Optional, Protocol

from agrimarket.schemas import CropType

MarketComparison = Literal["above", "below"]


def make_random_source(seed: Optional[int] = None) -> random.Random:
    return random.Random(seed)


class ComparisonStrategy(Protocol):
    def compare(self, crop_type_id: int, location: str, quality: str, price: float) -> MarketComparison:
        ...


class CoinFlipComparison:
    """
    STUB: no market data is consulted, the answer is a fair coin flip.
    """

    def __init__(self, rng: random.Random):
        self.rng = rng

    def compare(self, crop_type_id: int, location: str, quality: str, price: float) -> MarketComparison:
        return "above" if self.rng.random() > 0.5 else "below"


class CropSelectionStrategy(Protocol):
    def select(self, crop_types: List[CropType]) -> List[CropType]:
        ...


class FirstCropsSelection:
    """
    STUB: "top crops" are simply the first `limit` crop types in creation
    order. No listing volume or bid activity is looked at.
    """

    def __init__(self, limit: int = 3):
        self.limit = limit

    def select(self, crop_types: List[CropType]) -> List[CropType]:
        return list(crop_types[: self.limit])
