# backend/agrimarket/services/marketplace/forecast_service.py

import logging
import random
from typing import Dict, List, Optional

from agrimarket.repositories import RecordStore
from agrimarket.schemas import CropType, DemandGroups, ForecastDataset, ForecastReport
from agrimarket.services.marketplace.strategies import CropSelectionStrategy, FirstCropsSelection

logger = logging.getLogger("agrimarket.forecast")

# Six consecutive future periods
FORECAST_LABELS = ["May", "Jun", "Jul", "Aug", "Sep", "Oct"]

# Hand-authored demand curves
FIXED_CURVES: Dict[str, List[int]] = {
    "Tomato": [30, 45, 60, 70, 65, 55],
    "Rice": [50, 55, 52, 50, 48, 45],
    "Onion": [20, 25, 40, 50, 65, 70],
}

RANDOM_CURVE_MIN = 20
RANDOM_CURVE_MAX = 69

# Static tiers, not derived from listings or price history
HIGH_DEMAND_CROPS = ["Green Chillies", "Tomato", "Eggplant"]
MODERATE_DEMAND_CROPS = ["Rice", "Onion", "Cauliflower"]
LOW_DEMAND_CROPS = ["Potato", "Cabbage", "Carrots"]


def demand_groups() -> DemandGroups:
    return DemandGroups(
        high=list(HIGH_DEMAND_CROPS),
        moderate=list(MODERATE_DEMAND_CROPS),
        low=list(LOW_DEMAND_CROPS),
    )


class ForecastGenerator:
    def __init__(
        self,
        store: RecordStore,
        rng: Optional[random.Random] = None,
        selection: Optional[CropSelectionStrategy] = None,
    ):
        self.store = store
        self.rng = rng or random.Random()
        self.selection = selection or FirstCropsSelection(limit=3)

    def crop_curve(self, crop: CropType) -> List[int]:
        fixed = FIXED_CURVES.get(crop.name)
        if fixed is not None:
            return list(fixed)
        return [self.rng.randint(RANDOM_CURVE_MIN, RANDOM_CURVE_MAX) for _ in FORECAST_LABELS]

    def get_forecast_data(self) -> ForecastReport:
        top_crops = self.selection.select(self.store.crop_types.list())

        datasets = [
            ForecastDataset(crop_id=crop.id, crop_name=crop.name, data=self.crop_curve(crop))
            for crop in top_crops
        ]
        logger.info(f"Forecast generated for {len(datasets)} crops")

        return ForecastReport(
            labels=list(FORECAST_LABELS),
            datasets=datasets,
            demand_groups=demand_groups(),
        )
