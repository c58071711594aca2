# backend/agrimarket/api/marketplace/prediction.py

from fastapi import APIRouter, Depends

from agrimarket.api.deps import get_comparison, get_forecaster, get_predictor, get_settings, get_store
from agrimarket.core.errors import InternalFailure, MarketplaceError
from agrimarket.core.logger import logger
from agrimarket.repositories import RecordStore
from agrimarket.schemas import ForecastReport, PricePrediction, PricePredictionRequest
from agrimarket.services.marketplace.forecast_service import ForecastGenerator
from agrimarket.services.marketplace.price_prediction_service import PricePredictor, predict_for_request
from agrimarket.services.marketplace.strategies import ComparisonStrategy

router = APIRouter(tags=["marketplace-prediction"])


@router.post("/predict-price", response_model=PricePrediction)
def api_predict_price(
    req: PricePredictionRequest,
    store: RecordStore = Depends(get_store),
    predictor: PricePredictor = Depends(get_predictor),
    comparison: ComparisonStrategy = Depends(get_comparison),
    settings=Depends(get_settings),
):
    """
    Estimated unit price with a +/-10% range for a crop type (id or name),
    location and quality grade.
    """
    try:
        return predict_for_request(
            store, predictor, req,
            comparison=comparison,
            currency_symbol=settings.CURRENCY_SYMBOL,
        )
    except MarketplaceError:
        raise
    except Exception as exc:
        logger.exception("Price prediction failed")
        raise InternalFailure() from exc


@router.get("/forecast", response_model=ForecastReport)
def api_forecast(forecaster: ForecastGenerator = Depends(get_forecaster)):
    try:
        return forecaster.get_forecast_data()
    except Exception as exc:
        logger.exception("Forecast generation failed")
        raise InternalFailure() from exc
