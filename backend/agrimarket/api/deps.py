from fastapi import Request

from agrimarket.repositories import RecordStore
from agrimarket.services.marketplace.forecast_service import ForecastGenerator
from agrimarket.services.marketplace.price_prediction_service import PricePredictor
from agrimarket.services.marketplace.strategies import ComparisonStrategy


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_predictor(request: Request) -> PricePredictor:
    return request.app.state.predictor


def get_comparison(request: Request) -> ComparisonStrategy:
    return request.app.state.comparison


def get_forecaster(request: Request) -> ForecastGenerator:
    return request.app.state.forecaster


def get_settings(request: Request):
    return request.app.state.settings
