# backend/agrimarket/main.py

# import logger first so handlers are attached before anything logs
from agrimarket.core.logger import logger

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agrimarket.api import router as api_router
from agrimarket.core.config import Settings, settings as default_settings
from agrimarket.core.error_middleware import ExceptionLoggingMiddleware
from agrimarket.core.errors import register_error_handlers
from agrimarket.core.request_middleware import RequestLoggingMiddleware
from agrimarket.repositories import RecordStore, build_store
from agrimarket.services.marketplace.forecast_service import ForecastGenerator
from agrimarket.services.marketplace.price_prediction_service import PricePredictor
from agrimarket.services.marketplace.seed_service import seed_sample_data
from agrimarket.services.marketplace.strategies import (
    CoinFlipComparison,
    FirstCropsSelection,
    make_random_source,
)


def create_app(settings: Optional[Settings] = None, store: Optional[RecordStore] = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(title=settings.APP_NAME, version="1.0")

    # ---------------------------------------------------
    # Middleware (CORS first, then request / exception logging)
    # ---------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(ExceptionLoggingMiddleware)

    register_error_handlers(app)

    # ---------------------------------------------------
    # Store, randomness and services
    # ---------------------------------------------------
    store = store or build_store(settings)
    rng = make_random_source(settings.RANDOM_SEED)

    if settings.SEED_SAMPLE_DATA:
        seed_sample_data(store, rng=rng)

    app.state.settings = settings
    app.state.store = store
    app.state.rng = rng
    app.state.predictor = PricePredictor(store, rng=rng)
    app.state.comparison = CoinFlipComparison(rng)
    app.state.forecaster = ForecastGenerator(store, rng=rng, selection=FirstCropsSelection(limit=3))

    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.on_event("startup")
    async def startup_event():
        logger.info(
            f"{settings.APP_NAME} started",
            extra={"path": settings.API_PREFIX},
        )
        logger.info(f"Storage backend: {settings.STORAGE_BACKEND}")

    return app


app = create_app()
