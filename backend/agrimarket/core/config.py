# backend/agrimarket/core/config.py

from typing import List, Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "AgriMarket API"
    API_PREFIX: str = "/api"

    # Storage: "memory" keeps everything in process, "sql" goes through SQLAlchemy
    STORAGE_BACKEND: Literal["memory", "sql"] = "memory"
    DATABASE_URL: str = "sqlite://"

    SEED_SAMPLE_DATA: bool = True

    # Fix to make jitter / forecast noise reproducible
    RANDOM_SEED: Optional[int] = None

    CURRENCY_SYMBOL: str = "₹"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
