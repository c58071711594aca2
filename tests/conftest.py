import os

# keep test runs from writing log files
os.environ.setdefault("LOG_DIR", "")

import random
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from agrimarket.core.config import Settings
from agrimarket.main import create_app
from agrimarket.repositories import build_memory_store, build_sql_store
from agrimarket.services.marketplace.seed_service import seed_sample_data

FIXED_NOW = datetime(2024, 6, 15, 12, 0, 0)


@pytest.fixture
def empty_store():
    return build_memory_store()


@pytest.fixture
def seeded_store():
    store = build_memory_store()
    seed_sample_data(store, rng=random.Random(1234), now=FIXED_NOW)
    return store


@pytest.fixture(params=["memory", "sql"])
def any_store(request):
    if request.param == "sql":
        return build_sql_store("sqlite://")
    return build_memory_store()


@pytest.fixture
def test_settings():
    return Settings(RANDOM_SEED=42, LOG_DIR="", SEED_SAMPLE_DATA=True)


@pytest.fixture
def client(test_settings):
    return TestClient(create_app(test_settings))
