import pytest
import asyncio
from datetime import datetime, timezone
from unittest.mock import AsyncMock
from httpx import AsyncClient, ASGITransport

from rating_api.main import app
from rating_api.api.quotes import get_engine
from rating_api.core.config import settings
from rating_api.services.pricing import RatingEngine


FIXED_MOMENT = datetime(2024, 1, 15, 12, 30, 45, 123000, tzinfo=timezone.utc)


class StubIdGenerator:
    """Hands out predictable quote ids"""

    def __init__(self, prefix: str = "Q-1700000000000-STUB"):
        self.prefix = prefix
        self.calls = 0

    def next_id(self) -> str:
        self.calls += 1
        return f"{self.prefix}{self.calls}"


@pytest.fixture
async def test_client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def stub_id_generator():
    return StubIdGenerator()


@pytest.fixture
def stub_engine(stub_id_generator):
    return RatingEngine(id_generator=stub_id_generator, clock=lambda: FIXED_MOMENT)


@pytest.fixture
def override_engine(stub_engine):
    app.dependency_overrides[get_engine] = lambda: stub_engine
    yield stub_engine
    app.dependency_overrides.pop(get_engine, None)


@pytest.fixture
def fake_redis(monkeypatch):
    redis = AsyncMock()
    redis.get.return_value = None
    monkeypatch.setattr("rating_api.api.quotes.get_redis", lambda: redis)
    return redis


@pytest.fixture
def valid_quote_data():
    return {
        "revenue": 50000,
        "state": "CA",
        "business": "retail"
    }


@pytest.fixture
def app_settings():
    """Return application settings"""
    return settings


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "pricing: marks tests related to pricing"
    )
    config.addinivalue_line(
        "markers", "validation: marks tests related to request validation"
    )
    config.addinivalue_line(
        "markers", "cache: marks tests related to premium caching"
    )
    config.addinivalue_line(
        "markers", "client: marks tests related to the rating API client"
    )


def pytest_collection_modifyitems(config, items):
    """
    Modify test collection to handle asyncio tests
    """
    for item in items:
        if asyncio.iscoroutinefunction(item.function):
            item.add_marker(pytest.mark.asyncio)
