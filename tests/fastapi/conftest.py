"""
Fixtures for FastAPI endpoint tests.

Every test runs against its own FareQuoteEngine patched over the
module-level engine of the API.
"""

from unittest.mock import MagicMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

from src.fare_router.adapters.data_providers.seed_provider import SeedDataProvider
from src.fare_router.application import FareQuoteEngine
from src.fastapi.fares_api import app


@pytest.fixture
def anyio_backend():
    """Use asyncio backend for async tests."""
    return "asyncio"


def make_engine(provider) -> FareQuoteEngine:
    return FareQuoteEngine(data_provider=provider, auto_refresh=False)


@pytest.fixture
def seed_engine():
    engine = make_engine(SeedDataProvider())
    yield engine
    engine.shutdown()


@pytest.fixture
def line_engine(line_provider):
    engine = make_engine(line_provider)
    yield engine
    engine.shutdown()


@pytest.fixture
def untariffed_engine(records_provider_cls, line_airports, line_routes):
    engine = make_engine(records_provider_cls(line_airports, line_routes, tariff=None))
    yield engine
    engine.shutdown()


@pytest.fixture
def broken_engine():
    provider = MagicMock()
    provider.name = "Broken"
    provider.get_airports_df.side_effect = FileNotFoundError("Database not found: x.db")
    engine = make_engine(provider)
    yield engine
    engine.shutdown()


@pytest.fixture
def client_for():
    """Return an async context manager yielding a client bound to an engine."""

    class _Client:
        def __init__(self, engine):
            self._patch = patch("src.fastapi.fares_api.engine", engine)
            self._client = AsyncClient(
                transport=ASGITransport(app=app),
                base_url="http://test",
            )

        async def __aenter__(self):
            self._patch.start()
            return await self._client.__aenter__()

        async def __aexit__(self, *exc_info):
            try:
                await self._client.__aexit__(*exc_info)
            finally:
                self._patch.stop()

    return _Client
