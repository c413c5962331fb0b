"""Pytest configuration for service tests."""

import pytest

from src.fare_router.adapters.data_providers.seed_provider import SeedDataProvider
from src.fare_router.schemas.network import airports_from_frame, routes_from_frame


@pytest.fixture(scope="module")
def seed_records():
    """Airport and route records of the seed network."""
    provider = SeedDataProvider()
    airports = airports_from_frame(provider.get_airports_df())
    routes = routes_from_frame(provider.get_routes_df())
    return airports, routes
