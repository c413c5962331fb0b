"""
Shared fixtures for fare router tests.

Provides small airport/route networks and an in-memory data provider
built from plain records.
"""

from typing import List, Optional

import pytest

from src.fare_router.ports.network_provider import NetworkDataProvider
from src.fare_router.schemas.network import (
    AirportSchema,
    RouteSchema,
    airports_to_frame,
    routes_to_frame,
)
from src.fare_router.schemas.tariff import TariffConfiguration
from src.pathfinding.network import Airport, Route


class RecordsProvider(NetworkDataProvider):
    """In-memory provider over lists of records (test double)."""

    def __init__(
        self,
        airports: List[Airport],
        routes: List[Route],
        tariff: Optional[TariffConfiguration] = None,
    ) -> None:
        self.airports = airports
        self.routes = routes
        self.tariff = tariff
        self.load_count = 0

    def get_airports_df(self):
        self.load_count += 1
        return AirportSchema.validate(airports_to_frame(self.airports))

    def get_routes_df(self, active_only: bool = False):
        routes = [r for r in self.routes if r.active or not active_only]
        return RouteSchema.validate(routes_to_frame(routes))

    def get_tariff(self) -> Optional[TariffConfiguration]:
        return self.tariff

    @property
    def name(self) -> str:
        return "Records"


@pytest.fixture
def records_provider_cls():
    """The RecordsProvider class, for tests that build their own."""
    return RecordsProvider


@pytest.fixture
def seed_tariff_record() -> dict:
    """Tariff record as stored by the configuration store."""
    return {
        "baseRate": 4.5,
        "fuelSurcharge": 0.15,
        "taxes": 0.12,
        "markups": {"Saver": 1.0, "Standard": 1.25, "Flex": 1.6},
        "demandMultipliers": {"low": 0.8, "medium": 1.0, "high": 1.4},
        "minimumFare": 2000,
    }


@pytest.fixture
def seed_tariff(seed_tariff_record) -> TariffConfiguration:
    return TariffConfiguration.from_mapping(seed_tariff_record)


@pytest.fixture
def line_airports() -> List[Airport]:
    """Three airports one degree of longitude apart on the equator."""
    return [
        Airport(code="AAA", name="Alpha", city="Alphaville", country="Nowhere", lat=0.0, lon=0.0),
        Airport(code="BBB", name="Bravo", city="Bravotown", country="Nowhere", lat=0.0, lon=1.0),
        Airport(code="CCC", name="Charlie", city="Charlieton", country="Nowhere", lat=0.0, lon=2.0),
    ]


@pytest.fixture
def line_routes() -> List[Route]:
    """AAA->BBB and BBB->CCC (distances derived), no direct AAA->CCC."""
    return [
        Route(from_code="AAA", to_code="BBB"),
        Route(from_code="BBB", to_code="CCC"),
    ]


@pytest.fixture
def line_provider(line_airports, line_routes, seed_tariff) -> RecordsProvider:
    return RecordsProvider(line_airports, line_routes, seed_tariff)
