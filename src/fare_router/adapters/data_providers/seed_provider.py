"""
Seed Data Provider - built-in demonstration network.

Ten Indian airports joined by bidirectional routes whose distances are
derived from the airport coordinates, plus the default tariff.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd

from src.fare_router.adapters.data_providers.distances import fill_missing_distances
from src.fare_router.ports.network_provider import NetworkDataProvider
from src.fare_router.schemas.network import (
    AirportDataFrame,
    AirportSchema,
    RouteDataFrame,
    RouteSchema,
)
from src.fare_router.schemas.tariff import TariffConfiguration

logger = logging.getLogger(__name__)

SEED_AIRPORTS: List[Dict[str, Any]] = [
    {"code": "DEL", "name": "Indira Gandhi Intl", "city": "Delhi", "country": "India", "lat": 28.556, "lon": 77.100},
    {"code": "BOM", "name": "Chhatrapati Shivaji", "city": "Mumbai", "country": "India", "lat": 19.089, "lon": 72.865},
    {"code": "BLR", "name": "Kempegowda", "city": "Bangalore", "country": "India", "lat": 13.198, "lon": 77.706},
    {"code": "HYD", "name": "Rajiv Gandhi", "city": "Hyderabad", "country": "India", "lat": 17.24, "lon": 78.43},
    {"code": "MAA", "name": "Chennai Intl", "city": "Chennai", "country": "India", "lat": 12.99, "lon": 80.17},
    {"code": "CCU", "name": "Netaji Subhas Chandra", "city": "Kolkata", "country": "India", "lat": 22.65, "lon": 88.44},
    {"code": "PNQ", "name": "Pune", "city": "Pune", "country": "India", "lat": 18.58, "lon": 73.92},
    {"code": "GOI", "name": "Goa", "city": "Goa", "country": "India", "lat": 15.38, "lon": 73.83},
    {"code": "AMD", "name": "Ahmedabad", "city": "Ahmedabad", "country": "India", "lat": 23.07, "lon": 72.63},
    {"code": "COK", "name": "Cochin Intl", "city": "Kochi", "country": "India", "lat": 10.15, "lon": 76.40},
]

# Hub connections first, then cross-regional extras. Pairs repeated in
# either direction are collapsed when the seed is expanded.
SEED_CONNECTIONS: List[Tuple[str, str]] = [
    # Delhi
    ("DEL", "BOM"), ("DEL", "BLR"), ("DEL", "HYD"), ("DEL", "MAA"), ("DEL", "CCU"),
    ("DEL", "PNQ"), ("DEL", "AMD"), ("DEL", "COK"), ("DEL", "GOI"),
    # Mumbai
    ("BOM", "BLR"), ("BOM", "HYD"), ("BOM", "MAA"), ("BOM", "CCU"),
    ("BOM", "PNQ"), ("BOM", "GOI"), ("BOM", "AMD"), ("BOM", "COK"),
    # Bangalore
    ("BLR", "HYD"), ("BLR", "MAA"), ("BLR", "CCU"), ("BLR", "COK"),
    ("BLR", "GOI"), ("BLR", "PNQ"), ("BLR", "AMD"),
    # Chennai
    ("MAA", "HYD"), ("MAA", "CCU"), ("MAA", "COK"), ("MAA", "BLR"),
    ("MAA", "GOI"), ("MAA", "PNQ"),
    # Hyderabad
    ("HYD", "CCU"), ("HYD", "COK"), ("HYD", "GOI"), ("HYD", "AMD"), ("HYD", "PNQ"),
    # Kolkata
    ("CCU", "COK"), ("CCU", "GOI"), ("CCU", "AMD"), ("CCU", "PNQ"),
    # Regional
    ("PNQ", "GOI"), ("PNQ", "AMD"), ("PNQ", "COK"),
    ("GOI", "AMD"), ("GOI", "COK"),
    ("AMD", "COK"),
    # Secondary
    ("MAA", "AMD"), ("CCU", "GOI"), ("HYD", "PNQ"), ("BLR", "AMD"),
]

SEED_TARIFF: Dict[str, Any] = {
    "baseRate": 4.5,
    "fuelSurcharge": 0.15,
    "taxes": 0.12,
    "markups": {"Saver": 1.0, "Standard": 1.25, "Flex": 1.6},
    "demandMultipliers": {"low": 0.8, "medium": 1.0, "high": 1.4},
    "minimumFare": 2000,
}


def expand_connections(connections: List[Tuple[str, str]]) -> List[Tuple[str, str]]:
    """
    Expand undirected connections into directed (from, to) pairs.

    Each unordered pair yields A->B then B->A once, in first-seen order.
    """
    seen = set()
    directed: List[Tuple[str, str]] = []
    for a, b in connections:
        key = frozenset((a, b))
        if key in seen:
            continue
        seen.add(key)
        directed.append((a, b))
        directed.append((b, a))
    return directed


class SeedDataProvider(NetworkDataProvider):
    """
    In-memory provider for the built-in seed network.

    Frames are built once at construction; every call returns a copy so
    callers can never alter the seed.
    """

    def __init__(self, tariff: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize the seed provider.

        Args:
            tariff: Tariff record overriding SEED_TARIFF (optional).
        """
        airports_df = AirportSchema.validate(pd.DataFrame(SEED_AIRPORTS))

        directed = expand_connections(SEED_CONNECTIONS)
        routes_df = pd.DataFrame(
            {
                "from_code": [a for a, _ in directed],
                "to_code": [b for _, b in directed],
                "distance_km": [None] * len(directed),
                "active": [True] * len(directed),
            }
        )
        routes_df["distance_km"] = routes_df["distance_km"].astype(float)
        routes_df = RouteSchema.validate(fill_missing_distances(routes_df, airports_df))

        self._airports_df = airports_df
        self._routes_df = routes_df
        self._tariff = TariffConfiguration.from_mapping(tariff or SEED_TARIFF)

        logger.debug(
            "Seed network ready: %d airports, %d routes",
            len(airports_df),
            len(routes_df),
        )

    def get_airports_df(self) -> AirportDataFrame:
        return self._airports_df.copy()

    def get_routes_df(self, active_only: bool = False) -> RouteDataFrame:
        routes = self._routes_df
        if active_only:
            routes = routes[routes["active"]]
        return routes.reset_index(drop=True).copy()

    def get_tariff(self) -> Optional[TariffConfiguration]:
        return self._tariff

    @property
    def name(self) -> str:
        """Human-readable provider name."""
        return "Seed Network"
