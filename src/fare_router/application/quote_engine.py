"""
FareQuoteEngine - public API for route computation and pricing.

Acts as a Facade/Factory: wires a data provider, the snapshot
repository and the domain services together behind a small interface.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from src.fare_router.adapters.algorithms.registry import available_algorithms
from src.fare_router.adapters.data_providers.seed_provider import SeedDataProvider
from src.fare_router.adapters.data_providers.sqlite_provider import (
    SqliteNetworkProvider,
)
from src.fare_router.adapters.repositories.network_repo import (
    NetworkRepository,
    NetworkSnapshot,
)
from src.fare_router.config import Config
from src.fare_router.exceptions import TariffNotConfiguredError
from src.fare_router.ports.network_provider import NetworkDataProvider
from src.fare_router.schemas.offer import PriceQuote
from src.fare_router.schemas.path import PathResult
from src.fare_router.services.pricing_service import PricingService
from src.fare_router.services.route_computation_service import (
    RouteComputationService,
)
from src.pathfinding.network import Airport

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_LIMIT = 50


class FareQuoteEngine:
    """
    Public API for computing routes and fare quotes.

    Example usage:
        >>> engine = FareQuoteEngine()
        >>> route = engine.compute_route("CCU", "DEL")
        >>> quote = engine.quote("CCU", "DEL", passenger_count=2)
        >>> [(o.fare_class, o.total_price) for o in quote.offers]

    Attributes:
        _provider: Source of airport/route/tariff records.
        _repo: Snapshot repository.
        _routes: Route computation service.
        _pricing: Pricing service.
    """

    def __init__(
        self,
        db_path: Optional[Union[str, Path]] = None,
        data_provider: Optional[NetworkDataProvider] = None,
        cache_ttl: Optional[timedelta] = None,
        default_algorithm: Optional[str] = None,
        auto_refresh: bool = True,
    ) -> None:
        """
        Initialize the engine with optional custom dependencies.

        Args:
            db_path: SQLite database path. Defaults to Config.DB_PATH;
                when neither is set the seed network is used.
            data_provider: Custom provider; takes precedence over db_path.
            cache_ttl: Snapshot time-to-live. Defaults to Config.CACHE_TTL_MINUTES.
            default_algorithm: Solver for calls that name none.
            auto_refresh: Reload snapshots once they outlive cache_ttl.
        """
        if data_provider is not None:
            self._provider = data_provider
        else:
            db_path = db_path or Config.DB_PATH
            if db_path:
                self._provider = SqliteNetworkProvider(db_path=str(db_path))
            else:
                self._provider = SeedDataProvider()

        if cache_ttl is None:
            cache_ttl = timedelta(minutes=Config.CACHE_TTL_MINUTES)

        self._repo = NetworkRepository(
            data_provider=self._provider,
            ttl=cache_ttl,
            auto_refresh=auto_refresh,
        )
        self._default_algorithm = default_algorithm or Config.DEFAULT_ALGORITHM
        self._routes = RouteComputationService()
        self._pricing = PricingService()

        logger.info(
            "FareQuoteEngine initialized with %s provider (default algorithm: %s)",
            self._provider.name,
            self._default_algorithm,
        )

    # ------------------------------------------------------------------
    # Routing
    # ------------------------------------------------------------------

    def compute_route(
        self,
        origin: str,
        destination: str,
        algorithm: Optional[str] = None,
    ) -> Optional[PathResult]:
        """
        Compute a best path over the current snapshot.

        Returns:
            PathResult, or None if a code is unknown or no path exists.
        """
        snapshot = self._repo.get_snapshot()
        return self._routes.compute_route(
            snapshot.airports,
            snapshot.routes,
            origin,
            destination,
            algorithm or self._default_algorithm,
        )

    def find_route(
        self,
        origin: str,
        destination: str,
        algorithm: Optional[str] = None,
    ) -> PathResult:
        """
        Raising variant of compute_route.

        Raises:
            UnknownAirportError: If a code is not a known airport.
            DisconnectedError: If no active route sequence joins them.
        """
        snapshot = self._repo.get_snapshot()
        return self._routes.find_route(
            snapshot.airports,
            snapshot.routes,
            origin,
            destination,
            algorithm or self._default_algorithm,
        )

    # ------------------------------------------------------------------
    # Pricing
    # ------------------------------------------------------------------

    def quote(
        self,
        origin: str,
        destination: str,
        passenger_count: int = 1,
        algorithm: Optional[str] = None,
        demand_level: Optional[str] = None,
    ) -> PriceQuote:
        """
        Compute a route and price it with the stored tariff.

        Raises:
            UnknownAirportError: If a code is not a known airport.
            DisconnectedError: If no active route sequence joins them.
            TariffNotConfiguredError: If the provider has no tariff.
            InvalidInputError: If passenger_count is not positive.
        """
        snapshot = self._repo.get_snapshot()
        route = self._routes.find_route(
            snapshot.airports,
            snapshot.routes,
            origin,
            destination,
            algorithm or self._default_algorithm,
        )

        if snapshot.tariff is None:
            raise TariffNotConfiguredError(self._provider.name)

        offers = self._pricing.price(
            route.path,
            route.total_distance,
            passenger_count,
            snapshot.tariff,
            demand_level,
        )
        logger.info(
            "Generated %d offers for %s -> %s (%d pax)",
            len(offers),
            origin,
            destination,
            passenger_count,
        )
        return PriceQuote(route=route, offers=tuple(offers), tariff=snapshot.tariff)

    # ------------------------------------------------------------------
    # Airports and diagnostics
    # ------------------------------------------------------------------

    def get_airports(self) -> List[Airport]:
        """All airports of the current snapshot, in provider order."""
        return list(self._repo.get_snapshot().airports)

    def get_airport(self, code: str) -> Optional[Airport]:
        """Airport by code (case-insensitive), or None."""
        return self._repo.get_snapshot().find_airport(code.upper())

    def search_airports(self, query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> List[Airport]:
        """
        Case-insensitive substring search over code, name and city.

        Args:
            query: Search text.
            limit: Maximum number of results.

        Returns:
            Matching airports in provider order.
        """
        needle = query.strip().lower()
        matches = [
            airport
            for airport in self._repo.get_snapshot().airports
            if needle in airport.code.lower()
            or needle in airport.name.lower()
            or needle in airport.city.lower()
        ]
        logger.debug("Airport search for %r: %d matches", query, len(matches))
        return matches[:limit]

    def has_route(self, origin: str, destination: str) -> bool:
        """Check if a direct active route exists."""
        snapshot = self._repo.get_snapshot()
        return self._routes.build(snapshot.airports, snapshot.routes).has_route(
            origin, destination
        )

    def network_summary(self, sample_size: int = 10) -> Dict[str, Any]:
        """
        Diagnostic view of the current network.

        Returns:
            Dict with airport/route counts, codes, a route sample,
            per-airport connectivity, unconnected airports and the
            routes dropped as malformed.
        """
        snapshot = self._repo.get_snapshot()
        network = self._routes.build(snapshot.airports, snapshot.routes)
        connectivity = network.connectivity()

        return {
            "airports": len(network.airports),
            "routes": network.route_count,
            "airportCodes": list(network.airports),
            "sampleRoutes": [
                {"from": r.from_code, "to": r.to_code, "distanceKm": r.distance_km}
                for r in snapshot.routes[:sample_size]
            ],
            "connectivity": connectivity,
            "unconnectedAirports": [
                code for code, counts in connectivity.items() if counts["total"] == 0
            ],
            "droppedRoutes": [
                {"from": d.route.from_code, "to": d.route.to_code, "reason": d.reason}
                for d in network.dropped_routes
            ],
            "version": snapshot.version,
        }

    @property
    def snapshot(self) -> NetworkSnapshot:
        """Current network snapshot."""
        return self._repo.get_snapshot()

    @property
    def algorithms(self) -> List[str]:
        """Registered algorithm names."""
        return available_algorithms()

    @property
    def default_algorithm(self) -> str:
        return self._default_algorithm

    @property
    def is_ready(self) -> bool:
        """Check if network records have been loaded."""
        return self._repo.is_initialized

    def refresh_data(self) -> None:
        """Reload the network records now; a failed reload keeps the old ones."""
        self._repo.refresh()

    def shutdown(self) -> None:
        """
        Clean shutdown of the engine.

        Closes the provider if it holds a connection.
        """
        if hasattr(self._provider, "close"):
            self._provider.close()
        logger.info("FareQuoteEngine shutdown complete")

    def __enter__(self) -> "FareQuoteEngine":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit with cleanup."""
        self.shutdown()
