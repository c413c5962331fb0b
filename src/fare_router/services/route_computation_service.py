"""
Route Computation Service - domain orchestrator for path solving.

Coordinates the interaction between:
- build_network (fresh graph per call)
- the solver registry (algorithm name -> PathSolver)
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterable, Optional

from src.fare_router.adapters.algorithms.registry import resolve_solver
from src.fare_router.ports.path_solver import PathSolver
from src.fare_router.schemas.path import PathResult
from src.pathfinding.exceptions import DisconnectedError
from src.pathfinding.network import Airport, Network, Route, build_network
from src.pathfinding.validation import validate_query

logger = logging.getLogger(__name__)


class RouteComputationService:
    """
    Domain service for computing routes.

    Orchestrates one computation:
    1. Builds a Network from the supplied records
    2. Resolves the solver for the algorithm name
    3. Delegates the search and logs timings

    Stateless and thread-safe: nothing outlives a call.

    Attributes:
        _resolve: Algorithm name -> PathSolver lookup.
    """

    def __init__(
        self,
        resolver: Callable[[Optional[str]], PathSolver] = resolve_solver,
    ) -> None:
        """
        Initialize the service.

        Args:
            resolver: Solver lookup. Defaults to the built-in registry.
        """
        self._resolve = resolver

    def compute_route(
        self,
        airports: Iterable[Airport],
        routes: Iterable[Route],
        origin: str,
        destination: str,
        algorithm: Optional[str] = None,
    ) -> Optional[PathResult]:
        """
        Compute a best path between two airports.

        Args:
            airports: Airport records.
            routes: Route records (inactive ones are ignored).
            origin: Origin airport code.
            destination: Destination airport code.
            algorithm: Solver name; None or unknown selects dijkstra.

        Returns:
            PathResult, or None if a code is unknown or no path exists.
        """
        network = self.build(airports, routes)
        return self.solve(network, origin, destination, algorithm)

    def find_route(
        self,
        airports: Iterable[Airport],
        routes: Iterable[Route],
        origin: str,
        destination: str,
        algorithm: Optional[str] = None,
    ) -> PathResult:
        """
        Raising variant of compute_route.

        Raises:
            UnknownAirportError: If origin or destination is not a known airport.
            DisconnectedError: If no active route sequence joins them.
        """
        network = self.build(airports, routes)
        validate_query(network, origin, destination)

        result = self.solve(network, origin, destination, algorithm)
        if result is None:
            raise DisconnectedError(origin, destination)
        return result

    def build(self, airports: Iterable[Airport], routes: Iterable[Route]) -> Network:
        """Build the per-call network."""
        return build_network(airports, routes)

    def solve(
        self,
        network: Network,
        origin: str,
        destination: str,
        algorithm: Optional[str] = None,
    ) -> Optional[PathResult]:
        """
        Solve a query on an already built network.

        Returns:
            PathResult, or None if a code is unknown or no path exists.
        """
        solver = self._resolve(algorithm)

        start_time = time.perf_counter()
        result = solver.solve(network, origin, destination)
        elapsed = time.perf_counter() - start_time

        if result is None:
            logger.info(
                "No route %s -> %s (%s) in %.3fms",
                origin,
                destination,
                solver.name,
                elapsed * 1000,
            )
        else:
            logger.info(
                "Route %s computed with %s: %d segments, %.1f km in %.3fms",
                " -> ".join(result.path),
                solver.name,
                result.num_segments,
                result.total_distance,
                elapsed * 1000,
            )
        return result


_default_service = RouteComputationService()


def compute_route(
    airports: Iterable[Airport],
    routes: Iterable[Route],
    origin: str,
    destination: str,
    algorithm: Optional[str] = None,
) -> Optional[PathResult]:
    """Module-level entry point; see RouteComputationService.compute_route."""
    return _default_service.compute_route(airports, routes, origin, destination, algorithm)
