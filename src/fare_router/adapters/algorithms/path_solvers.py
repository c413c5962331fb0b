"""
Path Solver Adapters - Bridge between architecture and algorithms.

Wraps the pathfinding searches behind the PathSolver port and converts
their SearchOutcome output to PathResult schema objects.
"""

import logging
from typing import Callable, Optional

from src.pathfinding.alg import astar, dijkstra, fewest_hops
from src.pathfinding.network import Network
from src.pathfinding.reconstruction import SearchOutcome

from src.fare_router.ports.path_solver import PathSolver
from src.fare_router.schemas.path import PathResult

logger = logging.getLogger(__name__)

SearchFunction = Callable[[Network, str, str], Optional[SearchOutcome]]


class SearchPathSolver(PathSolver):
    """
    Adapter for a pathfinding search function.

    Subclasses only pick the search and the canonical name.

    Attributes:
        _search: Search function from src.pathfinding.alg.
        _name: Canonical algorithm name.
    """

    def __init__(self, search: SearchFunction, name: str) -> None:
        self._search = search
        self._name = name

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return self._name

    def solve(
        self,
        network: Network,
        origin: str,
        destination: str,
    ) -> Optional[PathResult]:
        """
        Run the search and convert its outcome.

        Returns:
            PathResult, or None for unknown codes or unreachable pairs.
        """
        outcome = self._search(network, origin, destination)

        if outcome is None:
            logger.debug(
                "%s found no path for %s -> %s", self._name, origin, destination
            )
            return None

        logger.debug(
            "%s found %s (%.1f km)",
            self._name,
            " -> ".join(outcome.path),
            outcome.total_distance,
        )
        return PathResult.from_outcome(outcome, algorithm=self._name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class DijkstraPathSolver(SearchPathSolver):
    """Least total distance; the baseline solver."""

    def __init__(self) -> None:
        super().__init__(dijkstra, "dijkstra")


class FewestHopsPathSolver(SearchPathSolver):
    """Least number of legs (breadth-first)."""

    def __init__(self) -> None:
        super().__init__(fewest_hops, "fewest-hops")


class AStarPathSolver(SearchPathSolver):
    """Least total distance with a great-circle heuristic."""

    def __init__(self) -> None:
        super().__init__(astar, "astar")
