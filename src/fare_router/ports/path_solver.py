"""
Path Solver port interface.

Defines the abstract contract for shortest-path algorithms.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from src.fare_router.schemas.path import PathResult
    from src.pathfinding.network import Network


class PathSolver(ABC):
    """
    Abstract interface for path solving algorithms.

    Solvers receive a freshly built Network and never mutate it.
    New algorithms are added by implementing this interface and
    registering the instance under a name; callers keep the same
    solve() signature.

    Implementations:
    - DijkstraPathSolver: least total distance
    - FewestHopsPathSolver: least number of legs
    - AStarPathSolver: least total distance, great-circle guided
    """

    @abstractmethod
    def solve(
        self,
        network: Network,
        origin: str,
        destination: str,
    ) -> Optional[PathResult]:
        """
        Find a best path between two airports.

        Args:
            network: Network built for this call.
            origin: Origin airport code.
            destination: Destination airport code.

        Returns:
            PathResult, or None when either code is unknown or the
            destination is unreachable.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Algorithm identifier.

        Returns:
            Canonical registry name (e.g., "dijkstra").
        """
        ...
