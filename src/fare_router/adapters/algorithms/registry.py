"""
Solver registry - algorithm name to PathSolver strategy table.

Unknown names resolve to the baseline solver (dijkstra) with a
warning, never to a silent no-op.
"""

import logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from src.fare_router.adapters.algorithms.path_solvers import (
    AStarPathSolver,
    DijkstraPathSolver,
    FewestHopsPathSolver,
)
from src.fare_router.ports.path_solver import PathSolver

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "dijkstra"

# Solvers are stateless, so one instance per name is shared
_SOLVERS: Dict[str, PathSolver] = {
    "dijkstra": DijkstraPathSolver(),
    "fewest-hops": FewestHopsPathSolver(),
    "astar": AStarPathSolver(),
}

_ALIASES: Dict[str, str] = {
    "bfs": "fewest-hops",
    "fewest_hops": "fewest-hops",
    "hops": "fewest-hops",
    "a*": "astar",
    "a-star": "astar",
    "a_star": "astar",
}

SOLVERS: Mapping[str, PathSolver] = MappingProxyType(_SOLVERS)


def canonical_name(algorithm: Optional[str]) -> Optional[str]:
    """Return the registered name for algorithm (case-insensitive), or None."""
    if not algorithm:
        return None
    key = algorithm.strip().lower()
    key = _ALIASES.get(key, key)
    return key if key in _SOLVERS else None


def resolve_solver(algorithm: Optional[str]) -> PathSolver:
    """
    Look up the solver for an algorithm name.

    Args:
        algorithm: Name or alias such as "dijkstra", "bfs", "A*".
            None or empty selects the default.

    Returns:
        Registered PathSolver; the dijkstra solver for unknown names.
    """
    name = canonical_name(algorithm)
    if name is None:
        if algorithm:
            logger.warning(
                "Unknown algorithm %r, falling back to %s", algorithm, DEFAULT_ALGORITHM
            )
        name = DEFAULT_ALGORITHM
    return _SOLVERS[name]


def available_algorithms() -> list[str]:
    """Registered canonical algorithm names, in registration order."""
    return list(_SOLVERS)
