"""
Algorithm adapters for route computation.
"""

from src.fare_router.adapters.algorithms.path_solvers import (
    AStarPathSolver,
    DijkstraPathSolver,
    FewestHopsPathSolver,
    SearchPathSolver,
)
from src.fare_router.adapters.algorithms.registry import (
    DEFAULT_ALGORITHM,
    SOLVERS,
    available_algorithms,
    canonical_name,
    resolve_solver,
)

__all__ = [
    "AStarPathSolver",
    "DijkstraPathSolver",
    "FewestHopsPathSolver",
    "SearchPathSolver",
    "DEFAULT_ALGORITHM",
    "SOLVERS",
    "available_algorithms",
    "canonical_name",
    "resolve_solver",
]
