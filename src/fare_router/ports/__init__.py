"""
Port interfaces for the Fare Router.

Ports define the abstract interfaces (ABCs and Protocols) that the domain
layer uses to communicate with algorithms and data sources, following
the Ports and Adapters (Hexagonal) architecture pattern.
"""

from src.fare_router.ports.network_provider import NetworkDataProvider
from src.fare_router.ports.path_solver import PathSolver

__all__ = [
    "NetworkDataProvider",
    "PathSolver",
]
