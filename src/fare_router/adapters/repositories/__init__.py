"""
Repository adapters for network record caching.
"""

from src.fare_router.adapters.repositories.network_repo import (
    NetworkRepository,
    NetworkSnapshot,
)

__all__ = [
    "NetworkRepository",
    "NetworkSnapshot",
]
