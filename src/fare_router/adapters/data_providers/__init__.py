"""
Data provider adapters for network sources.
"""

from src.fare_router.adapters.data_providers.seed_provider import (
    SEED_TARIFF,
    SeedDataProvider,
)
from src.fare_router.adapters.data_providers.sqlite_provider import (
    SqliteNetworkProvider,
)

__all__ = [
    "SEED_TARIFF",
    "SeedDataProvider",
    "SqliteNetworkProvider",
]
