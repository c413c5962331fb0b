"""
Network Data Provider port interface.

Defines the abstract contract for sources of airport, route and tariff
records. Implementations handle the specifics of each backend.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.fare_router.schemas.network import AirportDataFrame, RouteDataFrame
from src.fare_router.schemas.tariff import TariffConfiguration


class NetworkDataProvider(ABC):
    """
    Abstract interface for network data providers.

    Providers return validated DataFrames; schema validation happens
    here at the boundary, not in the routing core.

    Implementations:
    - SeedDataProvider: built-in seed network held in memory
    - SqliteNetworkProvider: airports/routes/price_config tables
    """

    @abstractmethod
    def get_airports_df(self) -> AirportDataFrame:
        """
        Return all airports as a DataFrame validated against AirportSchema.

        Raises:
            pandera.errors.SchemaError: If data fails validation.
        """
        ...

    @abstractmethod
    def get_routes_df(self, active_only: bool = False) -> RouteDataFrame:
        """
        Return routes as a DataFrame validated against RouteSchema.

        Args:
            active_only: If True, drop inactive routes at the source.

        Raises:
            pandera.errors.SchemaError: If data fails validation.
        """
        ...

    @abstractmethod
    def get_tariff(self) -> Optional[TariffConfiguration]:
        """
        Return the tariff configuration, or None if none is stored.

        Raises:
            InvalidInputError: If the stored configuration is malformed.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this data provider."""
        ...

    @property
    def is_available(self) -> bool:
        """
        Check if the data source is currently available.

        Default implementation returns True.
        """
        return True
