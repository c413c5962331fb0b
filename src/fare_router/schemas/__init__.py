"""
Schema definitions for the Fare Router.

Frozen dataclasses for in-memory results and Pandera-validated
DataFrames for provider data.
"""

from .network import (
    AirportDataFrame,
    AirportSchema,
    RouteDataFrame,
    RouteSchema,
    airports_from_frame,
    routes_from_frame,
)
from .offer import Offer, PriceQuote
from .path import PathResult, PathSegment
from .tariff import TariffConfiguration

__all__ = [
    # Network record schemas
    "AirportSchema",
    "RouteSchema",
    "AirportDataFrame",
    "RouteDataFrame",
    "airports_from_frame",
    "routes_from_frame",
    # Results
    "PathSegment",
    "PathResult",
    "Offer",
    "PriceQuote",
    # Tariff
    "TariffConfiguration",
]
