"""
Network record schemas using Pandera.

Defines the DataFrame contracts for airport and route tables coming
from data providers, plus the conversion to the record types consumed
by the network builder. Validation happens once at the provider
boundary, not per call.
"""

import math
from typing import List

import pandas as pd
import pandera as pa
from pandera.typing import DataFrame, Series

from src.pathfinding.network import Airport, Route


class AirportSchema(pa.DataFrameModel):
    """
    Schema for airport records.

    Only code, lat and lon are used by the routing algorithms;
    name/city/country are display metadata.
    """

    code: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 3, "max_value": 3},
        description="3-letter airport code (e.g., 'DEL', 'BOM')",
    )
    name: Series[str] = pa.Field(nullable=True, description="Airport name")
    city: Series[str] = pa.Field(nullable=True, description="City served")
    country: Series[str] = pa.Field(nullable=True, description="Country")
    lat: Series[float] = pa.Field(
        ge=-90,
        le=90,
        description="Latitude in decimal degrees",
    )
    lon: Series[float] = pa.Field(
        ge=-180,
        le=180,
        description="Longitude in decimal degrees",
    )

    class Config:
        strict = False
        coerce = True
        name = "AirportSchema"


class RouteSchema(pa.DataFrameModel):
    """
    Schema for directed route records.

    distance_km may be null; the network builder derives it from the
    airport coordinates. Neither endpoint membership nor the sign of
    distance_km is checked here: such rows pass through and the builder
    drops and reports them, so one bad row never fails the whole load.
    """

    from_code: Series[str] = pa.Field(
        nullable=False,
        description="Origin airport code",
    )
    to_code: Series[str] = pa.Field(
        nullable=False,
        description="Destination airport code",
    )
    distance_km: Series[float] = pa.Field(
        nullable=True,
        description="Route length in kilometres",
    )
    active: Series[bool] = pa.Field(
        description="Inactive routes are excluded before solving",
    )

    class Config:
        strict = False
        coerce = True
        name = "RouteSchema"


# Type aliases for clarity in function signatures
AirportDataFrame = DataFrame[AirportSchema]
RouteDataFrame = DataFrame[RouteSchema]


def _text(value) -> str:
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return ""
    return str(value)


def airports_from_frame(df: pd.DataFrame) -> List[Airport]:
    """Convert a validated airports DataFrame into Airport records (row order kept)."""
    return [
        Airport(
            code=str(row.code),
            name=_text(row.name),
            city=_text(row.city),
            country=_text(row.country),
            lat=float(row.lat),
            lon=float(row.lon),
        )
        for row in df.itertuples(index=False)
    ]


def routes_from_frame(df: pd.DataFrame) -> List[Route]:
    """Convert a validated routes DataFrame into Route records (row order kept)."""
    routes = []
    for row in df.itertuples(index=False):
        distance = None if pd.isna(row.distance_km) else float(row.distance_km)
        routes.append(
            Route(
                from_code=str(row.from_code),
                to_code=str(row.to_code),
                distance_km=distance,
                active=bool(row.active),
            )
        )
    return routes


def airports_to_frame(airports: List[Airport]) -> pd.DataFrame:
    """Inverse of airports_from_frame, used by in-memory providers."""
    return pd.DataFrame(
        [(a.code, a.name, a.city, a.country, a.lat, a.lon) for a in airports],
        columns=["code", "name", "city", "country", "lat", "lon"],
    )


def routes_to_frame(routes: List[Route]) -> pd.DataFrame:
    """Inverse of routes_from_frame, used by in-memory providers."""
    return pd.DataFrame(
        [(r.from_code, r.to_code, r.distance_km, r.active) for r in routes],
        columns=["from_code", "to_code", "distance_km", "active"],
    )
