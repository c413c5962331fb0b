from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field

from src.fare_router.application import FareQuoteEngine
from src.fare_router.config import Config
from src.fare_router.exceptions import (
    InvalidInputError,
    NetworkNotInitializedError,
    TariffNotConfiguredError,
)
from src.fare_router.logging_config import configure_logging
from src.pathfinding.exceptions import DisconnectedError, UnknownAirportError

configure_logging()

engine = FareQuoteEngine()

app = FastAPI(title="Fare Router API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Pydantic Schemas (The JSON Contract) ---
# Field names are snake_case, the wire format is camelCase via aliases.


class AirportOut(BaseModel):
    code: str
    name: str
    city: str
    country: str
    lat: float
    lon: float


class SegmentOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_code: str = Field(alias="from")
    to_code: str = Field(alias="to")
    distance_km: float = Field(alias="distanceKm")


class RouteOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    path: List[str]
    total_distance: float = Field(alias="totalDistance")
    segments: List[SegmentOut]
    algorithm: str


class OfferOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    fare_class: str = Field(alias="fareClass")
    unit_price: float = Field(alias="unitPrice")
    total_price: float = Field(alias="totalPrice")
    passenger_count: int = Field(alias="passengerCount")
    demand_level: Optional[str] = Field(default=None, alias="demandLevel")


class TariffOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    base_rate: float = Field(alias="baseRate")
    fuel_surcharge: float = Field(alias="fuelSurcharge")
    taxes: float
    markups: Dict[str, float]
    demand_multipliers: Dict[str, float] = Field(alias="demandMultipliers")
    minimum_fare: float = Field(alias="minimumFare")


class QuoteOut(BaseModel):
    route: RouteOut
    offers: List[OfferOut]
    config: TariffOut


# --- Helpers ---


def _not_found_unknown_airport(message: str) -> HTTPException:
    return HTTPException(
        status_code=404,
        detail={
            "message": message,
            "availableAirports": [a.code for a in engine.get_airports()],
        },
    )


def _service_unavailable(error: NetworkNotInitializedError) -> HTTPException:
    return HTTPException(status_code=503, detail=f"Network data unavailable: {error}")


# --- API Endpoints ---


@app.get("/api/airports", response_model=List[AirportOut])
def list_airports(search: Optional[str] = None):
    """
    List airports, optionally filtered by a code/name/city substring.

    Results are capped at 50 when searching.
    """
    try:
        if not search:
            return engine.get_airports()
        return engine.search_airports(search)
    except NetworkNotInitializedError as e:
        raise _service_unavailable(e)


@app.get("/api/airports/{code}", response_model=AirportOut)
def get_airport(code: str):
    try:
        airport = engine.get_airport(code)
    except NetworkNotInitializedError as e:
        raise _service_unavailable(e)

    if airport is None:
        raise HTTPException(status_code=404, detail="Airport not found")
    return airport


@app.get("/api/algorithms")
def list_algorithms():
    return {"algorithms": engine.algorithms, "default": engine.default_algorithm}


@app.get("/api/route", response_model=RouteOut)
def compute_route(
    origin: str = Query(..., alias="from", min_length=3, max_length=3),
    destination: str = Query(..., alias="to", min_length=3, max_length=3),
    algorithm: Optional[str] = None,
):
    """
    Compute a best path between two airports.

    Unknown airports and disconnected pairs both answer 404; the
    former also lists the airports that are available.
    """
    try:
        result = engine.find_route(origin.upper(), destination.upper(), algorithm)
    except UnknownAirportError:
        raise _not_found_unknown_airport(
            "Route not available. Only routes between known airports are supported."
        )
    except DisconnectedError:
        raise HTTPException(status_code=404, detail="No route found")
    except NetworkNotInitializedError as e:
        raise _service_unavailable(e)

    return result.to_dict()


@app.get("/api/quote", response_model=QuoteOut)
def price_quote(
    origin: str = Query(..., alias="from", min_length=3, max_length=3),
    destination: str = Query(..., alias="to", min_length=3, max_length=3),
    pax: int = Query(1, gt=0),
    algorithm: Optional[str] = None,
    demand: Optional[str] = None,
):
    """
    Compute a route and price it for every fare class.

    Returns the route, the offers and the tariff that produced them.
    """
    try:
        quote = engine.quote(
            origin.upper(),
            destination.upper(),
            passenger_count=pax,
            algorithm=algorithm,
            demand_level=demand,
        )
    except UnknownAirportError:
        raise _not_found_unknown_airport(
            "Pricing not available. Only routes between known airports are supported."
        )
    except DisconnectedError:
        raise HTTPException(status_code=404, detail="No route found for pricing")
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=e.message)
    except TariffNotConfiguredError:
        raise HTTPException(status_code=500, detail="Price configuration not found")
    except NetworkNotInitializedError as e:
        raise _service_unavailable(e)

    return quote.to_dict()


@app.get("/api/debug/routes")
def debug_routes():
    """Network diagnostics: counts, sample routes, connectivity, dropped routes."""
    try:
        return engine.network_summary()
    except NetworkNotInitializedError as e:
        raise _service_unavailable(e)
