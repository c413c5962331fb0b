"""
Network construction for route computation.

Turns flat airport and route records into an adjacency structure the
solvers can walk. A Network is built fresh for every computation and
is never mutated after construction.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .geo import haversine_km

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Airport:
    """
    Airport node.

    Only code, lat and lon are used by the algorithms; the rest is
    display metadata carried through for callers.
    """

    code: str
    name: str = ""
    city: str = ""
    country: str = ""
    lat: float = 0.0
    lon: float = 0.0


@dataclass(frozen=True)
class Route:
    """
    Directed route record.

    A bidirectional connection needs two records (A->B and B->A).
    distance_km may be None, in which case the builder derives it
    from the airport coordinates.
    """

    from_code: str
    to_code: str
    distance_km: Optional[float] = None
    active: bool = True


@dataclass(frozen=True)
class Edge:
    """Outgoing adjacency entry."""

    to_code: str
    distance_km: float


@dataclass(frozen=True)
class DroppedRoute:
    """A route excluded from the network, with the reason."""

    route: Route
    reason: str


@dataclass(frozen=True)
class Network:
    """
    Immutable directed graph view over airports and active routes.

    Attributes:
        airports: Code -> Airport mapping for O(1) lookups.
        adjacency: Code -> outgoing edges, in route-list order.
            Every airport has an entry, possibly empty.
        dropped_routes: Routes excluded because they were malformed.
        duplicate_codes: Airport codes that appeared more than once
            (the first record was kept).
    """

    airports: Mapping[str, Airport]
    adjacency: Mapping[str, Tuple[Edge, ...]]
    dropped_routes: Tuple[DroppedRoute, ...] = ()
    duplicate_codes: Tuple[str, ...] = ()

    def has_airport(self, code: str) -> bool:
        return code in self.airports

    def neighbors(self, code: str) -> Tuple[Edge, ...]:
        """Outgoing edges of code (empty for unknown codes)."""
        return self.adjacency.get(code, ())

    def edge_weight(self, from_code: str, to_code: str) -> Optional[float]:
        """Cheapest parallel edge between an ordered pair, or None."""
        weights = [e.distance_km for e in self.neighbors(from_code) if e.to_code == to_code]
        return min(weights) if weights else None

    def has_route(self, from_code: str, to_code: str) -> bool:
        """Check if a direct active route exists."""
        return self.edge_weight(from_code, to_code) is not None

    @property
    def route_count(self) -> int:
        """Number of edges in the network (parallel edges counted)."""
        return sum(len(edges) for edges in self.adjacency.values())

    def connectivity(self) -> Dict[str, Dict[str, int]]:
        """
        Outgoing and incoming edge counts per airport.

        Returns:
            Dict mapping code to {"outgoing", "incoming", "total"}.
        """
        report = {code: {"outgoing": 0, "incoming": 0, "total": 0} for code in self.airports}
        for code, edges in self.adjacency.items():
            for edge in edges:
                report[code]["outgoing"] += 1
                report[edge.to_code]["incoming"] += 1
        for counts in report.values():
            counts["total"] = counts["outgoing"] + counts["incoming"]
        return report


def build_network(airports: Iterable[Airport], routes: Iterable[Route]) -> Network:
    """
    Build a Network from airport and route records.

    Steps:
    1. Index airports by code (first record wins on duplicates)
    2. Skip inactive routes
    3. Drop routes with an unknown endpoint or an invalid distance
    4. Append remaining routes to the adjacency of their origin

    Malformed routes are collected in Network.dropped_routes and logged,
    never raised. Parallel edges and self loops are retained.

    Args:
        airports: Airport records.
        routes: Route records (active and inactive).

    Returns:
        Newly built Network.
    """
    airport_map: Dict[str, Airport] = {}
    adjacency: Dict[str, List[Edge]] = {}
    duplicates: List[str] = []

    for airport in airports:
        if airport.code in airport_map:
            duplicates.append(airport.code)
            logger.warning("Duplicate airport code %s ignored", airport.code)
            continue
        airport_map[airport.code] = airport
        adjacency[airport.code] = []

    dropped: List[DroppedRoute] = []
    for route in routes:
        if not route.active:
            continue

        reason = _malformed_reason(route, airport_map)
        if reason is not None:
            dropped.append(DroppedRoute(route=route, reason=reason))
            logger.warning(
                "Dropping route %s -> %s: %s", route.from_code, route.to_code, reason
            )
            continue

        distance = route.distance_km
        if distance is None:
            origin = airport_map[route.from_code]
            dest = airport_map[route.to_code]
            distance = haversine_km(origin.lat, origin.lon, dest.lat, dest.lon)

        # + 0.0 normalises a -0.0 weight
        adjacency[route.from_code].append(
            Edge(to_code=route.to_code, distance_km=float(distance) + 0.0)
        )

    logger.debug(
        "Built network: %d airports, %d edges, %d dropped routes",
        len(airport_map),
        sum(len(edges) for edges in adjacency.values()),
        len(dropped),
    )

    return Network(
        airports=MappingProxyType(airport_map),
        adjacency=MappingProxyType({code: tuple(edges) for code, edges in adjacency.items()}),
        dropped_routes=tuple(dropped),
        duplicate_codes=tuple(duplicates),
    )


def _malformed_reason(route: Route, airport_map: Mapping[str, Airport]) -> Optional[str]:
    """Return why a route cannot enter the network, or None if it can."""
    if route.from_code not in airport_map:
        return f"unknown origin airport '{route.from_code}'"
    if route.to_code not in airport_map:
        return f"unknown destination airport '{route.to_code}'"
    if route.distance_km is not None:
        if math.isnan(route.distance_km):
            return "distance is NaN"
        if route.distance_km < 0:
            return f"negative distance {route.distance_km}"
    return None
