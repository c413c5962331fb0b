"""
Shortest-path searches over a Network.

- dijkstra: least total distance (baseline)
- fewest_hops: least number of legs (breadth-first)
- astar: least total distance, guided by great-circle distance

Every search returns None when there is no result (unknown endpoint
or unreachable destination) and a single-node outcome when origin
equals destination.

Ties are broken by discovery order: every heap entry carries a
monotonically increasing sequence number and a predecessor is only
replaced on a strictly shorter distance, so repeated calls on the
same network and query give the same path.
"""

import heapq
import itertools
import math
from collections import deque
from typing import Dict, List, Optional, Set, Tuple

from .geo import haversine_km
from .network import Network
from .reconstruction import SearchOutcome, reconstruct_path
from .validation import is_valid_query


def dijkstra(network: Network, origin: str, destination: str) -> Optional[SearchOutcome]:
    """
    Classic single-source Dijkstra with early exit at destination.

    Assumes non-negative edge weights (enforced by build_network).
    Parallel edges need no special handling: relaxation keeps the
    cheaper one.
    """
    if not is_valid_query(network, origin, destination):
        return None

    dist: Dict[str, float] = {origin: 0.0}
    predecessors: Dict[str, Tuple[str, float]] = {}
    settled: Set[str] = set()
    seq = itertools.count()

    heap: List[Tuple[float, int, str]] = [(0.0, next(seq), origin)]

    while heap:
        d, _, node = heapq.heappop(heap)
        if node in settled:
            continue
        settled.add(node)

        if node == destination:
            break

        for edge in network.neighbors(node):
            if edge.to_code in settled:
                continue
            candidate = d + edge.distance_km
            if candidate < dist.get(edge.to_code, math.inf):
                dist[edge.to_code] = candidate
                predecessors[edge.to_code] = (node, edge.distance_km)
                heapq.heappush(heap, (candidate, next(seq), edge.to_code))

    return reconstruct_path(predecessors, origin, destination)


def fewest_hops(network: Network, origin: str, destination: str) -> Optional[SearchOutcome]:
    """
    Breadth-first search minimising the number of legs.

    Each leg of the result uses the cheapest parallel edge between
    its endpoints.
    """
    if not is_valid_query(network, origin, destination):
        return None

    predecessors: Dict[str, Tuple[str, float]] = {}
    discovered: Set[str] = {origin}
    queue = deque([origin])

    while queue:
        node = queue.popleft()
        if node == destination:
            break
        for edge in network.neighbors(node):
            if edge.to_code in discovered:
                continue
            discovered.add(edge.to_code)
            predecessors[edge.to_code] = (node, network.edge_weight(node, edge.to_code))
            queue.append(edge.to_code)

    return reconstruct_path(predecessors, origin, destination)


def astar(network: Network, origin: str, destination: str) -> Optional[SearchOutcome]:
    """
    A* search with great-circle distance to the destination as heuristic.

    The heuristic is admissible when route distances are at least the
    great-circle distance between their airports, which holds for
    routes whose distance was derived with haversine_km. Nodes are
    reopened when a cheaper distance is found, so the first time the
    destination is popped its distance is final.
    """
    if not is_valid_query(network, origin, destination):
        return None

    target = network.airports[destination]

    def heuristic(code: str) -> float:
        airport = network.airports[code]
        return haversine_km(airport.lat, airport.lon, target.lat, target.lon)

    g: Dict[str, float] = {origin: 0.0}
    predecessors: Dict[str, Tuple[str, float]] = {}
    seq = itertools.count()

    heap: List[Tuple[float, int, float, str]] = [(heuristic(origin), next(seq), 0.0, origin)]

    while heap:
        _, _, g_node, node = heapq.heappop(heap)
        if g_node > g[node]:
            # Stale entry superseded by a cheaper push
            continue

        if node == destination:
            break

        for edge in network.neighbors(node):
            candidate = g_node + edge.distance_km
            if candidate < g.get(edge.to_code, math.inf):
                g[edge.to_code] = candidate
                predecessors[edge.to_code] = (node, edge.distance_km)
                heapq.heappush(
                    heap,
                    (candidate + heuristic(edge.to_code), next(seq), candidate, edge.to_code),
                )

    return reconstruct_path(predecessors, origin, destination)
