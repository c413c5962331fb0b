from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Leg:
    """One traversed edge of a solved path."""

    from_code: str
    to_code: str
    distance_km: float


@dataclass(frozen=True)
class SearchOutcome:
    """
    Raw solver output.

    path holds the visited codes origin..destination inclusive and
    legs mirrors each consecutive pair, so len(legs) == len(path) - 1.
    """

    path: Tuple[str, ...]
    legs: Tuple[Leg, ...]

    @property
    def total_distance(self) -> float:
        # + 0.0 keeps a -0.0 sum out of the output
        return sum(leg.distance_km for leg in self.legs) + 0.0


def reconstruct_path(
    predecessors: Dict[str, Tuple[str, float]],
    origin: str,
    destination: str,
) -> Optional[SearchOutcome]:
    """
    Reconstruct the path ending at destination from a predecessor map.

    Args:
        predecessors: Code -> (previous code, weight of the edge used).
        origin: Search origin.
        destination: Search destination.

    Returns:
        SearchOutcome, or None if destination was never reached.
    """
    if origin == destination:
        return SearchOutcome(path=(origin,), legs=())

    if destination not in predecessors:
        return None

    legs: List[Leg] = []
    curr = destination
    while curr != origin:
        prev, weight = predecessors[curr]
        legs.append(Leg(from_code=prev, to_code=curr, distance_km=weight))
        curr = prev

    legs.reverse()
    path = (origin,) + tuple(leg.to_code for leg in legs)
    return SearchOutcome(path=path, legs=tuple(legs))
