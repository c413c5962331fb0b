"""
Path result schemas.

Defines the output contract of route computation: the ordered stop
sequence, its total distance and the per-leg segments.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from src.pathfinding.reconstruction import SearchOutcome


@dataclass(frozen=True)
class PathSegment:
    """
    Immutable representation of a single leg.

    Mirrors one consecutive pair of PathResult.path.
    """

    from_code: str
    to_code: str
    distance_km: float

    def to_dict(self) -> Dict[str, Any]:
        return {"from": self.from_code, "to": self.to_code, "distanceKm": self.distance_km}


@dataclass(frozen=True)
class PathResult:
    """
    Immutable solved path.

    path has length 1 only for the degenerate origin == destination
    case, in which segments is empty and total_distance is 0.0.

    Attributes:
        path: Airport codes from origin to destination inclusive.
        total_distance: Sum of segment distances in km.
        segments: One PathSegment per consecutive pair in path.
        algorithm: Name of the solver that produced the result.
    """

    path: Tuple[str, ...]
    total_distance: float
    segments: Tuple[PathSegment, ...]
    algorithm: str = "dijkstra"

    @property
    def origin(self) -> str:
        return self.path[0]

    @property
    def destination(self) -> str:
        return self.path[-1]

    @property
    def num_segments(self) -> int:
        return len(self.segments)

    @property
    def stops(self) -> List[str]:
        """Intermediate airports (excluding origin and destination)."""
        return list(self.path[1:-1])

    @classmethod
    def from_outcome(cls, outcome: SearchOutcome, algorithm: str) -> "PathResult":
        """
        Factory method to create PathResult from raw solver output.

        Args:
            outcome: SearchOutcome from a pathfinding search.
            algorithm: Canonical name of the solver used.

        Returns:
            PathResult instance.
        """
        segments = tuple(
            PathSegment(
                from_code=leg.from_code,
                to_code=leg.to_code,
                distance_km=leg.distance_km,
            )
            for leg in outcome.legs
        )
        return cls(
            path=tuple(outcome.path),
            total_distance=outcome.total_distance,
            segments=segments,
            algorithm=algorithm,
        )

    def to_dict(self) -> Dict[str, Any]:
        """JSON-shaped representation: {path, totalDistance, segments, algorithm}."""
        return {
            "path": list(self.path),
            "totalDistance": self.total_distance,
            "segments": [seg.to_dict() for seg in self.segments],
            "algorithm": self.algorithm,
        }
