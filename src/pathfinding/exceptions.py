"""
Custom exceptions for the pathfinding module.

Provides a hierarchy of exceptions for clear error handling
of route computation. The solvers themselves report "no result"
as None; these exceptions are raised by the validation helpers
and by callers that need to tell the failure modes apart.
"""


class PathfindingError(Exception):
    """Base exception for all pathfinding module errors."""

    pass


class UnknownAirportError(PathfindingError):
    """Raised when an airport code is not present in the network."""

    def __init__(self, airport: str, context: str = "network") -> None:
        self.airport = airport
        message = f"Airport '{airport}' not found in {context}"
        super().__init__(message)


class DisconnectedError(PathfindingError):
    """Raised when both airports exist but no active route joins them."""

    def __init__(self, origin: str, destination: str) -> None:
        self.origin = origin
        self.destination = destination
        message = f"No route from '{origin}' to '{destination}' in the active network"
        super().__init__(message)
