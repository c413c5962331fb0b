"""
Input validation for the pathfinding module.

Checks a query against a built network before a search runs.
"""

from .exceptions import UnknownAirportError
from .network import Network


def validate_airport_exists(
    airport: str,
    network: Network,
    context: str = "network",
) -> None:
    """
    Validate that an airport exists in the network.

    Raises:
        UnknownAirportError: If airport is not found.
    """
    if not network.has_airport(airport):
        raise UnknownAirportError(airport, context)


def validate_query(network: Network, origin: str, destination: str) -> None:
    """
    Validate both endpoints of a route query.

    Origin is checked first so the error names it when both are missing.

    Raises:
        UnknownAirportError: If origin or destination is not in the network.
    """
    validate_airport_exists(origin, network, "network (origin)")
    validate_airport_exists(destination, network, "network (destination)")


def is_valid_query(network: Network, origin: str, destination: str) -> bool:
    """Non-raising variant of validate_query."""
    return network.has_airport(origin) and network.has_airport(destination)
