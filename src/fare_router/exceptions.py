"""
Custom exceptions for the fare router.

Route-level failures (unknown airport, disconnected pair) live in
src.pathfinding.exceptions; this module covers pricing input and
the snapshot repository.
"""


class FareRouterError(Exception):
    """Base exception for all fare router errors."""

    pass


class InvalidInputError(FareRouterError):
    """Raised when pricing input or a tariff configuration is malformed."""

    def __init__(self, field: str, message: str = "") -> None:
        self.field = field
        self.message = message or f"Invalid value for '{field}'"
        super().__init__(self.message)


class NetworkNotInitializedError(FareRouterError):
    """Raised when network records are accessed before the first load."""

    pass


class TariffNotConfiguredError(FareRouterError):
    """Raised when a quote is requested but no tariff is available."""

    def __init__(self, source: str = "data provider") -> None:
        self.source = source
        super().__init__(f"No tariff configuration available from {source}")
