"""
Application layer for the Fare Router.

This layer provides the public API for route computation and pricing.
It acts as a facade, handling dependency initialization and providing
a simple interface for consumers.
"""

from src.fare_router.application.quote_engine import FareQuoteEngine

__all__ = ["FareQuoteEngine"]
