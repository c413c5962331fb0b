"""
Domain services for the Fare Router.

Services orchestrate the interaction between ports (solvers, providers)
and domain logic (network building, pricing).
"""

from src.fare_router.services.pricing_service import (
    PricingService,
    generate_price_quote,
)
from src.fare_router.services.route_computation_service import (
    RouteComputationService,
    compute_route,
)

__all__ = [
    "PricingService",
    "RouteComputationService",
    "compute_route",
    "generate_price_quote",
]
