"""
Offer schemas - the output contract of pricing.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from src.fare_router.schemas.path import PathResult
from src.fare_router.schemas.tariff import TariffConfiguration


@dataclass(frozen=True)
class Offer:
    """
    Priced fare-class offer.

    Attributes:
        fare_class: Key of TariffConfiguration.markups.
        unit_price: Per-passenger fare, already floored at minimum_fare.
        total_price: unit_price x passenger_count.
        passenger_count: Number of passengers priced.
        demand_level: Demand tier applied, or None if the neutral
            factor was used.
    """

    fare_class: str
    unit_price: float
    total_price: float
    passenger_count: int
    demand_level: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fareClass": self.fare_class,
            "unitPrice": self.unit_price,
            "totalPrice": self.total_price,
            "passengerCount": self.passenger_count,
            "demandLevel": self.demand_level,
        }


@dataclass(frozen=True)
class PriceQuote:
    """A route together with its offers and the tariff that priced it."""

    route: PathResult
    offers: Tuple[Offer, ...]
    tariff: TariffConfiguration

    @property
    def cheapest(self) -> Optional[Offer]:
        """Offer with the lowest total (first declared wins on ties)."""
        if not self.offers:
            return None
        return min(self.offers, key=lambda offer: offer.total_price)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "route": self.route.to_dict(),
            "offers": [offer.to_dict() for offer in self.offers],
            "config": self.tariff.to_dict(),
        }
