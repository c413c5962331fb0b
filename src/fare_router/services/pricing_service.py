"""
Pricing Service - deterministic fare derivation.

Turns a solved path into one offer per fare class:

    base      = distance x base_rate
    surcharged = base x (1 + fuel_surcharge + taxes)
    marked_up = surcharged x markup[fare_class]
    demanded  = marked_up x demand_multiplier
    unit      = minimum_fare if demanded < minimum_fare else round(demanded, 2)
    total     = unit x passengers

Pure: no I/O, no randomness, no state between calls.
"""

import logging
import math
from numbers import Integral, Real
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

from src.fare_router.exceptions import InvalidInputError
from src.fare_router.schemas.offer import Offer
from src.fare_router.schemas.tariff import TariffConfiguration

logger = logging.getLogger(__name__)

DEFAULT_DEMAND_LEVEL = "medium"
NEUTRAL_DEMAND_MULTIPLIER = 1.0

# Currency minor units
PRICE_DECIMALS = 2


class PricingService:
    """
    Domain service for pricing solved paths.

    Stateless; one instance can serve concurrent callers.
    """

    def price(
        self,
        path: Sequence[str],
        total_distance: float,
        passenger_count: int,
        tariff: TariffConfiguration,
        demand_level: Optional[str] = None,
    ) -> List[Offer]:
        """
        Price a path for every fare class of the tariff.

        Args:
            path: Airport codes of the solved path (non-empty).
            total_distance: Path length in km (finite, >= 0).
            passenger_count: Positive integer.
            tariff: Tariff configuration.
            demand_level: Demand tier; None or unknown selects "medium".

        Returns:
            Offers in the declared order of tariff.markups.

        Raises:
            InvalidInputError: If any input is malformed.
        """
        self._validate(path, total_distance, passenger_count)
        level, multiplier = self.resolve_demand(tariff, demand_level)

        surcharged = total_distance * tariff.base_rate * tariff.surcharge_factor

        offers = []
        for fare_class, markup in tariff.markups.items():
            raw = surcharged * markup * multiplier
            if raw < tariff.minimum_fare:
                unit_price = tariff.minimum_fare + 0.0
            else:
                # rounding must not pull a sub-cent floor back down
                unit_price = max(round(raw, PRICE_DECIMALS), tariff.minimum_fare) + 0.0
            total_price = unit_price * passenger_count + 0.0
            offers.append(
                Offer(
                    fare_class=fare_class,
                    unit_price=unit_price,
                    total_price=total_price,
                    passenger_count=int(passenger_count),
                    demand_level=level,
                )
            )

        logger.debug(
            "Priced %s (%.1f km, %d pax, demand=%s): %s",
            "-".join(path),
            total_distance,
            passenger_count,
            level,
            ", ".join(f"{o.fare_class}={o.unit_price:.2f}" for o in offers),
        )
        return offers

    @staticmethod
    def resolve_demand(
        tariff: TariffConfiguration,
        demand_level: Optional[str],
    ) -> Tuple[Optional[str], float]:
        """
        Pick the demand tier and its multiplier.

        Unspecified or unknown tiers fall back to "medium"; when the
        tariff has no "medium" tier the neutral factor 1.0 is used and
        the returned level is None.
        """
        multipliers = tariff.demand_multipliers

        if demand_level is not None and demand_level in multipliers:
            return demand_level, multipliers[demand_level]

        if demand_level is not None:
            logger.warning(
                "Unknown demand level %r, using %s", demand_level, DEFAULT_DEMAND_LEVEL
            )

        if DEFAULT_DEMAND_LEVEL in multipliers:
            return DEFAULT_DEMAND_LEVEL, multipliers[DEFAULT_DEMAND_LEVEL]
        return None, NEUTRAL_DEMAND_MULTIPLIER

    @staticmethod
    def _validate(path: Sequence[str], total_distance: Any, passenger_count: Any) -> None:
        if isinstance(passenger_count, bool) or not isinstance(passenger_count, Integral):
            raise InvalidInputError(
                "passenger_count",
                f"passenger_count must be an integer, got {passenger_count!r}",
            )
        if passenger_count < 1:
            raise InvalidInputError(
                "passenger_count",
                f"passenger_count must be >= 1, got {passenger_count}",
            )
        if (
            isinstance(total_distance, bool)
            or not isinstance(total_distance, Real)
            or not math.isfinite(total_distance)
            or total_distance < 0
        ):
            raise InvalidInputError(
                "total_distance",
                f"total_distance must be a finite number >= 0, got {total_distance!r}",
            )
        if not path:
            raise InvalidInputError("path", "path must contain at least one airport")


_default_service = PricingService()


def generate_price_quote(
    path: Sequence[str],
    total_distance: float,
    passenger_count: int,
    tariff_config: Union[TariffConfiguration, Mapping[str, Any]],
    demand_level: Optional[str] = None,
) -> List[Offer]:
    """
    Module-level pricing entry point.

    Accepts the tariff either as a TariffConfiguration or as the plain
    record from the configuration store.

    Raises:
        InvalidInputError: For malformed input or tariff.
    """
    tariff = TariffConfiguration.from_mapping(tariff_config)
    return _default_service.price(path, total_distance, passenger_count, tariff, demand_level)
