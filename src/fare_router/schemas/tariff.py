"""
Tariff configuration schema.

An explicit, immutable value describing how a path is priced. It is
passed by value into pricing so no tariff state is ever global.
"""

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping

from src.fare_router.exceptions import InvalidInputError

# camelCase keys of the configuration store -> dataclass field names
_FIELD_KEYS = {
    "baseRate": "base_rate",
    "fuelSurcharge": "fuel_surcharge",
    "taxes": "taxes",
    "markups": "markups",
    "demandMultipliers": "demand_multipliers",
    "minimumFare": "minimum_fare",
}


def _as_number(field: str, value: Any) -> float:
    if isinstance(value, bool):
        raise InvalidInputError(field, f"'{field}' must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(field, f"'{field}' must be a number, got {value!r}") from e
    if math.isnan(number):
        raise InvalidInputError(field, f"'{field}' must not be NaN")
    return number


def _as_factor_table(field: str, value: Any) -> Mapping[str, float]:
    if not isinstance(value, Mapping):
        raise InvalidInputError(
            field, f"'{field}' must be a mapping of name to factor, got {type(value).__name__}"
        )
    # dict keeps insertion order, which fixes the order of offers
    table = {str(name): _as_number(f"{field}.{name}", factor) for name, factor in value.items()}
    return MappingProxyType(table)


@dataclass(frozen=True)
class TariffConfiguration:
    """
    Immutable tariff configuration.

    Negative factors are not rejected here (that belongs to whoever
    loads the configuration); pricing floors every fare at minimum_fare.

    Attributes:
        base_rate: Currency per kilometre.
        fuel_surcharge: Fractional surcharge (0.15 = 15%).
        taxes: Fractional tax (0.12 = 12%).
        markups: Fare class -> multiplicative factor, in offer order.
        demand_multipliers: Demand level -> multiplicative factor.
        minimum_fare: Per-passenger floor applied last.
    """

    base_rate: float
    fuel_surcharge: float
    taxes: float
    markups: Mapping[str, float]
    demand_multipliers: Mapping[str, float]
    minimum_fare: float

    def __post_init__(self) -> None:
        """Validate and freeze after initialization."""
        for name in ("base_rate", "fuel_surcharge", "taxes", "minimum_fare"):
            object.__setattr__(self, name, _as_number(name, getattr(self, name)))

        markups = _as_factor_table("markups", self.markups)
        if not markups:
            raise InvalidInputError("markups", "'markups' must define at least one fare class")
        object.__setattr__(self, "markups", markups)
        object.__setattr__(
            self,
            "demand_multipliers",
            _as_factor_table("demand_multipliers", self.demand_multipliers),
        )

    @property
    def surcharge_factor(self) -> float:
        """Combined additive surcharge multiplier: 1 + fuel + taxes."""
        return 1 + self.fuel_surcharge + self.taxes

    @property
    def fare_classes(self) -> list[str]:
        return list(self.markups)

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "TariffConfiguration":
        """
        Build from a plain record as stored by the configuration store.

        Accepts camelCase keys (baseRate, fuelSurcharge, ...) or the
        snake_case field names. All six fields are required.

        Raises:
            InvalidInputError: If config is not a mapping or a field is
                missing or malformed.
        """
        if isinstance(config, TariffConfiguration):
            return config
        if not isinstance(config, Mapping):
            raise InvalidInputError(
                "tariff", f"Tariff configuration must be a mapping, got {type(config).__name__}"
            )

        values: Dict[str, Any] = {}
        for camel, snake in _FIELD_KEYS.items():
            if camel in config:
                values[snake] = config[camel]
            elif snake in config:
                values[snake] = config[snake]
            else:
                raise InvalidInputError(camel, f"Tariff configuration is missing '{camel}'")

        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Echo the configuration in its camelCase record form."""
        return {
            "baseRate": self.base_rate,
            "fuelSurcharge": self.fuel_surcharge,
            "taxes": self.taxes,
            "markups": dict(self.markups),
            "demandMultipliers": dict(self.demand_multipliers),
            "minimumFare": self.minimum_fare,
        }
