"""
Network Repository - snapshots of network records with a time-to-live.

Airports, routes and the tariff are read from the data provider once and
reused by every computation. When a snapshot outlives its TTL the next
reader reloads it in place; if that reload fails the old snapshot stays
in service. Only the first load is allowed to fail a request.

The Network graph itself is not cached; the route computation service
rebuilds it from the records on each call.
"""

from __future__ import annotations

import hashlib
import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping, Optional, Tuple

from src.fare_router.exceptions import NetworkNotInitializedError
from src.fare_router.schemas.network import airports_from_frame, routes_from_frame
from src.fare_router.schemas.tariff import TariffConfiguration
from src.pathfinding.network import Airport, Route

if TYPE_CHECKING:
    from src.fare_router.ports.network_provider import NetworkDataProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NetworkSnapshot:
    """
    Immutable set of network records loaded at one point in time.

    Attributes:
        airports: Airport records in provider order.
        routes: Active route records in provider order.
        tariff: Tariff configuration (None if the provider has none).
        loaded_at: Timestamp when the snapshot was loaded.
        version: Hash for change detection.
    """

    airports: Tuple[Airport, ...]
    routes: Tuple[Route, ...]
    tariff: Optional[TariffConfiguration]
    loaded_at: datetime
    version: str
    by_code: Mapping[str, Airport] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index: dict[str, Airport] = {}
        for airport in self.airports:
            # duplicate codes: first record wins, as in build_network
            index.setdefault(airport.code, airport)
        object.__setattr__(self, "by_code", MappingProxyType(index))

    @property
    def airport_codes(self) -> list[str]:
        return [airport.code for airport in self.airports]

    def find_airport(self, code: str) -> Optional[Airport]:
        return self.by_code.get(code)

    def age(self, now: Optional[datetime] = None) -> timedelta:
        return (now or datetime.now()) - self.loaded_at


class NetworkRepository:
    """
    Serves the current NetworkSnapshot, reloading it once it expires.

    Usage:
        >>> repo = NetworkRepository(SeedDataProvider(), ttl=timedelta(minutes=30))
        >>> snapshot = repo.get_snapshot()
    """

    def __init__(
        self,
        data_provider: NetworkDataProvider,
        ttl: timedelta,
        auto_refresh: bool = True,
    ) -> None:
        """
        Args:
            data_provider: Source for network records.
            ttl: How long a snapshot is served before it is reloaded.
            auto_refresh: If False, an expired snapshot is kept until
                refresh() or invalidate() is called.
        """
        self._provider = data_provider
        self._ttl = ttl
        self._auto_refresh = auto_refresh
        self._snapshot: Optional[NetworkSnapshot] = None
        # Held across provider reads so concurrent readers load only once
        self._lock = threading.Lock()

    def get_snapshot(self) -> NetworkSnapshot:
        """
        Return the current snapshot, loading or reloading it when needed.

        Raises:
            NetworkNotInitializedError: If nothing has been loaded yet and
                the provider fails.
        """
        snapshot = self._snapshot
        if snapshot is not None and not self._expired(snapshot):
            return snapshot

        with self._lock:
            snapshot = self._snapshot
            if snapshot is None:
                return self._reload_or_raise()
            if self._expired(snapshot):
                return self._reload_or_keep(snapshot)
            return snapshot

    def refresh(self) -> NetworkSnapshot:
        """Reload now regardless of age. Failures keep the previous snapshot."""
        with self._lock:
            if self._snapshot is None:
                return self._reload_or_raise()
            return self._reload_or_keep(self._snapshot)

    def invalidate(self) -> None:
        """Drop the snapshot; the next reader loads from the provider."""
        with self._lock:
            self._snapshot = None

    @property
    def is_initialized(self) -> bool:
        return self._snapshot is not None

    @property
    def current_version(self) -> Optional[str]:
        snapshot = self._snapshot
        return snapshot.version if snapshot else None

    def _expired(self, snapshot: NetworkSnapshot) -> bool:
        return self._auto_refresh and snapshot.age() >= self._ttl

    def _reload_or_raise(self) -> NetworkSnapshot:
        try:
            self._snapshot = self._load_snapshot()
        except Exception as e:
            logger.error("Loading network records from %s failed: %s", self._provider.name, e)
            raise NetworkNotInitializedError(f"Failed to load network records: {e}") from e
        return self._snapshot

    def _reload_or_keep(self, previous: NetworkSnapshot) -> NetworkSnapshot:
        try:
            self._snapshot = self._load_snapshot()
        except Exception as e:
            logger.error(
                "Reloading network records failed, keeping version %s: %s",
                previous.version,
                e,
            )
            return previous
        if self._snapshot.version != previous.version:
            logger.info("Network records changed: %s -> %s", previous.version, self._snapshot.version)
        return self._snapshot

    def _load_snapshot(self) -> NetworkSnapshot:
        """Read all records from the provider and freeze them."""
        airports_df = self._provider.get_airports_df()
        routes_df = self._provider.get_routes_df(active_only=True)
        tariff = self._provider.get_tariff()

        airports = tuple(airports_from_frame(airports_df))
        routes = tuple(routes_from_frame(routes_df))

        logger.info(
            "Loaded network records from %s: %d airports, %d routes, tariff=%s",
            self._provider.name,
            len(airports),
            len(routes),
            "yes" if tariff else "no",
        )
        return NetworkSnapshot(
            airports=airports,
            routes=routes,
            tariff=tariff,
            loaded_at=datetime.now(),
            version=self._compute_version(airports, routes, tariff),
        )

    @staticmethod
    def _compute_version(
        airports: Tuple[Airport, ...],
        routes: Tuple[Route, ...],
        tariff: Optional[TariffConfiguration],
    ) -> str:
        """Hash of the records for change detection."""
        content = repr((airports, routes, tariff.to_dict() if tariff else None))
        return hashlib.md5(content.encode()).hexdigest()[:12]
