"""
SQLite Network Provider - SQL to DataFrame adapter.

Reads airports, routes and the tariff record from a SQLite database
and transforms them into schema-compliant DataFrames. The provider is
read-only: creating and seeding the database is out of its scope.

Expected tables:
    airports(code, name, city, country, lat, lon)
    routes("from", "to", distance_km, active)
    price_config(base_rate, fuel_surcharge, taxes, markups,
                 demand_multipliers, minimum_fare)
where markups and demand_multipliers hold JSON objects.
"""

import json
import logging
import sqlite3
from pathlib import Path
from typing import Optional

import pandas as pd

from src.fare_router.adapters.data_providers.distances import fill_missing_distances
from src.fare_router.exceptions import InvalidInputError
from src.fare_router.ports.network_provider import NetworkDataProvider
from src.fare_router.schemas.network import (
    AirportDataFrame,
    AirportSchema,
    RouteDataFrame,
    RouteSchema,
)
from src.fare_router.schemas.tariff import TariffConfiguration

logger = logging.getLogger(__name__)


class SqliteNetworkProvider(NetworkDataProvider):
    """
    Data provider for a SQLite network database.

    Attributes:
        _db_path: Path to the SQLite database file.
        _conn: SQLite connection (lazy initialized).
    """

    def __init__(self, db_path: str) -> None:
        """
        Initialize the SQLite provider.

        Args:
            db_path: Path to SQLite database file.
        """
        self._db_path = Path(db_path)
        self._conn: Optional[sqlite3.Connection] = None

    def _get_connection(self) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._conn is None:
            if not self._db_path.exists():
                raise FileNotFoundError(f"Database not found: {self._db_path}")
            # Snapshots may be loaded from the repository's refresh thread
            self._conn = sqlite3.connect(str(self._db_path), check_same_thread=False)
        return self._conn

    def get_airports_df(self) -> AirportDataFrame:
        """
        Fetch airports in insertion order.

        Returns:
            DataFrame validated against AirportSchema.
        """
        conn = self._get_connection()
        df = pd.read_sql(
            "SELECT code, name, city, country, lat, lon FROM airports ORDER BY rowid",
            conn,
        )
        validated = AirportSchema.validate(df)
        logger.info("Loaded %d airports from %s", len(validated), self._db_path)
        return validated

    def get_routes_df(self, active_only: bool = False) -> RouteDataFrame:
        """
        Fetch routes in insertion order, deriving missing distances.

        Args:
            active_only: If True, only rows with active = 1 are read.

        Returns:
            DataFrame validated against RouteSchema.
        """
        conn = self._get_connection()

        query = """
            SELECT
                "from" AS from_code,
                "to" AS to_code,
                distance_km,
                active
            FROM routes
        """
        if active_only:
            query += " WHERE active = 1"
        query += " ORDER BY rowid"

        logger.debug("Executing query: %s", query)
        df = pd.read_sql(query, conn)
        df["distance_km"] = pd.to_numeric(df["distance_km"], errors="coerce")

        df = fill_missing_distances(df, self.get_airports_df())
        validated = RouteSchema.validate(df)

        logger.info("Loaded %d routes from %s", len(validated), self._db_path)
        return validated

    def get_tariff(self) -> Optional[TariffConfiguration]:
        """
        Fetch the most recent price_config row.

        Returns:
            TariffConfiguration, or None if the table is empty.

        Raises:
            InvalidInputError: If the stored JSON is not valid.
        """
        conn = self._get_connection()
        df = pd.read_sql(
            """
            SELECT base_rate, fuel_surcharge, taxes, markups,
                   demand_multipliers, minimum_fare
            FROM price_config
            ORDER BY rowid DESC
            LIMIT 1
            """,
            conn,
        )

        if df.empty:
            logger.warning("No price configuration stored in %s", self._db_path)
            return None

        row = df.iloc[0]
        record = {
            "base_rate": row["base_rate"],
            "fuel_surcharge": row["fuel_surcharge"],
            "taxes": row["taxes"],
            "markups": self._parse_json("markups", row["markups"]),
            "demand_multipliers": self._parse_json(
                "demandMultipliers", row["demand_multipliers"]
            ),
            "minimum_fare": row["minimum_fare"],
        }
        return TariffConfiguration.from_mapping(record)

    @staticmethod
    def _parse_json(field: str, raw: Optional[str]) -> object:
        if raw is None:
            raise InvalidInputError(field, f"Tariff configuration is missing '{field}'")
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise InvalidInputError(field, f"'{field}' is not valid JSON: {e}") from e

    @property
    def name(self) -> str:
        """Human-readable provider name."""
        return "SQLite Network"

    @property
    def is_available(self) -> bool:
        """Check if database is accessible."""
        return self._db_path.exists()

    def close(self) -> None:
        """Close database connection."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.debug("Database connection closed")
