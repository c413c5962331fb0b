"""
Configuration module for the fare router.

Loads environment variables (optionally from a .env file) and exposes
them as class attributes with sensible defaults. Nothing here is
required: without FARE_ROUTER_DB_PATH the built-in seed network is used.
"""

import os
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    """
    Application configuration class.

    Attributes:
        DB_PATH: SQLite database with airports/routes/price_config tables.
            None selects the in-memory seed network.
        DEFAULT_ALGORITHM: Solver used when a request names none.
        CACHE_TTL_MINUTES: How long loaded network records are reused.
        CORS_ORIGINS: Origins allowed by the HTTP API.
        LOG_LEVEL: Root log level name.
    """

    DB_PATH: Optional[str] = os.getenv("FARE_ROUTER_DB_PATH") or None
    DEFAULT_ALGORITHM: str = os.getenv("FARE_ROUTER_DEFAULT_ALGORITHM", "dijkstra")
    CACHE_TTL_MINUTES: int = int(os.getenv("FARE_ROUTER_CACHE_TTL_MINUTES", "30"))
    CORS_ORIGINS: List[str] = _split_csv(
        os.getenv("FARE_ROUTER_CORS_ORIGINS", "http://localhost:5173")
    )
    LOG_LEVEL: str = os.getenv("FARE_ROUTER_LOG_LEVEL", "INFO")

    if CACHE_TTL_MINUTES < 0:
        raise ValueError(
            "FARE_ROUTER_CACHE_TTL_MINUTES must be >= 0, "
            f"got {CACHE_TTL_MINUTES}"
        )
