import logging
from typing import Optional

from src.fare_router.config import Config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure console logging for entry points (API, scripts)."""
    logging.basicConfig(
        level=getattr(logging, (level or Config.LOG_LEVEL).upper(), logging.INFO),
        format=LOG_FORMAT,
    )
