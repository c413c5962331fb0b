"""
Vectorized distance derivation for route tables.
"""

import logging

import numpy as np
import pandas as pd

from src.pathfinding.geo import haversine_km_vectorized

logger = logging.getLogger(__name__)


def fill_missing_distances(routes_df: pd.DataFrame, airports_df: pd.DataFrame) -> pd.DataFrame:
    """
    Fill null distance_km values with the great-circle distance.

    Routes whose endpoints are not in airports_df keep their null
    distance; the network builder reports them as malformed.

    Args:
        routes_df: Routes with from_code, to_code, distance_km columns.
        airports_df: Airports with code, lat, lon columns.

    Returns:
        New DataFrame; the input is not modified.
    """
    result = routes_df.copy()
    missing = result["distance_km"].isna().to_numpy()
    if not missing.any():
        return result

    coords = airports_df.drop_duplicates("code").set_index("code")[["lat", "lon"]]
    origin = coords.reindex(result["from_code"]).to_numpy()
    dest = coords.reindex(result["to_code"]).to_numpy()

    derived = haversine_km_vectorized(origin[:, 0], origin[:, 1], dest[:, 0], dest[:, 1])
    fillable = missing & ~np.isnan(derived)

    result.loc[fillable, "distance_km"] = derived[fillable]
    logger.debug("Derived distance for %d of %d routes", int(fillable.sum()), int(missing.sum()))
    return result
