"""Lazy-initialized service clients, reused across warm invocations."""

from functools import lru_cache

from ridefare.config import get_config
from ridefare.services.route_metrics import DistanceMatrixClient


@lru_cache(maxsize=1)
def get_distance_matrix_client() -> DistanceMatrixClient:
    config = get_config()
    if not config.google_maps_api_key:
        raise ValueError("GOOGLE_MAPS_API_KEY not configured")
    return DistanceMatrixClient(
        api_key=config.google_maps_api_key,
        base_url=config.distance_matrix_url,
        timeout=config.route_timeout_seconds,
    )
