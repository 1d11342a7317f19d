"""Driving distance/duration lookups via the Google Distance Matrix API."""

import logging
from typing import Any

import httpx

from ridefare.errors import ErrorCode, RouteMetricsError
from ridefare.models.route import RouteMetrics

logger = logging.getLogger(__name__)

DEFAULT_DISTANCE_MATRIX_URL = "https://maps.googleapis.com/maps/api/distancematrix/json"


def route_metrics_from_element(element: dict[str, Any]) -> RouteMetrics:
    """Meters -> km and seconds -> minutes; missing values count as zero."""
    status = element.get("status", "OK")
    if status != "OK":
        raise RouteMetricsError(f"No route for element: {status}")

    distance_m = (element.get("distance") or {}).get("value") or 0
    duration_s = (element.get("duration") or {}).get("value") or 0
    return RouteMetrics(distance_km=distance_m / 1000, duration_min=duration_s / 60)


class DistanceMatrixClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_DISTANCE_MATRIX_URL,
        timeout: float = 5.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    def get_route_metrics(self, origin: str, destination: str) -> RouteMetrics:
        params = {
            "origins": origin,
            "destinations": destination,
            "mode": "driving",
            "key": self.api_key,
        }

        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.get(self.base_url, params=params)
        except httpx.TimeoutException as e:
            raise RouteMetricsError(f"Request timed out after {self.timeout}s", code=ErrorCode.TIMEOUT) from e
        except httpx.TransportError as e:
            raise RouteMetricsError(f"Network error: {e}", code=ErrorCode.ROUTE_SERVICE_UNAVAILABLE) from e

        if response.status_code >= 500:
            raise RouteMetricsError(
                f"Distance Matrix server error: {response.status_code}",
                code=ErrorCode.ROUTE_SERVICE_UNAVAILABLE,
            )
        if response.status_code >= 400:
            raise RouteMetricsError(f"Distance Matrix rejected request: {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise RouteMetricsError(
                "Distance Matrix returned invalid JSON", code=ErrorCode.ROUTE_SERVICE_UNAVAILABLE
            ) from e

        if not isinstance(data, dict) or data.get("status") != "OK":
            status = data.get("status") if isinstance(data, dict) else None
            logger.warning("Distance Matrix failed for %s -> %s: %s", origin, destination, status)
            raise RouteMetricsError(f"DistanceMatrix failed: {status}")

        try:
            element = data["rows"][0]["elements"][0]
        except (KeyError, IndexError) as e:
            raise RouteMetricsError("DistanceMatrix returned no rows") from e

        metrics = route_metrics_from_element(element)
        logger.info(
            "Route %s -> %s: %.2f km, %.1f min", origin, destination, metrics.distance_km, metrics.duration_min
        )
        return metrics
