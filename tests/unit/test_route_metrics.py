"""Unit tests for Distance Matrix lookups."""

import httpx
import pytest

from ridefare.errors import ErrorCode, RouteMetricsError
from ridefare.services.route_metrics import DistanceMatrixClient, route_metrics_from_element

OK_RESPONSE = {
    "status": "OK",
    "rows": [{"elements": [{"status": "OK", "distance": {"value": 32400}, "duration": {"value": 1680}}]}],
}


def _client(handler) -> DistanceMatrixClient:
    return DistanceMatrixClient(
        api_key="test-key",
        base_url="https://maps.example.test/distancematrix/json",
        transport=httpx.MockTransport(handler),
    )


def test_route_metrics_from_element():
    metrics = route_metrics_from_element({"status": "OK", "distance": {"value": 10000}, "duration": {"value": 1200}})
    assert metrics.distance_km == 10.0
    assert metrics.duration_min == 20.0


def test_route_metrics_missing_values_are_zero():
    metrics = route_metrics_from_element({})
    assert metrics.distance_km == 0
    assert metrics.duration_min == 0


def test_route_metrics_element_not_found():
    with pytest.raises(RouteMetricsError) as exc_info:
        route_metrics_from_element({"status": "ZERO_RESULTS"})
    assert exc_info.value.code == ErrorCode.ROUTE_METRICS_FAILED


def test_get_route_metrics_sends_driving_request():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen.update(request.url.params)
        return httpx.Response(200, json=OK_RESPONSE)

    metrics = _client(handler).get_route_metrics("SeaTac Airport", "Bellevue, WA")

    assert metrics.distance_km == 32.4
    assert metrics.duration_min == 28.0
    assert seen["origins"] == "SeaTac Airport"
    assert seen["destinations"] == "Bellevue, WA"
    assert seen["mode"] == "driving"
    assert seen["key"] == "test-key"


def test_get_route_metrics_request_denied():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"status": "REQUEST_DENIED", "rows": []})

    with pytest.raises(RouteMetricsError, match="REQUEST_DENIED"):
        _client(handler).get_route_metrics("A", "B")


def test_get_route_metrics_client_error_status():
    client = _client(lambda request: httpx.Response(403))

    with pytest.raises(RouteMetricsError) as exc_info:
        client.get_route_metrics("A", "B")
    assert exc_info.value.code == ErrorCode.ROUTE_METRICS_FAILED
    assert "403" in exc_info.value.message


def test_get_route_metrics_non_json_body():
    client = _client(lambda request: httpx.Response(200, text="<html>"))

    with pytest.raises(RouteMetricsError) as exc_info:
        client.get_route_metrics("A", "B")
    assert exc_info.value.code == ErrorCode.ROUTE_SERVICE_UNAVAILABLE


def test_get_route_metrics_server_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    with pytest.raises(RouteMetricsError) as exc_info:
        _client(handler).get_route_metrics("A", "B")
    assert exc_info.value.code == ErrorCode.ROUTE_SERVICE_UNAVAILABLE


def test_get_route_metrics_timeout():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    with pytest.raises(RouteMetricsError) as exc_info:
        _client(handler).get_route_metrics("A", "B")
    assert exc_info.value.code == ErrorCode.TIMEOUT


def test_get_route_metrics_network_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(RouteMetricsError) as exc_info:
        _client(handler).get_route_metrics("A", "B")
    assert exc_info.value.code == ErrorCode.ROUTE_SERVICE_UNAVAILABLE


def test_get_route_metrics_no_rows():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"status": "OK", "rows": []})

    with pytest.raises(RouteMetricsError):
        _client(handler).get_route_metrics("A", "B")
