from datetime import datetime
from decimal import Decimal

import pytest
from pydantic import ValidationError

from ridefare.models import Coupon, PricingConfig, PricingInput, PricingSnapshot, RouteMetrics, VehicleRates
from ridefare.pricing_defaults import DEFAULT_PRICING_CONFIG

VALID_RATES = dict(display_name="Luxury Sedan", base_fare=10, min_fare=40, per_mile=3.25, per_minute=0.7)


# --- VehicleRates ---


def test_vehicle_rates_float_to_exact_decimal():
    rates = VehicleRates(**VALID_RATES)
    assert rates.per_mile == Decimal("3.25")
    assert rates.per_minute == Decimal("0.7")
    assert rates.included_miles == Decimal("0")


def test_vehicle_rates_negative_fare():
    with pytest.raises(ValidationError):
        VehicleRates(**{**VALID_RATES, "base_fare": -1})


# --- PricingConfig ---


def test_pricing_config_from_json_dict(pricing_config_dict):
    config = PricingConfig.model_validate(pricing_config_dict)
    assert config.pickup_hour_multipliers == {7: Decimal("1.25")}
    assert config.tax_rate == Decimal("0.08")
    assert config.vehicles["SEDAN"].display_name == "City Sedan"


def test_pricing_config_unsorted_bands(pricing_config_dict):
    pricing_config_dict["lead_time_multipliers"].reverse()
    with pytest.raises(ValidationError):
        PricingConfig.model_validate(pricing_config_dict)


def test_pricing_config_duplicate_band_limit(pricing_config_dict):
    pricing_config_dict["lead_time_multipliers"].append({"max_hours": 100000, "multiplier": 1.0})
    with pytest.raises(ValidationError):
        PricingConfig.model_validate(pricing_config_dict)


def test_pricing_config_no_bands(pricing_config_dict):
    with pytest.raises(ValidationError):
        PricingConfig.model_validate({**pricing_config_dict, "lead_time_multipliers": []})


def test_pricing_config_hour_out_of_range(pricing_config_dict):
    with pytest.raises(ValidationError):
        PricingConfig.model_validate({**pricing_config_dict, "pickup_hour_multipliers": {"24": 1.1}})


def test_pricing_config_unknown_timezone(pricing_config_dict):
    with pytest.raises(ValidationError):
        PricingConfig.model_validate({**pricing_config_dict, "timezone": "Mars/Olympus_Mons"})


def test_pricing_config_is_immutable():
    with pytest.raises(ValidationError):
        DEFAULT_PRICING_CONFIG.tax_rate = Decimal("0.2")  # type: ignore[misc]


def test_default_config_vehicles():
    assert set(DEFAULT_PRICING_CONFIG.vehicles) == {"SEDAN", "SUV", "VAN"}
    assert DEFAULT_PRICING_CONFIG.vehicles["VAN"].min_fare == Decimal("95")


# --- PricingInput ---


def test_pricing_input_defaults():
    p = PricingInput(
        vehicle_type="SUV", distance_km=1.5, duration_min=4, pickup_at=datetime(2026, 1, 1), booking_lead_hours=3
    )
    assert p.distance_km == Decimal("1.5")
    assert p.tolls == Decimal("0")
    assert p.apply_airport_fee is False


def test_pricing_input_requires_pickup_time():
    with pytest.raises(ValidationError):
        PricingInput(vehicle_type="SUV", distance_km=1, duration_min=1, booking_lead_hours=0)


# --- PricingSnapshot ---


def test_snapshot_parses_camel_case_partial_row():
    snapshot = PricingSnapshot.model_validate({"currency": "USD", "total": 69.99, "preTaxSubtotal": 63.63})
    assert snapshot.total == Decimal("69.99")
    assert snapshot.pre_tax_subtotal == Decimal("63.63")
    assert snapshot.tax is None


def test_snapshot_json_amounts_are_numbers():
    snapshot = PricingSnapshot(currency="USD", total=Decimal("69.99"), tax=Decimal("6.36"))

    stored = snapshot.model_dump_json(by_alias=True, exclude_none=True)
    assert stored == '{"currency":"USD","total":69.99,"tax":6.36}'
    assert snapshot.model_dump()["total"] == Decimal("69.99")
    assert PricingSnapshot.model_validate_json(stored).total == Decimal("69.99")


# --- Coupon / RouteMetrics ---


def test_coupon_percent_over_100():
    with pytest.raises(ValidationError):
        Coupon(code="HALF", kind="percent", percent_off=150)


def test_route_metrics_negative_distance():
    with pytest.raises(ValidationError):
        RouteMetrics(distance_km=-1, duration_min=5)
