"""Fare calculator: itemized quote from distance, time, demand and lead-time rules."""

import logging
import re
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from zoneinfo import ZoneInfo

from ridefare.errors import PricingConfigError, UnknownVehicleError
from ridefare.models.pricing import PricingBreakdown, PricingConfig, PricingInput, PricingSnapshot
from ridefare.models.route import RouteMetrics
from ridefare.money import round2, to_decimal
from ridefare.pricing_defaults import DEFAULT_PRICING_CONFIG

logger = logging.getLogger(__name__)

MI_PER_KM = Decimal("0.621371")
ZERO = Decimal("0")

_AIRPORT_PATTERN = re.compile(r"airport|sea-tac|seatac", re.IGNORECASE)


def pickup_hour(pickup_at: datetime, timezone: str | None = None) -> int:
    """Local hour of the pickup. Aware datetimes are moved into the service timezone first."""
    if timezone and pickup_at.tzinfo is not None:
        pickup_at = pickup_at.astimezone(ZoneInfo(timezone))
    return pickup_at.hour


def multiplier_for_pickup_hour(hour: int, config: PricingConfig) -> Decimal:
    return config.pickup_hour_multipliers.get(hour, Decimal("1.0"))


def multiplier_for_lead_time(lead_hours: float, config: PricingConfig) -> Decimal:
    """First band with max_hours >= lead_hours wins; bands are sorted ascending."""
    for band in config.lead_time_multipliers:
        if lead_hours <= band.max_hours:
            return band.multiplier
    raise PricingConfigError(f"No lead-time band covers {lead_hours} hours")


def compute_price(pricing_input: PricingInput, config: PricingConfig = DEFAULT_PRICING_CONFIG) -> PricingBreakdown:
    rates = config.vehicles.get(pricing_input.vehicle_type)
    if rates is None:
        raise UnknownVehicleError(f"Unknown vehicle type: {pricing_input.vehicle_type}")

    distance_mi = pricing_input.distance_km * MI_PER_KM

    billable_miles = max(ZERO, distance_mi - rates.included_miles)
    billable_minutes = max(ZERO, pricing_input.duration_min - rates.included_minutes)

    distance_fee = round2(billable_miles * rates.per_mile)
    time_fee = round2(billable_minutes * rates.per_minute)

    subtotal = rates.base_fare + distance_fee + time_fee

    pickup_mult = multiplier_for_pickup_hour(pickup_hour(pricing_input.pickup_at, config.timezone), config)
    lead_mult = multiplier_for_lead_time(pricing_input.booking_lead_hours, config)

    # Multipliers compound and apply to base + distance + time only
    subtotal = round2(subtotal * pickup_mult * lead_mult)

    wait_beyond_free = max(ZERO, pricing_input.wait_minutes - config.free_wait_minutes)
    wait_fee = round2(wait_beyond_free * config.wait_per_minute)

    tolls = round2(max(ZERO, pricing_input.tolls))
    airport_fee = round2(config.airport_fee if pricing_input.apply_airport_fee else ZERO)

    pre_tax_subtotal = subtotal + wait_fee + tolls + airport_fee
    min_fare_applied = False
    if pre_tax_subtotal < rates.min_fare:
        pre_tax_subtotal = rates.min_fare
        min_fare_applied = True

    tax = round2(pre_tax_subtotal * config.tax_rate)
    tip = round2(max(ZERO, pricing_input.tip_percent) / 100 * pre_tax_subtotal)

    total = round2(pre_tax_subtotal + tax + tip)

    logger.debug(
        "Quoted %s: pre-tax %s, total %s %s (min fare applied: %s)",
        pricing_input.vehicle_type,
        pre_tax_subtotal,
        total,
        config.currency,
        min_fare_applied,
    )

    return PricingBreakdown(
        currency=config.currency,
        vehicle=rates.display_name,
        base_fare=rates.base_fare,
        distance_fee=distance_fee,
        time_fee=time_fee,
        pickup_time_multiplier=pickup_mult,
        lead_time_multiplier=lead_mult,
        wait_fee=wait_fee,
        tolls=tolls,
        airport_fee=airport_fee,
        pre_tax_subtotal=pre_tax_subtotal,
        tax=tax,
        tip=tip,
        total=total,
        min_fare_applied=min_fare_applied,
        notes=[],
    )


def booking_lead_hours(pickup_at: datetime, now: datetime) -> float:
    """Hours from now until pickup, never negative."""
    return max(0.0, (pickup_at - now).total_seconds() / 3600)


def is_airport_trip(pickup_location: str | None, dropoff_location: str | None) -> bool:
    return any(loc and _AIRPORT_PATTERN.search(loc) for loc in (pickup_location, dropoff_location))


def build_pricing_input(
    vehicle_type: str,
    pickup_location: str,
    dropoff_location: str,
    pickup_at: datetime,
    route: RouteMetrics,
    now: datetime,
    tip_percent: float = 0,
    tolls: float = 0,
    wait_minutes: float = 0,
) -> PricingInput:
    """Assemble a quote request from booking form fields and a route lookup."""
    return PricingInput(
        vehicle_type=vehicle_type,
        distance_km=route.distance_km,
        duration_min=route.duration_min,
        pickup_at=pickup_at,
        booking_lead_hours=booking_lead_hours(pickup_at, now),
        tolls=tolls,
        wait_minutes=wait_minutes,
        tip_percent=tip_percent,
        apply_airport_fee=is_airport_trip(pickup_location, dropoff_location),
    )


def snapshot_from_breakdown(breakdown: PricingBreakdown, distance_km: float, duration_min: float) -> PricingSnapshot:
    """Copy of the quote kept with the booking, plus trip metrics for display."""
    distance_mi = to_decimal(distance_km) * MI_PER_KM
    return PricingSnapshot(
        **breakdown.model_dump(exclude={"min_fare_applied", "notes"}),
        distance_mi=float(distance_mi.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)),
        duration_min=duration_min,
    )
