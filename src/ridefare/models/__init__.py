"""
Pydantic models for RideFare.
"""

from ridefare.models.coupon import Coupon, CouponKind, CouponQuote
from ridefare.models.pricing import (
    LeadTimeBand,
    PricingBreakdown,
    PricingConfig,
    PricingInput,
    PricingSnapshot,
    VehicleRates,
    VehicleType,
)
from ridefare.models.receipt import LineItem, Receipt
from ridefare.models.route import RouteMetrics

__all__ = [
    "Coupon",
    "CouponKind",
    "CouponQuote",
    "LeadTimeBand",
    "LineItem",
    "PricingBreakdown",
    "PricingConfig",
    "PricingInput",
    "PricingSnapshot",
    "Receipt",
    "RouteMetrics",
    "VehicleRates",
    "VehicleType",
]
