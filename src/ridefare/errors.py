"""
Custom exceptions and error handling for RideFare.

Defines application-specific exceptions with error codes so callers can map
failures to client-safe messages without leaking internal details.

Usage:
    from ridefare.errors import UnknownVehicleError, ErrorCode

    raise UnknownVehicleError("Unknown vehicle type: LIMO")
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Pricing errors
    UNKNOWN_VEHICLE_TYPE = "UNKNOWN_VEHICLE_TYPE"
    INVALID_PRICING_CONFIG = "INVALID_PRICING_CONFIG"

    # Coupon errors
    COUPON_NOT_FOUND = "COUPON_NOT_FOUND"
    COUPON_EXPIRED = "COUPON_EXPIRED"
    COUPON_LIMIT_REACHED = "COUPON_LIMIT_REACHED"
    INVALID_COUPON_KIND = "INVALID_COUPON_KIND"

    # Route errors
    ROUTE_METRICS_FAILED = "ROUTE_METRICS_FAILED"
    ROUTE_SERVICE_UNAVAILABLE = "ROUTE_SERVICE_UNAVAILABLE"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    TIMEOUT = "TIMEOUT"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.UNKNOWN_VEHICLE_TYPE: "The selected vehicle is not available. Please choose another vehicle.",
    ErrorCode.INVALID_PRICING_CONFIG: "Pricing is temporarily unavailable. Please try again later.",
    ErrorCode.COUPON_NOT_FOUND: "Coupon not found or inactive.",
    ErrorCode.COUPON_EXPIRED: "This coupon has expired.",
    ErrorCode.COUPON_LIMIT_REACHED: "This coupon has reached its usage limit.",
    ErrorCode.INVALID_COUPON_KIND: "This coupon cannot be applied.",
    ErrorCode.ROUTE_METRICS_FAILED: "We could not find a driving route between these locations.",
    ErrorCode.ROUTE_SERVICE_UNAVAILABLE: "Route lookup is temporarily unavailable. Please try again.",
    ErrorCode.VALIDATION_ERROR: "Your request contains invalid information. Please check and try again.",
    ErrorCode.INVALID_REQUEST: "Invalid request format. Please try again.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
    ErrorCode.TIMEOUT: "The request timed out. Please try again.",
}


class RideFareError(Exception):
    """Base exception for all RideFare errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class UnknownVehicleError(RideFareError):
    """Requested vehicle class has no rate card in the pricing config."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN_VEHICLE_TYPE):
        super().__init__(message, code=code)


class PricingConfigError(RideFareError):
    """Pricing configuration is malformed or cannot price the request."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_PRICING_CONFIG):
        super().__init__(message, code=code)


class CouponError(RideFareError):
    """Coupon lookup or redemption rules rejected the coupon."""

    pass


class RouteMetricsError(RideFareError):
    """Distance/duration lookup failed."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ROUTE_METRICS_FAILED):
        super().__init__(message, code=code)


class ValidationError(RideFareError):
    """Input validation failed."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.VALIDATION_ERROR):
        super().__init__(message, code=code)
