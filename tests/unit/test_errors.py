from ridefare.errors import (
    USER_MESSAGES,
    CouponError,
    ErrorCode,
    PricingConfigError,
    RideFareError,
    RouteMetricsError,
    UnknownVehicleError,
    ValidationError,
)


def test_all_error_codes_have_user_message():
    for code in ErrorCode:
        assert code in USER_MESSAGES


def test_user_message_lookup():
    err = RideFareError("distance matrix quota exceeded", code=ErrorCode.ROUTE_SERVICE_UNAVAILABLE)
    assert err.user_message == "Route lookup is temporarily unavailable. Please try again."


def test_default_codes():
    assert RideFareError("boom").code == ErrorCode.INTERNAL_ERROR
    assert UnknownVehicleError("LIMO").code == ErrorCode.UNKNOWN_VEHICLE_TYPE
    assert PricingConfigError("bad bands").code == ErrorCode.INVALID_PRICING_CONFIG
    assert RouteMetricsError("no route").code == ErrorCode.ROUTE_METRICS_FAILED
    assert ValidationError("bad").code == ErrorCode.VALIDATION_ERROR


def test_subclasses_inherit_user_message():
    assert CouponError("gone", code=ErrorCode.COUPON_EXPIRED).user_message == USER_MESSAGES[ErrorCode.COUPON_EXPIRED]
    assert UnknownVehicleError("LIMO").user_message == USER_MESSAGES[ErrorCode.UNKNOWN_VEHICLE_TYPE]
    assert isinstance(CouponError("x"), RideFareError)


def test_user_message_never_exposes_internal_message():
    internal = "Unknown vehicle type: SELECT * FROM vehicles"
    err = UnknownVehicleError(internal)
    assert internal not in err.user_message
