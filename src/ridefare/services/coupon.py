"""Coupon matching and discount arithmetic. Coupon storage lives with the caller."""

import logging
from collections.abc import Iterable
from datetime import datetime, timezone

from ridefare.errors import CouponError, ErrorCode, ValidationError
from ridefare.models.coupon import Coupon, CouponKind, CouponQuote

logger = logging.getLogger(__name__)

MIN_CHARGE_CENTS = 50


def find_coupon(coupons: Iterable[Coupon], code: str) -> Coupon:
    """Case-insensitive exact match among active coupons."""
    wanted = code.strip().casefold()
    if not wanted:
        raise ValidationError("Coupon code is empty", code=ErrorCode.INVALID_REQUEST)

    for coupon in coupons:
        if coupon.active and coupon.code.casefold() == wanted:
            return coupon

    logger.info("Coupon %s not found or inactive", code.strip())
    raise CouponError(f"Coupon {code.strip()!r} not found or inactive", code=ErrorCode.COUPON_NOT_FOUND)


def _as_utc(value: datetime) -> datetime:
    """Naive timestamps are read as UTC."""
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


def apply_coupon(coupon: Coupon, subtotal_cents: int, now: datetime) -> CouponQuote:
    if subtotal_cents <= 0:
        raise ValidationError(f"Invalid subtotal: {subtotal_cents}", code=ErrorCode.INVALID_REQUEST)

    if coupon.expires_at is not None and _as_utc(coupon.expires_at) < _as_utc(now):
        logger.info("Coupon %s expired at %s", coupon.code, coupon.expires_at.isoformat())
        raise CouponError(f"Coupon {coupon.code} expired", code=ErrorCode.COUPON_EXPIRED)

    if coupon.max_redemptions is not None and coupon.redemptions_used >= coupon.max_redemptions:
        logger.info("Coupon %s reached %d redemptions", coupon.code, coupon.max_redemptions)
        raise CouponError(f"Coupon {coupon.code} usage limit reached", code=ErrorCode.COUPON_LIMIT_REACHED)

    if coupon.kind == CouponKind.PERCENT.value:
        pct = coupon.percent_off or 0
        discount_cents = int(subtotal_cents * pct // 100)
        display = f"{pct:g}% off"
    elif coupon.kind == CouponKind.FIXED.value:
        discount_cents = min(coupon.value_cents or 0, subtotal_cents)
        display = f"${discount_cents / 100:.2f} off"
    else:
        raise CouponError(f"Invalid coupon kind: {coupon.kind}", code=ErrorCode.INVALID_COUPON_KIND)

    final_cents = max(subtotal_cents - discount_cents, MIN_CHARGE_CENTS)

    return CouponQuote(
        code=coupon.code,
        kind=CouponKind(coupon.kind),
        percent_off=coupon.percent_off,
        value_cents=coupon.value_cents,
        discount_cents=discount_cents,
        final_cents=final_cents,
        display=display,
    )
