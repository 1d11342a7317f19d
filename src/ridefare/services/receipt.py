"""Receipt text built from a stored pricing snapshot. Delivery is handled elsewhere."""

from datetime import datetime
from decimal import Decimal

from ridefare.models.pricing import PricingSnapshot
from ridefare.models.receipt import LineItem, Receipt
from ridefare.money import format_currency

BRAND_NAME = "ROB Transportation"
SMS_LOCATION_MAX = 30


def format_pickup_time(value: str) -> str:
    """'Fri, Mar 13, 5:00 PM'; unparseable input is returned unchanged."""
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return value
    label = parsed.strftime("%a, %b %d, %I:%M %p").replace(" 0", " ")
    zone = parsed.strftime("%Z")
    return f"{label} {zone}" if zone else label


def truncate_location(location: str, max_length: int = SMS_LOCATION_MAX) -> str:
    return location[: max_length - 3] + "..." if len(location) > max_length else location


def format_minutes(value: float | None) -> str:
    """Plain positional notation with trailing zeros dropped: 20.0 -> '20', 1e6 -> '1000000'."""
    return format(Decimal(str(value or 0)).normalize(), "f")


def format_total(snapshot: PricingSnapshot | None) -> str:
    if snapshot is None or not snapshot.total:
        return "N/A"
    return format_currency(snapshot.total, snapshot.currency or "USD")


def receipt_line_items(snapshot: PricingSnapshot) -> list[LineItem]:
    """Non-zero charges in display order, always ending with Total."""
    currency = snapshot.currency or "USD"
    items: list[LineItem] = []

    if snapshot.base_fare:
        items.append(LineItem(label="Base Fare", amount=format_currency(snapshot.base_fare, currency)))
    if snapshot.distance_fee:
        items.append(
            LineItem(
                label=f"Distance Fee ({snapshot.distance_mi or 0:.1f} mi)",
                amount=format_currency(snapshot.distance_fee, currency),
            )
        )
    if snapshot.time_fee:
        items.append(
            LineItem(
                label=f"Time Fee ({format_minutes(snapshot.duration_min)} min)",
                amount=format_currency(snapshot.time_fee, currency),
            )
        )
    if snapshot.airport_fee:
        items.append(LineItem(label="Airport Fee", amount=format_currency(snapshot.airport_fee, currency)))
    if snapshot.tax:
        items.append(LineItem(label="Tax", amount=format_currency(snapshot.tax, currency)))

    items.append(LineItem(label="Total", amount=format_total(snapshot)))
    return items


def render_sms_receipt(receipt: Receipt) -> str:
    vehicle = receipt.vehicle_name or receipt.vehicle_type or "Selected Vehicle"

    lines = [
        BRAND_NAME,
        "",
        "Payment Successful!",
        "",
        f"Booking: {receipt.booking_id}",
        f"From: {truncate_location(receipt.pickup_location)}",
        f"To: {truncate_location(receipt.dropoff_location)}",
        f"When: {format_pickup_time(receipt.pickup_time)}",
        f"Vehicle: {vehicle}",
    ]
    if receipt.flight_number:
        lines.append(f"Flight: {receipt.flight_number}")
    lines.append(f"Total: {format_total(receipt.pricing)}")
    lines.append(f"Payment ID: {receipt.payment_id}")
    lines.append("")
    lines.append(f"Thank you for choosing {BRAND_NAME}! We'll contact you before pickup.")
    return "\n".join(lines)
