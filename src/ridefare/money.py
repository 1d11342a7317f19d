"""Money helpers: cent rounding, provider amounts and display formatting."""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")

_CURRENCY_SYMBOLS = {"USD": "$", "CAD": "CA$", "EUR": "€", "GBP": "£"}


def to_decimal(value: Decimal | float | int | str | None) -> Decimal:
    """Convert to Decimal via str() so 0.7 becomes exactly 0.7, not its binary float."""
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round2(value: Decimal | float | int) -> Decimal:
    """Round half away from zero to the cent."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def to_cents(amount: Decimal | float | int) -> int:
    """Integer minor units, as payment providers expect."""
    return int((round2(amount) * 100).to_integral_value(rounding=ROUND_HALF_UP))


def from_cents(cents: int) -> Decimal:
    return round2(Decimal(cents) / 100)


def format_currency(amount: Decimal | float | int, currency: str = "USD") -> str:
    """Format like en-US currency display: $1,234.50. Unknown codes fall back to '$'."""
    value = round2(amount)
    symbol = _CURRENCY_SYMBOLS.get(currency.upper(), "$")
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"
