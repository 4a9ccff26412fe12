"""Currency display helpers."""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def format_currency(value: Decimal | int | float) -> str:
    """Format as US dollars with two decimals, e.g. ``-$1,234.56``."""
    amount = Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"
