"""Display formatting for Naira amounts and percentages.

Display only. The engine always rounds to 2 dp internally, whatever the
display precision.
"""

from decimal import ROUND_HALF_UP, Decimal

CURRENCY_SYMBOL = "₦"


def _quantize(amount: float, decimals: int) -> Decimal:
    # ROUND_HALF_UP on Decimal rounds halves away from zero
    exponent = Decimal(1).scaleb(-decimals)
    return Decimal(repr(amount)).quantize(exponent, rounding=ROUND_HALF_UP)


def format_currency(amount: float, decimals: int = 0) -> str:
    """Format an amount as Naira, e.g. 500000 -> '₦500,000', -5166.67 -> '-₦5,167'."""
    value = _quantize(amount, decimals)
    sign = "-" if value < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(value):,.{decimals}f}"


def format_percent(value: float, decimals: int = 2) -> str:
    """Format a percentage value, e.g. 6.919642 -> '6.92%'."""
    return f"{_quantize(value, decimals):.{decimals}f}%"
