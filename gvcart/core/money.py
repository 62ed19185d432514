"""Money helpers - Decimal arithmetic for cart totals."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from .constants import CURRENCY_SYMBOL

MONEY_PRECISION = Decimal("0.01")

Number = Union[str, int, float, Decimal]


def to_decimal(value: Number | None) -> Decimal:
    """Convert a price-like value to Decimal.

    Floats go through ``str`` so ``0.1`` stays ``0.1``. ``None`` and
    unparsable values become ``Decimal("0")``.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    try:
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def round_money(value: Number) -> Decimal:
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def format_money(value: Number, symbol: str = CURRENCY_SYMBOL, grouping: bool = True) -> str:
    """Format an amount with the currency symbol and two decimals.

    >>> format_money(12000)
    '₹12,000.00'
    >>> format_money(1500, grouping=False)
    '₹1500.00'
    """
    amount = round_money(value)
    if grouping:
        return f"{symbol}{amount:,.2f}"
    return f"{symbol}{amount:.2f}"


def to_json_number(value: Decimal) -> int | float:
    """Convert a Decimal to the narrowest JSON number."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)
