"""Currency arithmetic helpers."""

from __future__ import annotations

from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal

WHOLE_UNIT = Decimal("1")


def to_decimal(value: float | int | Decimal) -> Decimal:
    # str() keeps the decimal literal the caller meant (0.1, not 0.1000000000000000055...).
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_currency(value: float | int | Decimal) -> int:
    """Round to a whole currency unit, halves away from zero."""
    return int(to_decimal(value).quantize(WHOLE_UNIT, rounding=ROUND_HALF_UP))


def ceil_whole(value: float | int | Decimal) -> int:
    return int(to_decimal(value).to_integral_value(rounding=ROUND_CEILING))
