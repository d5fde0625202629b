"""
Fixed-point helpers for monetary amounts.

Amounts are Decimals with exactly two places, rounded half away from zero,
matching a NUMERIC(10,2) column. Unit prices keep four places so a line
total can be rounded from the unrounded price.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

TWO_PLACES = Decimal('0.01')
UNIT_PRICE_PLACES = Decimal('0.0001')
ZERO_AMOUNT = Decimal('0.00')
AMOUNT_TOLERANCE = Decimal('0.01')

AmountLike = Union[Decimal, int, str]


def to_decimal(value: AmountLike) -> Decimal:
    """Convert to Decimal without rounding."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # Go through repr so 0.1 becomes Decimal('0.1'), not its binary expansion
        return Decimal(repr(value))
    return Decimal(str(value))


def to_amount(value: AmountLike) -> Decimal:
    """Round a value to a two-place amount."""
    return to_decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def to_unit_price(value: AmountLike) -> Decimal:
    """Round a unit price to the four places its column stores."""
    return to_decimal(value).quantize(UNIT_PRICE_PLACES, rounding=ROUND_HALF_UP)


def format_amount(value: AmountLike) -> str:
    """Render an amount as a fixed-point string, e.g. '31.00'."""
    return f"{to_amount(value):.2f}"


def amounts_differ(a: AmountLike, b: AmountLike, tolerance: Decimal = AMOUNT_TOLERANCE) -> bool:
    """True when two amounts differ by more than the tolerance."""
    return abs(to_decimal(a) - to_decimal(b)) > tolerance
