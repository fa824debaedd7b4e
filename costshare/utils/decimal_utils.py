"""Decimal arithmetic helpers"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

# One cent: balances closer to zero than this are treated as settled
SETTLEMENT_EPSILON = Decimal("0.01")

MONEY_PLACES = 2


def round_decimal(value: Decimal, decimal_places: int = MONEY_PLACES) -> Decimal:
    """
    Round a decimal value to specified decimal places.

    Args:
        value: Decimal value to round
        decimal_places: Number of decimal places (default 2)

    Returns:
        Rounded decimal value
    """
    quantize_value = Decimal(10) ** -decimal_places
    return value.quantize(quantize_value, rounding=ROUND_HALF_UP)


def sum_decimals(values: Iterable[Decimal]) -> Decimal:
    """
    Sum decimal values.

    Args:
        values: Decimal values

    Returns:
        Sum of all values
    """
    return sum(values, Decimal("0"))


def is_settled(value: Decimal, epsilon: Decimal = SETTLEMENT_EPSILON) -> bool:
    """Whether a balance is within epsilon of zero"""
    return abs(value) < epsilon
