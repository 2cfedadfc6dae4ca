"""
Rounding helpers.

Route documents have always been rounded the way browsers round numbers:
`Number.toFixed` (half away from zero on the exact binary value) and
`Math.round` (half toward positive infinity). Python's round() uses
banker's rounding, so these helpers go through Decimal instead.
"""
from decimal import Decimal, ROUND_FLOOR, ROUND_HALF_UP

_HALF = Decimal("0.5")


def round_fixed(value: float, digits: int) -> float:
    """
    Round to a fixed number of decimal places.

    Args:
        value: Number to round
        digits: Decimal places to keep (>= 0)

    Returns:
        Rounded value, e.g. round_fixed(0.0625, 3) == 0.063
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return int((Decimal(value) + _HALF).to_integral_value(rounding=ROUND_FLOOR))
