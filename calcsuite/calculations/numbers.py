"""Input coercion shared by the calculation functions."""

import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional, Union

Number = Union[int, float, Decimal]


def is_finite(*values) -> bool:
    """True when every value is a real, finite number (bools excluded)."""
    for value in values:
        if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
            return False
        if not math.isfinite(value):
            return False
    return True


def parse_number(value) -> Optional[float]:
    """
    Parse a user-typed value into a finite float.

    Returns None for blank, non-numeric or non-finite input.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def parse_amount(value) -> Optional[Decimal]:
    """Parse a money amount into a Decimal, or None when it is not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = Decimal(value.strip() if isinstance(value, str) else str(value))
    except (InvalidOperation, TypeError, ValueError):
        return None
    return amount if amount.is_finite() else None


def round_half_up(value: float, places: int) -> float:
    """Round the exact binary value of a float half-up (display rounding)."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def growth_factor(rate: float, periods: float) -> float:
    """(1 + rate) ** periods, saturating to infinity on overflow; NaN off the real domain."""
    try:
        return math.pow(1 + rate, periods)
    except OverflowError:
        return math.inf
    except ValueError:
        return math.nan
