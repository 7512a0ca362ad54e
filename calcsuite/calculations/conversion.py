"""
Unit and Currency Conversion

Linear unit families convert through a base unit:
    value * multiplier[from] / multiplier[to]

Temperature is not linear and has its own formulas.
Currency conversion goes through the rate table's base currency.
"""

from typing import Optional

from calcsuite.calculations.numbers import is_finite
from calcsuite.models.calculation import (
    CurrencyConversionResult,
    UnitConversionResult,
    UnitFamily,
)
from calcsuite.models.rates import RateTable


# Multiplier of each unit relative to the family's base unit (m, kg).
UNIT_MULTIPLIERS: dict[UnitFamily, dict[str, float]] = {
    UnitFamily.LENGTH: {
        "m": 1,
        "km": 1000,
        "cm": 0.01,
        "ft": 0.3048,
        "inch": 0.0254,
        "mi": 1609.34,
    },
    UnitFamily.WEIGHT: {
        "kg": 1,
        "g": 0.001,
        "lb": 0.453592,
        "oz": 0.0283495,
    },
}

TEMPERATURE_UNITS: tuple[str, ...] = ("C", "F")

# Quick-pick pairs offered by the converter.
UNIT_PRESETS: tuple[tuple[UnitFamily, str, str], ...] = (
    (UnitFamily.LENGTH, "m", "ft"),
    (UnitFamily.WEIGHT, "kg", "lb"),
    (UnitFamily.TEMPERATURE, "C", "F"),
)


def units_for(family: UnitFamily) -> tuple[str, ...]:
    if family == UnitFamily.TEMPERATURE:
        return TEMPERATURE_UNITS
    return tuple(UNIT_MULTIPLIERS[family])


def convert_units(
    family: UnitFamily,
    value: float,
    from_unit: str,
    to_unit: str,
) -> Optional[UnitConversionResult]:
    """Convert a value between two units of the same family."""
    if not is_finite(value):
        return None

    if family == UnitFamily.TEMPERATURE:
        converted = _convert_temperature(value, from_unit, to_unit)
    else:
        multipliers = UNIT_MULTIPLIERS[family]
        if from_unit not in multipliers or to_unit not in multipliers:
            return None
        converted = value * multipliers[from_unit] / multipliers[to_unit]

    if converted is None:
        return None
    return UnitConversionResult(
        family=family,
        from_unit=from_unit,
        to_unit=to_unit,
        value=converted,
    )


def _convert_temperature(value: float, from_unit: str, to_unit: str) -> Optional[float]:
    if from_unit not in TEMPERATURE_UNITS or to_unit not in TEMPERATURE_UNITS:
        return None
    if from_unit == to_unit:
        return value
    if from_unit == "C":
        return value * 9 / 5 + 32
    return (value - 32) * 5 / 9


def convert_currency(
    amount: float,
    from_code: str,
    to_code: str,
    table: Optional[RateTable],
) -> Optional[CurrencyConversionResult]:
    """
    Convert an amount with the loaded rate table.

    IMPORTANT: a code missing from the table is converted at rate 1
    (i.e. treated as the base currency). The result says so through
    from_known / to_known; it is never silently indistinguishable.
    """
    if table is None or not is_finite(amount):
        return None

    from_code = from_code.upper()
    to_code = to_code.upper()
    from_rate = table.rate_for(from_code)
    to_rate = table.rate_for(to_code)

    result = (amount / (from_rate or 1)) * (to_rate or 1)
    return CurrencyConversionResult(
        amount=amount,
        from_code=from_code,
        to_code=to_code,
        result=result,
        from_known=from_rate is not None,
        to_known=to_rate is not None,
    )
