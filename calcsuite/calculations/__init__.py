"""
Calculation Library

Stateless formulas, one family per tool. Nothing here touches
shared state: results are returned, and recording them is the
caller's job.
"""

from calcsuite.calculations.conversion import (
    TEMPERATURE_UNITS,
    UNIT_MULTIPLIERS,
    UNIT_PRESETS,
    convert_currency,
    convert_units,
    units_for,
)
from calcsuite.calculations.expression import evaluate_expression
from calcsuite.calculations.finance import (
    amortized_payment,
    compound_interest,
    discount,
    emi,
    interest,
    investment_growth,
    loan_payment,
    percentage,
    simple_interest,
)
from calcsuite.calculations.health import (
    BMI_BANDS,
    age_difference,
    bmi,
    classify_bmi,
)
from calcsuite.calculations.numbers import (
    is_finite,
    parse_amount,
    parse_number,
)

__all__ = [
    # Conversion
    "TEMPERATURE_UNITS",
    "UNIT_MULTIPLIERS",
    "UNIT_PRESETS",
    "convert_currency",
    "convert_units",
    "units_for",
    # Expressions
    "evaluate_expression",
    # Finance
    "amortized_payment",
    "compound_interest",
    "discount",
    "emi",
    "interest",
    "investment_growth",
    "loan_payment",
    "percentage",
    "simple_interest",
    # Health
    "BMI_BANDS",
    "age_difference",
    "bmi",
    "classify_bmi",
    # Input parsing
    "is_finite",
    "parse_amount",
    "parse_number",
]
