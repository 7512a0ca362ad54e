"""
Calculation Result Models

Every calculation tool returns one of these models, or None when
the input cannot produce a result.

DESIGN DECISION: Tool modes are closed enumerations rather than
free strings. A mode that is not a member cannot be constructed,
so the dispatch in the calculation functions never has to guess.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class PercentageMode(str, Enum):
    """Percentage tool modes."""
    FIND_VALUE = "find_value"      # p% of base
    FIND_PERCENT = "find_percent"  # part is what % of base


class InterestMode(str, Enum):
    """Interest tool modes."""
    SIMPLE = "simple"
    COMPOUND = "compound"


class InvestmentMode(str, Enum):
    """Investment growth modes."""
    SIP = "sip"          # monthly contribution plus initial lump sum
    LUMPSUM = "lumpsum"  # single upfront investment


class UnitFamily(str, Enum):
    """Convertible unit families."""
    LENGTH = "length"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"


class BMICategory(str, Enum):
    """BMI classification bands."""
    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"


# =============================================================================
# RESULT MODELS
# =============================================================================

class _Result(BaseModel):
    model_config = ConfigDict(frozen=True)


class PercentageResult(_Result):
    mode: PercentageMode
    value: float


class InterestResult(_Result):
    mode: InterestMode
    interest: float
    principal: float

    @property
    def total_amount(self) -> float:
        return self.principal + self.interest


class DiscountResult(_Result):
    """
    Outcome of applying a percentage discount.

    saved_amount + final_price equals the original price.
    """
    saved_amount: float = Field(ge=0)
    final_price: float = Field(ge=0)


class EMIResult(_Result):
    """Fixed monthly installment for a loan given in months."""
    emi: float
    months: int = Field(ge=1)
    principal: float

    @property
    def total_paid(self) -> float:
        return self.emi * self.months

    @property
    def total_interest(self) -> float:
        return self.total_paid - self.principal


class LoanPaymentResult(_Result):
    monthly: float
    total_paid: float
    total_interest: float


class InvestmentResult(_Result):
    """
    Future value of an investment.

    Always carries the invested principal so callers can derive the gain.
    """
    mode: InvestmentMode
    total_value: float
    invested: float

    @property
    def gain(self) -> float:
        return self.total_value - self.invested


class UnitConversionResult(_Result):
    family: UnitFamily
    from_unit: str
    to_unit: str
    value: float


class CurrencyConversionResult(_Result):
    """
    Currency conversion against a loaded rate table.

    An unknown currency code is converted with rate 1.
    from_known / to_known tell the caller when that happened.
    """
    amount: float
    from_code: str
    to_code: str
    result: float
    from_known: bool
    to_known: bool

    @property
    def used_fallback_rate(self) -> bool:
        return not (self.from_known and self.to_known)


class BMIResult(_Result):
    bmi: float
    category: BMICategory


class AgeResult(_Result):
    """Calendar difference between two dates."""
    years: int = Field(ge=0)
    months: int = Field(ge=0, lt=12)
    days: int = Field(ge=0, lt=31)


class ExpressionResult(_Result):
    expression: str
    value: float
