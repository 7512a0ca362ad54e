"""
Tool Registry Models

Each tool in the panel is a member of the Tool enum. Tools that
compute something have a request model carrying only that tool's
inputs; the `tool` field is a literal discriminator so a request
can only ever be dispatched to the tool it was built for.
"""

from datetime import date
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from calcsuite.models.calculation import (
    InterestMode,
    InvestmentMode,
    PercentageMode,
    UnitFamily,
)


class Tool(str, Enum):
    """Every tool in the panel, by display name."""
    STANDARD = "Standard"
    AI_MATH = "AI Math"
    PERCENTAGE = "Percentage"
    CURRENCY = "Currency"
    UNIT_CONVERT = "Unit Convert"
    EMI = "EMI Loan"
    LOAN_PAYMENT = "Loan Payment"
    DISCOUNT = "Discount"
    INTEREST = "Interest"
    INVESTMENT = "Investment"
    DASHBOARD = "Financial Dashboard"
    BUDGET = "Budget"
    BMI = "BMI"
    AGE = "Age Calc"
    HEALTH = "Health"


class _Request(BaseModel):
    model_config = ConfigDict(frozen=True)


class ExpressionRequest(_Request):
    tool: Literal[Tool.STANDARD] = Tool.STANDARD
    expression: str


class PercentageRequest(_Request):
    tool: Literal[Tool.PERCENTAGE] = Tool.PERCENTAGE
    mode: PercentageMode = PercentageMode.FIND_VALUE
    value: float
    base: float


class CurrencyRequest(_Request):
    tool: Literal[Tool.CURRENCY] = Tool.CURRENCY
    amount: float
    from_code: str = "USD"
    to_code: str = "INR"


class UnitConversionRequest(_Request):
    tool: Literal[Tool.UNIT_CONVERT] = Tool.UNIT_CONVERT
    family: UnitFamily = UnitFamily.LENGTH
    value: float
    from_unit: str
    to_unit: str


class EMIRequest(_Request):
    tool: Literal[Tool.EMI] = Tool.EMI
    principal: float = 100000
    annual_rate: float = 10
    months: int = 12


class LoanPaymentRequest(_Request):
    tool: Literal[Tool.LOAN_PAYMENT] = Tool.LOAN_PAYMENT
    amount: float = 250000
    annual_rate: float = 5.5
    years: float = 30


class DiscountRequest(_Request):
    tool: Literal[Tool.DISCOUNT] = Tool.DISCOUNT
    price: float
    rate: float


class InterestRequest(_Request):
    tool: Literal[Tool.INTEREST] = Tool.INTEREST
    mode: InterestMode = InterestMode.SIMPLE
    principal: float = 10000
    rate: float = 5
    years: float = 1


class InvestmentRequest(_Request):
    tool: Literal[Tool.INVESTMENT] = Tool.INVESTMENT
    mode: InvestmentMode = InvestmentMode.SIP
    initial: float = 10000
    contribution: float = 1000
    annual_rate: float = 12
    years: int = 5


class BMIRequest(_Request):
    tool: Literal[Tool.BMI] = Tool.BMI
    weight_kg: float
    height_cm: float


class AgeRequest(_Request):
    tool: Literal[Tool.AGE] = Tool.AGE
    birth_date: date
    on_date: Optional[date] = Field(
        default=None,
        description="Date to measure the age at; today when omitted"
    )


ToolRequest = Annotated[
    Union[
        ExpressionRequest,
        PercentageRequest,
        CurrencyRequest,
        UnitConversionRequest,
        EMIRequest,
        LoanPaymentRequest,
        DiscountRequest,
        InterestRequest,
        InvestmentRequest,
        BMIRequest,
        AgeRequest,
    ],
    Field(discriminator="tool"),
]


class ToolOutcome(BaseModel):
    """
    What a tool produced: the typed result plus the texts recorded to history.
    """
    model_config = ConfigDict(frozen=True)

    tool: Tool
    expression: str
    result_text: str
    result: Any = None
