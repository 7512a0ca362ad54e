"""
Data Models Package

This package contains all Pydantic models used in the Calculation Suite.
All data flowing between tools, ledger and logs conforms to these schemas.
"""

from calcsuite.models.calculation import (
    AgeResult,
    BMICategory,
    BMIResult,
    CurrencyConversionResult,
    DiscountResult,
    EMIResult,
    ExpressionResult,
    InterestMode,
    InterestResult,
    InvestmentMode,
    InvestmentResult,
    LoanPaymentResult,
    PercentageMode,
    PercentageResult,
    UnitConversionResult,
    UnitFamily,
)
from calcsuite.models.ledger import (
    CategoryTotal,
    ExpenseCategory,
    IncomeCategory,
    LedgerTotals,
    Recurrence,
    Transaction,
    TransactionKind,
    categories_for,
)
from calcsuite.models.history import HistoryEntry
from calcsuite.models.rates import (
    FALLBACK_RATES,
    SUPPORTED_CURRENCIES,
    RateSource,
    RateTable,
)
from calcsuite.models.biometrics import BiometricEntry
from calcsuite.models.solver import ProblemImage, SolverRequest, SolverResponse
from calcsuite.models.tools import (
    AgeRequest,
    BMIRequest,
    CurrencyRequest,
    DiscountRequest,
    EMIRequest,
    ExpressionRequest,
    InterestRequest,
    InvestmentRequest,
    LoanPaymentRequest,
    PercentageRequest,
    Tool,
    ToolOutcome,
    ToolRequest,
    UnitConversionRequest,
)

__all__ = [
    # Calculation models
    "AgeResult",
    "BMICategory",
    "BMIResult",
    "CurrencyConversionResult",
    "DiscountResult",
    "EMIResult",
    "ExpressionResult",
    "InterestMode",
    "InterestResult",
    "InvestmentMode",
    "InvestmentResult",
    "LoanPaymentResult",
    "PercentageMode",
    "PercentageResult",
    "UnitConversionResult",
    "UnitFamily",
    # Ledger models
    "CategoryTotal",
    "ExpenseCategory",
    "IncomeCategory",
    "LedgerTotals",
    "Recurrence",
    "Transaction",
    "TransactionKind",
    "categories_for",
    # History
    "HistoryEntry",
    # Rates
    "FALLBACK_RATES",
    "SUPPORTED_CURRENCIES",
    "RateSource",
    "RateTable",
    # Biometrics
    "BiometricEntry",
    # Solver
    "ProblemImage",
    "SolverRequest",
    "SolverResponse",
    # Tools
    "AgeRequest",
    "BMIRequest",
    "CurrencyRequest",
    "DiscountRequest",
    "EMIRequest",
    "ExpressionRequest",
    "InterestRequest",
    "InvestmentRequest",
    "LoanPaymentRequest",
    "PercentageRequest",
    "Tool",
    "ToolOutcome",
    "ToolRequest",
    "UnitConversionRequest",
]
