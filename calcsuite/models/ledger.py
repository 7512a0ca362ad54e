"""
Ledger Models

Transactions recorded by the budget tool and the aggregates derived
from them. Aggregates are plain value objects; they are recomputed
from the transactions on every read and never stored.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
)


class TransactionKind(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class IncomeCategory(str, Enum):
    """Categories available for income entries."""
    SALARY = "Salary"
    FREELANCE = "Freelance"
    INVESTMENT = "Investment"
    OTHER = "Other"


class ExpenseCategory(str, Enum):
    """Categories available for expense entries."""
    FOOD = "Food"
    TRANSPORT = "Transport"
    RENT = "Rent"
    UTILITIES = "Utilities"
    ENTERTAINMENT = "Entertainment"
    SHOPPING = "Shopping"
    HEALTH = "Health"
    OTHER = "Other"


class Recurrence(str, Enum):
    """
    How often a transaction repeats.

    Advisory only: aggregation treats every transaction as a single entry.
    """
    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


Category = Union[IncomeCategory, ExpenseCategory]


def categories_for(kind: TransactionKind) -> type[Enum]:
    """Category enum whose members are valid for the given kind."""
    if kind == TransactionKind.INCOME:
        return IncomeCategory
    return ExpenseCategory


class Transaction(BaseModel):
    """
    A single income or expense entry.

    CRITICAL: amount is always positive; the kind decides the sign
    when balances are computed.
    """
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    id: int = Field(
        ...,
        ge=1,
        description="Unique within the ledger's lifetime"
    )
    description: str = Field(
        ...,
        min_length=1,
        max_length=200
    )
    amount: Decimal = Field(
        ...,
        gt=0
    )
    kind: TransactionKind
    category: Category
    recurrence: Recurrence = Recurrence.NONE
    occurred_at: datetime = Field(
        default_factory=datetime.now
    )

    @model_validator(mode='before')
    @classmethod
    def match_category_to_kind(cls, data):
        """Resolve the category against the enum that belongs to the kind."""
        if not isinstance(data, dict):
            return data
        kind = data.get("kind")
        category = data.get("category")
        if kind is None or category is None:
            return data
        enum_cls = categories_for(TransactionKind(kind))
        value = category.value if isinstance(category, Enum) else category
        return {**data, "category": enum_cls(value)}

    @property
    def signed_amount(self) -> Decimal:
        if self.kind == TransactionKind.INCOME:
            return self.amount
        return -self.amount


class LedgerTotals(BaseModel):
    """Income, expense and balance over the whole ledger."""
    model_config = ConfigDict(frozen=True)

    income: Decimal = Decimal("0")
    expense: Decimal = Decimal("0")

    @property
    def balance(self) -> Decimal:
        return self.income - self.expense


class CategoryTotal(BaseModel):
    """Summed amount for one category (breakdown charts)."""
    model_config = ConfigDict(frozen=True)

    category: Category
    amount: Decimal
    count: int = Field(ge=1)
