"""
Tests for the Calculation Suite models

Test strategy:
1. Unit tests for individual models and validators
2. Integration tests for the suite (with fake external services)
3. No real API calls in tests
"""

import math
from datetime import date
from decimal import Decimal

import pytest
from pydantic import TypeAdapter, ValidationError

from calcsuite.models import (
    AgeResult,
    BiometricEntry,
    DiscountResult,
    EMIResult,
    ExpenseCategory,
    FALLBACK_RATES,
    IncomeCategory,
    PercentageRequest,
    ProblemImage,
    RateSource,
    RateTable,
    SolverRequest,
    Tool,
    ToolRequest,
    Transaction,
    TransactionKind,
    categories_for,
)


class TestTransactionModel:
    """Tests for ledger transaction models."""

    def test_transaction_creation(self):
        """Test Transaction model creation."""
        transaction = Transaction(
            id=1,
            description="  Groceries  ",
            amount=Decimal("450.00"),
            kind=TransactionKind.EXPENSE,
            category="Food",
        )
        assert transaction.description == "Groceries"
        assert transaction.category == ExpenseCategory.FOOD

    def test_transaction_rejects_non_positive_amount(self):
        """Test that zero and negative amounts are rejected."""
        with pytest.raises(ValidationError):
            Transaction(id=1, description="x", amount=Decimal("0"), kind="expense", category="Food")

    def test_category_resolved_against_kind(self):
        """Test that 'Other' belongs to whichever kind it is used with."""
        income = Transaction(id=1, description="x", amount=1, kind="income", category=ExpenseCategory.OTHER)
        assert income.category is IncomeCategory.OTHER

    def test_category_from_other_kind_rejected(self):
        with pytest.raises(ValidationError):
            Transaction(id=1, description="x", amount=1, kind="income", category="Rent")

    def test_categories_for(self):
        assert categories_for(TransactionKind.INCOME) is IncomeCategory
        assert categories_for(TransactionKind.EXPENSE) is ExpenseCategory


class TestRateTable:
    """Tests for rate table validation."""

    def test_codes_upper_cased_and_base_added(self):
        table = RateTable(base_code="usd", rates={"inr": 83})
        assert table.base_code == "USD"
        assert table.rates == {"INR": 83, "USD": 1.0}
        assert "inr" in table

    @pytest.mark.parametrize("rate", [0, -1, math.inf, math.nan])
    def test_rejects_invalid_rates(self, rate):
        with pytest.raises(ValidationError):
            RateTable(rates={"USD": 1, "INR": rate})

    def test_base_rate_must_be_one(self):
        with pytest.raises(ValidationError):
            RateTable(base_code="USD", rates={"USD": 1.5})

    def test_fallback_table(self):
        table = RateTable.fallback()
        assert table.source == RateSource.FALLBACK
        assert table.rates == FALLBACK_RATES
        assert table.rate_for("eur") == 0.92
        assert table.rate_for("XYZ") is None


class TestResultModels:

    def test_emi_derived_totals(self):
        result = EMIResult(emi=1000, months=12, principal=11000)
        assert result.total_paid == 12000
        assert result.total_interest == 1000

    def test_discount_result_rejects_negative(self):
        with pytest.raises(ValidationError):
            DiscountResult(saved_amount=10, final_price=-1)

    def test_age_result_bounds(self):
        with pytest.raises(ValidationError):
            AgeResult(years=1, months=12, days=0)


class TestBiometricEntry:

    def test_accepts_short_keys(self):
        entry = BiometricEntry.model_validate({"date": "2024-06-01", "steps": 10, "sleep": 7, "water": 2})
        assert entry.date == date(2024, 6, 1)
        assert entry.sleep_hours == 7
        assert entry.water_liters == 2

    def test_serializes_with_short_keys(self):
        entry = BiometricEntry(date=date(2024, 6, 1), steps=10, sleep_hours=7, water_liters=2)
        assert set(entry.model_dump(by_alias=True)) == {"date", "steps", "sleep", "water"}

    def test_rejects_negative_values(self):
        with pytest.raises(ValidationError):
            BiometricEntry(date=date(2024, 6, 1), steps=-1)


class TestSolverModels:

    def test_image_must_be_an_image(self):
        with pytest.raises(ValidationError):
            ProblemImage(data=b"%PDF", mime_type="application/pdf")

    def test_request_is_empty(self):
        assert SolverRequest(problem="  ").is_empty
        assert not SolverRequest(problem="2+2").is_empty
        assert not SolverRequest(image=ProblemImage(data=b"x", mime_type="image/png")).is_empty


class TestToolRequests:

    def test_discriminated_by_tool(self):
        request = TypeAdapter(ToolRequest).validate_python(
            {"tool": Tool.PERCENTAGE, "value": 15, "base": 200}
        )
        assert isinstance(request, PercentageRequest)

    def test_requests_are_immutable(self):
        request = PercentageRequest(value=1, base=2)
        with pytest.raises(ValidationError):
            request.value = 3

    def test_every_tool_has_a_display_name(self):
        assert Tool.EMI.value == "EMI Loan"
        assert Tool.AGE.value == "Age Calc"
        assert len(set(tool.value for tool in Tool)) == len(Tool)
