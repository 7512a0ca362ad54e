"""
Tests for the calculation library.

All functions here are pure: no fixtures, no mocks.
"""

import math
from datetime import date

import pytest

from calcsuite.calculations import (
    age_difference,
    amortized_payment,
    bmi,
    classify_bmi,
    compound_interest,
    convert_currency,
    convert_units,
    discount,
    emi,
    evaluate_expression,
    interest,
    investment_growth,
    is_finite,
    loan_payment,
    parse_amount,
    parse_number,
    percentage,
    simple_interest,
    units_for,
)
from calcsuite.calculations.numbers import growth_factor, round_half_up
from calcsuite.models import (
    BMICategory,
    InterestMode,
    InvestmentMode,
    PercentageMode,
    RateTable,
    UnitFamily,
)


class TestNumbers:
    """Tests for input coercion helpers."""

    def test_is_finite(self):
        assert is_finite(1, 2.5)
        assert not is_finite(1, math.nan)
        assert not is_finite(math.inf)
        assert not is_finite(True)
        assert not is_finite("3")

    @pytest.mark.parametrize("raw,expected", [
        ("42", 42.0),
        (" 7.5 ", 7.5),
        (3, 3.0),
        ("", None),
        ("abc", None),
        ("inf", None),
        (None, None),
    ])
    def test_parse_number(self, raw, expected):
        assert parse_number(raw) == expected

    def test_parse_amount_keeps_decimal_precision(self):
        assert str(parse_amount("12.10")) == "12.10"
        assert parse_amount("NaN") is None
        assert parse_amount("twelve") is None

    def test_growth_factor_edges(self):
        assert growth_factor(0.1, 2) == pytest.approx(1.21)
        assert growth_factor(1, 10_000) == math.inf
        assert math.isnan(growth_factor(-2, 0.5))

    def test_round_half_up(self):
        assert round_half_up(22.25, 1) == 22.3
        assert round_half_up(22.24, 1) == 22.2


class TestPercentage:

    def test_find_value(self):
        result = percentage(PercentageMode.FIND_VALUE, 15, 200)
        assert result.value == pytest.approx(30.0)

    def test_find_percent(self):
        result = percentage(PercentageMode.FIND_PERCENT, 30, 200)
        assert result.value == pytest.approx(15.0)

    @pytest.mark.parametrize("mode", list(PercentageMode))
    def test_zero_base_has_no_result(self, mode):
        assert percentage(mode, 10, 0) is None

    def test_non_finite_input_has_no_result(self):
        assert percentage(PercentageMode.FIND_VALUE, math.nan, 10) is None


class TestDiscount:

    def test_saved_and_final_add_up_to_price(self):
        result = discount(1000, 20)
        assert result.saved_amount == pytest.approx(200)
        assert result.final_price == pytest.approx(800)
        assert result.saved_amount + result.final_price == pytest.approx(1000)

    def test_full_discount_is_allowed(self):
        assert discount(50, 100).final_price == pytest.approx(0)

    @pytest.mark.parametrize("price,rate", [
        (100, 0),
        (100, -5),
        (100, 100.5),
        (0, 10),
        (-10, 10),
    ])
    def test_out_of_range_inputs(self, price, rate):
        assert discount(price, rate) is None


class TestInterest:

    def test_simple_interest(self):
        result = simple_interest(10000, 5, 1)
        assert result.interest == pytest.approx(500)
        assert result.total_amount == pytest.approx(10500)

    def test_compound_interest(self):
        result = compound_interest(10000, 10, 2)
        assert result.interest == pytest.approx(2100)

    def test_dispatch_by_mode(self):
        assert interest(InterestMode.SIMPLE, 1000, 10, 2).interest == pytest.approx(200)
        assert interest(InterestMode.COMPOUND, 1000, 10, 2).interest == pytest.approx(210)

    def test_negative_inputs_rejected(self):
        assert simple_interest(-1, 5, 1) is None
        assert compound_interest(1000, -5, 1) is None


class TestAmortization:

    def test_emi_reference_value(self):
        result = emi(100000, 10, 12)
        assert result.emi == pytest.approx(8791.59, abs=0.01)
        assert result.total_paid == pytest.approx(result.emi * 12)
        assert result.total_interest == pytest.approx(result.total_paid - 100000)

    def test_emi_zero_rate_is_principal_over_months(self):
        result = emi(12000, 0, 12)
        assert result.emi == pytest.approx(1000)
        assert result.total_interest == pytest.approx(0)

    @pytest.mark.parametrize("principal,rate,months", [
        (0, 10, 12),
        (1000, -1, 12),
        (1000, 10, 0),
        (1000, 10, 2.5),
    ])
    def test_emi_invalid_inputs(self, principal, rate, months):
        assert emi(principal, rate, months) is None

    def test_loan_payment_reference_value(self):
        result = loan_payment(250000, 5.5, 30)
        assert result.monthly == pytest.approx(1419.47, abs=0.01)
        assert result.total_paid == pytest.approx(result.monthly * 360)
        assert result.total_interest == pytest.approx(261010, abs=2)

    def test_loan_payment_zero_rate_has_no_result(self):
        assert loan_payment(1000, 0, 1) is None

    @pytest.mark.parametrize("amount,rate,years", [
        (0, 5, 1),
        (1000, 5, 0),
        (1000, -1, 1),
        (1000, -1500, 1.05),
        (1000, math.inf, 1),
    ])
    def test_loan_payment_invalid_inputs(self, amount, rate, years):
        assert loan_payment(amount, rate, years) is None

    def test_amortized_payment_zero_rate_is_nan(self):
        assert math.isnan(amortized_payment(1000, 0, 12))


class TestInvestment:

    def test_lumpsum(self):
        result = investment_growth(InvestmentMode.LUMPSUM, 10000, 10, 2)
        assert result.total_value == pytest.approx(12100)
        assert result.invested == 10000
        assert result.gain == pytest.approx(2100)

    def test_sip_zero_rate_is_sum_of_contributions(self):
        result = investment_growth(InvestmentMode.SIP, 0, 0, 1, contribution=1000)
        assert result.total_value == pytest.approx(12000)
        assert result.gain == pytest.approx(0)

    def test_sip_grows_beyond_invested(self):
        result = investment_growth(InvestmentMode.SIP, 10000, 12, 5, contribution=1000)
        assert result.invested == 70000
        assert result.total_value > result.invested

    def test_negative_contribution_rejected(self):
        assert investment_growth(InvestmentMode.SIP, 0, 5, 1, contribution=-1) is None


class TestUnitConversion:

    def test_length(self):
        result = convert_units(UnitFamily.LENGTH, 1, "m", "ft")
        assert result.value == pytest.approx(3.28084, rel=1e-5)

    def test_weight(self):
        result = convert_units(UnitFamily.WEIGHT, 1, "kg", "g")
        assert result.value == pytest.approx(1000)

    def test_temperature(self):
        assert convert_units(UnitFamily.TEMPERATURE, 100, "C", "F").value == pytest.approx(212)
        assert convert_units(UnitFamily.TEMPERATURE, 32, "F", "C").value == pytest.approx(0)
        assert convert_units(UnitFamily.TEMPERATURE, 20, "C", "C").value == pytest.approx(20)

    def test_unknown_unit_has_no_result(self):
        assert convert_units(UnitFamily.LENGTH, 1, "m", "kg") is None
        assert convert_units(UnitFamily.TEMPERATURE, 1, "K", "C") is None

    def test_units_for_family(self):
        assert units_for(UnitFamily.TEMPERATURE) == ("C", "F")
        assert "inch" in units_for(UnitFamily.LENGTH)


class TestCurrencyConversion:

    def test_convert_through_base(self):
        table = RateTable(rates={"USD": 1, "INR": 80, "EUR": 0.8})
        result = convert_currency(8, "EUR", "INR", table)
        assert result.result == pytest.approx(800)
        assert not result.used_fallback_rate

    def test_codes_are_case_insensitive(self):
        table = RateTable(rates={"USD": 1, "INR": 80})
        assert convert_currency(1, "usd", "inr", table).result == pytest.approx(80)

    def test_unknown_code_converts_at_rate_one(self):
        table = RateTable(rates={"USD": 1, "INR": 80})
        result = convert_currency(5, "XYZ", "INR", table)
        assert result.result == pytest.approx(400)
        assert result.from_known is False
        assert result.to_known is True
        assert result.used_fallback_rate

    def test_no_table_has_no_result(self):
        assert convert_currency(1, "USD", "INR", None) is None


class TestBMI:

    def test_normal_weight(self):
        result = bmi(70, 175)
        assert result.bmi == 22.9
        assert result.category == BMICategory.NORMAL

    @pytest.mark.parametrize("value,category", [
        (18.4, BMICategory.UNDERWEIGHT),
        (18.5, BMICategory.NORMAL),
        (24.8, BMICategory.NORMAL),
        (24.9, BMICategory.OVERWEIGHT),
        (29.8, BMICategory.OVERWEIGHT),
        (29.9, BMICategory.OBESE),
    ])
    def test_band_boundaries(self, value, category):
        assert classify_bmi(value) == category

    def test_invalid_measurements(self):
        assert bmi(0, 170) is None
        assert bmi(70, 0) is None


class TestAgeDifference:

    def test_borrows_start_month_length(self):
        result = age_difference(date(1990, 5, 20), date(2024, 5, 19))
        assert (result.years, result.months, result.days) == (33, 11, 30)

    def test_exact_birthday(self):
        result = age_difference(date(2000, 2, 29), date(2024, 2, 29))
        assert (result.years, result.months, result.days) == (24, 0, 0)

    def test_same_day(self):
        result = age_difference(date(2024, 1, 1), date(2024, 1, 1))
        assert (result.years, result.months, result.days) == (0, 0, 0)

    def test_future_start_has_no_result(self):
        assert age_difference(date(2030, 1, 1), date(2024, 1, 1)) is None


class TestExpressions:

    @pytest.mark.parametrize("expression,expected", [
        ("2+3×4", 14),
        ("10÷4", 2.5),
        ("(1+2)*3", 9),
        ("-5+2", -3),
        ("7 % 4", 3),
        ("8 − 10", -2),
    ])
    def test_evaluates(self, expression, expected):
        assert evaluate_expression(expression).value == pytest.approx(expected)

    def test_glyphs_normalized_in_expression_text(self):
        assert evaluate_expression("6÷3").expression == "6/3"

    @pytest.mark.parametrize("expression", [
        "",
        "1/0",
        "2**3",
        "__import__('os')",
        "abc",
        "1+",
        "True+1",
        "1" * 300,
    ])
    def test_rejects(self, expression):
        assert evaluate_expression(expression) is None


class TestCrossChecks:
    """Relations between tools that must always hold."""

    @pytest.mark.parametrize("principal,rate", [(1000, 5), (25000, 12.5), (1, 0)])
    def test_one_year_compound_equals_simple(self, principal, rate):
        simple = simple_interest(principal, rate, 1)
        compound = compound_interest(principal, rate, 1)
        assert compound.interest == pytest.approx(simple.interest)

    @pytest.mark.parametrize("source,target", [("USD", "INR"), ("EUR", "JPY"), ("GBP", "NZD")])
    def test_currency_round_trip(self, source, target):
        table = RateTable.fallback()
        there = convert_currency(123.45, source, target, table)
        back = convert_currency(there.result, target, source, table)
        assert back.result == pytest.approx(123.45)

    def test_underweight_bmi(self):
        result = bmi(50, 175)
        assert result.bmi == 16.3
        assert result.category == BMICategory.UNDERWEIGHT
