"""
Finance Formulas

Percentage, discount, interest, amortization and investment growth.

Every function is pure. Inputs that cannot produce a meaningful
result (non-finite numbers, zero denominators, out-of-domain values)
return None; callers treat that as "nothing to show, nothing to record".
"""

import math
from typing import Optional

from calcsuite.calculations.numbers import growth_factor, is_finite
from calcsuite.models.calculation import (
    DiscountResult,
    EMIResult,
    InterestMode,
    InterestResult,
    InvestmentMode,
    InvestmentResult,
    LoanPaymentResult,
    PercentageMode,
    PercentageResult,
)


# =============================================================================
# PERCENTAGE & DISCOUNT
# =============================================================================

def percentage(mode: PercentageMode, value: float, base: float) -> Optional[PercentageResult]:
    """
    FIND_VALUE:   value% of base          -> value / 100 * base
    FIND_PERCENT: value is what % of base -> value / base * 100
    """
    if not is_finite(value, base) or base == 0:
        return None

    if mode == PercentageMode.FIND_VALUE:
        result = (value / 100) * base
    elif mode == PercentageMode.FIND_PERCENT:
        result = (value / base) * 100
    else:
        raise ValueError(f"Unknown percentage mode: {mode}")

    return PercentageResult(mode=mode, value=result)


def discount(price: float, rate: float) -> Optional[DiscountResult]:
    """Apply a percentage discount; rate must be in (0, 100]."""
    if not is_finite(price, rate) or price <= 0 or rate <= 0 or rate > 100:
        return None

    saved = price * rate / 100
    return DiscountResult(saved_amount=saved, final_price=price - saved)


# =============================================================================
# INTEREST
# =============================================================================

def simple_interest(principal: float, rate: float, years: float) -> Optional[InterestResult]:
    """interest = principal * rate * years / 100"""
    if not _valid_interest_inputs(principal, rate, years):
        return None
    return InterestResult(
        mode=InterestMode.SIMPLE,
        interest=principal * rate * years / 100,
        principal=principal,
    )


def compound_interest(principal: float, rate: float, years: float) -> Optional[InterestResult]:
    """interest = principal * (1 + rate/100) ** years - principal (annual compounding)"""
    if not _valid_interest_inputs(principal, rate, years):
        return None

    interest = principal * growth_factor(rate / 100, years) - principal
    if not math.isfinite(interest):
        return None
    return InterestResult(mode=InterestMode.COMPOUND, interest=interest, principal=principal)


def interest(mode: InterestMode, principal: float, rate: float, years: float) -> Optional[InterestResult]:
    if mode == InterestMode.SIMPLE:
        return simple_interest(principal, rate, years)
    if mode == InterestMode.COMPOUND:
        return compound_interest(principal, rate, years)
    raise ValueError(f"Unknown interest mode: {mode}")


def _valid_interest_inputs(principal: float, rate: float, years: float) -> bool:
    return is_finite(principal, rate, years) and principal >= 0 and rate >= 0 and years >= 0


# =============================================================================
# AMORTIZATION
# =============================================================================

def amortized_payment(principal: float, monthly_rate: float, months: float) -> float:
    """
    Fixed payment that fully amortizes a loan.

    M = P * r * (1 + r)^n / ((1 + r)^n - 1)

    Returns the raw float: NaN when r == 0 (0/0) and possibly
    infinite or NaN on overflow. Callers decide how to treat that.
    """
    factor = growth_factor(monthly_rate, months)
    try:
        return principal * monthly_rate * factor / (factor - 1)
    except ZeroDivisionError:
        return math.nan


def emi(principal: float, annual_rate: float, months: int) -> Optional[EMIResult]:
    """
    Equated monthly installment.

    At a zero rate the installment is principal / months.
    Any other non-finite result is reported as 0.
    """
    if not is_finite(principal, annual_rate, months) or principal <= 0 or annual_rate < 0:
        return None
    if int(months) != months or months < 1:
        return None
    months = int(months)

    monthly_rate = annual_rate / 12 / 100
    if monthly_rate == 0:
        value = principal / months
    else:
        value = amortized_payment(principal, monthly_rate, months)
        if not math.isfinite(value):
            value = 0.0

    return EMIResult(emi=value, months=months, principal=principal)


def loan_payment(amount: float, annual_rate: float, years: float) -> Optional[LoanPaymentResult]:
    """
    Monthly payment, total paid and total interest for a loan term in years.

    A monthly payment that is not finite (including the 0/0 of a zero
    rate) produces no result.
    """
    if not is_finite(amount, annual_rate, years) or amount <= 0 or years <= 0 or annual_rate < 0:
        return None

    months = years * 12
    monthly = amortized_payment(amount, annual_rate / 100 / 12, months)
    if not math.isfinite(monthly):
        return None

    total_paid = monthly * months
    return LoanPaymentResult(
        monthly=monthly,
        total_paid=total_paid,
        total_interest=total_paid - amount,
    )


# =============================================================================
# INVESTMENT GROWTH
# =============================================================================

def investment_growth(
    mode: InvestmentMode,
    initial: float,
    annual_rate: float,
    years: int,
    contribution: float = 0.0,
) -> Optional[InvestmentResult]:
    """
    SIP:     initial * (1+r)^n  +  contribution * ((1+r)^n - 1) / r * (1+r)
             with r the monthly rate and n the number of months.
    LUMPSUM: initial * (1 + annual_rate)^years
    """
    if not is_finite(initial, annual_rate, years, contribution):
        return None
    if initial < 0 or contribution < 0 or annual_rate < 0 or years < 0:
        return None

    if mode == InvestmentMode.SIP:
        r = annual_rate / 100 / 12
        n = years * 12
        factor = growth_factor(r, n)
        fv_initial = initial * factor
        if r == 0:
            fv_series = contribution * n
        else:
            fv_series = contribution * ((factor - 1) / r) * (1 + r)
        invested = initial + contribution * n
    elif mode == InvestmentMode.LUMPSUM:
        fv_initial = initial * growth_factor(annual_rate / 100, years)
        fv_series = 0.0
        invested = initial
    else:
        raise ValueError(f"Unknown investment mode: {mode}")

    total = fv_initial + fv_series
    if not math.isfinite(total):
        return None
    return InvestmentResult(mode=mode, total_value=total, invested=invested)
