"""
Streamlit Frontend for the Calculation Suite

A thin shell: every page collects inputs, builds one request model and
hands it to CalculationSuite. No formula lives in this file.

DESIGN PRINCIPLES:
1. One tool on screen at a time, chosen from the sidebar
2. Results appear only when the inputs produce one
3. History is shared by every tool and always visible
"""

import asyncio
from datetime import date

import streamlit as st

from calcsuite.calculations import UNIT_PRESETS, units_for
from calcsuite.config import validate_all_settings
from calcsuite.models import (
    AgeRequest,
    BMIRequest,
    CurrencyRequest,
    DiscountRequest,
    EMIRequest,
    ExpressionRequest,
    InterestMode,
    InterestRequest,
    InvestmentMode,
    InvestmentRequest,
    LoanPaymentRequest,
    PercentageMode,
    PercentageRequest,
    ProblemImage,
    SolverRequest,
    SUPPORTED_CURRENCIES,
    Tool,
    TransactionKind,
    UnitConversionRequest,
    UnitFamily,
    categories_for,
)
from calcsuite.orchestrator import CalculationSuite, create_app_components


st.set_page_config(
    page_title="Calculation Suite",
    page_icon="🧮",
    layout="wide",
    initial_sidebar_state="expanded",
)


def run_async(coro):
    """Helper to run async functions in Streamlit."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


@st.cache_resource
def get_components():
    """Get or create application components (cached)."""
    try:
        return create_app_components(use_storage=True)
    except Exception as e:
        st.error(f"Failed to initialize storage: {e}")
        return create_app_components(use_storage=False)


def main():
    """Main application entry point."""
    suite, history = get_components()

    st.sidebar.title("🧮 Calculation Suite")
    tool = st.sidebar.radio(
        "Tool:",
        list(Tool),
        format_func=lambda t: t.value,
    )

    st.sidebar.markdown("---")
    render_history(history)

    pages = {
        Tool.STANDARD: render_standard,
        Tool.AI_MATH: render_ai_math,
        Tool.PERCENTAGE: render_percentage,
        Tool.CURRENCY: render_currency,
        Tool.UNIT_CONVERT: render_unit_convert,
        Tool.EMI: render_emi,
        Tool.LOAN_PAYMENT: render_loan_payment,
        Tool.DISCOUNT: render_discount,
        Tool.INTEREST: render_interest,
        Tool.INVESTMENT: render_investment,
        Tool.DASHBOARD: render_dashboard,
        Tool.BUDGET: render_budget,
        Tool.BMI: render_bmi,
        Tool.AGE: render_age,
        Tool.HEALTH: render_health,
    }
    st.title(tool.value)
    pages[tool](suite)


def render_history(history):
    st.sidebar.subheader("History")
    if not len(history):
        st.sidebar.caption("No calculations yet.")
        return
    for entry in history:
        st.sidebar.markdown(f"**{entry.tool}**  \n{entry.expression}  \n= `{entry.result}`")
    if st.sidebar.button("Clear history"):
        history.clear()
        st.rerun()


def show_outcome(outcome, empty_message="Enter valid values to see a result."):
    if outcome is None:
        st.info(empty_message)
    else:
        st.metric(outcome.expression, outcome.result_text)


# =============================================================================
# CALCULATOR PAGES
# =============================================================================

def render_standard(suite: CalculationSuite):
    expression = st.text_input("Expression", placeholder="12 × (3 + 4) ÷ 2")
    if st.button("=", type="primary"):
        show_outcome(suite.calculate(ExpressionRequest(expression=expression)), "Error")


def render_ai_math(suite: CalculationSuite):
    problem = st.text_area("Problem")
    unit_hint = st.text_input("Answer unit (optional)")
    upload = st.file_uploader("Or attach a photo", type=["jpg", "jpeg", "png", "webp"])

    if st.button("Solve", type="primary"):
        image = None
        if upload is not None:
            image = ProblemImage(data=upload.read(), mime_type=upload.type)
        request = SolverRequest(problem=problem, unit_hint=unit_hint or None, image=image)
        with st.spinner("Solving..."):
            response = run_async(suite.solve(request))
        if response is None:
            st.info("Type a problem or attach an image.")
        elif response.solved:
            st.markdown(response.text)
        else:
            st.error(response.text)


def render_percentage(suite: CalculationSuite):
    mode = st.radio(
        "Mode",
        list(PercentageMode),
        format_func=lambda m: "X% of Y" if m == PercentageMode.FIND_VALUE else "X is what % of Y",
        horizontal=True,
    )
    col1, col2 = st.columns(2)
    value = col1.number_input("X", value=15.0)
    base = col2.number_input("Y", value=200.0)
    if st.button("Calculate", type="primary"):
        show_outcome(suite.calculate(PercentageRequest(mode=mode, value=value, base=base)))


def render_currency(suite: CalculationSuite):
    if suite.rates is None or suite.rates.table is None:
        with st.spinner("Loading rates..."):
            run_async(suite.refresh_rates())

    st.caption(f"Rates updated: {suite.rates.last_updated_label}")
    amount = st.number_input("Amount", value=1.0)
    col1, col2 = st.columns(2)
    from_code = col1.selectbox("From", SUPPORTED_CURRENCIES, index=SUPPORTED_CURRENCIES.index("USD"))
    to_code = col2.selectbox("To", SUPPORTED_CURRENCIES, index=SUPPORTED_CURRENCIES.index("INR"))

    if st.button("Refresh rates"):
        run_async(suite.refresh_rates())
        st.rerun()
    if st.button("Convert", type="primary"):
        show_outcome(suite.calculate(CurrencyRequest(amount=amount, from_code=from_code, to_code=to_code)))


def render_unit_convert(suite: CalculationSuite):
    family = st.radio("Family", list(UnitFamily), format_func=lambda f: f.value.title(), horizontal=True)
    units = units_for(family)
    presets = [preset for preset in UNIT_PRESETS if preset[0] == family]
    default_from, default_to = (presets[0][1], presets[0][2]) if presets else (units[0], units[-1])

    value = st.number_input("Value", value=1.0)
    col1, col2 = st.columns(2)
    from_unit = col1.selectbox("From", units, index=units.index(default_from))
    to_unit = col2.selectbox("To", units, index=units.index(default_to))
    if st.button("Convert", type="primary"):
        show_outcome(suite.calculate(
            UnitConversionRequest(family=family, value=value, from_unit=from_unit, to_unit=to_unit)
        ))


def render_emi(suite: CalculationSuite):
    principal = st.number_input("Loan amount (₹)", value=100000.0)
    rate = st.number_input("Annual rate (%)", value=10.0)
    months = st.number_input("Tenure (months)", value=12, step=1)
    outcome = suite.calculate(EMIRequest(principal=principal, annual_rate=rate, months=int(months)))
    show_outcome(outcome)
    if outcome is not None:
        col1, col2 = st.columns(2)
        col1.metric("Total paid", f"₹{outcome.result.total_paid:,.2f}")
        col2.metric("Total interest", f"₹{outcome.result.total_interest:,.2f}")


def render_loan_payment(suite: CalculationSuite):
    amount = st.number_input("Loan amount ($)", value=250000.0)
    rate = st.number_input("Annual rate (%)", value=5.5)
    years = st.number_input("Term (years)", value=30.0)
    outcome = suite.calculate(LoanPaymentRequest(amount=amount, annual_rate=rate, years=years))
    show_outcome(outcome)
    if outcome is not None:
        col1, col2 = st.columns(2)
        col1.metric("Total paid", f"${outcome.result.total_paid:,.2f}")
        col2.metric("Total interest", f"${outcome.result.total_interest:,.2f}")


def render_discount(suite: CalculationSuite):
    price = st.number_input("Price (₹)", value=1000.0)
    rate = st.number_input("Discount (%)", value=20.0)
    if st.button("Apply", type="primary"):
        outcome = suite.calculate(DiscountRequest(price=price, rate=rate))
        show_outcome(outcome)
        if outcome is not None:
            st.caption(f"You save ₹{outcome.result.saved_amount:.2f}")


def render_interest(suite: CalculationSuite):
    mode = st.radio("Type", list(InterestMode), format_func=lambda m: m.value.title(), horizontal=True)
    principal = st.number_input("Principal (₹)", value=10000.0)
    rate = st.number_input("Rate (% per year)", value=5.0)
    years = st.number_input("Time (years)", value=1.0)
    if st.button("Calculate", type="primary"):
        show_outcome(suite.calculate(
            InterestRequest(mode=mode, principal=principal, rate=rate, years=years)
        ))


def render_investment(suite: CalculationSuite):
    mode = st.radio("Plan", list(InvestmentMode), format_func=lambda m: m.value.upper(), horizontal=True)
    initial = st.number_input("Initial investment (₹)", value=10000.0)
    contribution = 0.0
    if mode == InvestmentMode.SIP:
        contribution = st.number_input("Monthly contribution (₹)", value=1000.0)
    rate = st.number_input("Expected return (% per year)", value=12.0)
    years = st.number_input("Years", value=5, step=1)
    if st.button("Calculate", type="primary"):
        outcome = suite.calculate(InvestmentRequest(
            mode=mode,
            initial=initial,
            contribution=contribution,
            annual_rate=rate,
            years=int(years),
        ))
        show_outcome(outcome)
        if outcome is not None:
            st.caption(f"Invested ₹{outcome.result.invested:,.0f}, gain ₹{outcome.result.gain:,.0f}")


# =============================================================================
# LEDGER PAGES
# =============================================================================

def render_dashboard(suite: CalculationSuite):
    totals = suite.ledger.totals()
    col1, col2, col3 = st.columns(3)
    col1.metric("Income", f"₹{totals.income:,.2f}")
    col2.metric("Expense", f"₹{totals.expense:,.2f}")
    col3.metric("Balance", f"₹{totals.balance:,.2f}")

    breakdown = suite.ledger.by_category(TransactionKind.EXPENSE)
    if breakdown:
        st.subheader("Expenses by category")
        st.bar_chart({item.category.value: float(item.amount) for item in breakdown})

    st.subheader("Recent transactions")
    recent = suite.ledger.recent()
    if not recent:
        st.caption("No transactions yet.")
    for transaction in recent:
        st.write(f"{transaction.description} · {transaction.category.value} · {transaction.signed_amount:+,.2f}")


def render_budget(suite: CalculationSuite):
    with st.form("add_transaction", clear_on_submit=True):
        kind = st.radio("Kind", list(TransactionKind), format_func=lambda k: k.value.title(), horizontal=True)
        category = st.selectbox("Category", list(categories_for(kind)), format_func=lambda c: c.value)
        description = st.text_input("Description")
        amount = st.text_input("Amount")
        if st.form_submit_button("Add", type="primary"):
            if suite.add_transaction(description, amount, kind, category) is None:
                st.warning("Enter a description and an amount greater than zero.")

    for transaction in suite.ledger.transactions:
        col1, col2 = st.columns([5, 1])
        col1.write(f"{transaction.description} · {transaction.category.value} · {transaction.signed_amount:+,.2f}")
        if col2.button("Delete", key=f"delete_{transaction.id}"):
            suite.remove_transaction(transaction.id)
            st.rerun()


# =============================================================================
# HEALTH PAGES
# =============================================================================

def render_bmi(suite: CalculationSuite):
    weight = st.number_input("Weight (kg)", value=70.0)
    height = st.number_input("Height (cm)", value=175.0)
    if st.button("Calculate", type="primary"):
        outcome = suite.calculate(BMIRequest(weight_kg=weight, height_cm=height))
        show_outcome(outcome)
        if outcome is not None:
            st.caption(outcome.result.category.value)


def render_age(suite: CalculationSuite):
    birth_date = st.date_input("Date of birth", value=date(1990, 1, 1), max_value=date.today())
    if st.button("Calculate", type="primary"):
        show_outcome(suite.calculate(AgeRequest(birth_date=birth_date)))


def render_health(suite: CalculationSuite):
    with st.form("log_health"):
        steps = st.text_input("Steps")
        sleep = st.text_input("Sleep (hours)")
        water = st.text_input("Water (liters)")
        if st.form_submit_button("Log today", type="primary"):
            if suite.log_biometrics(steps=steps, sleep=sleep, water=water) is None:
                st.info("Nothing to log.")

    entries = suite.biometrics.entries if suite.biometrics is not None else ()
    if entries:
        st.line_chart({
            "steps": {entry.date.isoformat(): entry.steps for entry in entries},
        })
        st.line_chart({
            "sleep (h)": {entry.date.isoformat(): entry.sleep_hours for entry in entries},
            "water (l)": {entry.date.isoformat(): entry.water_liters for entry in entries},
        })


def render_settings_status():
    status = validate_all_settings()
    for name in ("rates", "gemini", "storage", "app"):
        if status.get(name):
            st.sidebar.caption(f"✅ {name}")
        else:
            st.sidebar.caption(f"❌ {name}: {status.get(f'{name}_error', 'invalid')}")


if __name__ == "__main__":
    main()
    render_settings_status()
