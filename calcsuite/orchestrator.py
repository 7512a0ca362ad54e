"""
Main Orchestrator for the Calculation Suite

This module ties the components together and defines the tool
invocation boundary:

    request (one model per tool) -> calculation -> outcome -> history

DESIGN DECISION: The orchestrator enforces the boundaries:
- A tool only records to history when it produced a result
- Each result is recorded exactly once, through the injected recorder
- Ledger and biometric changes go through their owning components

Formatting of the recorded expression/result texts lives here too,
so every calculation function can stay purely numeric.
"""

from datetime import date
from decimal import Decimal
from typing import Callable, Optional, Union

from pydantic import ValidationError

from calcsuite.audit import get_logger
from calcsuite.biometrics import BiometricLog
from calcsuite.calculations import (
    age_difference,
    bmi,
    convert_currency,
    convert_units,
    discount,
    emi,
    evaluate_expression,
    interest,
    investment_growth,
    loan_payment,
    percentage,
)
from calcsuite.history import HistoryLog, HistoryRecorder
from calcsuite.ledger import TransactionLedger
from calcsuite.models.biometrics import BiometricEntry
from calcsuite.models.calculation import (
    InterestMode,
    InvestmentMode,
    PercentageMode,
)
from calcsuite.models.ledger import Recurrence, Transaction
from calcsuite.models.solver import SolverRequest, SolverResponse
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
from calcsuite.services.rates import RateTableManager
from calcsuite.services.solver import CONNECTION_ERROR_MESSAGE, GeminiMathSolver
from calcsuite.services.storage import (
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    KeyValueStoreInterface,
)


logger = get_logger(__name__)


def format_number(value: Union[int, float, Decimal]) -> str:
    """Plain number text: integral values without a trailing '.0'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class CalculationSuite:
    """
    Runs tools on behalf of the host shell.

    Components are injected so any of them can be replaced in tests.
    """

    def __init__(
        self,
        recorder: HistoryRecorder,
        ledger: Optional[TransactionLedger] = None,
        rates: Optional[RateTableManager] = None,
        biometrics: Optional[BiometricLog] = None,
        solver: Optional[GeminiMathSolver] = None,
        today: Callable[[], date] = date.today,
    ):
        self._recorder = recorder
        self._ledger = ledger or TransactionLedger()
        self._rates = rates
        self._biometrics = biometrics
        self._solver = solver
        self._today = today

        self._handlers = {
            ExpressionRequest: self._run_expression,
            PercentageRequest: self._run_percentage,
            CurrencyRequest: self._run_currency,
            UnitConversionRequest: self._run_unit_conversion,
            EMIRequest: self._run_emi,
            LoanPaymentRequest: self._run_loan_payment,
            DiscountRequest: self._run_discount,
            InterestRequest: self._run_interest,
            InvestmentRequest: self._run_investment,
            BMIRequest: self._run_bmi,
            AgeRequest: self._run_age,
        }

    @property
    def ledger(self) -> TransactionLedger:
        return self._ledger

    @property
    def rates(self) -> Optional[RateTableManager]:
        return self._rates

    @property
    def biometrics(self) -> Optional[BiometricLog]:
        return self._biometrics

    # -------------------------------------------------------------------------
    # Tool invocation boundary
    # -------------------------------------------------------------------------

    def calculate(self, request: ToolRequest) -> Optional[ToolOutcome]:
        """
        Run one tool.

        Returns None (and records nothing) when the inputs produce no result.
        """
        handler = self._handlers.get(type(request))
        if handler is None:
            raise TypeError(f"No tool handles {type(request).__name__}")

        outcome = handler(request)
        if outcome is None:
            logger.debug("tool_no_result", tool=request.tool.value)
            return None

        self._recorder.record(outcome.tool.value, outcome.expression, outcome.result_text)
        return outcome

    def _run_expression(self, request: ExpressionRequest) -> Optional[ToolOutcome]:
        result = evaluate_expression(request.expression)
        if result is None:
            return None
        value_text = format_number(result.value)
        # Pressing "=" on a bare number is not a calculation
        if result.expression == value_text:
            return None
        return ToolOutcome(
            tool=Tool.STANDARD,
            expression=result.expression,
            result_text=value_text,
            result=result,
        )

    def _run_percentage(self, request: PercentageRequest) -> Optional[ToolOutcome]:
        result = percentage(request.mode, request.value, request.base)
        if result is None:
            return None
        value, base = format_number(request.value), format_number(request.base)
        if request.mode == PercentageMode.FIND_VALUE:
            expression = f"{value}% of {base}"
            text = f"{result.value:.2f}"
        else:
            expression = f"{value} is what % of {base}"
            text = f"{result.value:.2f}%"
        return ToolOutcome(tool=Tool.PERCENTAGE, expression=expression, result_text=text, result=result)

    def _run_currency(self, request: CurrencyRequest) -> Optional[ToolOutcome]:
        table = self._rates.table if self._rates is not None else None
        result = convert_currency(request.amount, request.from_code, request.to_code, table)
        if result is None:
            return None
        if result.used_fallback_rate:
            logger.warning(
                "currency_code_missing_from_table",
                from_code=result.from_code,
                to_code=result.to_code,
                from_known=result.from_known,
                to_known=result.to_known,
            )
        return ToolOutcome(
            tool=Tool.CURRENCY,
            expression=f"{format_number(request.amount)} {result.from_code} to {result.to_code}",
            result_text=f"{result.result:.2f} {result.to_code}",
            result=result,
        )

    def _run_unit_conversion(self, request: UnitConversionRequest) -> Optional[ToolOutcome]:
        result = convert_units(request.family, request.value, request.from_unit, request.to_unit)
        if result is None:
            return None
        return ToolOutcome(
            tool=Tool.UNIT_CONVERT,
            expression=f"{format_number(request.value)} {request.from_unit} to {request.to_unit}",
            result_text=f"{result.value:.4f}",
            result=result,
        )

    def _run_emi(self, request: EMIRequest) -> Optional[ToolOutcome]:
        result = emi(request.principal, request.annual_rate, request.months)
        if result is None:
            return None
        return ToolOutcome(
            tool=Tool.EMI,
            expression=(
                f"₹{format_number(request.principal)} @ "
                f"{format_number(request.annual_rate)}% for {request.months}m"
            ),
            result_text=f"₹{result.emi:.2f}",
            result=result,
        )

    def _run_loan_payment(self, request: LoanPaymentRequest) -> Optional[ToolOutcome]:
        result = loan_payment(request.amount, request.annual_rate, request.years)
        if result is None:
            return None
        return ToolOutcome(
            tool=Tool.LOAN_PAYMENT,
            expression=(
                f"${format_number(request.amount)} @ "
                f"{format_number(request.annual_rate)}% / {format_number(request.years)}yr"
            ),
            result_text=f"${result.monthly:.2f}/mo",
            result=result,
        )

    def _run_discount(self, request: DiscountRequest) -> Optional[ToolOutcome]:
        result = discount(request.price, request.rate)
        if result is None:
            return None
        return ToolOutcome(
            tool=Tool.DISCOUNT,
            expression=f"{format_number(request.rate)}% off on ₹{format_number(request.price)}",
            result_text=f"₹{result.final_price:.2f}",
            result=result,
        )

    def _run_interest(self, request: InterestRequest) -> Optional[ToolOutcome]:
        result = interest(request.mode, request.principal, request.rate, request.years)
        if result is None:
            return None
        label = "Simple" if request.mode == InterestMode.SIMPLE else "Compound"
        return ToolOutcome(
            tool=Tool.INTEREST,
            expression=f"{label} Interest on ₹{format_number(request.principal)}",
            result_text=f"₹{result.interest:.2f}",
            result=result,
        )

    def _run_investment(self, request: InvestmentRequest) -> Optional[ToolOutcome]:
        result = investment_growth(
            request.mode,
            request.initial,
            request.annual_rate,
            request.years,
            contribution=request.contribution if request.mode == InvestmentMode.SIP else 0.0,
        )
        if result is None:
            return None
        label = "SIP" if request.mode == InvestmentMode.SIP else "Lumpsum"
        return ToolOutcome(
            tool=Tool.INVESTMENT,
            expression=f"{label} {request.years}y @ {format_number(request.annual_rate)}%",
            result_text=f"₹{result.total_value:.0f}",
            result=result,
        )

    def _run_bmi(self, request: BMIRequest) -> Optional[ToolOutcome]:
        result = bmi(request.weight_kg, request.height_cm)
        if result is None:
            return None
        return ToolOutcome(
            tool=Tool.BMI,
            expression=f"{format_number(request.weight_kg)}kg, {format_number(request.height_cm)}cm",
            result_text=f"BMI: {result.bmi:.1f}",
            result=result,
        )

    def _run_age(self, request: AgeRequest) -> Optional[ToolOutcome]:
        result = age_difference(request.birth_date, request.on_date or self._today())
        if result is None:
            return None
        return ToolOutcome(
            tool=Tool.AGE,
            expression=f"Born: {request.birth_date.isoformat()}",
            result_text=f"{result.years}y {result.months}m {result.days}d",
            result=result,
        )

    # -------------------------------------------------------------------------
    # Asynchronous tools
    # -------------------------------------------------------------------------

    async def refresh_rates(self) -> None:
        """Reload the rate table (falls back to static rates on failure)."""
        if self._rates is None:
            self._rates = RateTableManager()
        await self._rates.load()

    async def solve(self, request: SolverRequest) -> Optional[SolverResponse]:
        """
        Ask the AI solver. A solved problem is recorded to history;
        a failure only returns its fixed message.
        """
        if request.is_empty:
            return None
        if self._solver is None:
            try:
                self._solver = GeminiMathSolver()
            except ValidationError as e:
                # Missing or invalid GEMINI_* configuration
                logger.error("solver_not_configured", error=str(e))
                return SolverResponse(text=CONNECTION_ERROR_MESSAGE, solved=False)

        response = await self._solver.solve(request)
        if response is not None and response.solved:
            expression = request.problem or ("Image Analysis" if request.image else "Question")
            self._recorder.record(Tool.AI_MATH.value, expression, "Solved")
        return response

    # -------------------------------------------------------------------------
    # Ledger and biometrics
    # -------------------------------------------------------------------------

    def add_transaction(
        self,
        description: str,
        amount,
        kind,
        category,
        recurrence=Recurrence.NONE,
    ) -> Optional[Transaction]:
        return self._ledger.add(description, amount, kind, category, recurrence)

    def remove_transaction(self, transaction_id: int) -> bool:
        return self._ledger.remove(transaction_id)

    def log_biometrics(self, steps=None, sleep=None, water=None) -> Optional[BiometricEntry]:
        if self._biometrics is None:
            raise RuntimeError("No biometric log configured")
        return self._biometrics.log_today(steps=steps, sleep=sleep, water=water)


def create_app_components(
    use_storage: bool = True,
    store: Optional[KeyValueStoreInterface] = None,
) -> tuple[CalculationSuite, HistoryLog]:
    """
    Factory function to create the application components.

    Args:
        use_storage: Persist biometric data to the configured JSON file.
                     When False an in-memory store is used.
        store: Explicit store (overrides use_storage).

    Returns:
        (suite, history)
    """
    if store is None:
        store = JsonFileKeyValueStore() if use_storage else InMemoryKeyValueStore()

    history = HistoryLog()
    suite = CalculationSuite(
        recorder=history,
        ledger=TransactionLedger(),
        rates=RateTableManager(),
        biometrics=BiometricLog(store),
    )
    return suite, history
