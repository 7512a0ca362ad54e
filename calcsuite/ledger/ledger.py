"""
Transaction Ledger

DESIGN DECISION: Aggregates are computed, never maintained.
totals() and by_category() walk the whole collection on every call,
so there are no running totals that an add/remove interleaving could
leave out of sync.

The ledger lives for the session only. Nothing here is persisted.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

from pydantic import ValidationError

from calcsuite.audit import get_logger
from calcsuite.calculations.numbers import parse_amount
from calcsuite.config import get_settings
from calcsuite.models.ledger import (
    Category,
    CategoryTotal,
    LedgerTotals,
    Recurrence,
    Transaction,
    TransactionKind,
)


logger = get_logger(__name__)


class TransactionLedger:
    """
    Ordered collection of income and expense entries, newest first.
    """

    def __init__(self):
        self._transactions: list[Transaction] = []
        # Ids are never reused, even after removal or clear()
        self._next_id = 1

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """All transactions, most recent first."""
        return tuple(self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    def add(
        self,
        description: str,
        amount: Union[str, float, Decimal],
        kind: Union[TransactionKind, str],
        category: Union[Category, str],
        recurrence: Union[Recurrence, str] = Recurrence.NONE,
        occurred_at: Optional[datetime] = None,
    ) -> Optional[Transaction]:
        """
        Add a transaction.

        Invalid input (amount not > 0, blank description, category not
        valid for the kind) is a silent no-op: returns None and leaves
        the ledger untouched.
        """
        parsed = parse_amount(amount)
        if parsed is None or parsed <= 0:
            return None
        if not isinstance(description, str) or not description.strip():
            return None

        data = {
            "description": description,
            "amount": parsed,
            "kind": kind,
            "category": category,
            "recurrence": recurrence,
        }
        if occurred_at is not None:
            data["occurred_at"] = occurred_at

        try:
            transaction = Transaction(id=self._next_id, **data)
        except (ValidationError, ValueError) as e:
            logger.debug("transaction_rejected", reason=str(e))
            return None

        self._next_id += 1
        self._transactions.insert(0, transaction)
        logger.info(
            "transaction_added",
            transaction_id=transaction.id,
            kind=transaction.kind.value,
            category=transaction.category.value,
            amount=str(transaction.amount),
        )
        return transaction

    def remove(self, transaction_id: int) -> bool:
        """Delete by id. Returns False (and changes nothing) if absent."""
        for index, transaction in enumerate(self._transactions):
            if transaction.id == transaction_id:
                del self._transactions[index]
                logger.info("transaction_removed", transaction_id=transaction_id)
                return True
        return False

    def clear(self) -> None:
        count = len(self._transactions)
        self._transactions.clear()
        logger.info("ledger_cleared", removed=count)

    def get(self, transaction_id: int) -> Optional[Transaction]:
        for transaction in self._transactions:
            if transaction.id == transaction_id:
                return transaction
        return None

    # -------------------------------------------------------------------------
    # Aggregates
    # -------------------------------------------------------------------------

    def totals(self) -> LedgerTotals:
        """Income, expense and balance over the full collection."""
        income = Decimal("0")
        expense = Decimal("0")
        for transaction in self._transactions:
            if transaction.kind == TransactionKind.INCOME:
                income += transaction.amount
            else:
                expense += transaction.amount
        return LedgerTotals(income=income, expense=expense)

    def by_category(self, kind: Union[TransactionKind, str]) -> list[CategoryTotal]:
        """
        Amounts per category for one kind.

        Categories appear in the order they are first seen in the
        collection (newest first).
        """
        kind = TransactionKind(kind)
        grouped: dict[Category, list[Decimal]] = {}
        for transaction in self._transactions:
            if transaction.kind != kind:
                continue
            grouped.setdefault(transaction.category, []).append(transaction.amount)

        return [
            CategoryTotal(category=category, amount=sum(amounts, Decimal("0")), count=len(amounts))
            for category, amounts in grouped.items()
        ]

    def recent(self, limit: Optional[int] = None) -> list[Transaction]:
        """
        The most recently added transactions (highest ids first).

        limit defaults to the configured dashboard size (5).
        """
        if limit is None:
            limit = get_settings().app.recent_transactions
        return sorted(self._transactions, key=lambda t: t.id, reverse=True)[:limit]
