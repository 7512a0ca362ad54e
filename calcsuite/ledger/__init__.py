"""Transaction ledger package."""

from calcsuite.ledger.ledger import TransactionLedger

__all__ = ["TransactionLedger"]
