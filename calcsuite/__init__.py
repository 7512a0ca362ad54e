"""
Calculation Suite - Source Package

The calculation engine and session-state ledger behind a panel of
everyday finance and utility tools (loans, interest, conversions,
budgeting, biometric tracking).

DESIGN PRINCIPLES:
1. Every formula is a pure function
2. Invalid input produces no result, never a crash
3. External services degrade to a defined fallback
4. Every produced result is recorded through one entry point
5. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Calculation Suite Team"
