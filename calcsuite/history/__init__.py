"""Calculation history package."""

from calcsuite.history.log import HistoryLog, HistoryRecorder

__all__ = [
    "HistoryLog",
    "HistoryRecorder",
]
