"""
Calculation History

DESIGN DECISION: There is exactly one way to report a result:
HistoryRecorder.record(tool, expression, result). Tools receive a
recorder instead of reaching for shared global state, which keeps
them testable with any sink.

The log:
- Holds the newest entry first
- Never reorders entries already recorded
- Drops the oldest entries beyond its limit (never archived)
"""

from enum import Enum
from typing import Optional, Protocol, runtime_checkable

from calcsuite.audit import get_logger
from calcsuite.config import get_settings
from calcsuite.models.history import HistoryEntry


logger = get_logger(__name__)


@runtime_checkable
class HistoryRecorder(Protocol):
    """Event sink every tool reports its results to."""

    def record(self, tool: str, expression: str, result: str) -> HistoryEntry:
        ...


class HistoryLog:
    """
    Bounded, newest-first record of calculation results.

    Shared by every tool for the lifetime of the session.
    """

    def __init__(self, limit: Optional[int] = None):
        """
        Args:
            limit: Maximum number of entries kept.
                   Defaults to the configured history limit (50).
        """
        if limit is None:
            limit = get_settings().app.history_limit
        if limit < 1:
            raise ValueError("History limit must be at least 1")
        self._limit = limit
        self._entries: list[HistoryEntry] = []

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        """All entries, newest first."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self.entries)

    def record(self, tool: str, expression: str, result: str) -> HistoryEntry:
        """Prepend a new entry and drop whatever falls beyond the limit."""
        if isinstance(tool, Enum):
            tool = tool.value
        entry = HistoryEntry(tool=tool, expression=expression, result=result)
        self._entries.insert(0, entry)

        dropped = len(self._entries) - self._limit
        if dropped > 0:
            del self._entries[self._limit:]

        logger.info(
            "history_recorded",
            tool=entry.tool,
            expression=entry.expression,
            result=entry.result,
            size=len(self._entries),
            dropped=max(dropped, 0),
        )
        return entry

    def clear(self) -> None:
        """Empty the log."""
        count = len(self._entries)
        self._entries.clear()
        logger.info("history_cleared", removed=count)
