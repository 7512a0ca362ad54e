"""
History Models

One entry per result a tool produced. Entries are immutable once
recorded; the log that owns them decides ordering and retention.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class HistoryEntry(BaseModel):
    """A single "tool produced result from expression" event."""
    model_config = ConfigDict(frozen=True)

    tool: str = Field(
        ...,
        min_length=1,
        description="Display name of the tool that produced the result"
    )
    expression: str = Field(
        ...,
        description="Human-readable inputs, e.g. '15% of 200'"
    )
    result: str = Field(
        ...,
        description="Formatted result shown to the user"
    )
    recorded_at: datetime = Field(
        default_factory=_utcnow
    )

    def as_text(self) -> str:
        """Copyable one-line form of the entry."""
        return f"{self.expression} = {self.result}"
