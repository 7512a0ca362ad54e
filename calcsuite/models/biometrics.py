"""
Biometric Models

Daily health metrics. The serialized form uses the short keys
(date/steps/sleep/water) the persistent store has always held.
"""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class BiometricEntry(BaseModel):
    """Steps, sleep and water intake for one calendar day."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    date: dt.date
    steps: float = Field(default=0, ge=0)
    sleep_hours: float = Field(default=0, ge=0, alias="sleep")
    water_liters: float = Field(default=0, ge=0, alias="water")
