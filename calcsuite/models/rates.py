"""
Exchange Rate Models

A RateTable is a complete snapshot: it is replaced as a whole on
every refresh and never merged with a previous one.
"""

import math
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# Used whenever the live source cannot be reached or parsed.
FALLBACK_RATES: dict[str, float] = {
    "USD": 1.0,
    "INR": 83.5,
    "EUR": 0.92,
    "GBP": 0.79,
    "JPY": 150.2,
    "AUD": 1.52,
    "CAD": 1.35,
    "CHF": 0.91,
    "CNY": 7.23,
    "SGD": 1.35,
    "NZD": 1.63,
}

# Codes offered by the currency tool's pickers.
SUPPORTED_CURRENCIES: tuple[str, ...] = (
    "USD", "EUR", "GBP", "INR", "JPY", "AUD", "CAD",
    "CHF", "CNY", "SGD", "NZD", "AED", "ZAR", "BRL",
)


class RateSource(str, Enum):
    LIVE = "live"
    FALLBACK = "fallback"


class RateTable(BaseModel):
    """
    Currency code -> rate relative to a fixed base currency.

    rates[base_code] is always 1.
    """
    model_config = ConfigDict(frozen=True)

    base_code: str = Field(
        default="USD",
        min_length=3,
        max_length=3
    )
    rates: dict[str, float]
    fetched_at: Optional[datetime] = Field(
        default=None,
        description="When the source last updated this snapshot"
    )
    source: RateSource = RateSource.LIVE

    @model_validator(mode='before')
    @classmethod
    def normalize_codes(cls, data):
        if not isinstance(data, dict):
            return data
        base = str(data.get("base_code", "USD")).upper()
        rates = {str(code).upper(): value for code, value in (data.get("rates") or {}).items()}
        rates.setdefault(base, 1.0)
        return {**data, "base_code": base, "rates": rates}

    @model_validator(mode='after')
    def validate_rates(self) -> 'RateTable':
        for code, rate in self.rates.items():
            if not math.isfinite(rate) or rate <= 0:
                raise ValueError(f"Rate for {code} must be a positive number, got {rate}")
        if self.rates[self.base_code] != 1:
            raise ValueError(
                f"Base currency {self.base_code} must have rate 1, "
                f"got {self.rates[self.base_code]}"
            )
        return self

    @classmethod
    def fallback(cls) -> 'RateTable':
        return cls(base_code="USD", rates=dict(FALLBACK_RATES), source=RateSource.FALLBACK)

    def rate_for(self, code: str) -> Optional[float]:
        return self.rates.get(code.upper())

    def __contains__(self, code: str) -> bool:
        return code.upper() in self.rates

    @property
    def codes(self) -> list[str]:
        return sorted(self.rates)
