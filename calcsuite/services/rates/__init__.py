"""Exchange rate services package."""

from calcsuite.services.rates.manager import OFFLINE_LABEL, RateTableManager
from calcsuite.services.rates.provider import (
    HttpRateProvider,
    RateProviderError,
    RateProviderInterface,
)

__all__ = [
    "HttpRateProvider",
    "OFFLINE_LABEL",
    "RateProviderError",
    "RateProviderInterface",
    "RateTableManager",
]
