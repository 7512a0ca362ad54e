"""
Exchange Rate Provider

Fetches the latest rate snapshot over HTTP.

Expected response body:
    {"rates": {"USD": 1, "INR": 83.1, ...}, "time_last_updated": 1717027201}

Every failure (transport error, non-2xx status, unparseable or
invalid body) is raised as RateProviderError. Deciding what to show
instead is the caller's job.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional

import httpx
from pydantic import ValidationError
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from calcsuite.audit import get_logger
from calcsuite.config import RatesSettings, get_settings
from calcsuite.models.rates import RateSource, RateTable


logger = get_logger(__name__)


class RateProviderError(Exception):
    """Base exception for rate fetching errors."""
    pass


class RateProviderInterface(ABC):
    """Anything that can produce a fresh RateTable."""

    @abstractmethod
    async def fetch(self) -> RateTable:
        """
        Fetch the latest rates.

        Raises:
            RateProviderError: If no valid table could be produced
        """
        pass


class HttpRateProvider(RateProviderInterface):
    """
    Rate provider backed by a JSON HTTP endpoint.

    Transport errors and 5xx responses are retried with exponential
    back-off; anything else fails immediately.
    """

    def __init__(
        self,
        settings: Optional[RatesSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            settings: Endpoint, timeout and retry configuration.
            transport: Optional httpx transport (tests use httpx.MockTransport).
        """
        self._settings = settings or get_settings().rates
        self._transport = transport

    async def fetch(self) -> RateTable:
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self._settings.retry_attempts),
                wait=wait_exponential(
                    multiplier=self._settings.retry_wait_seconds,
                    max=self._settings.retry_wait_seconds * 8,
                ),
                retry=retry_if_exception_type(_RetryableFetchError),
                reraise=True,
            ):
                with attempt:
                    payload = await self._get_json()
        except _RetryableFetchError as e:
            raise RateProviderError(str(e)) from e

        return self._parse(payload)

    async def _get_json(self) -> dict:
        url = self._settings.endpoint
        try:
            async with httpx.AsyncClient(
                timeout=self._settings.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            logger.warning("rate_fetch_transport_error", url=url, error=str(e))
            raise _RetryableFetchError(f"Rate request failed: {e}") from e

        if response.status_code >= 500:
            logger.warning("rate_fetch_server_error", url=url, status=response.status_code)
            raise _RetryableFetchError(f"Rate source returned {response.status_code}")
        if not response.is_success:
            raise RateProviderError(f"Rate source returned {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise RateProviderError(f"Rate source returned invalid JSON: {e}") from e
        if not isinstance(payload, dict):
            raise RateProviderError("Rate source returned an unexpected body")
        return payload

    def _parse(self, payload: dict) -> RateTable:
        rates = payload.get("rates")
        if not isinstance(rates, dict) or not rates:
            raise RateProviderError("Response has no rates mapping")

        fetched_at = None
        updated = payload.get("time_last_updated")
        if isinstance(updated, (int, float)) and not isinstance(updated, bool):
            try:
                fetched_at = datetime.fromtimestamp(updated, timezone.utc)
            except (OverflowError, OSError, ValueError):
                fetched_at = None
        if fetched_at is None:
            fetched_at = datetime.now(timezone.utc)

        try:
            table = RateTable(
                base_code=self._settings.base_code,
                rates=rates,
                fetched_at=fetched_at,
                source=RateSource.LIVE,
            )
        except ValidationError as e:
            raise RateProviderError(f"Response rates are invalid: {e}") from e

        logger.info("rates_fetched", codes=len(table.rates), fetched_at=fetched_at.isoformat())
        return table


class _RetryableFetchError(RateProviderError):
    """Transient failure worth another attempt."""
    pass
