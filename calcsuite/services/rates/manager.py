"""
Rate Table Manager

Owns the currently loaded RateTable. load() is its only mutator:
- success: the table is replaced by the fetched snapshot
- failure: the table is replaced by the static fallback snapshot
  and the manager goes "offline"

The offline flag is for display only. Conversions keep working on
the fallback rates and never see the fetch error.

Every load takes a generation number. When loads overlap, only the
newest one may replace the table; an older response arriving late
is discarded.
"""

from datetime import datetime
from typing import Optional

from calcsuite.audit import get_logger
from calcsuite.models.rates import RateTable
from calcsuite.services.rates.provider import (
    HttpRateProvider,
    RateProviderError,
    RateProviderInterface,
)


logger = get_logger(__name__)

OFFLINE_LABEL = "Offline (Using Fallback Rates)"


class RateTableManager:

    def __init__(self, provider: Optional[RateProviderInterface] = None):
        self._provider = provider or HttpRateProvider()
        self._table: Optional[RateTable] = None
        self._offline = False
        self._loading = False
        self._generation = 0

    @property
    def table(self) -> Optional[RateTable]:
        """The loaded table, or None before the first load."""
        return self._table

    @property
    def offline(self) -> bool:
        return self._offline

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def last_updated_label(self) -> str:
        if self._offline:
            return OFFLINE_LABEL
        if self._table is None or self._table.fetched_at is None:
            return ""
        return _format_timestamp(self._table.fetched_at)

    async def load(self) -> Optional[RateTable]:
        """
        Refresh the table.

        Never raises for a fetch failure: the fallback table is installed
        instead. Returns the table that is current once this load settles.
        """
        self._generation += 1
        generation = self._generation
        self._loading = True

        try:
            try:
                table = await self._provider.fetch()
                offline = False
            except RateProviderError as e:
                logger.warning("rates_fallback_used", error=str(e), generation=generation)
                table = RateTable.fallback()
                offline = True
            except Exception as e:
                # Unexpected provider bug: still never leave the tool without rates
                logger.exception("rates_provider_crashed", error=str(e), generation=generation)
                table = RateTable.fallback()
                offline = True

            if generation != self._generation:
                logger.info(
                    "rates_stale_response_discarded",
                    generation=generation,
                    current=self._generation,
                )
                return self._table

            self._table = table
            self._offline = offline
            return table
        finally:
            # Only the newest load owns the pending state, even when cancelled
            if generation == self._generation:
                self._loading = False


def _format_timestamp(moment: datetime) -> str:
    return moment.astimezone().strftime("%Y-%m-%d %H:%M")
