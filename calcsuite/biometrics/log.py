"""
Biometric Log

Day-keyed steps / sleep / water entries backed by the persistent
key-value store.

The log:
- Is read once, when it is created
- Holds at most one entry per calendar day
- Keeps only the most recent days (7 by default), oldest first
- Is written back on every log_today()

Unreadable or corrupt stored content starts an empty log instead of
failing: there is no sensible recovery to guess at.
"""

from datetime import date
from typing import Callable, Optional

from pydantic import TypeAdapter, ValidationError

from calcsuite.audit import get_logger
from calcsuite.calculations.numbers import parse_number
from calcsuite.config import get_settings
from calcsuite.models.biometrics import BiometricEntry
from calcsuite.services.storage import KeyValueStoreInterface, StorageError


logger = get_logger(__name__)

_ENTRIES = TypeAdapter(list[BiometricEntry])


class BiometricLog:

    def __init__(
        self,
        store: KeyValueStoreInterface,
        key: Optional[str] = None,
        window_days: Optional[int] = None,
        today: Callable[[], date] = date.today,
    ):
        """
        Args:
            store: Where the serialized log lives.
            key: Store key. Defaults to the configured biometrics key.
            window_days: Days kept. Defaults to the configured window (7).
            today: Clock used to date new entries.
        """
        self._store = store
        self._key = key or get_settings().storage.biometrics_key
        self._window = window_days or get_settings().app.biometric_window_days
        self._today = today
        self._entries: list[BiometricEntry] = self._load()

    @property
    def entries(self) -> tuple[BiometricEntry, ...]:
        """Entries in ascending date order."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def _load(self) -> list[BiometricEntry]:
        try:
            raw = self._store.get(self._key)
        except StorageError as e:
            logger.warning("biometrics_load_failed", key=self._key, error=str(e))
            return []
        if raw is None:
            return []

        try:
            entries = _ENTRIES.validate_json(raw)
        except ValidationError as e:
            logger.warning("biometrics_store_corrupt", key=self._key, error=str(e))
            return []
        return self._normalize(entries)

    def _normalize(self, entries: list[BiometricEntry]) -> list[BiometricEntry]:
        # Last write wins per day, then keep the trailing window in date order
        by_day = {entry.date: entry for entry in entries}
        ordered = sorted(by_day.values(), key=lambda entry: entry.date)
        return ordered[-self._window:]

    def log_today(self, steps=None, sleep=None, water=None) -> Optional[BiometricEntry]:
        """
        Record today's metrics, replacing any entry already logged today.

        Each value may be a number, a numeric string, blank or None.
        When all three are blank nothing happens and None is returned.
        Missing, non-numeric or negative values are stored as 0.
        """
        if all(_is_blank(value) for value in (steps, sleep, water)):
            return None

        entry = BiometricEntry(
            date=self._today(),
            steps=_coerce(steps),
            sleep_hours=_coerce(sleep),
            water_liters=_coerce(water),
        )
        others = [existing for existing in self._entries if existing.date != entry.date]
        self._entries = self._normalize(others + [entry])
        self._persist()

        logger.info(
            "biometrics_logged",
            date=entry.date.isoformat(),
            steps=entry.steps,
            sleep_hours=entry.sleep_hours,
            water_liters=entry.water_liters,
            kept=len(self._entries),
        )
        return entry

    def today_entry(self) -> Optional[BiometricEntry]:
        today = self._today()
        for entry in self._entries:
            if entry.date == today:
                return entry
        return None

    def _persist(self) -> None:
        payload = _ENTRIES.dump_json(self._entries, by_alias=True).decode("utf-8")
        try:
            self._store.set(self._key, payload)
        except StorageError as e:
            # Keep the in-memory log; the next successful write catches up
            logger.error("biometrics_persist_failed", key=self._key, error=str(e))


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _coerce(value) -> float:
    number = parse_number(value)
    if number is None or number < 0:
        return 0.0
    return number
