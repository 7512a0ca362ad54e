"""Tests for the biometric log and its persistence."""

import json
from datetime import date, timedelta

import pytest

from calcsuite.biometrics import BiometricLog
from calcsuite.services.storage import InMemoryKeyValueStore, StorageError

KEY = "calc_health_metrics"
TODAY = date(2024, 6, 10)


def _stored(store):
    return json.loads(store.get(KEY))


def _days(count, end=TODAY):
    return [
        {"date": (end - timedelta(days=offset)).isoformat(), "steps": offset, "sleep": 7, "water": 2}
        for offset in range(count)
    ]


class FailingStore(InMemoryKeyValueStore):
    def set(self, key, value):
        raise StorageError("disk full")


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def log(store):
    return BiometricLog(store, today=lambda: TODAY)


class TestLoading:

    def test_empty_store_starts_empty(self, log):
        assert log.entries == ()

    def test_loads_stored_entries_in_date_order(self):
        store = InMemoryKeyValueStore({KEY: json.dumps(_days(3))})
        log = BiometricLog(store, today=lambda: TODAY)
        dates = [entry.date for entry in log.entries]
        assert dates == sorted(dates)
        assert dates[-1] == TODAY

    def test_keeps_only_last_seven_days(self):
        store = InMemoryKeyValueStore({KEY: json.dumps(_days(10))})
        log = BiometricLog(store, today=lambda: TODAY)
        assert len(log) == 7
        assert log.entries[0].date == TODAY - timedelta(days=6)

    @pytest.mark.parametrize("raw", ["not json", '{"date": 1}', '[{"steps": 5}]'])
    def test_corrupt_content_starts_empty(self, raw):
        store = InMemoryKeyValueStore({KEY: raw})
        assert BiometricLog(store, today=lambda: TODAY).entries == ()


class TestLogToday:

    def test_all_blank_is_noop(self, log, store):
        assert log.log_today(steps="", sleep=None, water="  ") is None
        assert store.get(KEY) is None

    def test_logs_and_persists(self, log, store):
        entry = log.log_today(steps="8000", sleep="7.5", water="2")

        assert entry.date == TODAY
        assert entry.steps == 8000
        assert entry.sleep_hours == 7.5
        assert entry.water_liters == 2
        assert _stored(store) == [
            {"date": "2024-06-10", "steps": 8000.0, "sleep": 7.5, "water": 2.0}
        ]

    def test_missing_and_invalid_values_become_zero(self, log):
        entry = log.log_today(steps="abc", sleep="-3", water=None)
        assert (entry.steps, entry.sleep_hours, entry.water_liters) == (0, 0, 0)

    def test_same_day_replaces_entry(self, log, store):
        log.log_today(steps="1000")
        log.log_today(steps="5000")
        assert len(log) == 1
        assert log.today_entry().steps == 5000
        assert len(_stored(store)) == 1

    def test_window_applies_after_logging(self):
        store = InMemoryKeyValueStore({KEY: json.dumps(_days(7, end=TODAY - timedelta(days=1)))})
        log = BiometricLog(store, today=lambda: TODAY)
        log.log_today(steps="10")
        assert len(log) == 7
        assert log.entries[-1].date == TODAY
        assert len(_stored(store)) == 7

    def test_reload_sees_logged_entry(self, log, store):
        log.log_today(water="3")
        reloaded = BiometricLog(store, today=lambda: TODAY)
        assert reloaded.today_entry().water_liters == 3

    def test_write_failure_keeps_memory_state(self):
        log = BiometricLog(FailingStore(), today=lambda: TODAY)
        entry = log.log_today(steps="42")
        assert entry is not None
        assert log.today_entry().steps == 42
