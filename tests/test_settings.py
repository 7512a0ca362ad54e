"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from calcsuite.config import (
    AppSettings,
    GeminiSettings,
    RatesSettings,
    StorageSettings,
    get_settings,
    validate_all_settings,
)


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:

    def test_defaults(self):
        assert RatesSettings().base_code == "USD"
        assert AppSettings().history_limit == 50
        assert AppSettings().biometric_window_days == 7
        assert StorageSettings().biometrics_key == "calc_health_metrics"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("RATES_TIMEOUT_SECONDS", "3")
        monkeypatch.setenv("STORAGE_PATH", "/tmp/calc.json")
        assert get_settings().rates.timeout_seconds == 3
        assert str(get_settings().storage.store_path) == "/tmp/calc.json"

    def test_base_code_upper_cased(self):
        assert RatesSettings(base_code="eur").base_code == "EUR"

    def test_gemini_key_required(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        with pytest.raises(ValidationError):
            GeminiSettings(_env_file=None)

    def test_validate_all_reports_missing_key(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        results = validate_all_settings()
        assert results["rates"] is True
        assert results["app"] is True
        assert results["gemini"] is False
        assert "gemini_error" in results
