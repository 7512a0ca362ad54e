"""
Configuration Management for the Calculation Suite

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
This makes it easy to see what external dependencies exist and
ensures all required configuration is validated at startup.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RatesSettings(BaseSettings):
    """Exchange-rate data source configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RATES_",
        extra="ignore"
    )

    endpoint: str = Field(
        default="https://api.exchangerate-api.com/v4/latest/USD",
        description="URL returning the latest rates against USD"
    )
    base_code: str = Field(
        default="USD",
        min_length=3,
        max_length=3,
        description="Currency every rate in the table is relative to"
    )
    timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        le=120,
        description="HTTP timeout for a single fetch"
    )
    retry_attempts: int = Field(
        default=2,
        ge=1,
        le=5,
        description="Fetch attempts before falling back to the static table"
    )
    retry_wait_seconds: float = Field(
        default=0.5,
        ge=0.0,
        le=10.0,
        description="Base back-off between attempts"
    )

    @field_validator('base_code')
    @classmethod
    def upper_base_code(cls, v: str) -> str:
        return v.upper()


class GeminiSettings(BaseSettings):
    """Gemini LLM configuration for the math solver."""

    model_config = SettingsConfigDict(
        env_prefix="GEMINI_",
        extra="ignore"
    )

    api_key: str = Field(
        ...,
        description="Gemini API key"
    )
    model_name: str = Field(
        default="gemini-1.5-pro",
        description="Gemini model to use"
    )
    max_tokens: int = Field(
        default=2048,
        ge=100,
        le=8192,
        description="Maximum tokens in response"
    )
    temperature: float = Field(
        default=0.2,
        ge=0.0,
        le=1.0,
        description="Model temperature (lower = more deterministic)"
    )


class StorageSettings(BaseSettings):
    """Persistent key-value store configuration."""

    model_config = SettingsConfigDict(
        env_prefix="STORAGE_",
        extra="ignore"
    )

    path: str = Field(
        default=".calcsuite/store.json",
        description="JSON file backing the key-value store"
    )
    biometrics_key: str = Field(
        default="calc_health_metrics",
        min_length=1,
        description="Key holding the serialized biometric log"
    )

    @property
    def store_path(self) -> Path:
        return Path(self.path).expanduser()


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    # Session limits
    history_limit: int = Field(
        default=50,
        ge=1,
        le=1000,
        description="Maximum number of calculation history entries kept"
    )
    biometric_window_days: int = Field(
        default=7,
        ge=1,
        le=366,
        description="Number of most recent days kept in the biometric log"
    )
    recent_transactions: int = Field(
        default=5,
        ge=1,
        le=50,
        description="Transactions shown on the dashboard"
    )


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Note: These are loaded lazily to allow partial configuration

    @property
    def rates(self) -> RatesSettings:
        return RatesSettings()

    @property
    def gemini(self) -> GeminiSettings:
        return GeminiSettings()

    @property
    def storage(self) -> StorageSettings:
        return StorageSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, plus
    "<setting_name>_error" entries for the sections that failed.
    Useful for startup checks.
    """
    results = {}
    settings = get_settings()

    for name in ("rates", "gemini", "storage", "app"):
        try:
            _ = getattr(settings, name)
            results[name] = True
        except Exception as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
