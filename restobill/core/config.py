# restobill/core/config.py

"""
Configuration management for the RestoBill backend.

Values are read from environment variables prefixed with ``RESTOBILL_``
(or a ``.env`` file) and validated on load.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RestoBillSettings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="RESTOBILL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment Settings
    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"

    # Document store backend: "memory" keeps everything in process,
    # "sql" persists documents through SQLAlchemy
    store_backend: str = "memory"
    database_url: str = "sqlite:///:memory:"
    log_sql_queries: bool = False

    # Seed default tables/menu/staff/settings when the store is empty
    seed_on_startup: bool = True

    # Reporting
    weekly_window_days: int = 30
    ledger_display_limit: int = 50


    @field_validator("store_backend")
    @classmethod
    def validate_store_backend(cls, v: str) -> str:
        v = v.lower()
        if v not in {"memory", "sql"}:
            raise ValueError("store_backend must be 'memory' or 'sql'")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return v.upper()

    @field_validator("weekly_window_days", "ledger_display_limit")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("must be a positive integer")
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def uses_sql_store(self) -> bool:
        return self.store_backend == "sql"


@lru_cache()
def get_settings() -> RestoBillSettings:
    """
    Get application settings (cached).

    Returns:
        RestoBillSettings instance with environment variables loaded
    """
    return RestoBillSettings()
