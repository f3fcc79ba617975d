"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Ready - HRV readiness engine"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["Ready contributors"]
    PROJECT_URL: str = ""

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./ready.db"

    # Engine defaults, used to seed the persisted settings row
    DEFAULT_BASELINE_PERIOD_DAYS: int = 7
    DEFAULT_MINIMUM_DAYS_FOR_BASELINE: int = 2
    DEFAULT_USE_RHR_ADJUSTMENT: bool = False
    DEFAULT_USE_SLEEP_ADJUSTMENT: bool = False
    DEFAULT_RETENTION_DAYS: int = 365

    # Historical recalculation
    RECALCULATION_LIMIT_DAYS: int = 365

    # Maintenance
    CREATE_TABLES_ON_STARTUP: bool = True
    PURGE_ON_STARTUP: bool = True

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
