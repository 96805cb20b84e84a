# ==== APPLICATION SETTINGS CONFIGURATION ==== #

"""
Application settings configuration for orderguard.

This module provides centralized configuration management using Pydantic Settings
with environment variable loading and validation. Values that would otherwise be
hard-coded in business rules (such as the length of a day in seconds) live here
and are passed explicitly to the functions that need them.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ==== MAIN SETTINGS CLASS ==== #


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Provides configuration for logging, tracing and the business constants
    used by the calculation helpers, with validation and type safety.
    """

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra='ignore'
    )

    # --► CORE APPLICATION SETTINGS
    APP_ENV: str = "dev"
    SERVICE_NAME: str = "orderguard"
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str | None = None

    # --► BUSINESS CONSTANTS
    SECONDS_IN_A_DAY: int = Field(default=86_400, gt=0)

    # --► OBSERVABILITY CONFIGURATION
    OTEL_EXPORTER_OTLP_ENDPOINT: str | None = None
    OTEL_EXPORTER_OTLP_HEADERS: str | None = None
    OTEL_SERVICE_NAME: str | None = None


# ==== GLOBAL SETTINGS INSTANCE ==== #


# Read once at process start
settings = Settings()


def get_settings() -> Settings:
    """
    Get global settings instance.

    Returns:
        Settings: Global application settings instance
    """
    return settings
