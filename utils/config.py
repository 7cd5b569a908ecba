"""
Configuration Utility - Environment Variables Management

Centralized configuration loading from .env files using pydantic-settings.
Type-safe access to all environment variables with validation.

Values are read once per process. The enricher never reads them directly:
the Firehose handler resolves them and passes the result in.

Usage:
    from utils.config import settings

    timezone_name = settings.TIMEZONE
    lowercase = settings.PARTITION_KEYS_LOWERCASE
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Enrichment Configuration
    TIMEZONE: str = Field(default="Asia/Tokyo")
    PARTITION_KEYS_LOWERCASE: bool = Field(default=False)

    # Logging Configuration
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: str = Field(default="json")

    # Application Metadata
    ENVIRONMENT: str = Field(default="production")
    APP_NAME: str = Field(default="telemetry-firehose-enricher")
    APP_VERSION: str = Field(default="0.1.0")

    @field_validator("TIMEZONE")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Reject blank timezone identifiers early."""
        if not v or not v.strip():
            raise ValueError("TIMEZONE must be a non-empty timezone identifier")
        return v.strip()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("LOG_FORMAT must be 'json' or 'text'")
        return v


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Singleton Settings instance
    """
    return Settings()


# Global settings instance
settings = get_settings()
