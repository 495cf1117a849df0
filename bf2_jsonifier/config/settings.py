"""bf2_jsonifier application settings loaded from environment variables."""

from enum import StrEnum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from bf2_jsonifier.models.common import Project


class Environment(StrEnum):
    """Deployment environment."""

    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"


class LogLevel(StrEnum):
    """Supported log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Application-wide settings loaded from environment variables / .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Responses ---
    CACHE_TTL: int = Field(
        default=600,
        ge=0,
        description="max-age (seconds) sent with successful responses.",
    )

    # --- Upstream ---
    UPSTREAM_TIMEOUT: float = Field(
        default=5.0,
        gt=0,
        description="Timeout (seconds) for a single ASPX request.",
    )
    DEFAULT_PROJECT: Project = Field(
        default=Project.BF2HUB,
        description="Project queried when no valid ?project= is given.",
    )

    # --- Logging ---
    LOG_LEVEL: LogLevel = Field(
        default=LogLevel.INFO,
        description="Application log level.",
    )

    # --- Environment ---
    ENVIRONMENT: Environment = Field(
        default=Environment.DEV,
        description="Deployment environment (dev/staging/prod).",
    )


def get_settings() -> Settings:
    """Factory function for dependency injection via FastAPI Depends."""
    return Settings()
