"""
Application Settings - Main Layer

Pydantic Settings read from environment variables, a `.env` file and the
defaults below.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from healthcheck.shared import DEFAULT_HEALTHCHECK_PATH, EnumEnvironment, EnumLogLevel


class ServerSettings(BaseSettings):
    """HTTP server settings."""

    title: str = Field(default="Health Check", description="API title")
    description: str = Field(
        default="Aggregated health of the service dependencies",
        description="API description",
    )
    version: str = Field(default="1.0.0", description="API version")
    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=8080, description="Port to bind the server")
    path: str = Field(
        default=DEFAULT_HEALTHCHECK_PATH, description="Health check endpoint path"
    )

    model_config = SettingsConfigDict(
        env_prefix="HEALTHCHECK_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    server: ServerSettings = Field(default_factory=ServerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Settings factory.

    Kept as a function so tests can patch it.
    """
    return AppSettings()
