"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables following 12-factor principles.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Data
    data_dir: str = Field(
        default="data",
        description="Root directory of the election result tree ({type}/{year}/*.json)",
    )

    # Server
    host: str = Field(
        default="0.0.0.0",  # noqa: S104
        description="Bind host for the API server",
    )
    port: int = Field(
        default=8080,
        description="Bind port for the API server",
        gt=0,
        le=65535,
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            msg = f"Invalid log_level: {v}"
            raise ValueError(msg)
        return level

    # CORS
    cors_allow_origin: str = Field(
        default="*",
        description="Value sent in the Access-Control-Allow-Origin header on every response",
    )

    # Error handling
    silent_errors: bool = Field(
        default=False,
        description="Answer 200 with a null body instead of 404/500/502 when a result file is missing or unreadable",
    )


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()
