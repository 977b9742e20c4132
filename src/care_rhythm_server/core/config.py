"""Application configuration."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Allow extra env vars without error
    )

    # API
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    api_prefix: str = Field(default="/api/v1", description="API prefix")

    # Heatmap computation
    run_tolerance: float = Field(
        default=0.02,
        ge=0.0,
        description="Max intensity difference merged into one run segment",
    )
    instant_half_window: int = Field(
        default=7,
        ge=0,
        lt=720,
        description="Minutes marked on each side of an instant event",
    )
    default_window_days: int = Field(
        default=30,
        ge=0,
        description="Lookback (days before the latest record) for the default date window",
    )

    # Request limits
    max_records_per_kind: int = Field(
        default=20000,
        ge=1,
        description="Maximum activity records accepted per kind in one request",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level",
    )


# Global settings instance
settings = Settings()
