"""Configuration management for Meeting Cost Calculator.

This module handles application configuration using Pydantic settings.
Configuration can be loaded from environment variables or .env files.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support.

    All settings can be overridden via environment variables with
    the MEETING_COST_ prefix (e.g., MEETING_COST_HOURLY_RATE).
    """

    model_config = SettingsConfigDict(
        env_prefix="MEETING_COST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Google Calendar Configuration
    calendar_credentials_path: Path = Field(
        default=Path("credentials.json"),
        description="Path to Google OAuth client credentials file",
    )
    calendar_token_path: Path = Field(
        default=Path("calendar_token.json"),
        description="Path to the cached Google Calendar OAuth token",
    )
    calendar_scope: str = Field(
        default="https://www.googleapis.com/auth/calendar.readonly",
        description="OAuth scope used for Calendar access. Read-only is all we need.",
    )
    calendar_id: str = Field(
        default="primary",
        description="Calendar to read events from",
    )
    calendar_max_results: int = Field(
        default=2500,
        description="Maximum number of events fetched for one window",
    )
    fetch_window_days: int = Field(
        default=90,
        description="Look-back window fetched once and re-filtered per reporting period",
    )

    # Calculation Configuration
    hourly_rate: float = Field(
        default=50.0,
        description="Effective hourly cost of your time",
    )
    default_period_days: int = Field(
        default=30,
        description="Reporting period used when none is given",
    )
    min_attendees: int = Field(
        default=2,
        ge=1,
        description="Minimum attendee count for an event to count as a meeting",
    )
    timezone: str | None = Field(
        default=None,
        description=(
            "IANA time zone used for the work-hours filter. When unset, each "
            "event's own UTC offset decides its local time."
        ),
    )

    # Application Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Returns:
        Settings: Application settings instance.
    """
    return Settings()
