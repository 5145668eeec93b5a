"""Unit tests for configuration module."""

from pathlib import Path

import pytest

from meeting_cost_calculator.config import Settings, get_settings
from meeting_cost_calculator.stats import PERIOD_CHOICES


class TestSettings:
    """Test suite for Settings class."""

    def test_default_settings(self) -> None:
        """Test that default settings are properly initialized."""
        settings = Settings()

        assert settings.calendar_credentials_path == Path("credentials.json")
        assert settings.calendar_scope == "https://www.googleapis.com/auth/calendar.readonly"
        assert settings.calendar_id == "primary"
        assert settings.calendar_max_results == 2500
        assert settings.fetch_window_days == 90
        assert settings.hourly_rate == 50
        assert settings.default_period_days == 30
        assert settings.min_attendees == 2
        assert settings.timezone is None
        assert settings.log_level == "INFO"
        assert settings.debug is False

    def test_fetch_window_covers_longest_period(self) -> None:
        """Test that one fetch is enough for every reporting period."""
        assert Settings().fetch_window_days == max(PERIOD_CHOICES)

    def test_settings_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test loading settings from environment variables."""
        monkeypatch.setenv("MEETING_COST_HOURLY_RATE", "120.5")
        monkeypatch.setenv("MEETING_COST_TIMEZONE", "Europe/London")
        monkeypatch.setenv("MEETING_COST_DEBUG", "true")

        # Clear the cache to ensure fresh settings
        get_settings.cache_clear()

        settings = get_settings()

        assert settings.hourly_rate == 120.5
        assert settings.timezone == "Europe/London"
        assert settings.debug is True

        # Clean up
        get_settings.cache_clear()

    def test_get_settings_returns_cached_instance(self) -> None:
        """Test that get_settings returns the same cached instance."""
        get_settings.cache_clear()

        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2

        # Clean up
        get_settings.cache_clear()
