"""Pytest configuration and shared fixtures."""

from collections.abc import Callable

import pytest
import structlog

from meeting_cost_calculator.models import CalendarEvent


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo CLI logging configuration so later tests log to live streams."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def mock_settings(tmp_path):
    """Provide mock settings for testing."""
    from meeting_cost_calculator.config import Settings

    return Settings(
        calendar_credentials_path=tmp_path / "credentials.json",
        calendar_token_path=tmp_path / "token.json",
        hourly_rate=100.0,
        log_level="DEBUG",
        debug=True,
    )


@pytest.fixture
def make_event() -> Callable[..., CalendarEvent]:
    """Build a timed CalendarEvent with ``n_attendees`` anonymous attendees."""

    def _make(
        start: str = "2023-01-03T10:00:00Z",
        end: str = "2023-01-03T11:00:00Z",
        n_attendees: int | None = 2,
        attendees: list[dict] | None = None,
        **fields,
    ) -> CalendarEvent:
        if attendees is None and n_attendees is not None:
            attendees = [{"email": f"person{i}@example.com"} for i in range(n_attendees)]
        return CalendarEvent.model_validate(
            {
                "start": {"dateTime": start},
                "end": {"dateTime": end},
                "attendees": attendees,
                **fields,
            }
        )

    return _make


@pytest.fixture
def sample_event_data() -> dict:
    """Provide a Calendar API event resource."""
    return {
        "kind": "calendar#event",
        "id": "evt123456",
        "status": "confirmed",
        "summary": "Weekly sync",
        "start": {"dateTime": "2023-01-03T10:00:00-05:00", "timeZone": "America/New_York"},
        "end": {"dateTime": "2023-01-03T10:30:00-05:00", "timeZone": "America/New_York"},
        "attendees": [
            {"email": "me@example.com", "self": True, "organizer": True, "responseStatus": "accepted"},
            {"email": "alice@co.com", "displayName": "Alice Smith", "responseStatus": "tentative"},
        ],
    }
