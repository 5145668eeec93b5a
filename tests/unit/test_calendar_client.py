"""Unit tests for the Google Calendar client."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from meeting_cost_calculator.exceptions import (
    AuthenticationError,
    CalendarAPIError,
    ConfigurationError,
)
from meeting_cost_calculator.google_calendar.client import GoogleCalendarClient

NOW = datetime(2023, 3, 31, 12, 0, tzinfo=timezone.utc)


def _service_with_pages(*pages: dict) -> MagicMock:
    service = MagicMock()
    service.events.return_value.list.return_value.execute.side_effect = list(pages)
    return service


class TestGoogleCalendarClient:
    """Test suite for GoogleCalendarClient class."""

    def test_client_initialization(self, mock_settings) -> None:
        """Test that the client is properly initialized."""
        client = GoogleCalendarClient(mock_settings)

        assert client.settings is mock_settings
        assert client._service is None

    @pytest.mark.asyncio
    async def test_authenticate_missing_credentials_raises(self, mock_settings) -> None:
        """Test that authenticate fails fast when credentials.json is missing."""
        client = GoogleCalendarClient(mock_settings)

        with pytest.raises(ConfigurationError):
            await client.authenticate()

    @pytest.mark.asyncio
    async def test_authenticate_wraps_oauth_failures(self, mock_settings, monkeypatch) -> None:
        mock_settings.calendar_credentials_path.write_text("{}", encoding="utf-8")
        client = GoogleCalendarClient(mock_settings)

        def _fail(*args):
            raise ValueError("bad client secrets")

        monkeypatch.setattr(client, "_build_service", _fail)

        with pytest.raises(AuthenticationError, match="bad client secrets"):
            await client.authenticate()

    @pytest.mark.asyncio
    async def test_list_events_requires_authentication(self, mock_settings) -> None:
        """Test that list_events requires authenticate() first."""
        client = GoogleCalendarClient(mock_settings)

        with pytest.raises(AuthenticationError):
            await client.list_events()

    @pytest.mark.asyncio
    async def test_get_user_email_requires_authentication(self, mock_settings) -> None:
        client = GoogleCalendarClient(mock_settings)

        with pytest.raises(AuthenticationError):
            await client.get_user_email()

    @pytest.mark.asyncio
    async def test_list_events_follows_pages(self, mock_settings, sample_event_data) -> None:
        client = GoogleCalendarClient(mock_settings)
        client._service = _service_with_pages(
            {"items": [sample_event_data], "nextPageToken": "p2"},
            {"items": [{**sample_event_data, "id": "evt2"}]},
        )

        events = await client.list_events(7, now=NOW)

        assert [e["id"] for e in events] == ["evt123456", "evt2"]
        list_calls = client._service.events.return_value.list.call_args_list
        assert len(list_calls) == 2
        first = list_calls[0].kwargs
        assert first["calendarId"] == "primary"
        assert first["singleEvents"] is True
        assert first["orderBy"] == "startTime"
        assert first["timeMin"] == "2023-03-24T12:00:00+00:00"
        assert first["timeMax"] == "2023-03-31T12:00:00+00:00"
        assert first["pageToken"] is None
        assert list_calls[1].kwargs["pageToken"] == "p2"

    @pytest.mark.asyncio
    async def test_list_events_caps_results(self, mock_settings, sample_event_data) -> None:
        settings = mock_settings.model_copy(update={"calendar_max_results": 1})
        client = GoogleCalendarClient(settings)
        client._service = _service_with_pages(
            {"items": [sample_event_data, sample_event_data], "nextPageToken": "p2"},
        )

        events = await client.list_events(now=NOW)

        assert len(events) == 1
        assert client._service.events.return_value.list.call_args.kwargs["maxResults"] == 1

    @pytest.mark.asyncio
    async def test_list_events_wraps_api_errors(self, mock_settings) -> None:
        client = GoogleCalendarClient(mock_settings)
        client._service = MagicMock()
        client._service.events.return_value.list.return_value.execute.side_effect = RuntimeError(
            "quota exceeded"
        )

        with pytest.raises(CalendarAPIError, match="quota exceeded"):
            await client.list_events(now=NOW)

    @pytest.mark.asyncio
    async def test_fetch_events_returns_models(self, mock_settings, sample_event_data) -> None:
        client = GoogleCalendarClient(mock_settings)
        client._service = _service_with_pages({"items": [sample_event_data]})

        events = await client.fetch_events(now=NOW)

        assert events[0].summary == "Weekly sync"
        assert events[0].is_meeting_candidate is True

    @pytest.mark.asyncio
    async def test_get_user_email(self, mock_settings) -> None:
        client = GoogleCalendarClient(mock_settings)
        client._service = MagicMock()
        client._service.calendars.return_value.get.return_value.execute.return_value = {
            "id": "me@example.com"
        }

        assert await client.get_user_email() == "me@example.com"
