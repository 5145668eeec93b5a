"""Google Calendar API client implementation.

This module provides a client for reading events from Google Calendar.

Notes:
    The Google API client is synchronous. This project wraps those calls using
    `asyncio.to_thread` so the rest of the codebase can remain async-friendly.
    The client is an explicit handle: callers create it, authenticate it and
    pass it where events are needed. Nothing is initialized at import time.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

import structlog

from meeting_cost_calculator.google_calendar.parsing import events_from_api
from meeting_cost_calculator.config import Settings
from meeting_cost_calculator.exceptions import (
    AuthenticationError,
    CalendarAPIError,
    ConfigurationError,
)
from meeting_cost_calculator.models import CalendarEvent

logger = structlog.get_logger()

# Upper bound the Calendar API accepts for maxResults on events.list.
_MAX_PAGE_SIZE = 2500


class GoogleCalendarClient:
    """Google Calendar API client for event retrieval.

    This client handles authentication and paginated event listing.
    Failures are raised to the caller and never retried here.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize Google Calendar client.

        Args:
            settings: Application settings. If None, uses default settings.
        """
        from meeting_cost_calculator.config import get_settings

        self.settings = settings or get_settings()
        self._service: Any | None = None
        logger.info("calendar_client_initialized", calendar_id=self.settings.calendar_id)

    async def authenticate(self) -> None:
        """Authenticate with Google Calendar using OAuth2.

        Raises:
            ConfigurationError: If the client credentials file is missing.
            AuthenticationError: If authentication fails.
        """

        if self._service is not None:
            return

        credentials_path = Path(self.settings.calendar_credentials_path)
        token_path = Path(self.settings.calendar_token_path)
        scope = self.settings.calendar_scope

        if not credentials_path.exists():
            raise ConfigurationError(
                f"Google credentials file not found: {credentials_path}. "
                "Create an OAuth client ID of type 'Desktop app' and download it there."
            )

        logger.info(
            "calendar_authentication_started",
            credentials_path=str(credentials_path),
            token_path=str(token_path),
            scope=scope,
        )

        try:
            self._service = await asyncio.to_thread(
                self._build_service,
                credentials_path,
                token_path,
                scope,
            )
        except Exception as exc:  # noqa: BLE001
            logger.exception("calendar_authentication_failed", error=str(exc))
            raise AuthenticationError(str(exc)) from exc

        logger.info("calendar_authentication_completed")

    async def list_events(
        self,
        days: int | None = None,
        *,
        now: datetime | None = None,
    ) -> list[dict[str, Any]]:
        """List raw events from the last ``days`` days, oldest first.

        Args:
            days: Look-back window. If None, uses settings.fetch_window_days.
            now: End of the window. Defaults to the current UTC time.

        Returns:
            List of Calendar API event dictionaries.

        Raises:
            AuthenticationError: If authenticate() has not been called.
            CalendarAPIError: If the API request fails.
        """

        await self._ensure_authenticated()

        window_days = days if days is not None else self.settings.fetch_window_days
        time_max = now or datetime.now(timezone.utc)
        time_min = time_max - timedelta(days=window_days)

        logger.info(
            "listing_events",
            days=window_days,
            calendar_id=self.settings.calendar_id,
            max_results=self.settings.calendar_max_results,
        )

        try:
            events = await asyncio.to_thread(
                self._list_events_sync,
                time_min.isoformat(),
                time_max.isoformat(),
                self.settings.calendar_max_results,
            )
        except Exception as exc:  # noqa: BLE001
            logger.exception("calendar_list_events_failed", error=str(exc))
            raise CalendarAPIError(str(exc)) from exc

        logger.info("calendar_events_listed", event_count=len(events), days=window_days)
        return events

    async def fetch_events(
        self,
        days: int | None = None,
        *,
        now: datetime | None = None,
    ) -> list[CalendarEvent]:
        """List events and parse them into CalendarEvent models."""
        return events_from_api(await self.list_events(days, now=now))

    async def get_user_email(self) -> str | None:
        """Return the account email, which is the primary calendar's ID.

        Raises:
            AuthenticationError: If authenticate() has not been called.
            CalendarAPIError: If the API request fails.
        """

        await self._ensure_authenticated()

        try:
            calendar = await asyncio.to_thread(self._get_primary_calendar_sync)
        except Exception as exc:  # noqa: BLE001
            logger.exception("calendar_get_user_failed", error=str(exc))
            raise CalendarAPIError(str(exc)) from exc

        email = calendar.get("id")
        return email if isinstance(email, str) and email else None

    async def _ensure_authenticated(self) -> None:
        if self._service is None:
            raise AuthenticationError(
                "Calendar client is not authenticated. "
                "Call await GoogleCalendarClient.authenticate() first."
            )

    def _build_service(self, credentials_path: Path, token_path: Path, scope: str) -> Any:
        # Imported lazily to keep import-time cost low and tests fast.
        from google.auth.transport.requests import Request
        from google.oauth2.credentials import Credentials
        from google_auth_oauthlib.flow import InstalledAppFlow
        from googleapiclient.discovery import build

        creds: Credentials | None = None
        if token_path.exists():
            creds = Credentials.from_authorized_user_file(str(token_path), scopes=[scope])

        if creds is not None and creds.expired and creds.refresh_token:
            creds.refresh(Request())

        if creds is None or not creds.valid:
            flow = InstalledAppFlow.from_client_secrets_file(str(credentials_path), scopes=[scope])
            creds = flow.run_local_server(port=0)
            token_path.parent.mkdir(parents=True, exist_ok=True)
            token_path.write_text(creds.to_json(), encoding="utf-8")

        # cache_discovery=False prevents writing discovery docs to disk.
        return build("calendar", "v3", credentials=creds, cache_discovery=False)

    def _list_events_sync(
        self,
        time_min: str,
        time_max: str,
        max_results: int,
    ) -> list[dict[str, Any]]:
        assert self._service is not None
        events: list[dict[str, Any]] = []

        page_token: str | None = None
        while len(events) < max_results:
            per_page = min(_MAX_PAGE_SIZE, max_results - len(events))
            request = self._service.events().list(
                calendarId=self.settings.calendar_id,
                timeMin=time_min,
                timeMax=time_max,
                showDeleted=False,
                singleEvents=True,
                orderBy="startTime",
                maxResults=per_page,
                pageToken=page_token,
            )
            response = request.execute()
            events.extend(response.get("items", []) or [])
            page_token = response.get("nextPageToken")
            if page_token is None:
                break

        return events[:max_results]

    def _get_primary_calendar_sync(self) -> dict[str, Any]:
        assert self._service is not None
        return self._service.calendars().get(calendarId="primary").execute()
