"""Calendar event model.

Mirrors the subset of the Google Calendar v3 event resource the statistics
need. Field aliases accept the API's camelCase keys directly, so an item from
``events.list`` validates without renaming.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class EventTime(BaseModel):
    """Start or end of an event: a timestamp or a bare all-day date."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    date_time: str | None = Field(
        default=None, alias="dateTime", description="RFC 3339 timestamp"
    )
    date: str | None = Field(default=None, description="All-day date (YYYY-MM-DD)")

    @property
    def is_timestamp(self) -> bool:
        return bool(self.date_time)


class Attendee(BaseModel):
    """A single participant record."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    email: str | None = Field(default=None, description="Attendee email address")
    display_name: str | None = Field(
        default=None, alias="displayName", description="Attendee display name"
    )

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match against email or display name."""
        needle = term.lower()
        return any(needle in value.lower() for value in (self.email, self.display_name) if value)


class CalendarEvent(BaseModel):
    """One calendar entry as returned by the provider.

    ``attendees`` is ``None`` when the provider omitted the field, which is not
    the same thing as an empty list.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(default="", description="Provider event ID")
    summary: str | None = Field(default=None, description="Event title")
    start: EventTime = Field(default_factory=EventTime, description="Event start")
    end: EventTime = Field(default_factory=EventTime, description="Event end")
    attendees: tuple[Attendee, ...] | None = Field(
        default=None, description="Participants, absent when not reported"
    )

    @property
    def is_meeting_candidate(self) -> bool:
        """Both ends carry a timestamp; all-day entries never qualify."""
        return self.start.is_timestamp and self.end.is_timestamp
