"""Google Calendar access.

The client fetches a look-back window of events; the parsing helpers turn API
resources and JSON exports into CalendarEvent models.
"""

from .client import GoogleCalendarClient
from .parsing import dump_events, event_from_api, events_from_api, load_events, parse_timestamp

__all__ = [
    "GoogleCalendarClient",
    "dump_events",
    "event_from_api",
    "events_from_api",
    "load_events",
    "parse_timestamp",
]
