"""Helpers for parsing Google Calendar events into internal models."""

from __future__ import annotations

import json
import re
from datetime import datetime
from pathlib import Path
from typing import Any

from meeting_cost_calculator.exceptions import EventFileError
from meeting_cost_calculator.models import CalendarEvent

# Fractional seconds directly before an optional UTC offset.
_FRACTION = re.compile(r"\.(\d+)(?=(?:[+-]\d{2}:\d{2})?$)")


def _microsecond_fraction(match: re.Match[str]) -> str:
    # fromisoformat before Python 3.11 wants exactly 3 or 6 digits.
    return "." + (match.group(1) + "000000")[:6]


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an RFC 3339 timestamp.

    Fractions of a second of any length are kept to microsecond precision.

    Returns:
        The parsed datetime, or None when the value is missing or malformed.
    """
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    # fromisoformat only accepts a trailing Z from Python 3.11 on.
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION.sub(_microsecond_fraction, text, count=1)
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def _event_time(value: Any) -> dict[str, Any]:
    if not isinstance(value, dict):
        return {}
    return {k: v for k, v in value.items() if k in ("dateTime", "date") and isinstance(v, str)}


_ATTENDEE_KEYS = ("email", "displayName")


def _attendee(value: dict[str, Any]) -> dict[str, Any]:
    return {key: value[key] for key in _ATTENDEE_KEYS if isinstance(value.get(key), str)}


def _attendees(value: Any) -> list[dict[str, Any]] | None:
    if not isinstance(value, list):
        return None
    return [_attendee(a) for a in value if isinstance(a, dict)]


def event_from_api(item: dict[str, Any]) -> CalendarEvent:
    """Convert a Calendar API event resource to CalendarEvent.

    Args:
        item: Event dict as returned by ``events.list``.

    Returns:
        CalendarEvent: Parsed event. Odd shapes degrade to empty fields
        instead of failing, so a single bad entry never sinks a fetch.
    """

    return CalendarEvent.model_validate(
        {
            "id": str(item.get("id") or ""),
            "summary": item.get("summary") if isinstance(item.get("summary"), str) else None,
            "start": _event_time(item.get("start")),
            "end": _event_time(item.get("end")),
            "attendees": _attendees(item.get("attendees")),
        }
    )


def events_from_api(items: list[dict[str, Any]]) -> list[CalendarEvent]:
    return [event_from_api(item) for item in items if isinstance(item, dict)]


def load_events(path: Path) -> list[CalendarEvent]:
    """Load events from a JSON export.

    The file holds either a list of event resources or an ``events.list``
    response object with an ``items`` list.

    Raises:
        EventFileError: If the file is missing, unreadable or not an export.
    """

    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise EventFileError(f"Cannot read events file {path}: {exc}") from exc

    if isinstance(data, dict):
        data = data.get("items")
    if not isinstance(data, list):
        raise EventFileError(f"Events file {path} must contain a list of events")

    return events_from_api(data)


def dump_events(items: list[dict[str, Any]], path: Path) -> None:
    """Write raw event resources as a JSON export readable by load_events."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({"items": items}, indent=2), encoding="utf-8")
