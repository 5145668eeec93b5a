"""Reporting period selection.

A fixed window of events is fetched once; each reporting period is a suffix of
that window, re-selected whenever the user picks another period.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta, timezone

from meeting_cost_calculator.google_calendar.parsing import parse_timestamp
from meeting_cost_calculator.models import CalendarEvent

PERIOD_CHOICES = (7, 14, 30, 90)


def events_in_period(
    events: Iterable[CalendarEvent],
    period_days: float,
    *,
    now: datetime | None = None,
) -> list[CalendarEvent]:
    """Keep events starting within the last ``period_days`` days.

    Events without a start timestamp (all-day entries) and events whose start
    cannot be parsed are dropped. Naive timestamps are read in ``now``'s zone;
    when ``now`` itself is naive it is read as UTC.

    Args:
        events: Raw events of the fetched window.
        period_days: Length of the reporting period.
        now: End of the period. Defaults to the current UTC time.
    """

    now = now or datetime.now(timezone.utc)
    cutoff = now - timedelta(days=period_days)

    selected = []
    for event in events:
        start = parse_timestamp(event.start.date_time)
        if start is None:
            continue
        try:
            if start.tzinfo is None and cutoff.tzinfo is not None:
                start = start.replace(tzinfo=cutoff.tzinfo)
            elif start.tzinfo is not None and cutoff.tzinfo is None:
                start = start.astimezone(timezone.utc).replace(tzinfo=None)
        except OverflowError:
            continue
        if start >= cutoff:
            selected.append(event)
    return selected
