"""Meeting statistics engine.

Turns a list of calendar events into a CalculationResult. The computation is
pure: it reads only its arguments, keeps no state between calls and never
raises on event data. Events with malformed timestamps are dropped one by one.

Two attendee conventions coexist on purpose and are kept as separate rules:

* ``inclusion_attendee_count`` treats a missing attendee list as the
  organizer alone (1), so solo blocks fall below the default minimum of 2.
* ``reported_attendee_count`` ignores events without a recorded list when
  averaging, so missing data does not drag the average towards 1.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, time, tzinfo

import structlog

from meeting_cost_calculator.google_calendar.parsing import parse_timestamp
from meeting_cost_calculator.models import CalculationResult, CalendarEvent, FilterOptions
from meeting_cost_calculator.utils import round_half_up

logger = structlog.get_logger()

MAX_MEETING_MINUTES = 480
WORK_DAY_START = time(9, 0)
WORK_DAY_END = time(18, 0)
# Monday=0 ... Friday=4
WORK_WEEKDAYS = frozenset(range(5))
DEFAULT_FILTERS = FilterOptions()


@dataclass(frozen=True)
class ClassifiedMeeting:
    """An event that passed every filter, with its derived figures."""

    event: CalendarEvent
    start: datetime
    duration_minutes: float
    attendee_count: int
    reported_attendees: int | None


def inclusion_attendee_count(event: CalendarEvent) -> int:
    """Attendee count used for filtering and people-hours.

    A missing list counts as 1, the organizer. An explicit empty list is 0.
    """
    if event.attendees is None:
        return 1
    return len(event.attendees)


def reported_attendee_count(event: CalendarEvent) -> int | None:
    """Attendee count used for the average, or None when nothing was recorded."""
    if not event.attendees:
        return None
    return len(event.attendees)


def matches_participant(event: CalendarEvent, term: str | None) -> bool:
    needle = (term or "").strip()
    if not needle:
        return True
    return any(attendee.matches(needle) for attendee in event.attendees or ())


def within_work_hours(start: datetime, tz: tzinfo | None = None) -> bool:
    """Monday to Friday, starting in [09:00, 18:00) local time."""
    if tz is not None and start.tzinfo is not None:
        start = start.astimezone(tz)
    return start.weekday() in WORK_WEEKDAYS and WORK_DAY_START <= start.time() < WORK_DAY_END


def _duration_minutes(start: datetime, end: datetime) -> float | None:
    try:
        return (end - start).total_seconds() / 60
    except TypeError:
        # One side carries an offset and the other does not.
        return None


def classify_event(
    event: CalendarEvent,
    filters: FilterOptions | None = None,
    *,
    tz: tzinfo | None = None,
) -> ClassifiedMeeting | None:
    """Apply the meeting rules to one event.

    Returns:
        The classified meeting, or None when the event does not qualify.
    """

    filters = filters or DEFAULT_FILTERS

    if not event.is_meeting_candidate:
        return None

    start = parse_timestamp(event.start.date_time)
    end = parse_timestamp(event.end.date_time)
    duration = _duration_minutes(start, end) if start and end else None
    if start is None or duration is None:
        logger.debug("meeting_event_malformed", event_id=event.id)
        return None

    if duration <= 0 or duration >= MAX_MEETING_MINUTES:
        return None

    attendee_count = inclusion_attendee_count(event)
    if attendee_count < filters.min_attendees:
        return None

    if not matches_participant(event, filters.specific_participant):
        return None

    if filters.work_hours_only:
        try:
            in_work_hours = within_work_hours(start, tz)
        except OverflowError:
            # Converting to ``tz`` left the representable date range.
            logger.debug("meeting_event_malformed", event_id=event.id)
            return None
        if not in_work_hours:
            return None

    return ClassifiedMeeting(
        event=event,
        start=start,
        duration_minutes=duration,
        attendee_count=attendee_count,
        reported_attendees=reported_attendee_count(event),
    )


def filter_meetings(
    events: Iterable[CalendarEvent],
    filters: FilterOptions | None = None,
    *,
    tz: tzinfo | None = None,
) -> list[ClassifiedMeeting]:
    """Classify every event and keep the qualifying meetings, in input order."""
    meetings = []
    for event in events:
        meeting = classify_event(event, filters, tz=tz)
        if meeting is not None:
            meetings.append(meeting)
    return meetings


def _divide(numerator: float, denominator: float) -> float:
    # Float division by zero yields inf/nan instead of raising.
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def compute_stats(
    events: Iterable[CalendarEvent],
    hourly_rate: float,
    period_days: float,
    filters: FilterOptions | None = None,
    *,
    tz: tzinfo | None = None,
) -> CalculationResult:
    """Aggregate meeting statistics over a list of events.

    Args:
        events: Calendar events already narrowed to the reporting period.
        hourly_rate: Cost of one hour of your time.
        period_days: Length of the reporting period, used for weekly rates.
        filters: Meeting filters. If None, uses FilterOptions defaults.
        tz: Zone for the work-hours check. If None, each timestamp's own
            offset decides its local time.

    Returns:
        CalculationResult: Always fully populated. A zero or negative period
        gives infinite or NaN weekly rates rather than an error.
    """

    meetings = filter_meetings(events, filters, tz=tz)

    total_minutes = 0.0
    total_people_hours = 0.0
    total_attendees = 0
    meetings_with_attendees = 0
    for meeting in meetings:
        total_minutes += meeting.duration_minutes
        total_people_hours += (meeting.duration_minutes / 60) * meeting.attendee_count
        if meeting.reported_attendees is not None:
            total_attendees += meeting.reported_attendees
            meetings_with_attendees += 1

    total_meetings = len(meetings)
    total_hours = total_minutes / 60
    weeks = period_days / 7

    result = CalculationResult(
        total_meetings=total_meetings,
        total_hours=total_hours,
        total_people_hours=total_people_hours,
        average_duration_minutes=total_minutes / total_meetings if total_meetings > 0 else 0,
        average_attendees=(
            round_half_up(total_attendees / meetings_with_attendees)
            if meetings_with_attendees > 0
            else 1
        ),
        total_cost=total_hours * hourly_rate,
        meetings_per_week=_divide(total_meetings, weeks),
        hours_per_week=_divide(total_hours, weeks),
        period_days=period_days,
    )

    logger.debug(
        "meeting_stats_computed",
        total_meetings=result.total_meetings,
        total_hours=result.total_hours,
        period_days=period_days,
    )
    return result
