"""Meeting statistics: the engine plus period and methodology helpers."""

from .engine import (
    ClassifiedMeeting,
    classify_event,
    compute_stats,
    filter_meetings,
    inclusion_attendee_count,
    reported_attendee_count,
)
from .methodology import project_annual_cost, time_allocation, work_week_share
from .period import PERIOD_CHOICES, events_in_period

__all__ = [
    "ClassifiedMeeting",
    "PERIOD_CHOICES",
    "classify_event",
    "compute_stats",
    "events_in_period",
    "filter_meetings",
    "inclusion_attendee_count",
    "project_annual_cost",
    "reported_attendee_count",
    "time_allocation",
    "work_week_share",
]
