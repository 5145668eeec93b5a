"""Data models for Meeting Cost Calculator.

This module contains Pydantic models for calculator inputs and outputs. All of
them are frozen: every call builds fresh values and nothing is mutated after.
"""

from pydantic import BaseModel, ConfigDict, Field

from meeting_cost_calculator.models.calendar_event import Attendee, CalendarEvent, EventTime


class FilterOptions(BaseModel):
    """Filters applied by one statistics run."""

    model_config = ConfigDict(frozen=True)

    min_attendees: int = Field(
        default=2,
        ge=1,
        description="Minimum participant count to count as a meeting",
    )
    specific_participant: str | None = Field(
        default=None,
        description="Only keep events with an attendee matching this text",
    )
    work_hours_only: bool = Field(
        default=False,
        description="Only keep events starting Mon-Fri, 09:00-17:59",
    )


class CalculationResult(BaseModel):
    """Aggregate meeting statistics for one reporting period."""

    model_config = ConfigDict(frozen=True)

    total_meetings: int = Field(description="Number of qualifying meetings")
    total_hours: float = Field(description="Hours spent in qualifying meetings")
    total_people_hours: float = Field(description="Meeting hours times attendee count")
    average_duration_minutes: float = Field(description="Mean meeting length")
    average_attendees: int = Field(description="Mean attendee count, rounded")
    total_cost: float = Field(description="total_hours times the hourly rate")
    meetings_per_week: float = Field(description="Meetings per week over the period")
    hours_per_week: float = Field(description="Meeting hours per week over the period")
    period_days: float = Field(description="Reporting period length in days")


class AnnualProjection(BaseModel):
    """Yearly extrapolation of weekly meeting figures."""

    model_config = ConfigDict(frozen=True)

    hourly_rate: float
    annual_meeting_cost: float
    distraction_hours_per_week: float
    annual_distraction_cost: float
    total_annual_waste: float


class TimeAllocation(BaseModel):
    """How the working hours of a reporting period were spent."""

    model_config = ConfigDict(frozen=True)

    capacity_hours: float
    meeting_hours: float
    distraction_hours: float
    productive_hours: float


__all__ = [
    "AnnualProjection",
    "Attendee",
    "CalculationResult",
    "CalendarEvent",
    "EventTime",
    "FilterOptions",
    "TimeAllocation",
]
