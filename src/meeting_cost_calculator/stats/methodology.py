"""Annualization and distraction-tax figures.

Linear post-processing of a CalculationResult for the methodology view and the
time-allocation breakdown. Nothing here feeds back into the engine.
"""

from __future__ import annotations

from meeting_cost_calculator.models import AnnualProjection, CalculationResult, TimeAllocation

WORK_WEEKS_PER_YEAR = 48
WORK_HOURS_PER_WEEK = 40
# Time needed to refocus after an interruption (Gloria Mark, UC Irvine).
CONTEXT_SWITCH_MINUTES = 23
CONTEXT_SWITCH_HOURS = CONTEXT_SWITCH_MINUTES / 60
# Salary-to-cost multiplier for taxes and benefits; shown, never applied to a
# rate the user entered directly.
BURDEN_MULTIPLIER = 1.3


def project_annual_cost(result: CalculationResult, hourly_rate: float) -> AnnualProjection:
    """Extrapolate weekly meeting time and distraction to a working year."""
    annual_meeting_cost = result.hours_per_week * hourly_rate * WORK_WEEKS_PER_YEAR
    distraction_hours_per_week = result.meetings_per_week * CONTEXT_SWITCH_HOURS
    annual_distraction_cost = distraction_hours_per_week * hourly_rate * WORK_WEEKS_PER_YEAR

    return AnnualProjection(
        hourly_rate=hourly_rate,
        annual_meeting_cost=annual_meeting_cost,
        distraction_hours_per_week=distraction_hours_per_week,
        annual_distraction_cost=annual_distraction_cost,
        total_annual_waste=annual_meeting_cost + annual_distraction_cost,
    )


def time_allocation(result: CalculationResult) -> TimeAllocation:
    """Split the period's working hours into meetings, switching and the rest."""
    capacity_hours = result.period_days / 7 * WORK_HOURS_PER_WEEK
    distraction_hours = result.total_meetings * CONTEXT_SWITCH_HOURS
    productive_hours = max(0.0, capacity_hours - result.total_hours - distraction_hours)

    return TimeAllocation(
        capacity_hours=capacity_hours,
        meeting_hours=result.total_hours,
        distraction_hours=distraction_hours,
        productive_hours=productive_hours,
    )


def work_week_share(result: CalculationResult) -> float:
    """Weekly meeting hours as a percentage of a 40-hour week."""
    return result.hours_per_week / WORK_HOURS_PER_WEEK * 100
