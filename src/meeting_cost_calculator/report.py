"""Plain-text renderings of meeting statistics."""

from __future__ import annotations

import math

from meeting_cost_calculator.models import CalculationResult
from meeting_cost_calculator.stats.methodology import (
    BURDEN_MULTIPLIER,
    CONTEXT_SWITCH_HOURS,
    CONTEXT_SWITCH_MINUTES,
    WORK_WEEKS_PER_YEAR,
    project_annual_cost,
    time_allocation,
    work_week_share,
)
from meeting_cost_calculator.utils import format_currency, format_number, round_half_up

SHARE_URL = "Quely.io/meeting-cost-calculator"


def _period_label(result: CalculationResult) -> str:
    return format_number(result.period_days, 0)


def _whole(value: float) -> str:
    # Weekly figures are infinite or NaN for an empty period.
    if not math.isfinite(value):
        return format_number(value)
    return str(round_half_up(value))


def format_report(result: CalculationResult) -> str:
    """Render the shareable meeting cost summary."""
    allocation = time_allocation(result)
    lines = [
        "MEETING COST REALITY CHECK",
        "",
        f'"You spent {_whole(result.total_hours)} hours across '
        f"{result.total_meetings} meetings in the last {_period_label(result)} days...\"",
        f"...and it cost roughly {format_currency(result.total_cost)} in focus time.",
        "",
        f"That is {_whole(work_week_share(result))}% of your entire work week "
        "gone to meetings.",
        "",
        f"Total Meetings: {result.total_meetings}",
        f"Avg Duration: {_whole(result.average_duration_minutes)} min",
        f"Avg Attendees: {result.average_attendees}",
        f"People-Hours: {format_number(result.total_people_hours)}",
        f"Context Switching: {format_number(allocation.distraction_hours)} hrs lost",
        "",
        f"Check your own stats at {SHARE_URL}",
    ]
    return "\n".join(lines)


def format_share_text(result: CalculationResult) -> str:
    """Short text for posting to social networks."""
    return (
        f"Just used Quely meeting calculator to review my meetings for the past "
        f"{_period_label(result)} days,\n\n"
        f"{_whole(result.total_hours)} hours across {result.total_meetings} meetings.\n"
        f"{format_currency(result.total_cost)} of my time.\n\n"
        f"Check yours at {SHARE_URL}"
    )


def format_methodology(result: CalculationResult, hourly_rate: float) -> str:
    """Show the arithmetic behind the annual projection."""
    projection = project_annual_cost(result, hourly_rate)
    rate = format_currency(hourly_rate)
    lines = [
        "How is this calculated?",
        "",
        "Step 1 - Your Value Rate",
        f"  We use your rate of {rate}/hr as the full cost of your time.",
        f"  (A salary would usually get a {BURDEN_MULTIPLIER}x burden multiplier for "
        "taxes and benefits.)",
        "",
        "Step 2 - Your Direct Meeting Cost (Annualized)",
        f"  {rate}/hr x {format_number(result.hours_per_week)} hrs/wk x "
        f"{WORK_WEEKS_PER_YEAR} weeks = {format_currency(projection.annual_meeting_cost)}",
        "",
        "Step 3 - The Distraction Tax",
        f"  You average {format_number(result.meetings_per_week)} meetings/week.",
        f"  {format_number(result.meetings_per_week)} mtgs x "
        f"{format_number(CONTEXT_SWITCH_HOURS, 2)} hrs ({CONTEXT_SWITCH_MINUTES}m) x {rate} x "
        f"{WORK_WEEKS_PER_YEAR} weeks = {format_currency(projection.annual_distraction_cost)}",
        "",
        "Total Projected Annual Waste",
        f"  {format_currency(projection.annual_meeting_cost)} + "
        f"{format_currency(projection.annual_distraction_cost)} = "
        f"{format_currency(projection.total_annual_waste)}",
    ]
    return "\n".join(lines)
