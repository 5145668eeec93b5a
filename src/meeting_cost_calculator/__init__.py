"""Meeting Cost Calculator - what your calendar actually costs you.

This package fetches a window of Google Calendar events for one person and
turns them into meeting statistics: counts, hours, cost and the distraction
overhead of context switching.
"""

__version__ = "0.1.0"
__author__ = "Quely"

from meeting_cost_calculator.config import Settings, get_settings
from meeting_cost_calculator.models import CalculationResult, CalendarEvent, FilterOptions
from meeting_cost_calculator.stats import compute_stats

__all__ = [
    "CalculationResult",
    "CalendarEvent",
    "FilterOptions",
    "Settings",
    "compute_stats",
    "get_settings",
    "__version__",
    "__author__",
]
