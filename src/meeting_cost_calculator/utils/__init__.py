"""Utility functions for Meeting Cost Calculator."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up.

    Python's ``round`` rounds halves to even, which would turn an average of
    2.5 attendees into 2.
    """
    return math.floor(value + 0.5)


def format_number(value: float, digits: int = 1) -> str:
    """Format with thousands separators and at most ``digits`` decimals.

    Trailing zeros are dropped, so ``2.0`` renders as ``2``.
    """
    if not math.isfinite(value):
        return str(value)
    text = f"{value:,.{digits}f}"
    if digits > 0:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_currency(value: float) -> str:
    """Format as whole US dollars, e.g. ``$1,234``."""
    if not math.isfinite(value):
        return f"${value}"
    amount = round_half_up(abs(value))
    sign = "-" if value < 0 and amount else ""
    return f"{sign}${amount:,}"
