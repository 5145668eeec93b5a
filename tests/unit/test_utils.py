"""Unit tests for number formatting helpers."""

import pytest

from meeting_cost_calculator.utils import format_currency, format_number, round_half_up


@pytest.mark.parametrize(("value", "expected"), [(2.5, 3), (2.4, 2), (3.5, 4), (0, 0)])
def test_round_half_up(value: float, expected: int) -> None:
    assert round_half_up(value) == expected


@pytest.mark.parametrize(
    ("value", "digits", "expected"),
    [(2.0, 1, "2"), (2.36, 1, "2.4"), (1234.5, 1, "1,234.5"), (0.383, 2, "0.38"), (30, 0, "30")],
)
def test_format_number(value: float, digits: int, expected: str) -> None:
    assert format_number(value, digits) == expected


def test_format_number_non_finite() -> None:
    assert format_number(float("inf")) == "inf"


@pytest.mark.parametrize(("value", "expected"), [(1234.4, "$1,234"), (0, "$0"), (99.5, "$100"), (-20, "-$20")])
def test_format_currency(value: float, expected: str) -> None:
    assert format_currency(value) == expected
