"""
Tests for the shared domain helpers: rounding, error checks and numerics.
"""

from __future__ import annotations

import math

import pytest

from calcdeck.domain.errors import (
    CalculationError,
    ErrorCode,
    check_choice,
    check_finite,
    check_integer,
    check_range,
)
from calcdeck.domain.numeric import check_intervals, grid, simpson
from calcdeck.domain.rounding import round_currency, round_half_up, round_int
from calcdeck.domain.units import to_metric


class TestRounding:
    @pytest.mark.parametrize(
        ("value", "places", "expected"),
        [
            (2.5, 0, 3.0),
            (-2.5, 0, -2.0),
            (1.234, 2, 1.23),
            (1.235, 1, 1.2),
            (0.125, 2, 0.13),
        ],
    )
    def test_half_up(self, value: float, places: int, expected: float) -> None:
        assert round_half_up(value, places) == pytest.approx(expected)

    def test_non_finite_passes_through(self) -> None:
        assert math.isnan(round_half_up(float("nan"), 2))
        assert round_half_up(math.inf) == math.inf

    def test_round_int(self) -> None:
        assert round_int(0.5) == 1
        assert round_int(-0.5) == 0
        assert isinstance(round_int(3.2), int)

    def test_currency(self) -> None:
        assert round_currency(12.345678) == pytest.approx(12.35)
        assert round_currency(-0.001) == pytest.approx(0.0)


class TestChecks:
    def test_finite(self) -> None:
        errors: list[CalculationError] = []

        assert check_finite(errors, "a", 1.5)
        assert not check_finite(errors, "b", math.nan)
        assert not check_finite(errors, "c", True)
        assert [e.field for e in errors] == ["b", "c"]

    def test_range_bounds(self) -> None:
        errors: list[CalculationError] = []
        check_range(errors, "low", -1, minimum=0)
        check_range(errors, "edge", 0, minimum=0, exclusive_minimum=True)
        check_range(errors, "high", 11, maximum=10)
        check_range(errors, "ok", 0, minimum=0, maximum=10)

        assert [e.field for e in errors] == ["low", "edge", "high"]
        assert all(e.code == ErrorCode.INVALID_RANGE for e in errors)

    def test_choice_lists_allowed_values(self) -> None:
        errors: list[CalculationError] = []
        check_choice(errors, "unit", "stone", ("metric", "imperial"))

        assert "metric, imperial" in errors[0].message

    @pytest.mark.parametrize("value", [1.5, "3", True])
    def test_integer_rejects_non_integers(self, value) -> None:
        errors: list[CalculationError] = []
        check_integer(errors, "count", value)

        assert errors[0].field == "count"

    def test_error_code_values(self) -> None:
        assert ErrorCode.INVALID_RANGE.value == "invalid_range"
        assert ErrorCode.DIVISION_BY_ZERO.value == "division_by_zero"
        assert ErrorCode.UNPARSABLE_EXPRESSION.value == "unparsable_expression"


class TestNumeric:
    def test_simpson_integrates_cubic_exactly(self) -> None:
        assert simpson(lambda x: x**3, 0.0, 2.0, 2) == pytest.approx(4.0)

    def test_grid_includes_both_ends(self) -> None:
        points = grid(0.0, 1.0, 4)

        assert points == pytest.approx([0.0, 0.25, 0.5, 0.75, 1.0])

    @pytest.mark.parametrize(
        ("intervals", "code"),
        [
            (0, ErrorCode.DIVISION_BY_ZERO),
            (5, ErrorCode.INVALID_RANGE),
            (-4, ErrorCode.INVALID_RANGE),
            (2.0, ErrorCode.INVALID_RANGE),
        ],
    )
    def test_interval_checks(self, intervals, code: ErrorCode) -> None:
        errors: list[CalculationError] = []
        check_intervals(errors, "intervals", intervals)

        assert errors[0].code == code

    def test_even_intervals_accepted(self) -> None:
        errors: list[CalculationError] = []
        check_intervals(errors, "intervals", 10)

        assert errors == []


class TestUnits:
    def test_imperial_conversion(self) -> None:
        kg, cm = to_metric(100, 10, "imperial")

        assert kg == pytest.approx(45.3592)
        assert cm == pytest.approx(25.4)

    def test_metric_unchanged(self) -> None:
        assert to_metric(70, 175, "metric") == (70, 175)
