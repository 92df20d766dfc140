"""
Integral component unit tests.

Covers the symbolic antiderivative path and composite Simpson's rule.
"""

from __future__ import annotations

import math

import pytest

from calcdeck.components.integral import (
    AntiderivativeInput,
    SimpsonInput,
    run,
    run_antiderivative,
    run_simpson,
)
from calcdeck.components.integral.component import NO_CLOSED_FORM_NOTE
from calcdeck.domain.errors import ErrorCode
from calcdeck.domain.expressions import parse_expression

# --- Antiderivative ---


class TestAntiderivative:
    """Polynomial-like integrands."""

    @pytest.mark.parametrize(
        ("expression", "expected"),
        [
            ("x^2", "x^3/3 + C"),
            ("3x^2 + 2x + 1", "x^3 + x^2 + x + C"),
            ("5", "5*x + C"),
            ("1/x", "ln(abs(x)) + C"),
            ("x^0.5", "2*x^(3/2)/3 + C"),
            ("-4x^3", "-x^4 + C"),
            ("x^2 - x", "x^3/3 - x^2/2 + C"),
        ],
    )
    def test_closed_form(self, expression: str, expected: str) -> None:
        out = run_antiderivative(AntiderivativeInput(expression=expression))

        assert out.success
        assert out.result.antiderivative == expected
        assert out.result.definite_result is None
        assert out.result.note is None

    def test_antiderivative_is_reparseable(self) -> None:
        out = run_antiderivative(AntiderivativeInput(expression="6x^2 + 4/x"))

        text = out.result.antiderivative.removesuffix(" + C")
        f = parse_expression(text)
        assert f(2.0) == pytest.approx(16 + 4 * math.log(2))

    def test_sum_rule_steps(self) -> None:
        out = run_antiderivative(AntiderivativeInput(expression="3x^2 + 2x + 1"))

        rules = [step.rule for step in out.result.steps]
        assert rules == ["Sum Rule", "Power Rule", "Power Rule", "Constant Rule"]

    def test_single_term_has_no_sum_step(self) -> None:
        out = run_antiderivative(AntiderivativeInput(expression="x^2"))

        assert [step.rule for step in out.result.steps] == ["Power Rule"]

    def test_rules_reference_table(self) -> None:
        out = run_antiderivative(AntiderivativeInput(expression="x"))

        names = {rule.name for rule in out.result.rules}
        assert {"Power Rule", "Constant Rule", "Sum Rule"} <= names

    def test_non_polynomial_returns_note(self) -> None:
        out = run_antiderivative(AntiderivativeInput(expression="sin(x)"))

        assert out.success
        assert out.result.antiderivative is None
        assert out.result.note == NO_CLOSED_FORM_NOTE

    @pytest.mark.parametrize(
        "expression",
        [
            "2^20000",
            "1e999*x",
            "(3x)^2000",
            "+".join(f"x^{i}" for i in range(70)),
        ],
    )
    def test_oversized_polynomial_returns_note(self, expression: str) -> None:
        out = run_antiderivative(AntiderivativeInput(expression=expression))

        assert out.success
        assert out.result.antiderivative is None
        assert out.result.note == NO_CLOSED_FORM_NOTE

    def test_unparsable_expression(self) -> None:
        out = run_antiderivative(AntiderivativeInput(expression="x + * 2"))

        assert not out.success
        assert out.errors[0].code == ErrorCode.UNPARSABLE_EXPRESSION
        assert out.errors[0].field == "expression"


class TestDefiniteIntegral:
    def test_x_squared_zero_to_three(self) -> None:
        out = run_antiderivative(
            AntiderivativeInput(expression="x^2", lower_bound=0.0, upper_bound=3.0)
        )

        assert out.result.definite_result == pytest.approx(9.0)
        assert out.result.steps[-1].rule == "Definite Integral"
        assert len(out.result.visual_points) == 51

    def test_log_term_between_positive_bounds(self) -> None:
        out = run_antiderivative(
            AntiderivativeInput(expression="1/x", lower_bound=1.0, upper_bound=math.e)
        )

        assert out.result.definite_result == pytest.approx(1.0)

    def test_singularity_between_bounds(self) -> None:
        out = run_antiderivative(
            AntiderivativeInput(expression="1/x", lower_bound=-1.0, upper_bound=1.0)
        )

        assert not out.success
        assert out.errors[0].code == ErrorCode.INVALID_RANGE
        assert out.errors[0].field == "expression"

    def test_visual_points_skip_undefined_samples(self) -> None:
        out = run_antiderivative(
            AntiderivativeInput(expression="ln(x)", lower_bound=-1.0, upper_bound=1.0)
        )

        assert out.success
        assert out.result.antiderivative is None
        assert all(point.x > 0 for point in out.result.visual_points)

    @pytest.mark.parametrize(
        ("lower", "upper", "field"),
        [
            (0.0, None, "upper_bound"),
            (None, 1.0, "lower_bound"),
            (0.0, math.inf, "upper_bound"),
        ],
    )
    def test_incomplete_bounds(self, lower, upper, field: str) -> None:
        out = run_antiderivative(
            AntiderivativeInput(expression="x", lower_bound=lower, upper_bound=upper)
        )

        assert not out.success
        assert out.errors[0].field == field

    def test_overflowing_antiderivative_reports_bound(self) -> None:
        out = run_antiderivative(
            AntiderivativeInput(expression="x^1000", lower_bound=-1e12, upper_bound=1e12)
        )

        assert not out.success
        assert out.errors[0].code == ErrorCode.INVALID_RANGE
        assert out.errors[0].field == "upper_bound"

    def test_bounds_beyond_limit(self) -> None:
        out = run_antiderivative(
            AntiderivativeInput(expression="x", lower_bound=0.0, upper_bound=1e100)
        )

        assert not out.success
        assert out.errors[0].code == ErrorCode.INVALID_RANGE
        assert out.errors[0].field == "upper_bound"


# --- Simpson's Rule ---


class TestSimpson:
    def test_quadratic_is_exact(self) -> None:
        out = run_simpson(
            SimpsonInput(expression="x^2", lower_bound=0.0, upper_bound=1.0, intervals=2)
        )

        assert out.success
        assert out.result.result == pytest.approx(1 / 3, abs=1e-12)
        assert out.result.error.bound < 1e-3
        assert len(out.result.points) == 5

    def test_sine_over_half_period(self) -> None:
        out = run_simpson(
            SimpsonInput(
                expression="sin(x)", lower_bound=0.0, upper_bound=math.pi, intervals=10
            )
        )

        assert out.result.result == pytest.approx(2.0, abs=1e-3)
        assert out.result.error.relative == pytest.approx(
            out.result.error.absolute / out.result.result
        )

    def test_step_breakdown(self) -> None:
        out = run_simpson(
            SimpsonInput(expression="x", lower_bound=0.0, upper_bound=2.0, intervals=4)
        )

        steps = out.result.steps
        assert [s.step for s in steps] == [
            "Initial Values",
            "Odd Terms",
            "Even Terms",
            "Final Result",
        ]
        assert steps[0].value == pytest.approx(2.0)
        assert steps[1].value == pytest.approx(4 * (0.5 + 1.5))
        assert steps[2].value == pytest.approx(2 * 1.0)
        assert steps[3].value == pytest.approx(2.0)

    def test_zero_result_has_no_relative_error(self) -> None:
        out = run_simpson(
            SimpsonInput(expression="x", lower_bound=-1.0, upper_bound=1.0, intervals=2)
        )

        assert out.result.result == pytest.approx(0.0)
        assert out.result.error.relative is None

    @pytest.mark.parametrize(
        ("intervals", "code"),
        [
            (3, ErrorCode.INVALID_RANGE),
            (-2, ErrorCode.INVALID_RANGE),
            (0, ErrorCode.DIVISION_BY_ZERO),
        ],
    )
    def test_bad_interval_counts(self, intervals: int, code: ErrorCode) -> None:
        out = run_simpson(
            SimpsonInput(expression="x", lower_bound=0.0, upper_bound=1.0, intervals=intervals)
        )

        assert not out.success
        assert out.errors[0].code == code
        assert out.errors[0].field == "intervals"

    def test_reversed_bounds(self) -> None:
        out = run_simpson(SimpsonInput(expression="x", lower_bound=2.0, upper_bound=1.0))

        assert out.errors[0].field == "upper_bound"

    def test_undefined_sample_reports_division_by_zero(self) -> None:
        out = run_simpson(
            SimpsonInput(expression="1/x", lower_bound=-1.0, upper_bound=1.0, intervals=2)
        )

        assert not out.success
        assert out.errors[0].code == ErrorCode.DIVISION_BY_ZERO
        assert out.errors[0].field == "expression"

    @pytest.mark.parametrize(("lower", "upper"), [(0.0, 1e100), (-1e300, 0.0), (0.0, 1e-90)])
    def test_extreme_bounds(self, lower: float, upper: float) -> None:
        out = run_simpson(
            SimpsonInput(expression="x", lower_bound=lower, upper_bound=upper, intervals=2)
        )

        assert not out.success
        assert out.errors[0].code == ErrorCode.INVALID_RANGE
        assert out.errors[0].field in ("lower_bound", "upper_bound")

    def test_widest_bounds_give_finite_estimate(self) -> None:
        out = run_simpson(SimpsonInput(expression="x^2", lower_bound=-1e12, upper_bound=1e12))

        assert out.success
        assert math.isfinite(out.result.result)
        assert math.isfinite(out.result.error.bound)

    def test_overflowing_sum_reports_expression(self) -> None:
        out = run_simpson(SimpsonInput(expression="1e308", lower_bound=0.0, upper_bound=1e12))

        assert not out.success
        assert out.errors[0].code == ErrorCode.INVALID_RANGE
        assert out.errors[0].field == "expression"


class TestDispatch:
    def test_routes_by_input_type(self) -> None:
        assert run(AntiderivativeInput(expression="x")).result.antiderivative == "x^2/2 + C"
        simpson = run(SimpsonInput(expression="1", lower_bound=0.0, upper_bound=1.0))
        assert simpson.result.result == pytest.approx(1.0)

    def test_unknown_input(self) -> None:
        with pytest.raises(ValueError):
            run(object())  # type: ignore[arg-type]
