"""
Expression engine unit tests.

Covers tokenizing, precedence, implicit multiplication and evaluation errors.
"""

from __future__ import annotations

import math

import pytest

from calcdeck.domain.errors import ErrorCode
from calcdeck.domain.expressions import (
    MAX_NESTING,
    MAX_TREE_DEPTH,
    BinaryOp,
    Call,
    ExpressionEvaluationError,
    ExpressionSyntaxError,
    Number,
    UnaryOp,
    Variable,
    parse_expression,
)


class TestParsing:
    """Test the grammar."""

    def test_number_literals(self) -> None:
        assert parse_expression("2.5").evaluate(0) == 2.5
        assert parse_expression(".5").evaluate(0) == 0.5
        assert parse_expression("1e-3").evaluate(0) == 0.001

    def test_precedence(self) -> None:
        assert parse_expression("1 + 2 * 3").evaluate(0) == 7
        assert parse_expression("(1 + 2) * 3").evaluate(0) == 9
        assert parse_expression("8 / 4 / 2").evaluate(0) == 1

    def test_power_is_right_associative(self) -> None:
        assert parse_expression("2^3^2").evaluate(0) == 512
        assert parse_expression("2**3").evaluate(0) == 8

    def test_unary_minus_binds_looser_than_power(self) -> None:
        expr = parse_expression("-x^2")
        assert expr.root == UnaryOp("-", BinaryOp("^", Variable(), Number(2.0)))
        assert expr.evaluate(3) == -9

    def test_negative_exponent(self) -> None:
        assert parse_expression("2^-1").evaluate(0) == 0.5

    def test_implicit_multiplication(self) -> None:
        assert parse_expression("2x").evaluate(3) == 6
        assert parse_expression("3(x+1)").evaluate(1) == 6
        assert parse_expression("(x+1)(x-1)").evaluate(3) == 8
        assert parse_expression("2x^2").evaluate(3) == 18

    def test_implicit_multiplication_without_separators(self) -> None:
        assert parse_expression("xsin(x)").evaluate(math.pi / 2) == pytest.approx(math.pi / 2)
        assert parse_expression("x2").evaluate(3) == 6
        assert parse_expression("(x+1)3").evaluate(1) == 6
        assert parse_expression("2ex").evaluate(1) == pytest.approx(2 * math.e)
        assert parse_expression("pix").evaluate(2) == pytest.approx(2 * math.pi)

    def test_longest_name_wins(self) -> None:
        assert parse_expression("sinh(x)").root == Call("sinh", Variable())
        assert parse_expression("exp(x)").root == Call("exp", Variable())
        assert parse_expression("log10(x)").evaluate(100) == pytest.approx(2.0)

    def test_spaced_number_is_not_a_factor(self) -> None:
        with pytest.raises(ExpressionSyntaxError):
            parse_expression("x 2")

    def test_functions_and_constants(self) -> None:
        assert parse_expression("sin(pi/2)").evaluate(0) == pytest.approx(1.0)
        assert parse_expression("ln(e)").evaluate(0) == pytest.approx(1.0)
        assert parse_expression("sqrt(x)").evaluate(16) == 4
        assert parse_expression("abs(x)").evaluate(-2) == 2
        assert parse_expression("2sin(x)").evaluate(math.pi / 6) == pytest.approx(1.0)

    def test_names_are_case_insensitive(self) -> None:
        assert parse_expression("X + PI").evaluate(1) == pytest.approx(1 + math.pi)

    def test_call_node(self) -> None:
        assert parse_expression("cos(x)").root == Call("cos", Variable())

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "x +", "2 * (x", "x)", "foo(x)", "sin x", "2 $ 3", "y + 1"],
    )
    def test_invalid_expressions(self, text: str) -> None:
        with pytest.raises(ExpressionSyntaxError):
            parse_expression(text)

    def test_syntax_error_reports_position(self) -> None:
        with pytest.raises(ExpressionSyntaxError) as exc_info:
            parse_expression("x + $")
        assert exc_info.value.position == 4

    @pytest.mark.parametrize(
        "text",
        [
            "+".join(["x"] * 3000),
            "(" * 500 + "x" + ")" * 500,
            "-" * 3000 + "x",
            "2^" * 100 + "x",
            "sqrt(" * 100 + "x" + ")" * 100,
        ],
    )
    def test_nesting_limits(self, text: str) -> None:
        with pytest.raises(ExpressionSyntaxError):
            parse_expression(text)

    def test_within_nesting_limits(self) -> None:
        assert parse_expression("(" * MAX_NESTING + "x" + ")" * MAX_NESTING).evaluate(2) == 2
        assert parse_expression("+".join(["x"] * (MAX_TREE_DEPTH - 1))).evaluate(1) == (
            MAX_TREE_DEPTH - 1
        )


class TestEvaluation:
    """Test evaluation failures."""

    def test_division_by_zero(self) -> None:
        with pytest.raises(ExpressionEvaluationError) as exc_info:
            parse_expression("1/x").evaluate(0)
        assert exc_info.value.code == ErrorCode.DIVISION_BY_ZERO

    def test_zero_to_negative_power(self) -> None:
        with pytest.raises(ExpressionEvaluationError) as exc_info:
            parse_expression("x^-2").evaluate(0)
        assert exc_info.value.code == ErrorCode.DIVISION_BY_ZERO

    def test_domain_error(self) -> None:
        with pytest.raises(ExpressionEvaluationError) as exc_info:
            parse_expression("ln(x)").evaluate(-1)
        assert exc_info.value.code == ErrorCode.INVALID_RANGE

    def test_fractional_power_of_negative(self) -> None:
        with pytest.raises(ExpressionEvaluationError) as exc_info:
            parse_expression("x^0.5").evaluate(-4)
        assert exc_info.value.code == ErrorCode.INVALID_RANGE

    def test_overflow(self) -> None:
        with pytest.raises(ExpressionEvaluationError) as exc_info:
            parse_expression("exp(x)").evaluate(1000)
        assert exc_info.value.code == ErrorCode.INVALID_RANGE

    def test_expression_is_callable(self) -> None:
        f = parse_expression("x^2 + 1")
        assert f(2) == 5
