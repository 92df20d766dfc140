"""
Wronskian component - determinant of the derivative matrix of a function set.

Row ``i`` of the matrix holds function ``i`` and its first ``n - 1``
derivatives at the point, estimated by repeated central differences.
"""

from __future__ import annotations

import json
import math

from calcdeck.domain.advice import Recommendation
from calcdeck.domain.errors import CalculationError, invalid_range
from calcdeck.domain.expressions import Expression, ExpressionEvaluationError
from calcdeck.domain.numeric import check_bound, evaluation_error, parse_field, require_finite

from .models import (
    WronskianInput,
    WronskianOutput,
    WronskianProperty,
    WronskianResult,
    WronskianStep,
)

MAX_FUNCTIONS = 4
DERIVATIVE_STEP = 1e-3
INDEPENDENCE_THRESHOLD = 1e-4


def derivative(expression: Expression, x: float, order: int) -> float:
    """``order``-th derivative of ``expression`` at ``x`` by central differences."""
    if order == 0:
        return expression.evaluate(x)
    h = DERIVATIVE_STEP
    return (
        derivative(expression, x + h, order - 1) - derivative(expression, x - h, order - 1)
    ) / (2 * h)


def determinant(matrix: list[list[float]]) -> float:
    """Cofactor expansion along the first row."""
    n = len(matrix)
    if n == 1:
        return matrix[0][0]
    if n == 2:
        return matrix[0][0] * matrix[1][1] - matrix[0][1] * matrix[1][0]

    total = 0.0
    for i in range(n):
        minor = [row[:i] + row[i + 1 :] for row in matrix[1:]]
        sign = -1 if i % 2 else 1
        total += sign * matrix[0][i] * determinant(minor)
    return total


def _validate(inp: WronskianInput) -> tuple[list[CalculationError], list[Expression]]:
    errors: list[CalculationError] = []
    if not 1 <= len(inp.functions) <= MAX_FUNCTIONS:
        errors.append(
            invalid_range("functions", f"Provide between 1 and {MAX_FUNCTIONS} functions")
        )

    expressions = []
    for i, text in enumerate(inp.functions):
        expression = parse_field(errors, f"functions[{i}]", text)
        if expression is not None:
            expressions.append(expression)

    check_bound(errors, "point", inp.point)
    return errors, expressions


def run(inp: WronskianInput) -> WronskianOutput:
    """
    Evaluate the Wronskian of a set of functions at a point.

    The functions are reported linearly independent when ``|W| > 1e-4``.
    """
    errors, expressions = _validate(inp)
    if errors:
        return WronskianOutput(result=None, errors=errors, success=False)

    n = len(expressions)
    matrix: list[list[float]] = []
    for i, expression in enumerate(expressions):
        try:
            matrix.append(
                [
                    require_finite(derivative(expression, inp.point, j), "Derivative")
                    for j in range(n)
                ]
            )
        except ExpressionEvaluationError as e:
            return WronskianOutput(
                result=None,
                errors=[evaluation_error(f"functions[{i}]", e)],
                success=False,
            )

    det = determinant(matrix)
    if not math.isfinite(det):
        return WronskianOutput(
            result=None,
            errors=[invalid_range("functions", "Wronskian is too large to represent")],
            success=False,
        )
    is_independent = abs(det) > INDEPENDENCE_THRESHOLD

    steps = (
        WronskianStep(
            "Build Matrix",
            "Evaluate functions and their derivatives",
            f"W({inp.point}) = {json.dumps(matrix)}",
        ),
        WronskianStep("Calculate Determinant", "Compute Wronskian determinant", f"{det:.4f}"),
        WronskianStep(
            "Check Independence",
            "Verify if Wronskian is non-zero",
            "Functions are linearly independent"
            if is_independent
            else "Functions are linearly dependent",
        ),
    )
    properties = (
        WronskianProperty("Order", str(n), "Number of functions in the set"),
        WronskianProperty(
            "Evaluation Point", str(inp.point), "Point at which Wronskian is evaluated"
        ),
        WronskianProperty("Determinant", f"{det:.4f}", "Value of Wronskian determinant"),
    )
    recommendations = (
        Recommendation(
            "Verification",
            "Verify independence at multiple points for stronger conclusion"
            if is_independent
            else "Check for linear combinations between functions",
        ),
        Recommendation(
            "Application",
            "Functions can form a fundamental set of solutions"
            if is_independent
            else "Consider finding alternative functions",
        ),
        Recommendation(
            "Analysis",
            "Consider scaling functions for numerical stability"
            if abs(det) < 1
            else "Good numerical stability",
        ),
        Recommendation(
            "Further Steps", "Consider checking for special properties like constant Wronskian"
        ),
    )

    return WronskianOutput(
        result=WronskianResult(
            determinant=det,
            matrix=tuple(tuple(row) for row in matrix),
            steps=steps,
            is_independent=is_independent,
            properties=properties,
            recommendations=recommendations,
        ),
        errors=[],
        success=True,
    )
