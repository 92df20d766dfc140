"""
Numerical helpers shared by the calculus calculators.
"""

from __future__ import annotations

import math
from collections.abc import Callable

from calcdeck.domain.errors import CalculationError, ErrorCode, check_range, invalid_range
from calcdeck.domain.expressions import (
    Expression,
    ExpressionEvaluationError,
    ExpressionSyntaxError,
    parse_expression,
)

# Integration bounds must lie in [-MAX_BOUND, MAX_BOUND] and be at least MIN_SPAN apart
MAX_BOUND = 1e12
MIN_SPAN = 1e-9


def parse_field(errors: list[CalculationError], field: str, text: str) -> Expression | None:
    """Parse a user expression, recording an error on failure."""
    try:
        return parse_expression(text)
    except ExpressionSyntaxError as e:
        errors.append(
            CalculationError(code=ErrorCode.UNPARSABLE_EXPRESSION, message=str(e), field=field)
        )
        return None


def evaluation_error(field: str, error: ExpressionEvaluationError) -> CalculationError:
    return CalculationError(code=error.code, message=str(error), field=field)


def check_intervals(errors: list[CalculationError], field: str, intervals: int) -> None:
    """Simpson's rule needs a positive, even interval count."""
    if isinstance(intervals, bool) or not isinstance(intervals, int):
        errors.append(
            CalculationError(ErrorCode.INVALID_RANGE, f"{field} must be a whole number", field)
        )
    elif intervals == 0:
        errors.append(
            CalculationError(ErrorCode.DIVISION_BY_ZERO, f"{field} must not be zero", field)
        )
    elif intervals < 0 or intervals % 2:
        errors.append(
            CalculationError(
                ErrorCode.INVALID_RANGE, f"{field} must be a positive even number", field
            )
        )


def check_bound(errors: list[CalculationError], field: str, value: float) -> bool:
    count = len(errors)
    check_range(errors, field, value, minimum=-MAX_BOUND, maximum=MAX_BOUND)
    return len(errors) == count


def check_bounds(errors: list[CalculationError], lower: float, upper: float) -> None:
    """Ordered integration bounds within range and not closer than ``MIN_SPAN``."""
    lower_ok = check_bound(errors, "lower_bound", lower)
    if not (check_bound(errors, "upper_bound", upper) and lower_ok):
        return
    if lower >= upper:
        errors.append(invalid_range("upper_bound", "upper_bound must be greater than lower_bound"))
    elif upper - lower < MIN_SPAN:
        errors.append(
            invalid_range("upper_bound", f"bounds must be at least {MIN_SPAN} apart")
        )


def require_finite(value: float, what: str) -> float:
    """
    Return ``value`` unchanged if it is finite.

    Raises:
        ExpressionEvaluationError: If sums of finite samples overflowed.
    """
    if not math.isfinite(value):
        raise ExpressionEvaluationError(
            ErrorCode.INVALID_RANGE, f"{what} is too large to represent"
        )
    return value


def simpson(f: Callable[[float], float], a: float, b: float, n: int) -> float:
    """Composite Simpson's rule over ``n`` (even) sub-intervals."""
    h = (b - a) / n
    total = f(a) + f(b)
    total += 4 * sum(f(a + i * h) for i in range(1, n, 2))
    total += 2 * sum(f(a + i * h) for i in range(2, n - 1, 2))
    return require_finite(h / 3 * total, "Integral")


def grid(a: float, b: float, steps: int) -> list[float]:
    """``steps + 1`` evenly spaced points from ``a`` to ``b`` inclusive."""
    h = (b - a) / steps
    return [a + i * h for i in range(steps + 1)]
