"""
Area between curves component - Simpson's rule on f1(x) - f2(x).

Intersections are located by scanning the interval left to right in equal
sub-steps. Each sign change of ``f1 - f2`` starts a short bisection, and the
midpoint is recorded (rounded to 3 decimals) once ``|f1 - f2|`` drops below
the tolerance. Intersections are reported in scan order and are not
deduplicated, so a root that lands exactly on a scan point can appear twice.
"""

from __future__ import annotations

from collections.abc import Callable

from calcdeck.domain.advice import Recommendation
from calcdeck.domain.errors import CalculationError, invalid_range
from calcdeck.domain.expressions import Expression, ExpressionEvaluationError
from calcdeck.domain.numeric import (
    check_bounds,
    check_intervals,
    evaluation_error,
    grid,
    parse_field,
    simpson,
)
from calcdeck.domain.rounding import round_half_up

from .models import (
    AreaBetweenCurvesInput,
    AreaBetweenCurvesOutput,
    AreaBetweenCurvesResult,
    CurvePoint,
    SolutionStep,
)

SCAN_STEPS = 1000
BISECTION_STEPS = 10
INTERSECTION_TOLERANCE = 1e-4
VISUAL_STEPS = 100
MAX_INTERVALS = 100_000


class _CurveError(Exception):
    def __init__(self, field: str, error: ExpressionEvaluationError) -> None:
        self.field = field
        self.error = error
        super().__init__(str(error))


class _Curve:
    """Expression bound to the input field it came from."""

    def __init__(self, field: str, expression: Expression) -> None:
        self.field = field
        self.expression = expression

    def __call__(self, x: float) -> float:
        try:
            return self.expression.evaluate(x)
        except ExpressionEvaluationError as e:
            raise _CurveError(self.field, e) from e


def find_intersections(
    difference: Callable[[float], float], lower: float, upper: float
) -> list[float]:
    """Approximate roots of ``difference`` on [lower, upper], in scan order."""
    xs = grid(lower, upper, SCAN_STEPS)
    values = [difference(x) for x in xs]
    found: list[float] = []

    for i in range(SCAN_STEPS):
        if values[i] * values[i + 1] > 0:
            continue

        left, right = xs[i], xs[i + 1]
        left_value = values[i]
        for _ in range(BISECTION_STEPS):
            mid = (left + right) / 2
            mid_value = difference(mid)
            if abs(mid_value) < INTERSECTION_TOLERANCE:
                found.append(round_half_up(mid, 3))
                break
            if mid_value * left_value > 0:
                left, left_value = mid, mid_value
            else:
                right = mid

    return found


def _validate(inp: AreaBetweenCurvesInput) -> tuple[list[CalculationError], list[Expression]]:
    errors: list[CalculationError] = []
    expressions = [
        expr
        for expr in (
            parse_field(errors, "function1", inp.function1),
            parse_field(errors, "function2", inp.function2),
        )
        if expr is not None
    ]

    check_bounds(errors, inp.lower_bound, inp.upper_bound)

    check_intervals(errors, "intervals", inp.intervals)
    if not errors and inp.intervals > MAX_INTERVALS:
        errors.append(invalid_range("intervals", f"intervals must be at most {MAX_INTERVALS}"))
    return errors, expressions


def _recommendations(intervals: int, intersections: list[float]) -> tuple[Recommendation, ...]:
    return (
        Recommendation(
            "Accuracy",
            "Increase number of intervals for better accuracy"
            if intervals < 100
            else "Current interval count provides good accuracy",
        ),
        Recommendation(
            "Integration Method", "Simpson's Rule provides good balance of accuracy and speed"
        ),
        Recommendation(
            "Domain",
            "Multiple intersection points found - verify domain"
            if intersections
            else "No intersection points in given domain",
        ),
        Recommendation("Verification", "Cross-check result with graphical representation"),
    )


def run(inp: AreaBetweenCurvesInput) -> AreaBetweenCurvesOutput:
    """
    Approximate the area enclosed between two curves.

    Args:
        inp: Expressions for both curves, the bounds and the interval count.

    Returns:
        AreaBetweenCurvesOutput with area, intersections and plot samples,
        or errors for unparsable expressions, bad bounds or points where a
        curve is undefined.
    """
    errors, expressions = _validate(inp)
    if errors:
        return AreaBetweenCurvesOutput(result=None, errors=errors, success=False)

    f1 = _Curve("function1", expressions[0])
    f2 = _Curve("function2", expressions[1])

    def difference(x: float) -> float:
        return f1(x) - f2(x)

    try:
        intersections = find_intersections(difference, inp.lower_bound, inp.upper_bound)
        area = abs(simpson(difference, inp.lower_bound, inp.upper_bound, inp.intervals))
        visual_points = tuple(
            CurvePoint(x=x, y1=f1(x), y2=f2(x))
            for x in grid(inp.lower_bound, inp.upper_bound, VISUAL_STEPS)
        )
    except _CurveError as e:
        return AreaBetweenCurvesOutput(
            result=None,
            errors=[evaluation_error(e.field, e.error)],
            success=False,
        )
    except ExpressionEvaluationError as e:
        # Every sample was finite but their weighted sum was not
        return AreaBetweenCurvesOutput(
            result=None, errors=[evaluation_error("function1", e)], success=False
        )

    area = round_half_up(area, 3)
    steps = (
        SolutionStep("Find Intersection Points", "f₁(x) = f₂(x)", len(intersections)),
        SolutionStep("Calculate Area", "∫[f₁(x) - f₂(x)]dx", area),
    )

    return AreaBetweenCurvesOutput(
        result=AreaBetweenCurvesResult(
            area=area,
            intersection_points=tuple(intersections),
            steps=steps,
            visual_points=visual_points,
            recommendations=_recommendations(inp.intervals, intersections),
        ),
        errors=[],
        success=True,
    )
