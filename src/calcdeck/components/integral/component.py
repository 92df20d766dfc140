"""
Integral component - symbolic antiderivatives and Simpson's rule.

``run_antiderivative`` handles polynomial-like input (sums of ``c * x^p`` with
rational ``p``) exactly. Anything else is reported with a note pointing at
``run_simpson`` rather than as an error.
"""

from __future__ import annotations

import math
from fractions import Fraction

from calcdeck.domain.advice import Recommendation
from calcdeck.domain.errors import CalculationError, invalid_range
from calcdeck.domain.expressions import Expression, ExpressionEvaluationError, parse_expression
from calcdeck.domain.numeric import (
    check_bound,
    check_bounds,
    check_intervals,
    evaluation_error,
    grid,
    parse_field,
    require_finite,
)

from ._impl import LOG_POWER, NotPolynomialError, format_term, integrate_term, render, to_polynomial
from .models import (
    AntiderivativeInput,
    AntiderivativeOutput,
    AntiderivativeResult,
    ErrorEstimate,
    IntegrationRule,
    Point,
    RuleStep,
    SimpsonInput,
    SimpsonOutput,
    SimpsonResult,
    SimpsonStep,
)

RULES: tuple[IntegrationRule, ...] = (
    IntegrationRule("Power Rule", "∫xⁿ dx = (xⁿ⁺¹)/(n+1) + C", "∫x² dx = x³/3 + C"),
    IntegrationRule("Constant Rule", "∫a dx = ax + C", "∫5 dx = 5x + C"),
    IntegrationRule(
        "Sum Rule",
        "∫(f(x) + g(x)) dx = ∫f(x) dx + ∫g(x) dx",
        "∫(x² + x) dx = x³/3 + x²/2 + C",
    ),
    IntegrationRule("Log Rule", "∫x⁻¹ dx = ln|x| + C", "∫3/x dx = 3ln|x| + C"),
    IntegrationRule("Exponential Rule", "∫eˣ dx = eˣ + C", "∫eˣ dx = eˣ + C"),
)

ANTIDERIVATIVE_VISUAL_STEPS = 50
SIMPSON_MAX_VISUAL_STEPS = 100
MAX_INTERVALS = 100_000
DERIVATIVE_STEP = 1e-2

NO_CLOSED_FORM_NOTE = (
    "No closed-form rule applies to this expression; use Simpson's rule for a numerical value"
)


# --- Antiderivative ---


def _validate_bounds(errors: list[CalculationError], inp: AntiderivativeInput) -> bool:
    """Returns True when a definite integral was requested and the bounds are usable."""
    if inp.lower_bound is None and inp.upper_bound is None:
        return False
    if inp.lower_bound is None:
        errors.append(invalid_range("lower_bound", "lower_bound is required with upper_bound"))
        return False
    if inp.upper_bound is None:
        errors.append(invalid_range("upper_bound", "upper_bound is required with lower_bound"))
        return False
    lower_ok = check_bound(errors, "lower_bound", inp.lower_bound)
    return check_bound(errors, "upper_bound", inp.upper_bound) and lower_ok


def _rule_step(power: Fraction, integrated: str) -> RuleStep:
    if power == LOG_POWER:
        return RuleStep("Log Rule", integrated, "Integral of x^(-1) is ln|x|")
    if power == 0:
        return RuleStep("Constant Rule", integrated, "Multiply constant by x")
    return RuleStep("Power Rule", integrated, "Increase power by 1 and divide by new power")


def _signed(power: Fraction, coef: Fraction, *, log: bool = False) -> str:
    text = format_term(power, coef, log=log)
    return f"-{text}" if coef < 0 else text


def _visual_points(expression: Expression, lower: float, upper: float) -> tuple[Point, ...]:
    points: list[Point] = []
    for x in grid(lower, upper, ANTIDERIVATIVE_VISUAL_STEPS):
        try:
            points.append(Point(x=x, y=expression.evaluate(x)))
        except ExpressionEvaluationError:
            # Undefined samples are left out of the plot.
            continue
    return tuple(points)


def run_antiderivative(inp: AntiderivativeInput) -> AntiderivativeOutput:
    """
    Find the antiderivative of a polynomial-like expression.

    Args:
        inp: The integrand and optional bounds for a definite integral.

    Returns:
        AntiderivativeOutput. ``antiderivative`` is a re-parseable expression
        followed by ``+ C``, or None with a note when no rule applies.
    """
    errors: list[CalculationError] = []
    expression = parse_field(errors, "expression", inp.expression)
    definite = _validate_bounds(errors, inp)
    if errors:
        return AntiderivativeOutput(result=None, errors=errors, success=False)
    assert expression is not None

    visual_points: tuple[Point, ...] = ()
    if definite:
        assert inp.lower_bound is not None and inp.upper_bound is not None
        visual_points = _visual_points(expression, inp.lower_bound, inp.upper_bound)

    try:
        polynomial = to_polynomial(expression.root)
    except NotPolynomialError:
        return AntiderivativeOutput(
            result=AntiderivativeResult(
                antiderivative=None,
                steps=(),
                definite_result=None,
                visual_points=visual_points,
                rules=RULES,
                note=NO_CLOSED_FORM_NOTE,
            ),
            errors=[],
            success=True,
        )

    steps: list[RuleStep] = []
    ordered = sorted(polynomial.items(), reverse=True)
    if len(ordered) > 1:
        steps.append(
            RuleStep(
                "Sum Rule",
                " + ".join(f"∫{_signed(p, c)} dx" for p, c in ordered),
                "Integrate each term separately",
            )
        )

    terms: list[tuple[Fraction, Fraction, bool]] = []
    for power, coef in ordered:
        new_power, new_coef = integrate_term(power, coef)
        log = power == LOG_POWER
        terms.append((new_power, new_coef, log))
        steps.append(_rule_step(power, _signed(new_power, new_coef, log=log)))

    rendered = render(terms)
    definite_result: float | None = None

    if definite:
        assert inp.lower_bound is not None and inp.upper_bound is not None
        low, high = sorted((inp.lower_bound, inp.upper_bound))
        if low <= 0 <= high and any(power <= -1 for power in polynomial):
            return AntiderivativeOutput(
                result=None,
                errors=[
                    invalid_range(
                        "expression", "Integrand is unbounded at x = 0 between the bounds"
                    )
                ],
                success=False,
            )

        antiderivative = parse_expression(rendered)
        try:
            upper_value = antiderivative.evaluate(inp.upper_bound)
        except ExpressionEvaluationError as e:
            return AntiderivativeOutput(
                result=None, errors=[evaluation_error("upper_bound", e)], success=False
            )
        try:
            lower_value = antiderivative.evaluate(inp.lower_bound)
        except ExpressionEvaluationError as e:
            return AntiderivativeOutput(
                result=None, errors=[evaluation_error("lower_bound", e)], success=False
            )

        definite_result = upper_value - lower_value
        if not math.isfinite(definite_result):
            return AntiderivativeOutput(
                result=None,
                errors=[invalid_range("expression", "Definite integral is too large to represent")],
                success=False,
            )
        steps.append(
            RuleStep(
                "Definite Integral",
                f"[{rendered}]_{{{inp.lower_bound}}}^{{{inp.upper_bound}}}",
                "Evaluate antiderivative at upper bound minus lower bound",
            )
        )

    return AntiderivativeOutput(
        result=AntiderivativeResult(
            antiderivative=f"{rendered} + C",
            steps=tuple(steps),
            definite_result=definite_result,
            visual_points=visual_points,
            rules=RULES,
        ),
        errors=[],
        success=True,
    )


# --- Simpson's Rule ---


def _validate_simpson(inp: SimpsonInput) -> tuple[list[CalculationError], Expression | None]:
    errors: list[CalculationError] = []
    expression = parse_field(errors, "expression", inp.expression)

    check_bounds(errors, inp.lower_bound, inp.upper_bound)

    check_intervals(errors, "intervals", inp.intervals)
    if not errors and inp.intervals > MAX_INTERVALS:
        errors.append(invalid_range("intervals", f"intervals must be at most {MAX_INTERVALS}"))
    return errors, expression


def fourth_derivative(expression: Expression, x: float, lower: float, upper: float) -> float:
    """
    Five-point central difference estimate of f''''(x).

    The stencil is shifted inward near the bounds so it never samples outside
    [lower, upper].
    """
    h = min(DERIVATIVE_STEP, (upper - lower) / 8)
    center = min(max(x, lower + 2 * h), upper - 2 * h)
    f = expression.evaluate
    return (
        f(center - 2 * h)
        - 4 * f(center - h)
        + 6 * f(center)
        - 4 * f(center + h)
        + f(center + 2 * h)
    ) / h**4


def run_simpson(inp: SimpsonInput) -> SimpsonOutput:
    """
    Approximate a definite integral with composite Simpson's rule.

    Returns:
        SimpsonOutput with the estimate, the step breakdown, plot samples and
        an error bound ``M * (b - a)^5 / (180 * n^4)``.
    """
    errors, expression = _validate_simpson(inp)
    if errors:
        return SimpsonOutput(result=None, errors=errors, success=False)
    assert expression is not None

    a, b, n = inp.lower_bound, inp.upper_bound, inp.intervals
    h = (b - a) / n
    f = expression.evaluate

    try:
        endpoints = f(a) + f(b)
        odd_sum = 4 * sum(f(a + i * h) for i in range(1, n, 2))
        even_sum = 2 * sum(f(a + i * h) for i in range(2, n - 1, 2))
        result = require_finite(h / 3 * (endpoints + odd_sum + even_sum), "Integral")

        xs = grid(a, b, min(SIMPSON_MAX_VISUAL_STEPS, n * 2))
        points = tuple(Point(x=x, y=f(x)) for x in xs)
        m = require_finite(
            max(abs(fourth_derivative(expression, x, a, b)) for x in xs), "Fourth derivative"
        )
        bound = require_finite(m * (b - a) ** 5 / (180 * n**4), "Error bound")
    except ExpressionEvaluationError as e:
        return SimpsonOutput(result=None, errors=[evaluation_error("expression", e)], success=False)

    steps = (
        SimpsonStep("Initial Values", "f(a) + f(b)", endpoints),
        SimpsonStep("Odd Terms", "4 × Σf(x₂ᵢ₋₁)", odd_sum),
        SimpsonStep("Even Terms", "2 × Σf(x₂ᵢ)", even_sum),
        SimpsonStep("Final Result", "(h/3) × (sum + oddSum + evenSum)", result),
    )
    recommendations = (
        Recommendation(
            "Accuracy",
            "Increase number of intervals for better accuracy"
            if n < 10
            else "Current interval count provides good accuracy",
        ),
        Recommendation(
            "Error Estimation",
            "Consider using more intervals to reduce error"
            if bound > 0.01
            else "Error bound is within acceptable range",
        ),
        Recommendation("Function Complexity", "Verify function is continuous on the interval"),
        Recommendation("Interval Selection", "Use even number of intervals for Simpson's rule"),
    )

    return SimpsonOutput(
        result=SimpsonResult(
            result=result,
            steps=steps,
            points=points,
            error=ErrorEstimate(
                absolute=bound,
                relative=bound / abs(result) if result != 0 else None,
                bound=bound,
            ),
            recommendations=recommendations,
        ),
        errors=[],
        success=True,
    )


def run(inp: AntiderivativeInput | SimpsonInput) -> AntiderivativeOutput | SimpsonOutput:
    """Dispatch to the integral operation matching the input type."""
    if isinstance(inp, AntiderivativeInput):
        return run_antiderivative(inp)
    if isinstance(inp, SimpsonInput):
        return run_simpson(inp)
    raise ValueError(f"Unknown input type: {type(inp)}")
