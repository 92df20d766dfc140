"""
Polynomial collection and rendering for the antiderivative calculator.

A polynomial here is a mapping ``power -> coefficient`` where both are exact
fractions, so ``x^(1/2)`` and ``3/x`` are representable. Coefficients are
built from ``str(value)`` so that decimal literals like ``0.1`` stay exact.
"""

from __future__ import annotations

import math
from fractions import Fraction

from calcdeck.domain.expressions import BinaryOp, Call, Node, Number, UnaryOp, Variable

Polynomial = dict[Fraction, Fraction]

MAX_EXPANSION_POWER = 20
# Keeps exact arithmetic fast and every rendered integer short
MAX_COEFFICIENT_BITS = 2048
MAX_TERMS = 64


class NotPolynomialError(ValueError):
    """Raised when an expression is not a sum of ``c * x^p`` terms."""


def _clean(poly: Polynomial) -> Polynomial:
    return {power: coef for power, coef in poly.items() if coef != 0}


def _add(left: Polynomial, right: Polynomial, sign: int = 1) -> Polynomial:
    result = dict(left)
    for power, coef in right.items():
        result[power] = result.get(power, Fraction(0)) + sign * coef
    return _clean(result)


def _multiply(left: Polynomial, right: Polynomial) -> Polynomial:
    result: Polynomial = {}
    for p1, c1 in left.items():
        for p2, c2 in right.items():
            result[p1 + p2] = result.get(p1 + p2, Fraction(0)) + c1 * c2
    return _clean(result)


def _checked(poly: Polynomial) -> Polynomial:
    if len(poly) > MAX_TERMS:
        raise NotPolynomialError(f"More than {MAX_TERMS} terms")
    for power, coef in poly.items():
        if _bits(power) > MAX_COEFFICIENT_BITS or _bits(coef) > MAX_COEFFICIENT_BITS:
            raise NotPolynomialError("Coefficients are too large for exact arithmetic")
    return poly


def _bits(value: Fraction) -> int:
    return max(value.numerator.bit_length(), value.denominator.bit_length())


def _constant(poly: Polynomial) -> Fraction | None:
    """The value of ``poly`` if it has no ``x`` terms."""
    if not poly:
        return Fraction(0)
    if set(poly) == {Fraction(0)}:
        return poly[Fraction(0)]
    return None


def _power(base: Polynomial, exponent: Fraction) -> Polynomial:
    if exponent == 0:
        return {Fraction(0): Fraction(1)}

    if len(base) == 1:
        ((power, coef),) = base.items()
        if coef == 1:
            return {power * exponent: Fraction(1)}
        if exponent.denominator == 1:
            if _bits(coef) * abs(int(exponent)) > MAX_COEFFICIENT_BITS:
                raise NotPolynomialError("Coefficients are too large for exact arithmetic")
            return {power * exponent: coef ** int(exponent)}

    if exponent.denominator == 1 and 0 < exponent <= MAX_EXPANSION_POWER:
        result: Polynomial = {Fraction(0): Fraction(1)}
        for _ in range(int(exponent)):
            result = _checked(_multiply(result, base))
        return result

    raise NotPolynomialError("Only whole powers of sums can be expanded")


def to_polynomial(node: Node) -> Polynomial:
    """
    Collect ``node`` into power/coefficient form.

    Raises:
        NotPolynomialError: If the tree uses functions, divides by ``x`` terms,
            raises to a non-constant power, or outgrows the term and
            coefficient limits.
    """
    return _checked(_collect(node))


def _collect(node: Node) -> Polynomial:
    if isinstance(node, Number):
        if not math.isfinite(node.value):
            raise NotPolynomialError(f"{node.value} is not a finite number")
        return _clean({Fraction(0): Fraction(str(node.value))})

    if isinstance(node, Variable):
        return {Fraction(1): Fraction(1)}

    if isinstance(node, UnaryOp):
        operand = to_polynomial(node.operand)
        if node.op == "-":
            return {power: -coef for power, coef in operand.items()}
        return operand

    if isinstance(node, Call):
        raise NotPolynomialError(f"{node.function}() has no polynomial form")

    assert isinstance(node, BinaryOp)
    left = to_polynomial(node.left)
    right = to_polynomial(node.right)

    if node.op == "+":
        return _add(left, right)
    if node.op == "-":
        return _add(left, right, sign=-1)
    if node.op == "*":
        return _multiply(left, right)
    if node.op == "/":
        divisor = _constant(right)
        if divisor is not None:
            if divisor == 0:
                raise NotPolynomialError("Division by zero")
            return {power: coef / divisor for power, coef in left.items()}
        if len(right) == 1:
            ((power, coef),) = right.items()
            return _multiply(left, {-power: 1 / coef})
        raise NotPolynomialError("Division by a sum has no polynomial form")

    exponent = _constant(right)
    if exponent is None:
        raise NotPolynomialError("Exponent must not depend on x")
    if not left and exponent <= 0:
        raise NotPolynomialError("Zero raised to a non-positive power")
    return _power(left, exponent)


# --- Integration ---


LOG_POWER = Fraction(-1)


def integrate_term(power: Fraction, coef: Fraction) -> tuple[Fraction, Fraction]:
    """
    Antiderivative of ``coef * x^power`` as ``(new_power, new_coef)``.

    For ``power == -1`` the returned power is ``LOG_POWER`` and the term stands
    for ``new_coef * ln(abs(x))``.
    """
    if power == LOG_POWER:
        return LOG_POWER, coef
    return power + 1, coef / (power + 1)


# --- Rendering ---


def _format_fraction(value: Fraction) -> str:
    if value.denominator == 1:
        return str(value.numerator)
    return f"{value.numerator}/{value.denominator}"


def _format_power(power: Fraction) -> str:
    if power == 1:
        return "x"
    if power.denominator == 1 and power > 0:
        return f"x^{power.numerator}"
    return f"x^({_format_fraction(power)})"


def format_term(power: Fraction, coef: Fraction, *, log: bool = False) -> str:
    """Render ``|coef| * x^power`` (or ``|coef| * ln(abs(x))``) without its sign."""
    magnitude = abs(coef)
    body = "ln(abs(x))" if log else ("" if power == 0 else _format_power(power))

    if not body:
        return _format_fraction(magnitude)
    if magnitude == 1:
        return body
    if magnitude.denominator == 1:
        return f"{magnitude.numerator}*{body}"
    if magnitude.numerator == 1:
        return f"{body}/{magnitude.denominator}"
    return f"{magnitude.numerator}*{body}/{magnitude.denominator}"


def render(terms: list[tuple[Fraction, Fraction, bool]]) -> str:
    """
    Join ``(power, coef, is_log)`` terms into a parseable expression.

    Terms are ordered by descending power.
    """
    if not terms:
        return "0"

    ordered = sorted(terms, key=lambda t: (t[0], not t[2]), reverse=True)
    parts: list[str] = []
    for i, (power, coef, log) in enumerate(ordered):
        text = format_term(power, coef, log=log)
        if i == 0:
            parts.append(f"-{text}" if coef < 0 else text)
        else:
            parts.append(f"{'-' if coef < 0 else '+'} {text}")
    return " ".join(parts)
