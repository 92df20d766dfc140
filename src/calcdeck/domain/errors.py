"""
Calculation error model shared by every calculator component.

Calculators never raise for bad user input. Validation failures and
degenerate arithmetic are reported as ``CalculationError`` entries on the
output envelope instead.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

# Largest accepted currency input; compounding from here stays finite
MAX_AMOUNT = 1e12


class ErrorCode(str, Enum):
    """Error kinds a calculation can report."""

    INVALID_RANGE = "invalid_range"
    DIVISION_BY_ZERO = "division_by_zero"
    UNPARSABLE_EXPRESSION = "unparsable_expression"


@dataclass(frozen=True)
class CalculationError:
    """A single calculation error."""

    code: ErrorCode
    message: str
    field: str | None = None


def invalid_range(field: str, message: str) -> CalculationError:
    return CalculationError(code=ErrorCode.INVALID_RANGE, message=message, field=field)


def division_by_zero(field: str, message: str) -> CalculationError:
    return CalculationError(code=ErrorCode.DIVISION_BY_ZERO, message=message, field=field)


def check_finite(errors: list[CalculationError], field: str, value: float) -> bool:
    """Append an error when ``value`` is NaN or infinite."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        errors.append(invalid_range(field, f"{field} must be a number"))
        return False
    # Python ints are always finite and may be too large to convert to float
    if isinstance(value, float) and not math.isfinite(value):
        errors.append(invalid_range(field, f"{field} must be a finite number"))
        return False
    return True


def check_range(
    errors: list[CalculationError],
    field: str,
    value: float,
    *,
    minimum: float | None = None,
    maximum: float | None = None,
    exclusive_minimum: bool = False,
) -> None:
    """Append an error when ``value`` falls outside the allowed bounds."""
    if not check_finite(errors, field, value):
        return

    if minimum is not None:
        if exclusive_minimum and value <= minimum:
            errors.append(invalid_range(field, f"{field} must be greater than {minimum}"))
            return
        if not exclusive_minimum and value < minimum:
            errors.append(invalid_range(field, f"{field} must be at least {minimum}"))
            return

    if maximum is not None and value > maximum:
        errors.append(invalid_range(field, f"{field} must be at most {maximum}"))


def check_choice(
    errors: list[CalculationError],
    field: str,
    value: str,
    choices: Iterable[str],
) -> None:
    """Append an error when ``value`` is not one of ``choices``."""
    allowed = list(choices)
    if value not in allowed:
        errors.append(
            invalid_range(field, f"{field} must be one of {', '.join(allowed)}; got {value!r}")
        )


def check_integer(
    errors: list[CalculationError],
    field: str,
    value: int,
    *,
    minimum: int | None = None,
    maximum: int | None = None,
) -> None:
    """Append an error unless ``value`` is a whole number within bounds."""
    if isinstance(value, bool) or not isinstance(value, int):
        errors.append(invalid_range(field, f"{field} must be a whole number"))
        return
    check_range(errors, field, value, minimum=minimum, maximum=maximum)
