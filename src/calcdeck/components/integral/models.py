"""
Integral component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from calcdeck.domain.advice import Recommendation
from calcdeck.domain.errors import CalculationError

# --- Input Models ---


@dataclass(frozen=True)
class AntiderivativeInput:
    """Input for a symbolic antiderivative, optionally evaluated over bounds."""

    expression: str
    lower_bound: float | None = None
    upper_bound: float | None = None


@dataclass(frozen=True)
class SimpsonInput:
    """Input for a numerical definite integral via Simpson's rule."""

    expression: str
    lower_bound: float
    upper_bound: float
    intervals: int = 10


# --- Shared ---


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class IntegrationRule:
    name: str
    formula: str
    example: str


# --- Antiderivative Output ---


@dataclass(frozen=True)
class RuleStep:
    rule: str
    expression: str
    explanation: str


@dataclass(frozen=True)
class AntiderivativeResult:
    antiderivative: str | None
    steps: tuple[RuleStep, ...]
    definite_result: float | None
    visual_points: tuple[Point, ...]
    rules: tuple[IntegrationRule, ...]
    note: str | None = None


@dataclass(frozen=True)
class AntiderivativeOutput:
    result: AntiderivativeResult | None
    errors: list[CalculationError] = field(default_factory=list)
    success: bool = True


# --- Simpson Output ---


@dataclass(frozen=True)
class SimpsonStep:
    step: str
    formula: str
    value: float


@dataclass(frozen=True)
class ErrorEstimate:
    absolute: float
    relative: float | None
    bound: float


@dataclass(frozen=True)
class SimpsonResult:
    result: float
    steps: tuple[SimpsonStep, ...]
    points: tuple[Point, ...]
    error: ErrorEstimate
    recommendations: tuple[Recommendation, ...]


@dataclass(frozen=True)
class SimpsonOutput:
    result: SimpsonResult | None
    errors: list[CalculationError] = field(default_factory=list)
    success: bool = True
