"""
Area between curves component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from calcdeck.domain.advice import Recommendation
from calcdeck.domain.errors import CalculationError


@dataclass(frozen=True)
class AreaBetweenCurvesInput:
    """Two expressions in ``x`` and the interval to integrate over."""

    function1: str
    function2: str
    lower_bound: float
    upper_bound: float
    intervals: int = 1000


@dataclass(frozen=True)
class SolutionStep:
    step: str
    formula: str
    result: float


@dataclass(frozen=True)
class CurvePoint:
    x: float
    y1: float
    y2: float


@dataclass(frozen=True)
class AreaBetweenCurvesResult:
    area: float
    intersection_points: tuple[float, ...]
    steps: tuple[SolutionStep, ...]
    visual_points: tuple[CurvePoint, ...]
    recommendations: tuple[Recommendation, ...]


@dataclass(frozen=True)
class AreaBetweenCurvesOutput:
    result: AreaBetweenCurvesResult | None
    errors: list[CalculationError] = field(default_factory=list)
    success: bool = True
