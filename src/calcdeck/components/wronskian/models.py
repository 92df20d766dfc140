"""
Wronskian component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from calcdeck.domain.advice import Recommendation
from calcdeck.domain.errors import CalculationError


@dataclass(frozen=True)
class WronskianInput:
    """Between one and four functions of ``x`` and the point to evaluate at."""

    functions: tuple[str, ...]
    point: float


@dataclass(frozen=True)
class WronskianStep:
    step: str
    description: str
    result: str


@dataclass(frozen=True)
class WronskianProperty:
    property: str
    value: str
    description: str


@dataclass(frozen=True)
class WronskianResult:
    determinant: float
    matrix: tuple[tuple[float, ...], ...]
    steps: tuple[WronskianStep, ...]
    is_independent: bool
    properties: tuple[WronskianProperty, ...]
    recommendations: tuple[Recommendation, ...]


@dataclass(frozen=True)
class WronskianOutput:
    result: WronskianResult | None
    errors: list[CalculationError] = field(default_factory=list)
    success: bool = True
