"""
BMR component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from calcdeck.domain.errors import CalculationError
from calcdeck.domain.units import Gender, UnitSystem


@dataclass(frozen=True)
class BMRInput:
    """Body measurements in kg/cm (metric) or lb/in (imperial)."""

    weight: float
    height: float
    age: float
    gender: Gender
    unit: UnitSystem = "metric"


@dataclass(frozen=True)
class DailyCalories:
    sedentary: int
    light: int
    moderate: int
    active: int


@dataclass(frozen=True)
class GramRange:
    min: int
    max: int


@dataclass(frozen=True)
class MacroBreakdown:
    protein: GramRange
    carbs: GramRange
    fats: GramRange


@dataclass(frozen=True)
class BMRFactor:
    factor: str
    value: float
    impact: int


@dataclass(frozen=True)
class BMRResult:
    bmr: int
    mifflin_st_jeor: float
    harris_benedict: float
    daily_calories: DailyCalories
    macro_breakdown: MacroBreakdown
    method_used: str
    factors: tuple[BMRFactor, ...]


@dataclass(frozen=True)
class BMROutput:
    result: BMRResult | None
    errors: list[CalculationError] = field(default_factory=list)
    success: bool = True
