"""
TDEE component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from calcdeck.domain.errors import CalculationError
from calcdeck.domain.units import Gender, UnitSystem

ActivityLevel = Literal["sedentary", "light", "moderate", "active", "very_active"]


@dataclass(frozen=True)
class TDEEInput:
    weight: float
    height: float
    age: float
    gender: Gender
    activity_level: ActivityLevel = "moderate"
    unit: UnitSystem = "metric"


@dataclass(frozen=True)
class MaintenanceCalories:
    sedentary: int
    light: int
    moderate: int
    active: int
    very_active: int


@dataclass(frozen=True)
class CalorieRange:
    min: int
    max: int


@dataclass(frozen=True)
class TDEEMacros:
    protein: CalorieRange
    carbs: CalorieRange
    fats: CalorieRange


@dataclass(frozen=True)
class CalorieGoals:
    weight_loss: CalorieRange
    maintenance: int
    weight_gain: CalorieRange


@dataclass(frozen=True)
class TDEEResult:
    bmr: int
    tdee: int
    maintenance_calories: MaintenanceCalories
    macro_breakdown: TDEEMacros
    goals: CalorieGoals


@dataclass(frozen=True)
class TDEEOutput:
    result: TDEEResult | None
    errors: list[CalculationError] = field(default_factory=list)
    success: bool = True
