"""
Snowboard size component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from calcdeck.domain.advice import Recommendation
from calcdeck.domain.errors import CalculationError
from calcdeck.domain.units import UnitSystem

Experience = Literal["beginner", "intermediate", "advanced"]
RidingStyle = Literal["all-mountain", "freestyle", "freeride", "powder"]
WidthClass = Literal["standard", "mid-wide", "wide"]


@dataclass(frozen=True)
class SnowboardInput:
    """Rider measurements; ``shoe_size`` is a US men's size."""

    weight: float
    height: float
    shoe_size: float
    experience: Experience = "beginner"
    style: RidingStyle = "all-mountain"
    unit: UnitSystem = "metric"


@dataclass(frozen=True)
class LengthRange:
    min: int
    max: int
    ideal: int


@dataclass(frozen=True)
class StyleCharacteristics:
    flex: str
    shape: str
    setback: str


@dataclass(frozen=True)
class SnowboardResult:
    recommended_length: LengthRange
    width_recommendation: WidthClass
    style_characteristics: StyleCharacteristics
    recommendations: tuple[Recommendation, ...]


@dataclass(frozen=True)
class SnowboardOutput:
    result: SnowboardResult | None
    errors: list[CalculationError] = field(default_factory=list)
    success: bool = True
