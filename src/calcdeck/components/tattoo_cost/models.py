"""
Tattoo cost component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from calcdeck.domain.advice import Recommendation
from calcdeck.domain.errors import CalculationError

Complexity = Literal["simple", "moderate", "complex"]
Placement = Literal["easy", "moderate", "difficult"]
ArtistExperience = Literal["apprentice", "experienced", "master"]


@dataclass(frozen=True)
class TattooInput:
    """``size`` is in square inches."""

    size: float
    complexity: Complexity = "simple"
    colors: int = 1
    placement: Placement = "easy"
    artist_experience: ArtistExperience = "experienced"


@dataclass(frozen=True)
class CostRange:
    low: int
    high: int
    average: int


@dataclass(frozen=True)
class TimeEstimate:
    hours: float
    sessions: int


@dataclass(frozen=True)
class PriceFactor:
    factor: str
    impact: float
    description: str


@dataclass(frozen=True)
class AftercarePhase:
    phase: str
    duration: str
    instructions: tuple[str, ...]


@dataclass(frozen=True)
class TattooResult:
    estimated_cost: CostRange
    time_estimate: TimeEstimate
    price_factors: tuple[PriceFactor, ...]
    recommendations: tuple[Recommendation, ...]
    aftercare: tuple[AftercarePhase, ...]


@dataclass(frozen=True)
class TattooOutput:
    result: TattooResult | None
    errors: list[CalculationError] = field(default_factory=list)
    success: bool = True
