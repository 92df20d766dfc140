"""
Baby eye colour component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from calcdeck.domain.advice import Recommendation
from calcdeck.domain.errors import CalculationError

EyeColor = Literal["brown", "green", "hazel", "blue"]
Genetics = Literal["homozygous", "heterozygous"]


@dataclass(frozen=True)
class ParentEyeColor:
    """A parent's eye colour; unknown genetics are treated as heterozygous."""

    color: EyeColor
    genetics: Genetics | None = None


@dataclass(frozen=True)
class BabyEyeColorInput:
    parent1: ParentEyeColor
    parent2: ParentEyeColor


@dataclass(frozen=True)
class ColorProbability:
    color: str
    percentage: int
    description: str


@dataclass(frozen=True)
class GenotypeProbability:
    genotype: str
    phenotype: str
    probability: float


@dataclass(frozen=True)
class InheritancePattern:
    pattern: str
    description: str
    probability: float


@dataclass(frozen=True)
class BabyEyeColorResult:
    probabilities: tuple[ColorProbability, ...]
    genetics: tuple[GenotypeProbability, ...]
    inheritance: tuple[InheritancePattern, ...]
    recommendations: tuple[Recommendation, ...]


@dataclass(frozen=True)
class BabyEyeColorOutput:
    result: BabyEyeColorResult | None
    errors: list[CalculationError] = field(default_factory=list)
    success: bool = True
