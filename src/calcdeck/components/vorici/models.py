"""
Vorici chromatic component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from calcdeck.domain.advice import Recommendation
from calcdeck.domain.errors import CalculationError

ItemType = Literal["body", "gloves", "boots", "helmet", "shield", "weapon"]


@dataclass(frozen=True)
class SocketColors:
    red: int = 0
    green: int = 0
    blue: int = 0

    @property
    def total(self) -> int:
        return self.red + self.green + self.blue


@dataclass(frozen=True)
class AttributeRequirements:
    strength: float = 0
    dexterity: float = 0
    intelligence: float = 0


@dataclass(frozen=True)
class VoriciInput:
    required_colors: SocketColors
    item_level: int
    item_type: ItemType = "body"
    attribute_requirements: AttributeRequirements = field(default_factory=AttributeRequirements)


@dataclass(frozen=True)
class CraftingMethod:
    method: str
    average_cost: float
    success_rate: float
    description: str


@dataclass(frozen=True)
class ColorChance:
    color: str
    chance: float
    weight_factor: float


@dataclass(frozen=True)
class VoriciResult:
    best_method: CraftingMethod
    methods: tuple[CraftingMethod, ...]
    probabilities: tuple[ColorChance, ...]
    recommendations: tuple[Recommendation, ...]


@dataclass(frozen=True)
class VoriciOutput:
    result: VoriciResult | None
    errors: list[CalculationError] = field(default_factory=list)
    success: bool = True
