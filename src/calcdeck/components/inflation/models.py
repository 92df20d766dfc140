"""
Inflation component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from calcdeck.domain.errors import CalculationError


@dataclass(frozen=True)
class InflationInput:
    amount: float
    start_year: int
    end_year: int
    rate: float = 2.5  # annual percent


@dataclass(frozen=True)
class InflationYear:
    year: int
    value: float
    change: float


@dataclass(frozen=True)
class InflationResult:
    future_value: float
    total_change: float
    percentage_change: float
    average_rate: float
    purchasing_power: float
    yearly_breakdown: tuple[InflationYear, ...]


@dataclass(frozen=True)
class InflationOutput:
    result: InflationResult | None
    errors: list[CalculationError] = field(default_factory=list)
    success: bool = True
