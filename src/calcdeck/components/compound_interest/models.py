"""
Compound interest component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from calcdeck.domain.advice import Recommendation
from calcdeck.domain.errors import CalculationError

CompoundingFrequency = Literal["daily", "weekly", "monthly", "quarterly", "annually"]


# --- Input Models ---


@dataclass(frozen=True)
class CompoundInterestInput:
    """Input for a certificate-of-deposit style compound interest calculation."""

    principal: float
    rate: float  # annual percentage rate, e.g. 4.5
    term: float  # years
    compounding: CompoundingFrequency = "daily"
    early_withdrawal: bool = False


# --- Output Models ---


@dataclass(frozen=True)
class YearlyTotal:
    """Interest earned during one year of the term and the closing balance."""

    year: float
    interest: float
    balance: float


@dataclass(frozen=True)
class CompoundInterestResult:
    final_balance: float
    total_interest: float
    apy: float
    effective_rate_gain: float
    compounding_periods: int
    yearly_totals: tuple[YearlyTotal, ...]
    early_withdrawal_penalty: float | None
    recommendations: tuple[Recommendation, ...]


@dataclass(frozen=True)
class CompoundInterestOutput:
    result: CompoundInterestResult | None
    errors: list[CalculationError] = field(default_factory=list)
    success: bool = True
