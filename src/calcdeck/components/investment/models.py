"""
Investment growth component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from calcdeck.domain.advice import Recommendation
from calcdeck.domain.errors import CalculationError

InvestmentCompounding = Literal["monthly", "quarterly", "annually"]


@dataclass(frozen=True)
class InvestmentInput:
    """Input for projecting an investment with regular contributions."""

    initial_amount: float
    monthly_contribution: float
    annual_return: float  # percent
    years: int
    compounding: InvestmentCompounding = "monthly"
    inflation_rate: float | None = None  # percent
    tax_rate: float | None = None  # percent, applied to earnings


@dataclass(frozen=True)
class YearlyBreakdown:
    year: int
    balance: float
    contributions: float
    earnings: float
    inflation_adjusted: float | None = None


@dataclass(frozen=True)
class InvestmentMetrics:
    effective_annual_rate: float
    real_return_rate: float | None
    taxable_amount: float | None


@dataclass(frozen=True)
class InvestmentResult:
    final_balance: float
    total_contributions: float
    total_earnings: float
    inflation_adjusted_balance: float | None
    yearly_breakdown: tuple[YearlyBreakdown, ...]
    metrics: InvestmentMetrics
    recommendations: tuple[Recommendation, ...]


@dataclass(frozen=True)
class InvestmentOutput:
    result: InvestmentResult | None
    errors: list[CalculationError] = field(default_factory=list)
    success: bool = True
