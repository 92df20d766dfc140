"""
Social Security component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from calcdeck.domain.advice import Recommendation
from calcdeck.domain.errors import CalculationError

MaritalStatus = Literal["single", "married", "divorced", "widowed"]


@dataclass(frozen=True)
class SocialSecurityInput:
    birth_year: int
    retirement_age: int
    current_income: float
    marital_status: MaritalStatus = "single"
    spouse_benefit: float | None = None
    table_year: int = 2024


@dataclass(frozen=True)
class RetirementAge:
    years: int
    months: int


@dataclass(frozen=True)
class CumulativeBenefit:
    age: int
    total: float


@dataclass(frozen=True)
class SocialSecurityResult:
    monthly_benefit: int
    yearly_benefit: int
    full_retirement_age: RetirementAge
    benefit_adjustment: float
    average_indexed_monthly_earnings: float
    primary_insurance_amount: float
    maximum_benefit: float
    spousal_benefit: float | None
    survivor_benefit: float | None
    estimated_total_benefits: tuple[CumulativeBenefit, ...]
    recommendations: tuple[Recommendation, ...]


@dataclass(frozen=True)
class SocialSecurityOutput:
    result: SocialSecurityResult | None
    errors: list[CalculationError] = field(default_factory=list)
    success: bool = True
