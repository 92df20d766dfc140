"""
VA disability component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from calcdeck.domain.errors import CalculationError

# --- Input Models ---


@dataclass(frozen=True)
class DisabilityRating:
    percentage: float
    description: str = ""


@dataclass(frozen=True)
class Dependents:
    spouse: bool = False
    children_under_18: int = 0
    children_in_school: int = 0
    dependent_parents: int = 0


@dataclass(frozen=True)
class VADisabilityInput:
    """Individual ratings, dependents and the compensation table year."""

    ratings: tuple[DisabilityRating, ...]
    dependents: Dependents = field(default_factory=Dependents)
    year: int = 2024


# --- Output Models ---


@dataclass(frozen=True)
class DependentPayments:
    spouse: float
    children_under_18: float
    children_in_school: float
    dependent_parents: float
    aid_and_attendance: float

    @property
    def total(self) -> float:
        return (
            self.spouse
            + self.children_under_18
            + self.children_in_school
            + self.dependent_parents
            + self.aid_and_attendance
        )


@dataclass(frozen=True)
class Benefit:
    category: str
    description: str
    eligibility: str


@dataclass(frozen=True)
class CalculationStep:
    step: str
    value: float
    description: str


@dataclass(frozen=True)
class VADisabilityResult:
    combined_rating: int
    exact_combined_rating: float
    base_monthly_payment: float
    dependent_payments: DependentPayments
    total_monthly_payment: float
    total_yearly_payment: float
    benefits: tuple[Benefit, ...]
    calculations: tuple[CalculationStep, ...]


@dataclass(frozen=True)
class VADisabilityOutput:
    result: VADisabilityResult | None
    errors: list[CalculationError] = field(default_factory=list)
    success: bool = True
