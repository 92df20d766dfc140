"""
Mortgage component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from calcdeck.domain.errors import CalculationError


@dataclass(frozen=True)
class MortgageInput:
    price: float
    interest_rate: float
    years: int
    down_payment: float = 0.0


@dataclass(frozen=True)
class AmortizationYear:
    year: int
    principal_paid: float
    interest_paid: float
    balance: float


@dataclass(frozen=True)
class MortgageResult:
    loan_amount: float
    monthly_payment: float
    total_payment: float
    total_interest: float
    amortization: tuple[AmortizationYear, ...]


@dataclass(frozen=True)
class MortgageOutput:
    result: MortgageResult | None
    errors: list[CalculationError] = field(default_factory=list)
    success: bool = True
