"""
HELOC component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from calcdeck.domain.errors import CalculationError


@dataclass(frozen=True)
class HelocInput:
    home_value: float
    mortgage_balance: float
    credit_score: int
    interest_rate: float
    draw_amount: float
    monthly_payment: float


@dataclass(frozen=True)
class HelocResult:
    available_equity: float
    credit_line_factor: float
    max_credit_line: int
    monthly_payment: float
    total_interest: int
    payoff_months: int
    payoff_capped: bool


@dataclass(frozen=True)
class HelocOutput:
    result: HelocResult | None
    errors: list[CalculationError] = field(default_factory=list)
    success: bool = True
