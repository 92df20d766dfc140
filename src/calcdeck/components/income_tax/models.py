"""
Income tax component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from calcdeck.domain.errors import CalculationError

FilingStatus = Literal["single", "married", "head"]


@dataclass(frozen=True)
class IncomeTaxInput:
    """
    Input for a federal plus flat-rate state income tax estimate.

    ``deductions`` of None applies the standard deduction for the filing
    status and year; 0 means no deduction at all.
    """

    income: float
    filing_status: FilingStatus = "single"
    deductions: float | None = None
    state_rate: float = 0.0
    tax_year: int = 2024


@dataclass(frozen=True)
class BracketTax:
    rate: float
    amount: float


@dataclass(frozen=True)
class IncomeTaxResult:
    taxable_income: float
    deduction_applied: float
    federal_tax: float
    state_tax: float
    total_tax: float
    effective_rate: float
    marginal_rate: float
    take_home_income: float
    brackets: tuple[BracketTax, ...]


@dataclass(frozen=True)
class IncomeTaxOutput:
    result: IncomeTaxResult | None
    errors: list[CalculationError] = field(default_factory=list)
    success: bool = True
