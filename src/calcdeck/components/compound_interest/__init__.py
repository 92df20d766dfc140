"""
Compound interest component - CD interest, APY and yearly growth.
"""

from .component import PERIODS_PER_YEAR, annual_percentage_yield, run
from .models import (
    CompoundingFrequency,
    CompoundInterestInput,
    CompoundInterestOutput,
    CompoundInterestResult,
    YearlyTotal,
)

__all__ = [
    "run",
    "annual_percentage_yield",
    "PERIODS_PER_YEAR",
    "CompoundingFrequency",
    "CompoundInterestInput",
    "CompoundInterestOutput",
    "CompoundInterestResult",
    "YearlyTotal",
]
