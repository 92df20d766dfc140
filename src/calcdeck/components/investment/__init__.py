"""
Investment component - growth projection with contributions, inflation and tax.
"""

from .component import PERIODS_PER_YEAR, run
from .models import (
    InvestmentCompounding,
    InvestmentInput,
    InvestmentMetrics,
    InvestmentOutput,
    InvestmentResult,
    YearlyBreakdown,
)

__all__ = [
    "run",
    "PERIODS_PER_YEAR",
    "InvestmentCompounding",
    "InvestmentInput",
    "InvestmentMetrics",
    "InvestmentOutput",
    "InvestmentResult",
    "YearlyBreakdown",
]
