"""
Mortgage component - fixed-rate payment and amortization.
"""

from .component import monthly_payment, run
from .models import AmortizationYear, MortgageInput, MortgageOutput, MortgageResult

__all__ = [
    "run",
    "monthly_payment",
    "AmortizationYear",
    "MortgageInput",
    "MortgageOutput",
    "MortgageResult",
]
