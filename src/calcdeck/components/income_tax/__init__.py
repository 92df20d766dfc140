"""
Income tax component - federal brackets, standard deduction and state tax.
"""

from .component import bracket_taxes, marginal_rate, run
from .models import BracketTax, FilingStatus, IncomeTaxInput, IncomeTaxOutput, IncomeTaxResult
from .ports import TaxTablesPort

__all__ = [
    "run",
    "bracket_taxes",
    "marginal_rate",
    "BracketTax",
    "FilingStatus",
    "IncomeTaxInput",
    "IncomeTaxOutput",
    "IncomeTaxResult",
    "TaxTablesPort",
]
