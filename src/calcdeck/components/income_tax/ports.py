"""
Income tax component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from calcdeck.tables.models import FederalTaxTable


class TaxTablesPort(Protocol):
    """Source of federal tax tables by year."""

    def tax_years(self) -> list[int]:
        """Years with a bracket table available."""
        ...

    def tax_table(self, year: int) -> FederalTaxTable:
        """Brackets and standard deductions for a tax year."""
        ...
