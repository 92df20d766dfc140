"""
VA disability component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from calcdeck.tables.models import VADisabilityTable


class VATablesPort(Protocol):
    """Source of VA compensation rate tables by year."""

    def va_years(self) -> list[int]:
        ...

    def va_table(self, year: int) -> VADisabilityTable:
        ...
