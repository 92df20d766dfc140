"""
Social Security component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from calcdeck.tables.models import SocialSecurityTable


class SocialSecurityTablesPort(Protocol):
    """Source of Social Security parameters by year."""

    def social_security_years(self) -> list[int]:
        ...

    def social_security_table(self, year: int) -> SocialSecurityTable:
        ...
