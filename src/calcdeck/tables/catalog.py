"""
TableCatalog - process-wide index of constant tables.

Tables are read from a directory on first access and then served read-only.
The catalog implements every table port the calculator components declare.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from calcdeck.config import get_settings
from calcdeck.tables.loader import TableNotFoundError, TableValidationError, load_table_dir
from calcdeck.tables.models import (
    FederalTaxTable,
    SocialSecurityTable,
    Table,
    VADisabilityTable,
    WordList,
)


class TableCatalog:
    """Index of tables by kind and year (or name for word lists)."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory
        self._tables: dict[tuple[str, int | str], Table] | None = None

    def load_all(self) -> int:
        """Load every table now. Returns the number of tables loaded."""
        return len(self._index())

    def _index(self) -> dict[tuple[str, int | str], Table]:
        if self._tables is None:
            tables: dict[tuple[str, int | str], Table] = {}
            for table in load_table_dir(self.directory):
                key: tuple[str, int | str] = (
                    (table.kind, table.name)
                    if isinstance(table, WordList)
                    else (table.kind, table.year)
                )
                if key in tables:
                    raise TableValidationError(
                        self.directory, f"duplicate {key[0]} table for {key[1]}"
                    )
                tables[key] = table
            self._tables = tables
        return self._tables

    def _years(self, kind: str) -> list[int]:
        return sorted(
            key
            for (table_kind, key) in self._index()
            if table_kind == kind and isinstance(key, int)
        )

    def _get(self, kind: str, key: int | str) -> Table:
        table = self._index().get((kind, key))
        if table is None:
            raise TableNotFoundError(f"No {kind} table for {key}")
        return table

    # --- Federal Tax ---

    def tax_years(self) -> list[int]:
        return self._years("federal_tax")

    def tax_table(self, year: int) -> FederalTaxTable:
        table = self._get("federal_tax", year)
        assert isinstance(table, FederalTaxTable)
        return table

    # --- VA Disability ---

    def va_years(self) -> list[int]:
        return self._years("va_disability")

    def va_table(self, year: int) -> VADisabilityTable:
        table = self._get("va_disability", year)
        assert isinstance(table, VADisabilityTable)
        return table

    # --- Social Security ---

    def social_security_years(self) -> list[int]:
        return self._years("social_security")

    def social_security_table(self, year: int) -> SocialSecurityTable:
        table = self._get("social_security", year)
        assert isinstance(table, SocialSecurityTable)
        return table

    # --- Word Lists ---

    def word_list(self, name: str) -> WordList:
        table = self._get("word_list", name)
        assert isinstance(table, WordList)
        return table


@lru_cache
def default_catalog() -> TableCatalog:
    """Catalog for the configured tables directory."""
    return TableCatalog(get_settings().tables_dir)
