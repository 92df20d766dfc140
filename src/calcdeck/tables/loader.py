"""
Table loader - read and validate year-stamped constant tables.

Tables are YAML documents tagged with a ``kind``. Loading is fail-fast:
unreadable YAML or a schema violation raises ``TableValidationError``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import TypeAdapter, ValidationError

from calcdeck.tables.models import Table

logger = logging.getLogger(__name__)

_table_adapter: TypeAdapter[Table] = TypeAdapter(Table)


class TableValidationError(ValueError):
    """Raised when a table file is malformed."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"Invalid table {path}: {message}")


class TableNotFoundError(LookupError):
    """Raised when a requested table kind/version is not available."""


def parse_table(data: object, path: Path) -> Table:
    """Validate already-parsed YAML content as a table."""
    try:
        return _table_adapter.validate_python(data)
    except ValidationError as e:
        raise TableValidationError(path, str(e)) from e


def load_table_file(path: Path) -> Table:
    """
    Load and validate a single table file.

    Raises:
        FileNotFoundError: If the file does not exist.
        TableValidationError: If the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Table file not found at: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise TableValidationError(path, f"invalid YAML syntax: {e}") from e

    table = parse_table(data, path)
    logger.debug("Loaded %s table from %s", table.kind, path)
    return table


def load_table_dir(directory: Path) -> list[Table]:
    """Load every ``*.yaml`` table in ``directory`` (sorted by file name)."""
    if not directory.is_dir():
        raise FileNotFoundError(f"Table directory not found at: {directory}")

    return [load_table_file(path) for path in sorted(directory.glob("*.yaml"))]
