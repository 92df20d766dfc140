from pathlib import Path

import pytest

from calcdeck.config import BUNDLED_TABLES_DIR
from calcdeck.tables import TableCatalog


@pytest.fixture
def catalog() -> TableCatalog:
    """Catalog over the bundled tables."""
    return TableCatalog(BUNDLED_TABLES_DIR)


@pytest.fixture
def tables_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "tables"
    directory.mkdir()
    return directory
