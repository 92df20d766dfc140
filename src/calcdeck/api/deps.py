from __future__ import annotations

from calcdeck.config import Settings, get_settings
from calcdeck.tables import TableCatalog, default_catalog

__all__ = ["Settings", "get_settings", "get_catalog"]


# --- Tables ---
def get_catalog() -> TableCatalog:
    """Process-wide table catalog, loaded once at startup."""
    return default_catalog()
