"""
Versioned constant tables (tax brackets, VA rates, Social Security parameters,
word lists) bundled as YAML and validated on load.
"""

from .catalog import TableCatalog, default_catalog
from .loader import (
    TableNotFoundError,
    TableValidationError,
    load_table_dir,
    load_table_file,
    parse_table,
)
from .models import (
    FILING_STATUSES,
    DependentRates,
    FederalTaxTable,
    RetirementAgeBand,
    SocialSecurityTable,
    TaxBracket,
    VADisabilityTable,
    WordList,
)

__all__ = [
    "TableCatalog",
    "default_catalog",
    "TableNotFoundError",
    "TableValidationError",
    "load_table_dir",
    "load_table_file",
    "parse_table",
    "FILING_STATUSES",
    "DependentRates",
    "FederalTaxTable",
    "RetirementAgeBand",
    "SocialSecurityTable",
    "TaxBracket",
    "VADisabilityTable",
    "WordList",
]
