"""
VA disability component - combined rating and compensation lookup.
"""

from .component import combined_rating, exact_combined_rating, run
from .models import (
    Benefit,
    CalculationStep,
    DependentPayments,
    Dependents,
    DisabilityRating,
    VADisabilityInput,
    VADisabilityOutput,
    VADisabilityResult,
)
from .ports import VATablesPort

__all__ = [
    "run",
    "combined_rating",
    "exact_combined_rating",
    "Benefit",
    "CalculationStep",
    "DependentPayments",
    "Dependents",
    "DisabilityRating",
    "VADisabilityInput",
    "VADisabilityOutput",
    "VADisabilityResult",
    "VATablesPort",
]
