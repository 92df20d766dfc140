"""
Inflation component - future value and yearly breakdown under inflation.
"""

from .component import run
from .models import InflationInput, InflationOutput, InflationResult, InflationYear

__all__ = [
    "run",
    "InflationInput",
    "InflationOutput",
    "InflationResult",
    "InflationYear",
]
