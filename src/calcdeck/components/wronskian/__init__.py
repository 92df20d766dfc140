"""
Wronskian component - linear independence check for function sets.
"""

from .component import derivative, determinant, run
from .models import (
    WronskianInput,
    WronskianOutput,
    WronskianProperty,
    WronskianResult,
    WronskianStep,
)

__all__ = [
    "run",
    "derivative",
    "determinant",
    "WronskianInput",
    "WronskianOutput",
    "WronskianProperty",
    "WronskianResult",
    "WronskianStep",
]
