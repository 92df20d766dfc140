"""
Integral component - antiderivatives and Simpson's rule.
"""

from .component import run, run_antiderivative, run_simpson
from .models import (
    AntiderivativeInput,
    AntiderivativeOutput,
    AntiderivativeResult,
    ErrorEstimate,
    IntegrationRule,
    Point,
    RuleStep,
    SimpsonInput,
    SimpsonOutput,
    SimpsonResult,
    SimpsonStep,
)

__all__ = [
    "run",
    "run_antiderivative",
    "run_simpson",
    "AntiderivativeInput",
    "AntiderivativeOutput",
    "AntiderivativeResult",
    "ErrorEstimate",
    "IntegrationRule",
    "Point",
    "RuleStep",
    "SimpsonInput",
    "SimpsonOutput",
    "SimpsonResult",
    "SimpsonStep",
]
