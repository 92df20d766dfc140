"""
Snowboard size component - length range, width and style guidance.
"""

from .component import run, width_class
from .models import (
    Experience,
    LengthRange,
    RidingStyle,
    SnowboardInput,
    SnowboardOutput,
    SnowboardResult,
    StyleCharacteristics,
    WidthClass,
)

__all__ = [
    "run",
    "width_class",
    "Experience",
    "LengthRange",
    "RidingStyle",
    "SnowboardInput",
    "SnowboardOutput",
    "SnowboardResult",
    "StyleCharacteristics",
    "WidthClass",
]
