"""
Baby eye colour component - inheritance probabilities.
"""

from .component import DOMINANCE_ORDER, color_probabilities, run
from .models import (
    BabyEyeColorInput,
    BabyEyeColorOutput,
    BabyEyeColorResult,
    ColorProbability,
    EyeColor,
    Genetics,
    GenotypeProbability,
    InheritancePattern,
    ParentEyeColor,
)

__all__ = [
    "run",
    "color_probabilities",
    "DOMINANCE_ORDER",
    "BabyEyeColorInput",
    "BabyEyeColorOutput",
    "BabyEyeColorResult",
    "ColorProbability",
    "EyeColor",
    "Genetics",
    "GenotypeProbability",
    "InheritancePattern",
    "ParentEyeColor",
]
