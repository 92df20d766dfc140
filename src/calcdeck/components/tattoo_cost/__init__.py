"""
Tattoo cost component - price range, sessions and aftercare.
"""

from .component import run
from .models import (
    AftercarePhase,
    ArtistExperience,
    Complexity,
    CostRange,
    Placement,
    PriceFactor,
    TattooInput,
    TattooOutput,
    TattooResult,
    TimeEstimate,
)

__all__ = [
    "run",
    "AftercarePhase",
    "ArtistExperience",
    "Complexity",
    "CostRange",
    "Placement",
    "PriceFactor",
    "TattooInput",
    "TattooOutput",
    "TattooResult",
    "TimeEstimate",
]
