"""
BMR component - basal metabolic rate, daily calories and macros.
"""

from .component import harris_benedict, macro_breakdown, mifflin_st_jeor, run
from .models import (
    BMRFactor,
    BMRInput,
    BMROutput,
    BMRResult,
    DailyCalories,
    GramRange,
    MacroBreakdown,
)

__all__ = [
    "run",
    "harris_benedict",
    "macro_breakdown",
    "mifflin_st_jeor",
    "BMRFactor",
    "BMRInput",
    "BMROutput",
    "BMRResult",
    "DailyCalories",
    "GramRange",
    "MacroBreakdown",
]
