"""
TDEE component - maintenance calories, macros and goals.
"""

from .component import ACTIVITY_MULTIPLIERS, run
from .models import (
    ActivityLevel,
    CalorieGoals,
    CalorieRange,
    MaintenanceCalories,
    TDEEInput,
    TDEEMacros,
    TDEEOutput,
    TDEEResult,
)

__all__ = [
    "run",
    "ACTIVITY_MULTIPLIERS",
    "ActivityLevel",
    "CalorieGoals",
    "CalorieRange",
    "MaintenanceCalories",
    "TDEEInput",
    "TDEEMacros",
    "TDEEOutput",
    "TDEEResult",
]
