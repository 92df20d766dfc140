"""
Area between curves component - numerical area and intersection search.
"""

from .component import find_intersections, run
from .models import (
    AreaBetweenCurvesInput,
    AreaBetweenCurvesOutput,
    AreaBetweenCurvesResult,
    CurvePoint,
    SolutionStep,
)

__all__ = [
    "run",
    "find_intersections",
    "AreaBetweenCurvesInput",
    "AreaBetweenCurvesOutput",
    "AreaBetweenCurvesResult",
    "CurvePoint",
    "SolutionStep",
]
