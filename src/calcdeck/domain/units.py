from __future__ import annotations

from typing import Literal

UnitSystem = Literal["metric", "imperial"]
Gender = Literal["male", "female"]

UNIT_SYSTEMS: tuple[str, ...] = ("metric", "imperial")
GENDERS: tuple[str, ...] = ("male", "female")

KG_PER_LB = 0.453592
CM_PER_INCH = 2.54

# Upper limits on entered body measurements, in either unit system
MAX_WEIGHT = 1500.0
MAX_HEIGHT = 1000.0


def to_metric(weight: float, height: float, unit: str) -> tuple[float, float]:
    """Return (kg, cm) for a weight/height pair given in ``unit``."""
    if unit == "imperial":
        return weight * KG_PER_LB, height * CM_PER_INCH
    return weight, height
