"""
Vorici chromatic component - socket colouring strategy and cost.
"""

from .component import colour_weights, run, success_rate
from .models import (
    AttributeRequirements,
    ColorChance,
    CraftingMethod,
    ItemType,
    SocketColors,
    VoriciInput,
    VoriciOutput,
    VoriciResult,
)

__all__ = [
    "run",
    "colour_weights",
    "success_rate",
    "AttributeRequirements",
    "ColorChance",
    "CraftingMethod",
    "ItemType",
    "SocketColors",
    "VoriciInput",
    "VoriciOutput",
    "VoriciResult",
]
