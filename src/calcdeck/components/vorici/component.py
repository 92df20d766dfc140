"""
Vorici chromatic component - socket colouring cost estimate.

Colour weights start at 1 and grow by a tenth of the matching attribute
requirement. Costs are in chromatic orb equivalents. The model is a rough
guide; it does not follow the game's exact colour weighting.
"""

from __future__ import annotations

from calcdeck.domain.advice import Recommendation
from calcdeck.domain.errors import (
    CalculationError,
    check_choice,
    check_integer,
    check_range,
    invalid_range,
)

from .models import (
    AttributeRequirements,
    ColorChance,
    CraftingMethod,
    SocketColors,
    VoriciInput,
    VoriciOutput,
    VoriciResult,
)

CHROMATIC_COST = 1
JEWELLER_COST = 4
FUSING_COST = 5
VORICI_COST = 10

MAX_SOCKETS = 6
MAX_ITEM_LEVEL = 100
MAX_ATTRIBUTE = 1000
ITEM_TYPES = ("body", "gloves", "boots", "helmet", "shield", "weapon")


def colour_weights(requirements: AttributeRequirements) -> tuple[float, float, float]:
    """Normalised (red, green, blue) chances."""
    red = 1 + requirements.strength / 10
    green = 1 + requirements.dexterity / 10
    blue = 1 + requirements.intelligence / 10
    total = red + green + blue
    return red / total, green / total, blue / total


def success_rate(colors: SocketColors, weights: tuple[float, float, float]) -> float:
    red, green, blue = weights
    return red**colors.red * green**colors.green * blue**colors.blue


def _validate(inp: VoriciInput) -> list[CalculationError]:
    errors: list[CalculationError] = []
    colors = inp.required_colors
    for name in ("red", "green", "blue"):
        check_integer(
            errors,
            f"required_colors.{name}",
            getattr(colors, name),
            minimum=0,
            maximum=MAX_SOCKETS,
        )
    if not errors and not 1 <= colors.total <= MAX_SOCKETS:
        errors.append(
            invalid_range("required_colors", f"Between 1 and {MAX_SOCKETS} sockets are required")
        )

    check_integer(errors, "item_level", inp.item_level, minimum=1, maximum=MAX_ITEM_LEVEL)
    check_choice(errors, "item_type", inp.item_type, ITEM_TYPES)

    reqs = inp.attribute_requirements
    for name in ("strength", "dexterity", "intelligence"):
        check_range(
            errors,
            f"attribute_requirements.{name}",
            getattr(reqs, name),
            minimum=0,
            maximum=MAX_ATTRIBUTE,
        )
    return errors


def run(inp: VoriciInput) -> VoriciOutput:
    """Compare chromatic, Vorici bench and jeweller approaches for a socket colouring."""
    errors = _validate(inp)
    if errors:
        return VoriciOutput(result=None, errors=errors, success=False)

    weights = colour_weights(inp.attribute_requirements)
    rate = success_rate(inp.required_colors, weights)

    methods = (
        CraftingMethod(
            "Chromatic Spam", CHROMATIC_COST / rate, rate, "Repeatedly use Chromatic Orbs"
        ),
        CraftingMethod(
            "Vorici Craft",
            VORICI_COST * inp.required_colors.red,
            1.0,
            "Use Vorici bench craft for guaranteed colors",
        ),
        CraftingMethod(
            "Jeweller Method",
            (JEWELLER_COST + FUSING_COST) / rate,
            rate,
            "Use Jeweller's Orbs to force specific colors",
        ),
    )
    # First method wins ties
    best = min(methods, key=lambda m: m.average_cost)

    reqs = inp.attribute_requirements
    probabilities = (
        ColorChance("Red", weights[0] * 100, reqs.strength / 10),
        ColorChance("Green", weights[1] * 100, reqs.dexterity / 10),
        ColorChance("Blue", weights[2] * 100, reqs.intelligence / 10),
    )
    recommendations = (
        Recommendation(
            "Crafting Method",
            "Use Vorici bench craft for guaranteed results"
            if best.method == "Vorici Craft"
            else "Manual crafting is more cost-effective",
        ),
        Recommendation(
            "Item Choice",
            "Consider using a lower item level base for easier coloring"
            if inp.item_level > 50
            else "Item level is good for socket coloring",
        ),
        Recommendation("Requirements", "Match item base type with desired socket colors"),
        Recommendation(
            "Cost Saving",
            "Consider trading for a pre-colored item"
            if best.average_cost > 100
            else "Self-crafting is cost-effective",
        ),
    )

    return VoriciOutput(
        result=VoriciResult(
            best_method=best,
            methods=methods,
            probabilities=probabilities,
            recommendations=recommendations,
        ),
        errors=[],
        success=True,
    )
