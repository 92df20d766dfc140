"""
Snowboard size component - board length and width from rider profile.

Length starts at 88% of rider height, is scaled by an experience band, gets
2 cm per 75 kg of rider weight and a fixed style offset.
"""

from __future__ import annotations

from calcdeck.domain.advice import Recommendation
from calcdeck.domain.errors import CalculationError, check_choice, check_range
from calcdeck.domain.rounding import round_int
from calcdeck.domain.units import MAX_HEIGHT, MAX_WEIGHT, UNIT_SYSTEMS, to_metric

from .models import (
    LengthRange,
    SnowboardInput,
    SnowboardOutput,
    SnowboardResult,
    StyleCharacteristics,
    WidthClass,
)

HEIGHT_FACTOR = 0.88
REFERENCE_WEIGHT_KG = 75
MIN_SHOE_SIZE = 3
MAX_SHOE_SIZE = 18

EXPERIENCE_BANDS: dict[str, tuple[float, float]] = {
    "beginner": (0.90, 0.95),
    "intermediate": (0.95, 1.00),
    "advanced": (1.00, 1.05),
}

STYLE_ADJUSTMENTS_CM: dict[str, int] = {
    "all-mountain": 0,
    "freestyle": -3,
    "freeride": 2,
    "powder": 4,
}

BOARD_TYPES = {
    "freestyle": "True twin shape recommended for freestyle riding",
    "freeride": "Directional shape recommended for freeride",
    "powder": "Directional or tapered shape recommended for powder",
    "all-mountain": "All-mountain shape recommended for versatility",
}

FLEX_ADVICE = {
    "beginner": "Soft to medium flex (3-5/10) for better control",
    "intermediate": "Medium flex (5-7/10) for versatility",
    "advanced": "Medium to stiff flex (7-9/10) for responsive performance",
}

FLEX = {"beginner": "Soft", "intermediate": "Medium", "advanced": "Stiff"}


def width_class(shoe_size: float) -> WidthClass:
    if shoe_size >= 11.5:
        return "wide"
    if shoe_size >= 10.5:
        return "mid-wide"
    return "standard"


def _validate(inp: SnowboardInput) -> list[CalculationError]:
    errors: list[CalculationError] = []
    check_range(
        errors, "weight", inp.weight, minimum=0, maximum=MAX_WEIGHT, exclusive_minimum=True
    )
    check_range(
        errors, "height", inp.height, minimum=0, maximum=MAX_HEIGHT, exclusive_minimum=True
    )
    check_range(errors, "shoe_size", inp.shoe_size, minimum=MIN_SHOE_SIZE, maximum=MAX_SHOE_SIZE)
    check_choice(errors, "experience", inp.experience, EXPERIENCE_BANDS)
    check_choice(errors, "style", inp.style, STYLE_ADJUSTMENTS_CM)
    check_choice(errors, "unit", inp.unit, UNIT_SYSTEMS)
    return errors


def run(inp: SnowboardInput) -> SnowboardOutput:
    errors = _validate(inp)
    if errors:
        return SnowboardOutput(result=None, errors=errors, success=False)

    kg, cm = to_metric(inp.weight, inp.height, inp.unit)
    base = cm * HEIGHT_FACTOR
    low, high = EXPERIENCE_BANDS[inp.experience]
    offset = kg / REFERENCE_WEIGHT_KG * 2 + STYLE_ADJUSTMENTS_CM[inp.style]

    shortest = round_int(base * low + offset)
    longest = round_int(base * high + offset)
    width = width_class(inp.shoe_size)
    freestyle = inp.style == "freestyle"

    recommendations = (
        Recommendation("Board Type", BOARD_TYPES[inp.style]),
        Recommendation("Flex Rating", FLEX_ADVICE[inp.experience]),
        Recommendation("Width", f"{width} board recommended for your boot size"),
        Recommendation(
            "Stance",
            "Centered stance recommended" if freestyle else "Slightly setback stance recommended",
        ),
    )
    shape = (
        "True Twin"
        if freestyle
        else "Directional Tapered"
        if inp.style == "powder"
        else "Directional"
    )

    return SnowboardOutput(
        result=SnowboardResult(
            recommended_length=LengthRange(
                min=shortest, max=longest, ideal=round_int((shortest + longest) / 2)
            ),
            width_recommendation=width,
            style_characteristics=StyleCharacteristics(
                flex=FLEX[inp.experience],
                shape=shape,
                setback="Centered" if freestyle else "Setback",
            ),
            recommendations=recommendations,
        ),
        errors=[],
        success=True,
    )
