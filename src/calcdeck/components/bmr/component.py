"""
BMR component - basal metabolic rate from two predictive equations.

The reported BMR is the mean of the Mifflin-St Jeor and revised
Harris-Benedict estimates. Macro ranges are derived from the moderate
activity level.
"""

from __future__ import annotations

from calcdeck.domain.errors import CalculationError, check_choice, check_range
from calcdeck.domain.rounding import round_int
from calcdeck.domain.units import GENDERS, MAX_HEIGHT, MAX_WEIGHT, UNIT_SYSTEMS, to_metric

from .models import (
    BMRFactor,
    BMRInput,
    BMROutput,
    BMRResult,
    DailyCalories,
    GramRange,
    MacroBreakdown,
)

ACTIVITY_MULTIPLIERS = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
}

MAX_AGE = 120


def mifflin_st_jeor(kg: float, cm: float, age: float, gender: str) -> float:
    base = 10 * kg + 6.25 * cm - 5 * age
    return base + 5 if gender == "male" else base - 161


def harris_benedict(kg: float, cm: float, age: float, gender: str) -> float:
    if gender == "male":
        return 66.47 + 13.75 * kg + 5.003 * cm - 6.755 * age
    return 655.1 + 9.563 * kg + 1.85 * cm - 4.676 * age


def macro_breakdown(calories: float) -> MacroBreakdown:
    """Protein 25-35%, carbs 45-65% (4 kcal/g) and fat 20-35% (9 kcal/g)."""
    return MacroBreakdown(
        protein=GramRange(round_int(calories * 0.25 / 4), round_int(calories * 0.35 / 4)),
        carbs=GramRange(round_int(calories * 0.45 / 4), round_int(calories * 0.65 / 4)),
        fats=GramRange(round_int(calories * 0.20 / 9), round_int(calories * 0.35 / 9)),
    )


def _validate(inp: BMRInput) -> list[CalculationError]:
    errors: list[CalculationError] = []
    check_range(
        errors, "weight", inp.weight, minimum=0, maximum=MAX_WEIGHT, exclusive_minimum=True
    )
    check_range(
        errors, "height", inp.height, minimum=0, maximum=MAX_HEIGHT, exclusive_minimum=True
    )
    check_range(errors, "age", inp.age, minimum=0, maximum=MAX_AGE, exclusive_minimum=True)
    check_choice(errors, "gender", inp.gender, GENDERS)
    check_choice(errors, "unit", inp.unit, UNIT_SYSTEMS)
    return errors


def run(inp: BMRInput) -> BMROutput:
    errors = _validate(inp)
    if errors:
        return BMROutput(result=None, errors=errors, success=False)

    kg, cm = to_metric(inp.weight, inp.height, inp.unit)
    mifflin = mifflin_st_jeor(kg, cm, inp.age, inp.gender)
    harris = harris_benedict(kg, cm, inp.age, inp.gender)
    bmr = round_int((mifflin + harris) / 2)

    daily = DailyCalories(
        **{level: round_int(bmr * m) for level, m in ACTIVITY_MULTIPLIERS.items()}
    )
    gender_offset = 5 if inp.gender == "male" else -161
    factors = (
        BMRFactor("Weight", kg, round_int(kg * 10)),
        BMRFactor("Height", cm, round_int(cm * 6.25)),
        BMRFactor("Age", inp.age, round_int(inp.age * -5)),
        BMRFactor("Gender", gender_offset, gender_offset),
    )

    return BMROutput(
        result=BMRResult(
            bmr=bmr,
            mifflin_st_jeor=mifflin,
            harris_benedict=harris,
            daily_calories=daily,
            macro_breakdown=macro_breakdown(daily.moderate),
            method_used="Average of Mifflin-St Jeor and Harris-Benedict equations",
            factors=factors,
        ),
        errors=[],
        success=True,
    )
