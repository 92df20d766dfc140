"""
TDEE component - total daily energy expenditure.

Mifflin-St Jeor BMR scaled by an activity multiplier. Macro ranges (grams)
and weight goals are derived from the selected activity level's TDEE.
"""

from __future__ import annotations

from calcdeck.domain.errors import CalculationError, check_choice, check_range
from calcdeck.domain.rounding import round_int
from calcdeck.domain.units import GENDERS, MAX_HEIGHT, MAX_WEIGHT, UNIT_SYSTEMS, to_metric

from .models import (
    CalorieGoals,
    CalorieRange,
    MaintenanceCalories,
    TDEEInput,
    TDEEMacros,
    TDEEOutput,
    TDEEResult,
)

ACTIVITY_MULTIPLIERS: dict[str, float] = {
    "sedentary": 1.2,  # little or no exercise
    "light": 1.375,  # 1-3 days/week
    "moderate": 1.55,  # 3-5 days/week
    "active": 1.725,  # 6-7 days/week
    "very_active": 1.9,  # physical job or twice-daily training
}

MAX_AGE = 120


def _validate(inp: TDEEInput) -> list[CalculationError]:
    errors: list[CalculationError] = []
    check_range(
        errors, "weight", inp.weight, minimum=0, maximum=MAX_WEIGHT, exclusive_minimum=True
    )
    check_range(
        errors, "height", inp.height, minimum=0, maximum=MAX_HEIGHT, exclusive_minimum=True
    )
    check_range(errors, "age", inp.age, minimum=0, maximum=MAX_AGE, exclusive_minimum=True)
    check_choice(errors, "gender", inp.gender, GENDERS)
    check_choice(errors, "activity_level", inp.activity_level, ACTIVITY_MULTIPLIERS)
    check_choice(errors, "unit", inp.unit, UNIT_SYSTEMS)
    return errors


def _scaled(value: float, low: float, high: float, divisor: float = 1) -> CalorieRange:
    return CalorieRange(round_int(value * low / divisor), round_int(value * high / divisor))


def run(inp: TDEEInput) -> TDEEOutput:
    errors = _validate(inp)
    if errors:
        return TDEEOutput(result=None, errors=errors, success=False)

    kg, cm = to_metric(inp.weight, inp.height, inp.unit)
    bmr = 10 * kg + 6.25 * cm - 5 * inp.age
    bmr = bmr + 5 if inp.gender == "male" else bmr - 161
    tdee = round_int(bmr * ACTIVITY_MULTIPLIERS[inp.activity_level])

    return TDEEOutput(
        result=TDEEResult(
            bmr=round_int(bmr),
            tdee=tdee,
            maintenance_calories=MaintenanceCalories(
                **{level: round_int(bmr * m) for level, m in ACTIVITY_MULTIPLIERS.items()}
            ),
            macro_breakdown=TDEEMacros(
                protein=_scaled(tdee, 0.25, 0.35, 4),
                carbs=_scaled(tdee, 0.45, 0.65, 4),
                fats=_scaled(tdee, 0.20, 0.35, 9),
            ),
            goals=CalorieGoals(
                weight_loss=_scaled(tdee, 0.8, 0.9),
                maintenance=tdee,
                weight_gain=_scaled(tdee, 1.1, 1.2),
            ),
        ),
        errors=[],
        success=True,
    )
