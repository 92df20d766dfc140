"""
Tattoo cost component - time and price estimate.

Simple designs take 15 minutes per square inch. Each colour beyond the
first adds 6 minutes per square inch. Sessions are capped at 4 hours.
"""

from __future__ import annotations

import math

from calcdeck.domain.advice import Recommendation
from calcdeck.domain.errors import CalculationError, check_choice, check_integer, check_range
from calcdeck.domain.rounding import round_half_up, round_int

from .models import (
    AftercarePhase,
    CostRange,
    PriceFactor,
    TattooInput,
    TattooOutput,
    TattooResult,
    TimeEstimate,
)

HOURLY_RATE = 150
MINIMUM_CHARGE = 100
MINIMUM_HOURS = 0.5
HOURS_PER_SESSION = 4
MAX_COLORS = 20
MAX_SIZE = 10_000

COMPLEXITY_MULTIPLIERS = {"simple": 1.0, "moderate": 1.5, "complex": 2.0}
PLACEMENT_MULTIPLIERS = {"easy": 1.0, "moderate": 1.25, "difficult": 1.5}
ARTIST_MULTIPLIERS = {"apprentice": 0.7, "experienced": 1.0, "master": 1.5}

AFTERCARE: tuple[AftercarePhase, ...] = (
    AftercarePhase(
        "Initial Healing",
        "3-7 days",
        (
            "Keep bandage on for 2-4 hours",
            "Wash gently with antibacterial soap",
            "Apply thin layer of aftercare ointment",
            "Avoid soaking in water",
        ),
    ),
    AftercarePhase(
        "Recovery",
        "2-3 weeks",
        (
            "Keep tattoo clean and moisturized",
            "Avoid direct sunlight",
            "Don't pick or scratch",
            "Wear loose clothing",
        ),
    ),
    AftercarePhase(
        "Long-term Care",
        "Ongoing",
        (
            "Use sunscreen when exposed",
            "Keep skin moisturized",
            "Touch-ups may be needed after healing",
        ),
    ),
)


def _validate(inp: TattooInput) -> list[CalculationError]:
    errors: list[CalculationError] = []
    check_range(errors, "size", inp.size, minimum=0, maximum=MAX_SIZE, exclusive_minimum=True)
    check_choice(errors, "complexity", inp.complexity, COMPLEXITY_MULTIPLIERS)
    check_integer(errors, "colors", inp.colors, minimum=1, maximum=MAX_COLORS)
    check_choice(errors, "placement", inp.placement, PLACEMENT_MULTIPLIERS)
    check_choice(errors, "artist_experience", inp.artist_experience, ARTIST_MULTIPLIERS)
    return errors


def run(inp: TattooInput) -> TattooOutput:
    errors = _validate(inp)
    if errors:
        return TattooOutput(result=None, errors=errors, success=False)

    base_hours = inp.size * 0.25 * COMPLEXITY_MULTIPLIERS[inp.complexity]
    color_hours = (inp.colors - 1) * inp.size * 0.1
    hours = max(MINIMUM_HOURS, base_hours + color_hours)

    cost = (
        max(MINIMUM_CHARGE, hours * HOURLY_RATE)
        * PLACEMENT_MULTIPLIERS[inp.placement]
        * ARTIST_MULTIPLIERS[inp.artist_experience]
    )
    estimate = CostRange(
        low=round_int(cost * 0.8), high=round_int(cost * 1.2), average=round_int(cost)
    )
    sessions = math.ceil(hours / HOURS_PER_SESSION)

    factors = (
        PriceFactor("Size", inp.size * 2, f"{inp.size} square inches"),
        PriceFactor(
            "Complexity",
            (COMPLEXITY_MULTIPLIERS[inp.complexity] - 1) * 100,
            f"{inp.complexity} design",
        ),
        PriceFactor("Colors", (inp.colors - 1) * 10, f"{inp.colors} colors used"),
        PriceFactor(
            "Placement",
            (PLACEMENT_MULTIPLIERS[inp.placement] - 1) * 100,
            f"{inp.placement} placement area",
        ),
    )
    recommendations = (
        Recommendation(
            "Artist Selection",
            "Choose an experienced artist for detailed work"
            if inp.complexity == "complex"
            else "Consider artist style match for best results",
        ),
        Recommendation(
            "Timing",
            f"Plan for {sessions} sessions, spaced 2-3 weeks apart"
            if sessions > 1
            else "Can be completed in one session",
        ),
        Recommendation("Preparation", "Stay hydrated and well-rested before appointment"),
        Recommendation(
            "Budget",
            "Consider breaking into multiple sessions for cost management"
            if estimate.average > 500
            else "Price is typical for size and complexity",
        ),
    )

    return TattooOutput(
        result=TattooResult(
            estimated_cost=estimate,
            time_estimate=TimeEstimate(hours=round_half_up(hours, 1), sessions=sessions),
            price_factors=factors,
            recommendations=recommendations,
            aftercare=AFTERCARE,
        ),
        errors=[],
        success=True,
    )
