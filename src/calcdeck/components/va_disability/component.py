"""
VA disability component - combined rating and monthly compensation.

Ratings are combined with the VA whole-person method: sorted highest first,
each rating applies only to the capacity the previous ones left. The sum is
kept as an exact fraction and rounded half-up to the nearest 10 once, so a
combined value of exactly 45 becomes 50.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from fractions import Fraction

from calcdeck.domain.errors import CalculationError, check_integer, check_range, invalid_range
from calcdeck.domain.rounding import round_currency
from calcdeck.tables import VADisabilityTable, default_catalog

from .models import (
    Benefit,
    CalculationStep,
    DependentPayments,
    VADisabilityInput,
    VADisabilityOutput,
    VADisabilityResult,
)
from .ports import VATablesPort

DEPENDENT_MINIMUM_RATING = 30
MAX_DEPENDENT_PARENTS = 2
MAX_CHILDREN = 20


def exact_combined_rating(percentages: Iterable[float]) -> Fraction:
    """Unrounded whole-person combined rating."""
    combined = Fraction(0)
    for rating in sorted((Fraction(str(p)) for p in percentages), reverse=True):
        combined += rating * (100 - combined) / 100
    return combined


def combined_rating(percentages: Iterable[float]) -> int:
    """Combined rating rounded half-up to the nearest 10."""
    exact = exact_combined_rating(percentages)
    return math.floor(exact / 10 + Fraction(1, 2)) * 10


def _validate(inp: VADisabilityInput, tables: VATablesPort) -> list[CalculationError]:
    errors: list[CalculationError] = []
    for i, rating in enumerate(inp.ratings):
        check_range(errors, f"ratings[{i}].percentage", rating.percentage, minimum=0, maximum=100)

    deps = inp.dependents
    check_integer(
        errors,
        "dependents.children_under_18",
        deps.children_under_18,
        minimum=0,
        maximum=MAX_CHILDREN,
    )
    check_integer(
        errors,
        "dependents.children_in_school",
        deps.children_in_school,
        minimum=0,
        maximum=MAX_CHILDREN,
    )
    check_integer(
        errors,
        "dependents.dependent_parents",
        deps.dependent_parents,
        minimum=0,
        maximum=MAX_DEPENDENT_PARENTS,
    )

    if inp.year not in tables.va_years():
        errors.append(invalid_range("year", f"No VA compensation table for {inp.year}"))
    return errors


def _dependent_payments(
    rating: int, inp: VADisabilityInput, table: VADisabilityTable
) -> DependentPayments:
    if rating < DEPENDENT_MINIMUM_RATING:
        return DependentPayments(0.0, 0.0, 0.0, 0.0, 0.0)

    rates = table.dependent_rates
    deps = inp.dependents
    return DependentPayments(
        spouse=rates.spouse[rating] if deps.spouse else 0.0,
        children_under_18=rates.child_under_18[rating] * deps.children_under_18,
        children_in_school=rates.child_in_school[rating] * deps.children_in_school,
        dependent_parents=rates.dependent_parent[rating] * deps.dependent_parents,
        aid_and_attendance=table.aid_and_attendance if rating == 100 else 0.0,
    )


def _benefits(rating: int) -> tuple[Benefit, ...]:
    def eligible(condition: bool, label: str = "Eligible") -> str:
        return label if condition else "Not eligible"

    return (
        Benefit("Healthcare", "VA Healthcare coverage", eligible(rating >= 0)),
        Benefit("Education", "GI Bill benefits", eligible(rating >= 20)),
        Benefit("Life Insurance", "Veterans Group Life Insurance", eligible(rating >= 30)),
        Benefit("Dental Care", "VA Dental Care", eligible(rating == 100)),
        Benefit(
            "Property Tax",
            "Property tax exemptions (varies by state)",
            eligible(rating >= 50, "May be eligible"),
        ),
    )


def run(inp: VADisabilityInput, *, tables: VATablesPort | None = None) -> VADisabilityOutput:
    """
    Combine disability ratings and look up monthly compensation.

    Dependent add-ons apply from a 30% combined rating. An empty rating list
    is valid and yields a 0% rating with no payment.
    """
    tables = tables or default_catalog()
    errors = _validate(inp, tables)
    if errors:
        return VADisabilityOutput(result=None, errors=errors, success=False)

    table = tables.va_table(inp.year)
    percentages = [r.percentage for r in inp.ratings]
    exact = exact_combined_rating(percentages)
    rating = combined_rating(percentages)

    base = table.base_rates.get(rating, 0.0)
    dependents = _dependent_payments(rating, inp, table)
    monthly = base + dependents.total

    calculations = [
        CalculationStep(f"Rating {i + 1}", r.percentage, r.description)
        for i, r in enumerate(inp.ratings)
    ]
    calculations.append(
        CalculationStep("Combined Value", round_currency(float(exact)), "Whole-person VA math")
    )
    calculations.append(
        CalculationStep("Combined Rating", rating, "Final combined rating after VA math")
    )

    return VADisabilityOutput(
        result=VADisabilityResult(
            combined_rating=rating,
            exact_combined_rating=float(exact),
            base_monthly_payment=base,
            dependent_payments=dependents,
            total_monthly_payment=round_currency(monthly),
            total_yearly_payment=round_currency(monthly * 12),
            benefits=_benefits(rating),
            calculations=tuple(calculations),
        ),
        errors=[],
        success=True,
    )
