"""
Social Security component - retirement benefit estimate.

The estimate uses a single year of earnings as a stand-in for the 35-year
average: AIME is the monthly income capped at the taxable maximum.
"""

from __future__ import annotations

from fractions import Fraction

from calcdeck.domain.advice import Recommendation
from calcdeck.domain.errors import (
    MAX_AMOUNT,
    CalculationError,
    check_choice,
    check_integer,
    check_range,
    invalid_range,
)
from calcdeck.domain.rounding import round_currency, round_int
from calcdeck.tables import SocialSecurityTable, default_catalog

from .models import (
    CumulativeBenefit,
    MaritalStatus,
    RetirementAge,
    SocialSecurityInput,
    SocialSecurityOutput,
    SocialSecurityResult,
)
from .ports import SocialSecurityTablesPort

MARITAL_STATUSES: tuple[MaritalStatus, ...] = ("single", "married", "divorced", "widowed")
SPOUSAL_STATUSES = ("married", "divorced", "widowed")

EARLIEST_BIRTH_YEAR = 1900
EARLIEST_RETIREMENT_AGE = 62
LATEST_RETIREMENT_AGE = 70
PROJECTION_YEARS = 30

FIRST_REDUCTION_MONTHS = 36
FIRST_REDUCTION_RATE = Fraction(5, 900)
EXTRA_REDUCTION_RATE = Fraction(5, 1200)
DELAYED_CREDIT_RATE = Fraction(2, 300)


def benefit_adjustment(fra_months: int, claim_months: int) -> Fraction:
    """
    Benefit multiplier for claiming ``claim_months - fra_months`` months late.

    Early claims lose 5/9 of 1% for each of the first 36 months and 5/12 of 1%
    for each month beyond. Late claims earn 2/3 of 1% per month.
    """
    diff = claim_months - fra_months
    if diff >= 0:
        return 1 + diff * DELAYED_CREDIT_RATE

    early = -diff
    first = min(early, FIRST_REDUCTION_MONTHS)
    extra = early - first
    return 1 - first * FIRST_REDUCTION_RATE - extra * EXTRA_REDUCTION_RATE


def primary_insurance_amount(aime: float, table: SocialSecurityTable) -> float:
    """PIA from the bend-point formula, rounded to cents."""
    first_bend, second_bend = table.bend_points
    low, mid, high = table.pia_factors

    pia = min(aime, first_bend) * low
    if aime > first_bend:
        pia += (min(aime, second_bend) - first_bend) * mid
    if aime > second_bend:
        pia += (aime - second_bend) * high
    return round_currency(pia)


def _validate(inp: SocialSecurityInput, tables: SocialSecurityTablesPort) -> list[CalculationError]:
    errors: list[CalculationError] = []
    years = tables.social_security_years()
    if inp.table_year not in years:
        errors.append(
            invalid_range("table_year", f"No Social Security table for {inp.table_year}")
        )

    check_integer(
        errors,
        "birth_year",
        inp.birth_year,
        minimum=EARLIEST_BIRTH_YEAR,
        maximum=inp.table_year,
    )
    check_integer(
        errors,
        "retirement_age",
        inp.retirement_age,
        minimum=EARLIEST_RETIREMENT_AGE,
        maximum=LATEST_RETIREMENT_AGE,
    )
    check_range(
        errors, "current_income", inp.current_income, minimum=0, maximum=MAX_AMOUNT
    )
    check_choice(errors, "marital_status", inp.marital_status, MARITAL_STATUSES)
    if inp.spouse_benefit is not None:
        check_range(
            errors, "spouse_benefit", inp.spouse_benefit, minimum=0, maximum=MAX_AMOUNT
        )
    return errors


def _recommendations(
    adjustment: Fraction, inp: SocialSecurityInput, table: SocialSecurityTable
) -> tuple[Recommendation, ...]:
    return (
        Recommendation(
            "Retirement Timing",
            "Consider delaying retirement to increase benefits"
            if adjustment < 1
            else "You're maximizing your benefit by delaying retirement",
        ),
        Recommendation(
            "Earnings Impact",
            "Increasing your earnings will boost your future benefits"
            if inp.current_income < table.taxable_maximum
            else f"You've reached the maximum taxable earnings for {table.year}",
        ),
        Recommendation(
            "Spousal Benefits",
            "Compare your benefit with potential spousal benefits"
            if inp.marital_status == "married"
            else "Review eligibility for spousal or survivor benefits",
        ),
        Recommendation(
            "Working in Retirement",
            "Be aware of earnings limits if working before full retirement age",
        ),
    )


def run(
    inp: SocialSecurityInput, *, tables: SocialSecurityTablesPort | None = None
) -> SocialSecurityOutput:
    """
    Estimate the monthly retirement benefit at a chosen claiming age.

    Args:
        inp: Birth year, claiming age, income, marital status and table year.
        tables: Social Security parameter source. Defaults to the bundled tables.

    Returns:
        SocialSecurityOutput with the adjusted monthly benefit, optional
        spousal and survivor amounts and 30 years of cumulative totals.
    """
    tables = tables or default_catalog()
    errors = _validate(inp, tables)
    if errors:
        return SocialSecurityOutput(result=None, errors=errors, success=False)

    table = tables.social_security_table(inp.table_year)
    fra = table.full_retirement_age(inp.birth_year)
    adjustment = benefit_adjustment(fra.years * 12 + fra.months, inp.retirement_age * 12)

    aime = min(inp.current_income, table.taxable_maximum) / 12
    pia = primary_insurance_amount(aime, table)
    monthly = round_int(pia * float(adjustment))

    spousal: float | None = None
    survivor: float | None = None
    if inp.spouse_benefit and inp.marital_status in SPOUSAL_STATUSES:
        spousal = max(inp.spouse_benefit * 0.5, monthly)
        if inp.marital_status == "widowed":
            survivor = max(inp.spouse_benefit, monthly)

    totals = tuple(
        CumulativeBenefit(age=inp.retirement_age + i, total=monthly * 12 * (i + 1))
        for i in range(PROJECTION_YEARS)
    )

    return SocialSecurityOutput(
        result=SocialSecurityResult(
            monthly_benefit=monthly,
            yearly_benefit=monthly * 12,
            full_retirement_age=RetirementAge(years=fra.years, months=fra.months),
            benefit_adjustment=float(adjustment),
            average_indexed_monthly_earnings=round_currency(aime),
            primary_insurance_amount=pia,
            maximum_benefit=table.maximum_benefit,
            spousal_benefit=spousal,
            survivor_benefit=survivor,
            estimated_total_benefits=totals,
            recommendations=_recommendations(adjustment, inp, table),
        ),
        errors=[],
        success=True,
    )
