"""
Compound interest component - certificate of deposit growth.

Iterates the term period by period, applying ``balance *= 1 + r/n`` and
collecting a yearly breakdown. Values accumulate in full double precision and
are only rounded when the result record is built.

Invariants:
- APY depends only on the rate and the compounding frequency
- final_balance = principal + total_interest
"""

from __future__ import annotations

from calcdeck.domain.advice import Recommendation
from calcdeck.domain.errors import (
    MAX_AMOUNT,
    CalculationError,
    check_choice,
    check_range,
    invalid_range,
)
from calcdeck.domain.rounding import round_currency, round_half_up, round_int

from .models import (
    CompoundInterestInput,
    CompoundInterestOutput,
    CompoundInterestResult,
    YearlyTotal,
)

PERIODS_PER_YEAR: dict[str, int] = {
    "daily": 365,
    "weekly": 52,
    "monthly": 12,
    "quarterly": 4,
    "annually": 1,
}

MAX_TERM_YEARS = 100


def annual_percentage_yield(rate: float, periods_per_year: int) -> float:
    """APY in percent for a nominal annual ``rate`` in percent."""
    r = rate / 100
    return ((1 + r / periods_per_year) ** periods_per_year - 1) * 100


def _validate(inp: CompoundInterestInput) -> list[CalculationError]:
    errors: list[CalculationError] = []
    check_range(
        errors,
        "principal",
        inp.principal,
        minimum=0,
        maximum=MAX_AMOUNT,
        exclusive_minimum=True,
    )
    check_range(errors, "rate", inp.rate, minimum=0, maximum=100)
    check_range(
        errors, "term", inp.term, minimum=0, maximum=MAX_TERM_YEARS, exclusive_minimum=True
    )
    check_choice(errors, "compounding", inp.compounding, PERIODS_PER_YEAR)

    if not errors and round_int(PERIODS_PER_YEAR[inp.compounding] * inp.term) < 1:
        errors.append(invalid_range("term", "term is shorter than one compounding period"))
    return errors


def _grow(
    principal: float, rate: float, periods_per_year: int, total_periods: int
) -> tuple[float, list[YearlyTotal]]:
    periodic_rate = rate / 100 / periods_per_year
    balance = principal
    year_interest = 0.0
    yearly: list[YearlyTotal] = []

    for period in range(1, total_periods + 1):
        interest = balance * periodic_rate
        balance += interest
        year_interest += interest

        if period % periods_per_year == 0 or period == total_periods:
            yearly.append(
                YearlyTotal(
                    year=round_half_up(period / periods_per_year, 4),
                    interest=round_currency(year_interest),
                    balance=round_currency(balance),
                )
            )
            year_interest = 0.0

    return balance, yearly


def _recommendations(inp: CompoundInterestInput) -> tuple[Recommendation, ...]:
    return (
        Recommendation(
            "Term Selection",
            "Consider locking in this favorable rate for a longer term"
            if inp.rate > 4
            else "Compare rates with other terms to maximize returns",
        ),
        Recommendation(
            "Compounding Frequency",
            "Daily compounding maximizes returns"
            if inp.compounding == "daily"
            else "Consider CDs with more frequent compounding",
        ),
        Recommendation(
            "Investment Strategy",
            "Consider CD laddering to maintain liquidity"
            if inp.term > 2
            else "Short term provides flexibility but may miss higher rates",
        ),
        Recommendation("Risk Management", "Ensure FDIC insurance coverage for full amount"),
    )


def run(inp: CompoundInterestInput) -> CompoundInterestOutput:
    """
    Calculate CD growth, APY and an optional early withdrawal penalty.

    Args:
        inp: Principal, annual rate (percent), term in years and compounding.

    Returns:
        CompoundInterestOutput with the result or validation errors.
    """
    errors = _validate(inp)
    if errors:
        return CompoundInterestOutput(result=None, errors=errors, success=False)

    n = PERIODS_PER_YEAR[inp.compounding]
    total_periods = round_int(n * inp.term)
    final_balance, yearly = _grow(inp.principal, inp.rate, n, total_periods)
    total_interest = final_balance - inp.principal
    apy = annual_percentage_yield(inp.rate, n)

    penalty: float | None = None
    if inp.early_withdrawal:
        # Banks typically charge 3 months of interest on short CDs, 6 months otherwise
        penalty_months = 3 if inp.term <= 1 else 6
        penalty = round_currency(total_interest / (inp.term * 12) * penalty_months)

    return CompoundInterestOutput(
        result=CompoundInterestResult(
            final_balance=round_currency(final_balance),
            total_interest=round_currency(total_interest),
            apy=round_half_up(apy, 4),
            effective_rate_gain=round_half_up(apy - inp.rate, 4),
            compounding_periods=n,
            yearly_totals=tuple(yearly),
            early_withdrawal_penalty=penalty,
            recommendations=_recommendations(inp),
        ),
        errors=[],
        success=True,
    )
