"""
Investment component - compound growth with periodic contributions.

Each compounding period adds the contribution for that period first and then
earns ``(balance + contribution) * r/n``.
"""

from __future__ import annotations

from calcdeck.domain.advice import Recommendation
from calcdeck.domain.errors import (
    MAX_AMOUNT,
    CalculationError,
    check_choice,
    check_integer,
    check_range,
)
from calcdeck.domain.rounding import round_currency, round_half_up

from .models import (
    InvestmentInput,
    InvestmentMetrics,
    InvestmentOutput,
    InvestmentResult,
    YearlyBreakdown,
)

PERIODS_PER_YEAR: dict[str, int] = {
    "monthly": 12,
    "quarterly": 4,
    "annually": 1,
}

MAX_YEARS = 100
# Deflation floor; the real value divides by (1 + inflation) ** years
MIN_INFLATION_RATE = -50


def _validate(inp: InvestmentInput) -> list[CalculationError]:
    errors: list[CalculationError] = []
    check_range(errors, "initial_amount", inp.initial_amount, minimum=0, maximum=MAX_AMOUNT)
    check_range(
        errors,
        "monthly_contribution",
        inp.monthly_contribution,
        minimum=0,
        maximum=MAX_AMOUNT,
    )
    check_range(
        errors,
        "annual_return",
        inp.annual_return,
        minimum=-100,
        maximum=100,
        exclusive_minimum=True,
    )
    check_integer(errors, "years", inp.years, minimum=1, maximum=MAX_YEARS)
    check_choice(errors, "compounding", inp.compounding, PERIODS_PER_YEAR)
    if inp.inflation_rate is not None:
        check_range(
            errors,
            "inflation_rate",
            inp.inflation_rate,
            minimum=MIN_INFLATION_RATE,
            maximum=100,
        )
    if inp.tax_rate is not None:
        check_range(errors, "tax_rate", inp.tax_rate, minimum=0, maximum=100)
    return errors


def _recommendations(inp: InvestmentInput, periods_per_year: int) -> tuple[Recommendation, ...]:
    return (
        Recommendation(
            "Compounding Frequency",
            "Consider monthly compounding to maximize returns"
            if periods_per_year < 12
            else "You're maximizing compound interest with monthly compounding",
        ),
        Recommendation(
            "Contribution Strategy",
            "Consider increasing monthly contributions to build wealth faster"
            if inp.monthly_contribution < inp.initial_amount / 24
            else "Strong contribution strategy for long-term growth",
        ),
        Recommendation(
            "Risk and Return",
            "Consider diversification to manage higher risk"
            if inp.annual_return > 12
            else "Balance matches typical long-term market returns",
        ),
        Recommendation("Tax Efficiency", "Consider tax-advantaged accounts like 401(k) or IRA"),
    )


def run(inp: InvestmentInput) -> InvestmentOutput:
    """Project an investment balance year by year."""
    errors = _validate(inp)
    if errors:
        return InvestmentOutput(result=None, errors=errors, success=False)

    n = PERIODS_PER_YEAR[inp.compounding]
    periodic_rate = inp.annual_return / 100 / n
    contribution = inp.monthly_contribution * (12 / n)
    inflation = inp.inflation_rate / 100 if inp.inflation_rate is not None else None

    effective_annual_rate = (1 + inp.annual_return / 100 / n) ** n - 1
    real_return_rate = (
        (1 + effective_annual_rate) / (1 + inflation) - 1 if inflation is not None else None
    )

    balance = inp.initial_amount
    total_contributions = inp.initial_amount
    year_contributions = 0.0
    year_earnings = 0.0
    yearly: list[YearlyBreakdown] = []

    for period in range(1, inp.years * n + 1):
        earnings = (balance + contribution) * periodic_rate
        balance += contribution + earnings
        total_contributions += contribution
        year_contributions += contribution
        year_earnings += earnings

        if period % n == 0:
            year = period // n
            adjusted = balance / (1 + inflation) ** year if inflation is not None else None
            yearly.append(
                YearlyBreakdown(
                    year=year,
                    balance=round_currency(balance),
                    contributions=round_currency(year_contributions),
                    earnings=round_currency(year_earnings),
                    inflation_adjusted=round_currency(adjusted) if adjusted is not None else None,
                )
            )
            year_contributions = 0.0
            year_earnings = 0.0

    total_earnings = balance - total_contributions
    taxable_amount = (
        round_currency(total_earnings * inp.tax_rate / 100) if inp.tax_rate is not None else None
    )
    inflation_adjusted_balance = (
        round_currency(balance / (1 + inflation) ** inp.years) if inflation is not None else None
    )

    return InvestmentOutput(
        result=InvestmentResult(
            final_balance=round_currency(balance),
            total_contributions=round_currency(total_contributions),
            total_earnings=round_currency(total_earnings),
            inflation_adjusted_balance=inflation_adjusted_balance,
            yearly_breakdown=tuple(yearly),
            metrics=InvestmentMetrics(
                effective_annual_rate=round_half_up(effective_annual_rate * 100, 4),
                real_return_rate=(
                    round_half_up(real_return_rate * 100, 4)
                    if real_return_rate is not None
                    else None
                ),
                taxable_amount=taxable_amount,
            ),
            recommendations=_recommendations(inp, n),
        ),
        errors=[],
        success=True,
    )
