"""
HELOC component - home equity line of credit sizing and payoff.
"""

from __future__ import annotations

from calcdeck.domain.errors import MAX_AMOUNT, CalculationError, check_integer, check_range
from calcdeck.domain.rounding import round_int

from .models import HelocInput, HelocOutput, HelocResult

MAX_LOAN_TO_VALUE = 0.80
MAX_PAYOFF_MONTHS = 360

# (minimum score, share of available equity offered), best tier first
CREDIT_TIERS: tuple[tuple[int, float], ...] = (
    (740, 0.95),
    (700, 0.85),
    (660, 0.75),
)
BASE_CREDIT_FACTOR = 0.65


def credit_line_factor(credit_score: int) -> float:
    for minimum, factor in CREDIT_TIERS:
        if credit_score >= minimum:
            return factor
    return BASE_CREDIT_FACTOR


def _validate(inp: HelocInput) -> list[CalculationError]:
    errors: list[CalculationError] = []
    check_range(errors, "home_value", inp.home_value, minimum=0, maximum=MAX_AMOUNT)
    check_range(
        errors, "mortgage_balance", inp.mortgage_balance, minimum=0, maximum=MAX_AMOUNT
    )
    check_integer(errors, "credit_score", inp.credit_score, minimum=300, maximum=850)
    check_range(errors, "interest_rate", inp.interest_rate, minimum=0, maximum=100)
    check_range(errors, "draw_amount", inp.draw_amount, minimum=0, maximum=MAX_AMOUNT)
    check_range(
        errors, "monthly_payment", inp.monthly_payment, minimum=0, maximum=MAX_AMOUNT
    )
    return errors


def run(inp: HelocInput) -> HelocOutput:
    """
    Size a HELOC and simulate paying off a draw.

    The payoff simulation stops after 360 months; ``payoff_capped`` is set
    when the balance is still outstanding at that point.
    """
    errors = _validate(inp)
    if errors:
        return HelocOutput(result=None, errors=errors, success=False)

    available_equity = max(0.0, inp.home_value * MAX_LOAN_TO_VALUE - inp.mortgage_balance)
    factor = credit_line_factor(inp.credit_score)

    monthly_rate = inp.interest_rate / 100 / 12
    balance = inp.draw_amount
    total_interest = 0.0
    months = 0
    while balance > 0 and months < MAX_PAYOFF_MONTHS:
        interest = balance * monthly_rate
        total_interest += interest
        balance += interest - inp.monthly_payment
        months += 1

    return HelocOutput(
        result=HelocResult(
            available_equity=available_equity,
            credit_line_factor=factor,
            max_credit_line=round_int(available_equity * factor),
            monthly_payment=inp.monthly_payment,
            total_interest=round_int(total_interest),
            payoff_months=months,
            payoff_capped=balance > 0,
        ),
        errors=[],
        success=True,
    )
