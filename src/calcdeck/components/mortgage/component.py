"""
Mortgage component - fixed-rate amortized payment and yearly schedule.
"""

from __future__ import annotations

from calcdeck.domain.errors import (
    MAX_AMOUNT,
    CalculationError,
    check_integer,
    check_range,
    invalid_range,
)
from calcdeck.domain.rounding import round_currency

from .models import AmortizationYear, MortgageInput, MortgageOutput, MortgageResult

MAX_TERM_YEARS = 50


def monthly_payment(loan: float, annual_rate: float, months: int) -> float:
    """Level payment for a fully amortizing loan; straight-line at 0%."""
    r = annual_rate / 100 / 12
    if r == 0:
        return loan / months
    growth = (1 + r) ** months
    return loan * r * growth / (growth - 1)


def _validate(inp: MortgageInput) -> list[CalculationError]:
    errors: list[CalculationError] = []
    check_range(errors, "price", inp.price, minimum=0, maximum=MAX_AMOUNT)
    check_range(errors, "interest_rate", inp.interest_rate, minimum=0, maximum=100)
    check_integer(errors, "years", inp.years, minimum=1, maximum=MAX_TERM_YEARS)
    check_range(errors, "down_payment", inp.down_payment, minimum=0, maximum=MAX_AMOUNT)
    if not errors and inp.down_payment > inp.price:
        errors.append(invalid_range("down_payment", "down_payment cannot exceed price"))
    return errors


def _amortize(
    loan: float, annual_rate: float, payment: float, years: int
) -> list[AmortizationYear]:
    r = annual_rate / 100 / 12
    balance = loan
    schedule: list[AmortizationYear] = []
    for year in range(1, years + 1):
        principal_paid = interest_paid = 0.0
        for _ in range(12):
            interest = balance * r
            principal = min(payment - interest, balance)
            balance -= principal
            principal_paid += principal
            interest_paid += interest
        schedule.append(
            AmortizationYear(
                year=year,
                principal_paid=round_currency(principal_paid),
                interest_paid=round_currency(interest_paid),
                balance=round_currency(max(balance, 0.0)),
            )
        )
    return schedule


def run(inp: MortgageInput) -> MortgageOutput:
    """Calculate the monthly payment, totals and a yearly amortization summary."""
    errors = _validate(inp)
    if errors:
        return MortgageOutput(result=None, errors=errors, success=False)

    loan = inp.price - inp.down_payment
    months = inp.years * 12
    payment = monthly_payment(loan, inp.interest_rate, months)
    total = payment * months

    return MortgageOutput(
        result=MortgageResult(
            loan_amount=round_currency(loan),
            monthly_payment=round_currency(payment),
            total_payment=round_currency(total),
            total_interest=round_currency(total - loan),
            amortization=tuple(_amortize(loan, inp.interest_rate, payment, inp.years)),
        ),
        errors=[],
        success=True,
    )
