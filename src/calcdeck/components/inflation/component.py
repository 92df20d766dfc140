"""
Inflation component - grow an amount at a constant annual inflation rate.
"""

from __future__ import annotations

from calcdeck.domain.errors import (
    MAX_AMOUNT,
    CalculationError,
    check_integer,
    check_range,
    invalid_range,
)
from calcdeck.domain.rounding import round_currency, round_half_up

from .models import InflationInput, InflationOutput, InflationResult, InflationYear

MAX_SPAN_YEARS = 200
# Purchasing power divides by (1 + rate) ** span, which must not underflow
MIN_RATE = -50


def _validate(inp: InflationInput) -> list[CalculationError]:
    errors: list[CalculationError] = []
    check_range(
        errors, "amount", inp.amount, minimum=0, maximum=MAX_AMOUNT, exclusive_minimum=True
    )
    check_integer(errors, "start_year", inp.start_year)
    check_integer(errors, "end_year", inp.end_year)
    check_range(errors, "rate", inp.rate, minimum=MIN_RATE, maximum=100)
    if errors:
        return errors

    span = inp.end_year - inp.start_year
    if span <= 0:
        errors.append(invalid_range("end_year", "end_year must be after start_year"))
    elif span > MAX_SPAN_YEARS:
        errors.append(
            invalid_range("end_year", f"span between years must be at most {MAX_SPAN_YEARS}")
        )
    return errors


def run(inp: InflationInput) -> InflationOutput:
    """Project ``amount`` from ``start_year`` to ``end_year``."""
    errors = _validate(inp)
    if errors:
        return InflationOutput(result=None, errors=errors, success=False)

    years = inp.end_year - inp.start_year
    growth = 1 + inp.rate / 100

    yearly: list[InflationYear] = []
    value = inp.amount
    previous = inp.amount
    for i in range(years + 1):
        yearly.append(
            InflationYear(
                year=inp.start_year + i,
                value=round_currency(value),
                change=round_currency(value - previous) if i else 0.0,
            )
        )
        previous = value
        value *= growth

    future_value = inp.amount * growth**years
    total_change = future_value - inp.amount
    average_rate = ((future_value / inp.amount) ** (1 / years) - 1) * 100

    return InflationOutput(
        result=InflationResult(
            future_value=round_currency(future_value),
            total_change=round_currency(total_change),
            percentage_change=round_half_up(total_change / inp.amount * 100, 2),
            average_rate=round_half_up(average_rate, 4),
            # What the original amount buys at end_year, in start_year money
            purchasing_power=round_currency(inp.amount / growth**years),
            yearly_breakdown=tuple(yearly),
        ),
        errors=[],
        success=True,
    )
