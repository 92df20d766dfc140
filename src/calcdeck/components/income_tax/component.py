"""
Income tax component - progressive federal brackets plus a flat state rate.
"""

from __future__ import annotations

from calcdeck.domain.errors import (
    MAX_AMOUNT,
    CalculationError,
    check_choice,
    check_range,
    invalid_range,
)
from calcdeck.domain.rounding import round_currency, round_half_up
from calcdeck.tables import FILING_STATUSES, TaxBracket, default_catalog

from .models import BracketTax, IncomeTaxInput, IncomeTaxOutput, IncomeTaxResult
from .ports import TaxTablesPort

MAX_STATE_RATE = 20.0


def _validate(inp: IncomeTaxInput, tables: TaxTablesPort) -> list[CalculationError]:
    errors: list[CalculationError] = []
    check_range(errors, "income", inp.income, minimum=0, maximum=MAX_AMOUNT)
    check_choice(errors, "filing_status", inp.filing_status, FILING_STATUSES)
    if inp.deductions is not None:
        check_range(errors, "deductions", inp.deductions, minimum=0, maximum=MAX_AMOUNT)
    check_range(errors, "state_rate", inp.state_rate, minimum=0, maximum=MAX_STATE_RATE)

    years = tables.tax_years()
    if inp.tax_year not in years:
        errors.append(
            invalid_range(
                "tax_year",
                f"No tax table for {inp.tax_year}; available years: "
                f"{', '.join(str(y) for y in years)}",
            )
        )
    return errors


def bracket_taxes(brackets: list[TaxBracket], taxable_income: float) -> list[BracketTax]:
    """Tax owed in each bracket the taxable income reaches."""
    owed: list[BracketTax] = []
    for bracket in brackets:
        if taxable_income <= bracket.min:
            break
        top = taxable_income if bracket.max is None else min(taxable_income, bracket.max)
        owed.append(BracketTax(rate=bracket.rate, amount=(top - bracket.min) * bracket.rate / 100))
    return owed


def marginal_rate(brackets: list[TaxBracket], taxable_income: float) -> float:
    """Rate of the first bracket containing the income (inclusive of its max)."""
    for bracket in brackets:
        if taxable_income >= bracket.min and (bracket.max is None or taxable_income <= bracket.max):
            return bracket.rate
    return 0.0


def run(inp: IncomeTaxInput, *, tables: TaxTablesPort | None = None) -> IncomeTaxOutput:
    """
    Estimate federal and state income tax.

    Args:
        inp: Income, filing status, deductions, state rate and tax year.
        tables: Tax table source. Defaults to the bundled tables.

    Returns:
        IncomeTaxOutput with per-bracket amounts, effective and marginal
        rates and take-home income.
    """
    tables = tables or default_catalog()
    errors = _validate(inp, tables)
    if errors:
        return IncomeTaxOutput(result=None, errors=errors, success=False)

    table = tables.tax_table(inp.tax_year)
    brackets = table.brackets[inp.filing_status]
    deduction = (
        table.standard_deduction[inp.filing_status] if inp.deductions is None else inp.deductions
    )
    taxable_income = max(0.0, inp.income - deduction)

    owed = bracket_taxes(brackets, taxable_income)
    federal_tax = sum(b.amount for b in owed)
    state_tax = taxable_income * inp.state_rate / 100
    total_tax = federal_tax + state_tax
    effective_rate = total_tax / inp.income * 100 if inp.income > 0 else 0.0

    return IncomeTaxOutput(
        result=IncomeTaxResult(
            taxable_income=round_currency(taxable_income),
            deduction_applied=round_currency(deduction),
            federal_tax=round_currency(federal_tax),
            state_tax=round_currency(state_tax),
            total_tax=round_currency(total_tax),
            effective_rate=round_half_up(effective_rate, 2),
            marginal_rate=marginal_rate(brackets, taxable_income),
            take_home_income=round_currency(inp.income - total_tax),
            brackets=tuple(BracketTax(b.rate, round_currency(b.amount)) for b in owed),
        ),
        errors=[],
        success=True,
    )
