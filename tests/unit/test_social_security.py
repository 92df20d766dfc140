"""
Tests for the Social Security benefit calculator.
"""

from __future__ import annotations

from fractions import Fraction

import pytest

from calcdeck.components.social_security import (
    SocialSecurityInput,
    benefit_adjustment,
    primary_insurance_amount,
    run,
)
from calcdeck.domain.errors import ErrorCode
from calcdeck.tables import TableCatalog


def _input(**overrides) -> SocialSecurityInput:
    values = {"birth_year": 1960, "retirement_age": 67, "current_income": 60000}
    values.update(overrides)
    return SocialSecurityInput(**values)


class TestBenefitAdjustment:
    """Early reduction and delayed retirement credits."""

    @pytest.mark.parametrize(
        ("claim_age", "expected"),
        [
            (67, Fraction(1)),
            (64, Fraction(4, 5)),
            (62, Fraction(7, 10)),
            (70, Fraction(31, 25)),
        ],
    )
    def test_full_retirement_age_67(self, claim_age: int, expected: Fraction) -> None:
        assert benefit_adjustment(67 * 12, claim_age * 12) == expected

    def test_partial_year_full_retirement_age(self) -> None:
        # FRA 66 and 8 months, claiming at 66 is 8 months early
        assert benefit_adjustment(66 * 12 + 8, 66 * 12) == 1 - 8 * Fraction(5, 900)


class TestPrimaryInsuranceAmount:
    def test_bend_point_formula(self, catalog: TableCatalog) -> None:
        table = catalog.social_security_table(2024)

        assert primary_insurance_amount(1000, table) == pytest.approx(900.0)
        assert primary_insurance_amount(5000, table) == pytest.approx(2280.92)
        assert primary_insurance_amount(14050, table) == pytest.approx(3991.68)


class TestRun:
    def test_claim_at_full_retirement_age(self, catalog: TableCatalog) -> None:
        out = run(_input(), tables=catalog)

        assert out.success
        result = out.result
        assert result.full_retirement_age.years == 67
        assert result.full_retirement_age.months == 0
        assert result.average_indexed_monthly_earnings == pytest.approx(5000.0)
        assert result.primary_insurance_amount == pytest.approx(2280.92)
        assert result.monthly_benefit == 2281
        assert result.yearly_benefit == 2281 * 12
        assert result.maximum_benefit == 4873

    def test_early_claim_is_reduced(self, catalog: TableCatalog) -> None:
        out = run(_input(retirement_age=62), tables=catalog)

        assert out.result.benefit_adjustment == pytest.approx(0.7)
        assert out.result.monthly_benefit == 1597

    def test_delayed_claim_earns_credits(self, catalog: TableCatalog) -> None:
        out = run(_input(retirement_age=70), tables=catalog)

        assert out.result.monthly_benefit == 2828

    def test_income_capped_at_taxable_maximum(self, catalog: TableCatalog) -> None:
        out = run(_input(current_income=1_000_000), tables=catalog)

        assert out.result.average_indexed_monthly_earnings == pytest.approx(14050.0)
        earnings = [r for r in out.result.recommendations if r.category == "Earnings Impact"]
        assert earnings[0].suggestion.endswith("2024")

    def test_zero_income(self, catalog: TableCatalog) -> None:
        out = run(_input(current_income=0), tables=catalog)

        assert out.success
        assert out.result.monthly_benefit == 0

    def test_cumulative_totals(self, catalog: TableCatalog) -> None:
        out = run(_input(), tables=catalog)

        totals = out.result.estimated_total_benefits
        assert len(totals) == 30
        assert totals[0].age == 67
        assert totals[0].total == 2281 * 12
        assert totals[-1].age == 96
        assert totals[-1].total == 2281 * 12 * 30

    def test_single_has_no_spousal_amounts(self, catalog: TableCatalog) -> None:
        out = run(_input(spouse_benefit=3000), tables=catalog)

        assert out.result.spousal_benefit is None
        assert out.result.survivor_benefit is None

    def test_married_spousal_benefit(self, catalog: TableCatalog) -> None:
        out = run(_input(marital_status="married", spouse_benefit=6000), tables=catalog)

        assert out.result.spousal_benefit == pytest.approx(3000)
        assert out.result.survivor_benefit is None

    def test_widowed_survivor_benefit(self, catalog: TableCatalog) -> None:
        out = run(_input(marital_status="widowed", spouse_benefit=3000), tables=catalog)

        assert out.result.spousal_benefit == pytest.approx(2281)
        assert out.result.survivor_benefit == pytest.approx(3000)


class TestValidation:
    @pytest.mark.parametrize(
        ("overrides", "field"),
        [
            ({"retirement_age": 61}, "retirement_age"),
            ({"retirement_age": 71}, "retirement_age"),
            ({"birth_year": 1899}, "birth_year"),
            ({"birth_year": 2025}, "birth_year"),
            ({"current_income": -1}, "current_income"),
            ({"marital_status": "engaged"}, "marital_status"),
            ({"table_year": 1990}, "table_year"),
        ],
    )
    def test_invalid(self, catalog: TableCatalog, overrides: dict, field: str) -> None:
        out = run(_input(**overrides), tables=catalog)

        assert not out.success
        assert out.errors[0].code == ErrorCode.INVALID_RANGE
        assert out.errors[0].field == field
