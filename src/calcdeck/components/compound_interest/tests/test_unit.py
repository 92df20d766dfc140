"""
Compound interest component unit tests.
"""

from __future__ import annotations

import pytest

from calcdeck.components.compound_interest import (
    CompoundInterestInput,
    annual_percentage_yield,
    run,
)
from calcdeck.domain.errors import ErrorCode


def _input(**overrides) -> CompoundInterestInput:
    values = {"principal": 10000.0, "rate": 4.5, "term": 1.0, "compounding": "daily"}
    values.update(overrides)
    return CompoundInterestInput(**values)


class TestGrowth:
    """Balance growth over the term."""

    def test_daily_compounding_one_year(self) -> None:
        out = run(_input())

        assert out.success
        assert out.result.apy == pytest.approx(4.6025, abs=1e-3)
        assert out.result.final_balance == pytest.approx(10460.25, abs=0.05)
        assert out.result.compounding_periods == 365

    def test_balance_is_principal_plus_interest(self) -> None:
        out = run(_input(term=5.0, compounding="monthly"))

        result = out.result
        assert result.final_balance == pytest.approx(10000 + result.total_interest, abs=0.01)

    def test_annual_compounding_matches_closed_form(self) -> None:
        out = run(_input(rate=5.0, term=3.0, compounding="annually"))

        assert out.result.final_balance == pytest.approx(10000 * 1.05**3, abs=0.01)
        assert out.result.apy == pytest.approx(5.0)
        assert out.result.effective_rate_gain == pytest.approx(0.0)

    def test_zero_rate_keeps_principal(self) -> None:
        out = run(_input(rate=0.0))

        assert out.result.final_balance == 10000.0
        assert out.result.total_interest == 0.0

    def test_yearly_totals_cover_partial_year(self) -> None:
        out = run(_input(term=1.5, compounding="monthly"))

        years = [row.year for row in out.result.yearly_totals]
        assert years == [1.0, 1.5]
        assert out.result.yearly_totals[-1].balance == out.result.final_balance

    def test_apy_independent_of_principal(self) -> None:
        small = run(_input(principal=100.0)).result.apy
        large = run(_input(principal=1_000_000.0)).result.apy
        assert small == large == pytest.approx(annual_percentage_yield(4.5, 365), abs=1e-4)


class TestEarlyWithdrawal:
    def test_no_penalty_by_default(self) -> None:
        assert run(_input()).result.early_withdrawal_penalty is None

    def test_short_term_penalty_is_three_months_interest(self) -> None:
        result = run(_input(early_withdrawal=True)).result

        assert result.early_withdrawal_penalty == pytest.approx(
            result.total_interest / 12 * 3, abs=0.01
        )

    def test_long_term_penalty_is_six_months_interest(self) -> None:
        result = run(_input(term=2.0, early_withdrawal=True)).result

        assert result.early_withdrawal_penalty == pytest.approx(
            result.total_interest / 24 * 6, abs=0.01
        )


class TestValidation:
    @pytest.mark.parametrize(
        ("overrides", "field"),
        [
            ({"principal": 0.0}, "principal"),
            ({"principal": -5.0}, "principal"),
            ({"rate": 101.0}, "rate"),
            ({"term": 0.0}, "term"),
            ({"compounding": "hourly"}, "compounding"),
            ({"term": 0.001, "compounding": "annually"}, "term"),
            ({"principal": float("nan")}, "principal"),
        ],
    )
    def test_invalid_input(self, overrides: dict, field: str) -> None:
        out = run(_input(**overrides))

        assert not out.success
        assert out.result is None
        assert out.errors[0].code == ErrorCode.INVALID_RANGE
        assert out.errors[0].field == field

    def test_recommendations_present(self) -> None:
        recs = run(_input()).result.recommendations

        assert [r.category for r in recs] == [
            "Term Selection",
            "Compounding Frequency",
            "Investment Strategy",
            "Risk Management",
        ]
        assert recs[1].suggestion == "Daily compounding maximizes returns"
