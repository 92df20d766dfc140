"""
Tests for the HELOC and mortgage calculators.
"""

from __future__ import annotations

import pytest

from calcdeck.components.heloc import HelocInput, credit_line_factor
from calcdeck.components.heloc import run as run_heloc
from calcdeck.components.mortgage import MortgageInput, monthly_payment
from calcdeck.components.mortgage import run as run_mortgage
from calcdeck.domain.errors import MAX_AMOUNT, ErrorCode


def _heloc(**overrides) -> HelocInput:
    values = {
        "home_value": 500000,
        "mortgage_balance": 330000,
        "credit_score": 720,
        "interest_rate": 8,
        "draw_amount": 10000,
        "monthly_payment": 500,
    }
    values.update(overrides)
    return HelocInput(**values)


class TestHeloc:
    @pytest.mark.parametrize(
        ("score", "factor"),
        [(850, 0.95), (740, 0.95), (739, 0.85), (700, 0.85), (660, 0.75), (659, 0.65), (300, 0.65)],
    )
    def test_credit_tiers(self, score: int, factor: float) -> None:
        assert credit_line_factor(score) == factor

    def test_credit_line(self) -> None:
        out = run_heloc(_heloc())

        assert out.success
        assert out.result.available_equity == pytest.approx(70000)
        assert out.result.max_credit_line == 59500

    def test_underwater_home_has_no_equity(self) -> None:
        out = run_heloc(_heloc(mortgage_balance=450000))

        assert out.result.available_equity == 0
        assert out.result.max_credit_line == 0

    def test_interest_free_payoff(self) -> None:
        out = run_heloc(_heloc(interest_rate=0, draw_amount=1000, monthly_payment=100))

        assert out.result.payoff_months == 10
        assert out.result.total_interest == 0
        assert not out.result.payoff_capped

    def test_payoff_accrues_interest(self) -> None:
        out = run_heloc(_heloc())

        assert 20 < out.result.payoff_months < 24
        assert out.result.total_interest > 0

    def test_payment_below_interest_is_capped(self) -> None:
        out = run_heloc(_heloc(interest_rate=12, monthly_payment=50))

        assert out.result.payoff_months == 360
        assert out.result.payoff_capped

    def test_no_draw(self) -> None:
        out = run_heloc(_heloc(draw_amount=0))

        assert out.result.payoff_months == 0
        assert out.result.total_interest == 0

    @pytest.mark.parametrize(
        ("overrides", "field"),
        [
            ({"credit_score": 299}, "credit_score"),
            ({"credit_score": 851}, "credit_score"),
            ({"credit_score": 700.5}, "credit_score"),
            ({"home_value": -1}, "home_value"),
            ({"interest_rate": 150}, "interest_rate"),
        ],
    )
    def test_validation(self, overrides: dict, field: str) -> None:
        out = run_heloc(_heloc(**overrides))

        assert not out.success
        assert out.errors[0].code == ErrorCode.INVALID_RANGE
        assert out.errors[0].field == field

    @pytest.mark.parametrize(
        "field", ["home_value", "mortgage_balance", "draw_amount", "monthly_payment"]
    )
    def test_amounts_above_limit(self, field: str) -> None:
        out = run_heloc(_heloc(**{field: 1e306}))

        assert not out.success
        assert out.errors[0].code == ErrorCode.INVALID_RANGE
        assert out.errors[0].field == field

    def test_largest_draw_at_highest_rate(self) -> None:
        out = run_heloc(
            _heloc(
                home_value=MAX_AMOUNT,
                mortgage_balance=0,
                interest_rate=100,
                draw_amount=MAX_AMOUNT,
                monthly_payment=0,
            )
        )

        assert out.success
        assert out.result.payoff_capped
        assert out.result.total_interest > MAX_AMOUNT


class TestMortgage:
    def test_standard_thirty_year(self) -> None:
        out = run_mortgage(
            MortgageInput(price=300000, interest_rate=6, years=30, down_payment=60000)
        )

        result = out.result
        assert result.loan_amount == 240000
        assert result.monthly_payment == pytest.approx(1438.92, abs=0.01)
        assert result.total_interest == pytest.approx(
            result.total_payment - result.loan_amount, abs=0.01
        )
        assert len(result.amortization) == 30
        assert result.amortization[-1].balance == pytest.approx(0, abs=0.01)

    def test_interest_shifts_to_principal(self) -> None:
        schedule = run_mortgage(MortgageInput(price=200000, interest_rate=5, years=15)).result
        first, last = schedule.amortization[0], schedule.amortization[-1]

        assert first.interest_paid > last.interest_paid
        assert first.principal_paid < last.principal_paid

    def test_zero_rate_is_straight_line(self) -> None:
        assert monthly_payment(120000, 0, 120) == 1000

        out = run_mortgage(MortgageInput(price=120000, interest_rate=0, years=10))
        assert out.result.monthly_payment == 1000
        assert out.result.total_interest == 0

    @pytest.mark.parametrize(
        ("inp", "field"),
        [
            (MortgageInput(price=100000, interest_rate=5, years=0), "years"),
            (MortgageInput(price=100000, interest_rate=5, years=51), "years"),
            (MortgageInput(price=100000, interest_rate=-1, years=30), "interest_rate"),
            (
                MortgageInput(price=100000, interest_rate=5, years=30, down_payment=200000),
                "down_payment",
            ),
        ],
    )
    def test_validation(self, inp: MortgageInput, field: str) -> None:
        out = run_mortgage(inp)

        assert not out.success
        assert out.errors[0].field == field

    def test_largest_loan_at_highest_rate(self) -> None:
        out = run_mortgage(MortgageInput(price=MAX_AMOUNT, interest_rate=100, years=50))

        assert out.success
        assert out.result.total_interest > out.result.loan_amount

    def test_price_above_limit(self) -> None:
        out = run_mortgage(MortgageInput(price=1e308, interest_rate=5, years=30))

        assert not out.success
        assert out.errors[0].code == ErrorCode.INVALID_RANGE
        assert out.errors[0].field == "price"
