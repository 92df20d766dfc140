"""
Tests for the tattoo cost estimator.
"""

from __future__ import annotations

import pytest

from calcdeck.components.tattoo_cost import TattooInput, run
from calcdeck.domain.errors import ErrorCode


class TestEstimate:
    def test_simple_design(self) -> None:
        out = run(TattooInput(size=10))

        assert out.success
        cost = out.result.estimated_cost
        assert (cost.low, cost.average, cost.high) == (300, 375, 450)
        assert out.result.time_estimate.hours == 2.5
        assert out.result.time_estimate.sessions == 1

    def test_minimum_charge_and_hours(self) -> None:
        out = run(TattooInput(size=1))

        assert out.result.estimated_cost.average == 100
        assert out.result.time_estimate.hours == 0.5

    def test_large_colour_piece_needs_sessions(self) -> None:
        out = run(TattooInput(size=20, complexity="complex", colors=3))

        assert out.result.time_estimate.hours == 14.0
        assert out.result.time_estimate.sessions == 4
        timing = [r for r in out.result.recommendations if r.category == "Timing"][0]
        assert timing.suggestion.startswith("Plan for 4 sessions")

    def test_placement_and_artist_multipliers(self) -> None:
        base = run(TattooInput(size=10)).result.estimated_cost.average
        priced = run(
            TattooInput(size=10, placement="difficult", artist_experience="master")
        ).result.estimated_cost.average

        assert priced == pytest.approx(base * 1.5 * 1.5, abs=1)

    def test_apprentice_discount(self) -> None:
        out = run(TattooInput(size=20, artist_experience="apprentice"))

        assert out.result.estimated_cost.average == 525

    def test_aftercare_phases(self) -> None:
        phases = run(TattooInput(size=4)).result.aftercare

        assert [p.phase for p in phases] == ["Initial Healing", "Recovery", "Long-term Care"]


class TestValidation:
    @pytest.mark.parametrize(
        ("inp", "field"),
        [
            (TattooInput(size=0), "size"),
            (TattooInput(size=5, colors=0), "colors"),
            (TattooInput(size=5, colors=21), "colors"),
            (TattooInput(size=5, complexity="insane"), "complexity"),
            (TattooInput(size=5, placement="eyeball"), "placement"),
            (TattooInput(size=5, artist_experience="robot"), "artist_experience"),
        ],
    )
    def test_invalid(self, inp: TattooInput, field: str) -> None:
        out = run(inp)

        assert not out.success
        assert out.errors[0].code == ErrorCode.INVALID_RANGE
        assert out.errors[0].field == field
