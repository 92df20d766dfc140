"""
Tests for the snowboard size calculator.
"""

from __future__ import annotations

import pytest

from calcdeck.components.snowboard_size import SnowboardInput, run, width_class


class TestWidth:
    @pytest.mark.parametrize(
        ("shoe_size", "expected"),
        [(9, "standard"), (10.4, "standard"), (10.5, "mid-wide"), (11.5, "wide"), (14, "wide")],
    )
    def test_width_class(self, shoe_size: float, expected: str) -> None:
        assert width_class(shoe_size) == expected


class TestLength:
    def test_beginner_all_mountain(self) -> None:
        out = run(SnowboardInput(weight=75, height=180, shoe_size=10))

        assert out.success
        length = out.result.recommended_length
        assert (length.min, length.max, length.ideal) == (145, 152, 149)
        assert out.result.width_recommendation == "standard"
        assert out.result.style_characteristics.flex == "Soft"
        assert out.result.style_characteristics.shape == "Directional"

    def test_freestyle_is_shorter_and_centered(self) -> None:
        all_mountain = run(SnowboardInput(weight=75, height=180, shoe_size=10)).result
        freestyle = run(
            SnowboardInput(weight=75, height=180, shoe_size=10, style="freestyle")
        ).result

        assert freestyle.recommended_length.ideal < all_mountain.recommended_length.ideal
        assert freestyle.style_characteristics.shape == "True Twin"
        assert freestyle.style_characteristics.setback == "Centered"

    def test_powder_board(self) -> None:
        out = run(
            SnowboardInput(
                weight=75, height=180, shoe_size=12, experience="advanced", style="powder"
            )
        )

        assert out.result.style_characteristics.shape == "Directional Tapered"
        assert out.result.style_characteristics.flex == "Stiff"
        assert out.result.width_recommendation == "wide"

    def test_imperial_units(self) -> None:
        metric = run(SnowboardInput(weight=75, height=180, shoe_size=10)).result
        imperial = run(
            SnowboardInput(weight=165.35, height=70.866, shoe_size=10, unit="imperial")
        ).result

        assert imperial.recommended_length == metric.recommended_length


class TestValidation:
    @pytest.mark.parametrize(
        ("inp", "field"),
        [
            (SnowboardInput(weight=0, height=180, shoe_size=10), "weight"),
            (SnowboardInput(weight=75, height=180, shoe_size=2), "shoe_size"),
            (SnowboardInput(weight=75, height=180, shoe_size=19), "shoe_size"),
            (SnowboardInput(weight=75, height=180, shoe_size=10, experience="pro"), "experience"),
            (SnowboardInput(weight=75, height=180, shoe_size=10, style="park"), "style"),
        ],
    )
    def test_invalid(self, inp: SnowboardInput, field: str) -> None:
        out = run(inp)

        assert not out.success
        assert out.errors[0].field == field
