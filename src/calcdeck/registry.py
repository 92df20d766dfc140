"""
Calculator registry - slug lookup for the function-call interface.

Maps a URL-safe slug to the calculator's metadata, its input dataclass and
its ``run`` function, and turns JSON-like payloads into validated inputs.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter

from calcdeck.components import (
    area_between_curves,
    baby_eye_color,
    bmr,
    compound_interest,
    heloc,
    income_tax,
    inflation,
    integral,
    investment,
    mortgage,
    poker_odds,
    snowboard_size,
    social_security,
    tattoo_cost,
    tdee,
    va_disability,
    vorici,
    wordle,
    wronskian,
)
from calcdeck.tables import TableCatalog


class UnknownCalculatorError(LookupError):
    """Raised when no calculator is registered under a slug."""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"Unknown calculator: {slug}")


@dataclass(frozen=True)
class Calculator:
    slug: str
    title: str
    category: str
    input_type: type
    runner: Callable[..., Any]
    uses_tables: bool = False


CALCULATORS: tuple[Calculator, ...] = (
    # Financial
    Calculator(
        "cd-interest",
        "CD Interest Calculator",
        "financial",
        compound_interest.CompoundInterestInput,
        compound_interest.run,
    ),
    Calculator(
        "investment",
        "Investment Calculator",
        "financial",
        investment.InvestmentInput,
        investment.run,
    ),
    Calculator(
        "inflation", "Inflation Calculator", "financial", inflation.InflationInput, inflation.run
    ),
    Calculator(
        "income-tax",
        "Tax Calculator",
        "financial",
        income_tax.IncomeTaxInput,
        income_tax.run,
        uses_tables=True,
    ),
    Calculator(
        "social-security",
        "Social Security Calculator",
        "financial",
        social_security.SocialSecurityInput,
        social_security.run,
        uses_tables=True,
    ),
    Calculator("heloc", "HELOC Calculator", "financial", heloc.HelocInput, heloc.run),
    Calculator(
        "mortgage", "Mortgage Calculator", "financial", mortgage.MortgageInput, mortgage.run
    ),
    # Health & fitness
    Calculator("bmr", "BMR Calculator", "health", bmr.BMRInput, bmr.run),
    Calculator("tdee", "TDEE Calculator", "health", tdee.TDEEInput, tdee.run),
    # Math
    Calculator(
        "area-between-curves",
        "Area Between Curves Calculator",
        "math",
        area_between_curves.AreaBetweenCurvesInput,
        area_between_curves.run,
    ),
    Calculator(
        "integral", "Integral Calculator", "math", integral.AntiderivativeInput, integral.run
    ),
    Calculator(
        "simpsons-rule",
        "Simpson's Rule Calculator",
        "math",
        integral.SimpsonInput,
        integral.run,
    ),
    Calculator(
        "wronskian", "Wronskian Calculator", "math", wronskian.WronskianInput, wronskian.run
    ),
    # Sports & gaming
    Calculator(
        "snowboard-size",
        "Snowboard Size Calculator",
        "sports",
        snowboard_size.SnowboardInput,
        snowboard_size.run,
    ),
    Calculator(
        "poker-odds", "Poker Odds Calculator", "sports", poker_odds.PokerInput, poker_odds.run
    ),
    Calculator("vorici", "Vorici Calculator", "sports", vorici.VoriciInput, vorici.run),
    # Lifestyle
    Calculator(
        "baby-eye-color",
        "Baby Eye Color Calculator",
        "lifestyle",
        baby_eye_color.BabyEyeColorInput,
        baby_eye_color.run,
    ),
    Calculator(
        "tattoo-cost",
        "Tattoo Cost Calculator",
        "lifestyle",
        tattoo_cost.TattooInput,
        tattoo_cost.run,
    ),
    Calculator(
        "wordle",
        "Wordle Calculator",
        "lifestyle",
        wordle.WordleInput,
        wordle.run,
        uses_tables=True,
    ),
    Calculator(
        "va-disability",
        "VA Disability Calculator",
        "lifestyle",
        va_disability.VADisabilityInput,
        va_disability.run,
        uses_tables=True,
    ),
)

_BY_SLUG: dict[str, Calculator] = {c.slug: c for c in CALCULATORS}


def list_calculators() -> list[Calculator]:
    return list(CALCULATORS)


def get_calculator(slug: str) -> Calculator:
    """
    Look up a calculator by slug.

    Raises:
        UnknownCalculatorError: If the slug is not registered.
    """
    calculator = _BY_SLUG.get(slug)
    if calculator is None:
        raise UnknownCalculatorError(slug)
    return calculator


@lru_cache
def _adapter(input_type: type) -> TypeAdapter[Any]:
    return TypeAdapter(input_type)


def input_schema(slug: str) -> dict[str, Any]:
    """JSON schema of a calculator's input."""
    return _adapter(get_calculator(slug).input_type).json_schema()


def build_input(slug: str, payload: Mapping[str, Any]) -> Any:
    """
    Validate a JSON-like payload into the calculator's input dataclass.

    Raises:
        UnknownCalculatorError: If the slug is not registered.
        pydantic.ValidationError: If the payload does not match the input shape.
    """
    return _adapter(get_calculator(slug).input_type).validate_python(payload)


def run_calculator(
    slug: str, payload: Mapping[str, Any], *, tables: TableCatalog | None = None
) -> Any:
    """Build the input for ``slug`` and run the calculator on it."""
    calculator = get_calculator(slug)
    inp = build_input(slug, payload)
    if calculator.uses_tables and tables is not None:
        return calculator.runner(inp, tables=tables)
    return calculator.runner(inp)
