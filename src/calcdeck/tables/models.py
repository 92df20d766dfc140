from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

FILING_STATUSES: tuple[str, ...] = ("single", "married", "head")


class _Table(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


# --- Federal Income Tax ---


class TaxBracket(_Table):
    rate: float = Field(ge=0, le=100)
    min: float = Field(ge=0)
    max: float | None = None


class FederalTaxTable(_Table):
    kind: Literal["federal_tax"]
    year: int
    brackets: dict[str, list[TaxBracket]]
    standard_deduction: dict[str, float]

    @model_validator(mode="after")
    def _check_brackets(self) -> FederalTaxTable:
        for status in FILING_STATUSES:
            if status not in self.brackets:
                raise ValueError(f"missing brackets for filing status {status!r}")
            if status not in self.standard_deduction:
                raise ValueError(f"missing standard deduction for filing status {status!r}")

            brackets = self.brackets[status]
            if not brackets or brackets[0].min != 0:
                raise ValueError(f"{status} brackets must start at 0")
            for lower, upper in zip(brackets, brackets[1:]):
                if lower.max is None or lower.max != upper.min:
                    raise ValueError(f"{status} brackets must be contiguous")
                if upper.rate < lower.rate:
                    raise ValueError(f"{status} bracket rates must not decrease")
            if brackets[-1].max is not None:
                raise ValueError(f"{status} top bracket must be open-ended")
        return self


# --- VA Disability ---


class DependentRates(_Table):
    spouse: dict[int, float]
    child_under_18: dict[int, float]
    child_in_school: dict[int, float]
    dependent_parent: dict[int, float]


class VADisabilityTable(_Table):
    kind: Literal["va_disability"]
    year: int
    base_rates: dict[int, float]
    dependent_rates: DependentRates
    aid_and_attendance: float = Field(ge=0)

    @model_validator(mode="after")
    def _check_ratings(self) -> VADisabilityTable:
        expected = set(range(10, 101, 10))
        if set(self.base_rates) != expected:
            raise ValueError("base_rates must cover ratings 10 through 100 in steps of 10")
        return self


# --- Social Security ---


class RetirementAgeBand(_Table):
    from_year: int | None = None
    to_year: int | None = None
    years: int
    months: int = Field(ge=0, le=11)

    def contains(self, birth_year: int) -> bool:
        if self.from_year is not None and birth_year < self.from_year:
            return False
        if self.to_year is not None and birth_year > self.to_year:
            return False
        return True


class SocialSecurityTable(_Table):
    kind: Literal["social_security"]
    year: int
    bend_points: tuple[float, float]
    pia_factors: tuple[float, float, float]
    taxable_maximum: float = Field(gt=0)
    maximum_benefit: float = Field(gt=0)
    full_retirement_ages: list[RetirementAgeBand]

    @model_validator(mode="after")
    def _check_table(self) -> SocialSecurityTable:
        if self.bend_points[0] >= self.bend_points[1]:
            raise ValueError("bend_points must be increasing")
        bands = self.full_retirement_ages
        if not bands or bands[0].from_year is not None or bands[-1].to_year is not None:
            raise ValueError("full_retirement_ages must be open-ended at both ends")
        return self

    def full_retirement_age(self, birth_year: int) -> RetirementAgeBand:
        for band in self.full_retirement_ages:
            if band.contains(birth_year):
                return band
        raise LookupError(f"No full retirement age for birth year {birth_year}")


# --- Word Lists ---


class WordList(_Table):
    kind: Literal["word_list"]
    name: str
    words: list[Annotated[str, Field(pattern=r"^[a-z]+$")]]


Table = Annotated[
    FederalTaxTable | VADisabilityTable | SocialSecurityTable | WordList,
    Field(discriminator="kind"),
]
