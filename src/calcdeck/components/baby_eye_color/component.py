"""
Baby eye colour component - simplified dominance model.

Each parent passes on one colour according to their genotype; the child
shows whichever of the two colours ranks first in the dominance order.
"""

from __future__ import annotations

from calcdeck.domain.advice import Recommendation
from calcdeck.domain.errors import CalculationError, check_choice
from calcdeck.domain.rounding import round_int

from .models import (
    BabyEyeColorInput,
    BabyEyeColorOutput,
    BabyEyeColorResult,
    ColorProbability,
    GenotypeProbability,
    InheritancePattern,
    ParentEyeColor,
)

DOMINANCE_ORDER: tuple[str, ...] = ("brown", "green", "hazel", "blue")
GENETICS: tuple[str, ...] = ("homozygous", "heterozygous")

# colour -> genotype -> colour passed on -> probability
ALLELE_PROBABILITIES: dict[str, dict[str, dict[str, float]]] = {
    "brown": {
        "homozygous": {"brown": 1.0},
        "heterozygous": {"brown": 0.5, "green": 0.25, "blue": 0.25},
    },
    "green": {
        "homozygous": {"green": 1.0},
        "heterozygous": {"green": 0.5, "blue": 0.5},
    },
    "hazel": {
        "homozygous": {"hazel": 1.0},
        "heterozygous": {"hazel": 0.5, "blue": 0.5},
    },
    "blue": {
        "homozygous": {"blue": 1.0},
        "heterozygous": {"blue": 1.0},
    },
}

DESCRIPTIONS = {
    "brown": "Most dominant eye color globally",
    "green": "Relatively rare, found in ~2% of population",
    "hazel": "Mix of brown and green/gold pigments",
    "blue": "Recessive trait, more common in European descent",
}

RECOMMENDATIONS: tuple[Recommendation, ...] = (
    Recommendation("Timing", "Baby's final eye color typically develops by age 3"),
    Recommendation("Changes", "Most babies are born with blue eyes that may change"),
    Recommendation("Documentation", "Take monthly photos to track eye color changes"),
    Recommendation("Medical", "Consult pediatrician if eye color is different between eyes"),
)


def color_probabilities(parent1: ParentEyeColor, parent2: ParentEyeColor) -> dict[str, float]:
    """Chance of each colour in the child, in dominance order."""
    first = ALLELE_PROBABILITIES[parent1.color][parent1.genetics or "heterozygous"]
    second = ALLELE_PROBABILITIES[parent2.color][parent2.genetics or "heterozygous"]

    result = dict.fromkeys(DOMINANCE_ORDER, 0.0)
    for color1, p1 in first.items():
        for color2, p2 in second.items():
            shown = next(c for c in DOMINANCE_ORDER if c in (color1, color2))
            result[shown] += p1 * p2
    return result


def _validate(inp: BabyEyeColorInput) -> list[CalculationError]:
    errors: list[CalculationError] = []
    for name in ("parent1", "parent2"):
        parent: ParentEyeColor = getattr(inp, name)
        check_choice(errors, f"{name}.color", parent.color, DOMINANCE_ORDER)
        if parent.genetics is not None:
            check_choice(errors, f"{name}.genetics", parent.genetics, GENETICS)
    return errors


def run(inp: BabyEyeColorInput) -> BabyEyeColorOutput:
    errors = _validate(inp)
    if errors:
        return BabyEyeColorOutput(result=None, errors=errors, success=False)

    probs = color_probabilities(inp.parent1, inp.parent2)
    genotypes_given = (inp.parent1.genetics, inp.parent2.genetics)

    colors = sorted(
        (
            ColorProbability(color, round_int(p * 100), DESCRIPTIONS[color])
            for color, p in probs.items()
            if p > 0
        ),
        key=lambda c: -c.percentage,
    )
    genotypes = [
        GenotypeProbability(
            "BB", "Brown", probs["brown"] * (1 if "homozygous" in genotypes_given else 0.25)
        ),
        GenotypeProbability(
            "Bb", "Brown", probs["brown"] * (0.5 if "heterozygous" in genotypes_given else 0)
        ),
        GenotypeProbability("bb", "Blue", probs["blue"]),
    ]
    inheritance = [
        InheritancePattern(
            "Complete Dominance", "Brown is dominant over other colors", probs["brown"]
        ),
        InheritancePattern(
            "Incomplete Dominance",
            "Green/Hazel results from mixed inheritance",
            probs["green"] + probs["hazel"],
        ),
        InheritancePattern(
            "Recessive Trait",
            "Blue eyes require recessive genes from both parents",
            probs["blue"],
        ),
    ]

    return BabyEyeColorOutput(
        result=BabyEyeColorResult(
            probabilities=tuple(colors),
            genetics=tuple(g for g in genotypes if g.probability > 0),
            inheritance=tuple(i for i in inheritance if i.probability > 0),
            recommendations=RECOMMENDATIONS,
        ),
        errors=[],
        success=True,
    )
