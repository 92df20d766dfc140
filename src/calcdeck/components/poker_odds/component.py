"""
Poker odds component - rough Texas Hold'em equity from pair outs.

This is a quick heuristic, not an equity simulation: the win chance is the
chance of drawing a card that pairs a hole card, split evenly across
opponents, with ties fixed at a tenth of the win chance.
"""

from __future__ import annotations

from calcdeck.domain.advice import Recommendation
from calcdeck.domain.errors import CalculationError, division_by_zero, invalid_range
from calcdeck.domain.rounding import round_int

from ._impl import HAND_RANKINGS, RANKS, SUITS, classify, pair_outs
from .models import (
    HandStrength,
    Outs,
    PokerInput,
    PokerOutput,
    PokerResult,
    PotOdds,
)

DECK_SIZE = 52
MAX_COMMUNITY_CARDS = 5
MAX_OPPONENTS = 22
TIE_SHARE = 0.1


def _validate(inp: PokerInput) -> list[CalculationError]:
    errors: list[CalculationError] = []
    if len(inp.hole_cards) != 2:
        errors.append(invalid_range("hole_cards", "Exactly two hole cards are required"))
    if len(inp.community_cards) > MAX_COMMUNITY_CARDS:
        errors.append(
            invalid_range(
                "community_cards", f"At most {MAX_COMMUNITY_CARDS} community cards are dealt"
            )
        )

    cards = [*inp.hole_cards, *inp.community_cards]
    for card in cards:
        if card.rank not in RANKS or card.suit not in SUITS:
            errors.append(invalid_range("cards", f"Unknown card {card.rank} of {card.suit}"))
    if len(set(cards)) != len(cards):
        errors.append(invalid_range("cards", "The same card appears more than once"))

    if isinstance(inp.opponents, bool) or not isinstance(inp.opponents, int):
        errors.append(invalid_range("opponents", "opponents must be a whole number"))
    elif inp.opponents == 0:
        errors.append(division_by_zero("opponents", "At least one opponent is required"))
    elif not 1 <= inp.opponents <= MAX_OPPONENTS:
        errors.append(
            invalid_range("opponents", f"opponents must be between 1 and {MAX_OPPONENTS}")
        )
    return errors


def _potential(current: str) -> tuple[str, ...]:
    """The next three categories above the current hand."""
    rank = HAND_RANKINGS[current]
    better = sorted(
        (name for name, r in HAND_RANKINGS.items() if r > rank), key=HAND_RANKINGS.__getitem__
    )
    return tuple(better[:3])


def _recommendations(
    win: float, opponents: int, pot_odds: PotOdds, outs: int
) -> tuple[Recommendation, ...]:
    if win > 0.5:
        action = "Consider raising"
    elif win > 0.3:
        action = "Consider calling"
    else:
        action = "Consider folding"

    return (
        Recommendation("Action", action),
        Recommendation(
            "Position",
            "Heads-up play allows for more aggressive strategy"
            if opponents <= 2
            else "Multiple opponents - play more selectively",
        ),
        Recommendation(
            "Pot Odds",
            "Positive expected value - call or raise justified"
            if pot_odds.implied > pot_odds.required
            else "Negative expected value - fold unless bluffing",
        ),
        Recommendation(
            "Drawing",
            "Strong drawing hand - consider semi-bluff"
            if outs > 12
            else "Weak drawing hand - proceed with caution",
        ),
    )


def run(inp: PokerInput) -> PokerOutput:
    """Estimate win, tie and lose chances for a Hold'em hand."""
    errors = _validate(inp)
    if errors:
        return PokerOutput(result=None, errors=errors, success=False)

    unseen = DECK_SIZE - len(inp.hole_cards) - len(inp.community_cards)
    outs = pair_outs(inp.hole_cards, inp.community_cards)
    out_chance = len(outs) / unseen

    win = out_chance / inp.opponents
    tie = win * TIE_SHARE
    current = classify([*inp.hole_cards, *inp.community_cards])

    pot_odds = PotOdds(
        required=out_chance * 100,
        implied=win * 100,
        ratio=f"{round_int(win * 100)}:{round_int((1 - win) * 100)}",
    )

    return PokerOutput(
        result=PokerResult(
            win_probability=win,
            tie_probability=tie,
            lose_probability=1 - win - tie,
            hand_strength=HandStrength(
                current=current, potential=_potential(current), rank=HAND_RANKINGS[current]
            ),
            outs=Outs(count=len(outs), cards=tuple(outs), probability=out_chance),
            pot_odds=pot_odds,
            recommendations=_recommendations(win, inp.opponents, pot_odds, len(outs)),
        ),
        errors=[],
        success=True,
    )
