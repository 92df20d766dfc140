"""
Poker odds component - hand category, pair outs and rough equity.
"""

from ._impl import HAND_RANKINGS, classify, pair_outs
from .component import run
from .models import (
    Card,
    HandStrength,
    Outs,
    PokerInput,
    PokerOutput,
    PokerResult,
    PotOdds,
    Rank,
    Suit,
)

__all__ = [
    "run",
    "classify",
    "pair_outs",
    "HAND_RANKINGS",
    "Card",
    "HandStrength",
    "Outs",
    "PokerInput",
    "PokerOutput",
    "PokerResult",
    "PotOdds",
    "Rank",
    "Suit",
]
