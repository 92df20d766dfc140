"""
Poker odds component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from calcdeck.domain.advice import Recommendation
from calcdeck.domain.errors import CalculationError

Rank = Literal["2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A"]
Suit = Literal["hearts", "diamonds", "clubs", "spades"]


@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit


@dataclass(frozen=True)
class PokerInput:
    hole_cards: tuple[Card, ...]
    community_cards: tuple[Card, ...] = ()
    opponents: int = 1


@dataclass(frozen=True)
class HandStrength:
    current: str
    potential: tuple[str, ...]
    rank: int


@dataclass(frozen=True)
class Outs:
    count: int
    cards: tuple[Card, ...]
    probability: float


@dataclass(frozen=True)
class PotOdds:
    required: float
    implied: float
    ratio: str


@dataclass(frozen=True)
class PokerResult:
    win_probability: float
    tie_probability: float
    lose_probability: float
    hand_strength: HandStrength
    outs: Outs
    pot_odds: PotOdds
    recommendations: tuple[Recommendation, ...]


@dataclass(frozen=True)
class PokerOutput:
    result: PokerResult | None
    errors: list[CalculationError] = field(default_factory=list)
    success: bool = True
