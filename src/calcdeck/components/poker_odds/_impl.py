"""
Hand classification for Texas Hold'em.

Classifies the best five-card category available in up to seven known
cards. Kickers are not compared; only the category is needed here.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from .models import Card

RANKS: tuple[str, ...] = ("2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A")
SUITS: tuple[str, ...] = ("hearts", "diamonds", "clubs", "spades")
RANK_VALUES: dict[str, int] = {rank: value for value, rank in enumerate(RANKS, start=2)}

HAND_RANKINGS: dict[str, int] = {
    "Royal Flush": 10,
    "Straight Flush": 9,
    "Four of a Kind": 8,
    "Full House": 7,
    "Flush": 6,
    "Straight": 5,
    "Three of a Kind": 4,
    "Two Pair": 3,
    "One Pair": 2,
    "High Card": 1,
}

ACE = RANK_VALUES["A"]


def straight_high(values: Iterable[int]) -> int | None:
    """Top card of the highest five-card run, with the ace also playing low."""
    present = set(values)
    if ACE in present:
        present.add(1)
    for high in range(ACE, 4, -1):
        if all(v in present for v in range(high - 4, high + 1)):
            return high
    return None


def classify(cards: Sequence[Card]) -> str:
    """Best hand category made by ``cards``."""
    values = [RANK_VALUES[c.rank] for c in cards]
    suit_counts = Counter(c.suit for c in cards)
    flush_suit = next((suit for suit, n in suit_counts.items() if n >= 5), None)

    if flush_suit is not None:
        high = straight_high(RANK_VALUES[c.rank] for c in cards if c.suit == flush_suit)
        if high == ACE:
            return "Royal Flush"
        if high is not None:
            return "Straight Flush"

    groups = sorted(Counter(values).values(), reverse=True)
    if groups[0] >= 4:
        return "Four of a Kind"
    if groups[0] == 3 and len(groups) > 1 and groups[1] >= 2:
        return "Full House"
    if flush_suit is not None:
        return "Flush"
    if straight_high(values) is not None:
        return "Straight"
    if groups[0] == 3:
        return "Three of a Kind"
    if groups[0] == 2 and len(groups) > 1 and groups[1] == 2:
        return "Two Pair"
    if groups[0] == 2:
        return "One Pair"
    return "High Card"


def pair_outs(hole_cards: Sequence[Card], community_cards: Sequence[Card]) -> list[Card]:
    """
    Unseen cards that would pair a hole card.

    Only hole cards whose rank appears once among the known cards count.
    """
    known = [*hole_cards, *community_cards]
    seen = set(known)
    rank_counts = Counter(c.rank for c in known)

    outs: list[Card] = []
    for rank in dict.fromkeys(c.rank for c in hole_cards):
        if rank_counts[rank] != 1:
            continue
        outs.extend(
            Card(rank=rank, suit=suit) for suit in SUITS if Card(rank=rank, suit=suit) not in seen
        )
    return outs
