"""
Wordle helper component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from calcdeck.domain.errors import CalculationError


@dataclass(frozen=True)
class WordleInput:
    """
    What is known about the answer so far.

    ``known_letters`` maps a 0-based position to its confirmed letter.
    """

    known_letters: dict[int, str] = field(default_factory=dict)
    present_letters: tuple[str, ...] = ()
    absent_letters: tuple[str, ...] = ()
    word_list: str = "wordle"


@dataclass(frozen=True)
class LetterFrequency:
    letter: str
    frequency: int
    percentage: float


@dataclass(frozen=True)
class PatternCount:
    pattern: str
    count: int
    percentage: float


@dataclass(frozen=True)
class WordleStatistics:
    total_words: int
    average_length: float
    common_patterns: tuple[str, ...]


@dataclass(frozen=True)
class WordleResult:
    suggestions: tuple[str, ...]
    letter_frequencies: tuple[LetterFrequency, ...]
    pattern_analysis: tuple[PatternCount, ...]
    statistics: WordleStatistics


@dataclass(frozen=True)
class WordleOutput:
    result: WordleResult | None
    errors: list[CalculationError] = field(default_factory=list)
    success: bool = True
