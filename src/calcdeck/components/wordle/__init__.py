"""
Wordle helper component - candidate answers and letter statistics.
"""

from .component import letter_frequencies, matches, pattern_analysis, run
from .models import (
    LetterFrequency,
    PatternCount,
    WordleInput,
    WordleOutput,
    WordleResult,
    WordleStatistics,
)
from .ports import WordListPort

__all__ = [
    "run",
    "letter_frequencies",
    "matches",
    "pattern_analysis",
    "LetterFrequency",
    "PatternCount",
    "WordleInput",
    "WordleOutput",
    "WordleResult",
    "WordleStatistics",
    "WordListPort",
]
