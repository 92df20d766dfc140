"""
Wordle helper component - filter candidate answers by known constraints.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from calcdeck.domain.errors import CalculationError, invalid_range
from calcdeck.tables import TableNotFoundError, default_catalog

from .models import (
    LetterFrequency,
    PatternCount,
    WordleInput,
    WordleOutput,
    WordleResult,
    WordleStatistics,
)
from .ports import WordListPort

WORD_LENGTH = 5
MAX_SUGGESTIONS = 20
MAX_COMMON_PATTERNS = 5


def _is_letter(value: str) -> bool:
    return len(value) == 1 and "a" <= value.lower() <= "z"


def _validate(inp: WordleInput) -> list[CalculationError]:
    errors: list[CalculationError] = []
    for position, letter in inp.known_letters.items():
        if not 0 <= position < WORD_LENGTH:
            errors.append(
                invalid_range(
                    "known_letters", f"Position {position} is outside 0-{WORD_LENGTH - 1}"
                )
            )
        if not _is_letter(letter):
            errors.append(invalid_range("known_letters", f"{letter!r} is not a single letter"))

    for field_name in ("present_letters", "absent_letters"):
        for letter in getattr(inp, field_name):
            if not _is_letter(letter):
                errors.append(invalid_range(field_name, f"{letter!r} is not a single letter"))
    return errors


def matches(
    word: str, known: dict[int, str], present: Iterable[str], absent: Iterable[str]
) -> bool:
    """Check a word against positional, present and absent letter constraints."""
    if any(word[position] != letter for position, letter in known.items()):
        return False
    if any(letter not in word for letter in present):
        return False
    return not any(letter in word for letter in absent)


def letter_frequencies(words: list[str]) -> list[LetterFrequency]:
    counts = Counter(letter for word in words for letter in word)
    total = sum(counts.values())
    return sorted(
        (LetterFrequency(letter, count, count / total * 100) for letter, count in counts.items()),
        key=lambda f: -f.frequency,
    )


def pattern_analysis(words: list[str]) -> list[PatternCount]:
    counts = Counter("*" * len(word) for word in words)
    return sorted(
        (
            PatternCount(pattern, count, count / len(words) * 100)
            for pattern, count in counts.items()
        ),
        key=lambda p: -p.count,
    )


def run(inp: WordleInput, *, tables: WordListPort | None = None) -> WordleOutput:
    """
    Suggest candidate answers consistent with the clues so far.

    Absent letters that are also known or present are ignored, since a
    repeated guess letter can be grey in one position and green in another.
    """
    tables = tables or default_catalog()
    errors = _validate(inp)
    try:
        word_list = tables.word_list(inp.word_list)
    except TableNotFoundError:
        errors.append(invalid_range("word_list", f"Unknown word list {inp.word_list!r}"))
    if errors:
        return WordleOutput(result=None, errors=errors, success=False)

    known = {position: letter.lower() for position, letter in inp.known_letters.items()}
    present = {letter.lower() for letter in inp.present_letters}
    absent = {letter.lower() for letter in inp.absent_letters} - present - set(known.values())

    candidates = [
        word
        for word in word_list.words
        if len(word) == WORD_LENGTH and matches(word, known, present, absent)
    ]
    patterns = pattern_analysis(candidates)
    total = len(candidates)

    return WordleOutput(
        result=WordleResult(
            suggestions=tuple(candidates[:MAX_SUGGESTIONS]),
            letter_frequencies=tuple(letter_frequencies(candidates)),
            pattern_analysis=tuple(patterns),
            statistics=WordleStatistics(
                total_words=total,
                average_length=sum(len(w) for w in candidates) / total if total else 0.0,
                common_patterns=tuple(p.pattern for p in patterns[:MAX_COMMON_PATTERNS]),
            ),
        ),
        errors=[],
        success=True,
    )
