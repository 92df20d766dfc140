"""
Wordle helper component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from calcdeck.tables.models import WordList


class WordListPort(Protocol):
    """Source of candidate word lists by name."""

    def word_list(self, name: str) -> WordList:
        """
        Get a word list.

        Raises:
            TableNotFoundError: If no list has that name.
        """
        ...
