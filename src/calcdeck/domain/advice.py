from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Recommendation:
    """Static advisory entry attached to a calculation result."""

    category: str
    suggestion: str
