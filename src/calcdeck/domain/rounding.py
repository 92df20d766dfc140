"""
Display rounding helpers.

Results are rounded half-up (ties toward positive infinity), the convention
used for currency and count display throughout the calculators.
"""

from __future__ import annotations

import math


def round_half_up(value: float, places: int = 0) -> float:
    """Round ``value`` to ``places`` decimals, ties toward +infinity."""
    if not math.isfinite(value):
        return value
    factor = 10**places
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    """Round to the nearest whole number, ties toward +infinity."""
    return int(math.floor(value + 0.5))


def round_currency(value: float) -> float:
    return round_half_up(value, 2)
