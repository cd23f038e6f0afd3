from __future__ import annotations

import math


def round_ratio(numerator: int, denominator: int) -> int:
    """
    round(numerator / denominator) on integers, half away from zero.

    Exact for any magnitude (nanosecond ticks exceed float precision).
    """
    if denominator <= 0:
        raise ValueError("denominator must be > 0")

    q, r = divmod(abs(numerator), denominator)
    if 2 * r >= denominator:
        q += 1
    return q if numerator >= 0 else -q


def round_half_away(value: float) -> int:
    """round() for floats, half away from zero (Python's round() is half-even)."""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    # fractional part is exact; value + 0.5 is not
    if magnitude - whole >= 0.5:
        whole += 1
    return whole if value >= 0.0 else -whole
