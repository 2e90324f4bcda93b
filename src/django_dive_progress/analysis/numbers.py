"""Rounding and clamping shared by the scorers."""

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves away from zero for positive values (2.5 -> 3).

    Python's round() uses banker's rounding, which would move scores that
    land exactly on .5 down instead of up.
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))
