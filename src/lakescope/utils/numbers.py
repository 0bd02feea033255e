"""Numeric helpers shared by the metric functions."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going up.

    Python's round() uses banker's rounding; the dashboard figures were
    always shown with halves rounded toward +infinity.

    Examples:
        >>> round_half_up(1.5)
        2
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-1.5)
        -1
    """
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))
