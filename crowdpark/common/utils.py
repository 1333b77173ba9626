"""
Common numeric helpers shared across all modules.
"""
import math

from .exceptions import InvalidTimeIndexError

def clamp(value: float, lower: float, upper: float) -> float:
    """
    Bounds value to [lower, upper].
    """
    return min(upper, max(lower, value))

def round_half_up(value: float) -> int:
    """
    Rounds to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2).

    Python's round() uses banker's rounding, which would break the published
    regression values for counts and prices.
    """
    return int(math.floor(value + 0.5))

def check_time_index(time_index: int, slot_count: int) -> int:
    """
    Returns time_index if it addresses one of slot_count slots.
    Negative indices are rejected rather than counted from the end.
    """
    if not 0 <= time_index < slot_count:
        raise InvalidTimeIndexError(
            f"time index {time_index} outside 0..{slot_count - 1}"
        )
    return time_index
