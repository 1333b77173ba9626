"""
Relative crowd intensity over the simulated day.
"""
import math
from typing import List, Tuple

import pandas as pd

from ..common.exceptions import InvalidTimeSlotsError
from ..common.utils import clamp
from .constants import TIMELINE_START, TIMELINE_SLOTS, TIMELINE_STEP_MINUTES

PEAK_CENTER = 0.55
PEAK_WIDTH = 0.25


def time_weights(slot_count: int) -> List[float]:
    """
    Bell curve centered on the midday peak with a single sine ripple.

    :param slot_count: Number of time slots (>= 2)
    :return: One weight per slot, each in [0.35, 1.05]
    """
    if slot_count < 2:
        raise InvalidTimeSlotsError(
            f"time weights need at least 2 slots, got {slot_count}"
        )

    weights = []
    for index in range(slot_count):
        t = index / (slot_count - 1)
        peak = math.exp(-(((t - PEAK_CENTER) / PEAK_WIDTH) ** 2))
        shoulder = 0.12 * math.sin(t * math.pi * 2)
        weights.append(clamp(0.42 + 0.65 * peak + shoulder, 0.35, 1.05))
    return weights


def time_slot_labels(
    start: str = TIMELINE_START,
    count: int = TIMELINE_SLOTS,
    step_minutes: int = TIMELINE_STEP_MINUTES
) -> Tuple[str, ...]:
    """
    Clock labels ("11:00", "11:15", ...) for each slot. Only the time of day is
    meaningful; the anchor date pandas needs is discarded.
    """
    stamps = pd.date_range(start=f"2000-01-01 {start}", periods=count, freq=f"{step_minutes}min")
    return tuple(stamps.strftime("%H:%M"))


TIME_SLOTS = time_slot_labels()
TIME_WEIGHTS = tuple(time_weights(len(TIME_SLOTS)))
