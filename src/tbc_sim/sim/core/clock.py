"""Simulated time units."""

from __future__ import annotations

import math
import sys

TICKS_PER_SECOND = 30

NEVER_EXPIRES = sys.maxsize
"""``Aura.expires_at`` for auras that only leave when removed explicitly."""


def seconds_to_ticks(seconds: float) -> int:
    """Convert a duration to ticks, rounding partial ticks up."""
    return math.ceil(round(seconds * TICKS_PER_SECOND, 6))


def ticks_to_seconds(ticks: int) -> float:
    return ticks / TICKS_PER_SECOND
