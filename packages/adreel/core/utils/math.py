"""Math utilities for common operations."""

from __future__ import annotations

import math
from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def round_half_up(x: float) -> int:
    """Round to nearest integer, halves away from -inf.

    Python's round() is banker's rounding (round(12.5) == 12). Frame counts
    and counters use half-up so 0.25 s at 50 fps is 13 frames, not 12.

    Example:
        >>> round_half_up(12.5)
        13
        >>> round_half_up(-0.5)
        0
    """
    return int(math.floor(x + 0.5))
