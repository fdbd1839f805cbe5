"""Width-driven responsive sizing.

Font sizes, gaps and cells scale with canvas width and stay inside a
floor/ceiling, so the portrait, square and landscape presets share one layout
without per-aspect branches.
"""

from __future__ import annotations

from adreel.core.errors import ConfigurationError
from adreel.core.utils.math import clamp, round_half_up


def clamp_px(value: float, min_px: float, max_px: float) -> float:
    """Clamp a pixel value to [min_px, max_px]."""
    if min_px > max_px:
        raise ConfigurationError(f"min_px ({min_px}) must be <= max_px ({max_px})")
    return clamp(value, min_px, max_px)


def scale_by_width(width: float, factor: float, min_px: int, max_px: int) -> int:
    """``clamp(round(width * factor), min_px, max_px)``.

    Example:
        >>> scale_by_width(1080, 0.09, 28, 84)
        84
        >>> scale_by_width(400, 0.09, 28, 84)
        36
    """
    return int(clamp_px(round_half_up(width * factor), min_px, max_px))


def percent_of(length: float, pct: float) -> int:
    """``pct`` percent of ``length``, rounded to whole pixels."""
    return round_half_up(length * pct / 100)
