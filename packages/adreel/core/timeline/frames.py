"""Millisecond/second to frame conversions."""

from __future__ import annotations

from collections.abc import Iterable

from adreel.core.errors import ConfigurationError
from adreel.core.spec.models import BaseScene
from adreel.core.utils.math import round_half_up

DEFAULT_TRANSITION_SECONDS = 0.25


def seconds_to_frames(seconds: float, fps: float) -> int:
    """Round ``seconds * fps`` half-up; may be 0 for very short windows."""
    return round_half_up(seconds * fps)


def ms_to_frames(ms: float, fps: float) -> int:
    """Base frame count for a duration: ``max(1, round(ms * fps / 1000))``.

    Example:
        >>> ms_to_frames(3200, 30)
        96
        >>> ms_to_frames(1, 30)
        1
    """
    return max(1, round_half_up(ms / 1000 * fps))


def transition_frames(fps: float, seconds: float = DEFAULT_TRANSITION_SECONDS) -> int:
    """Crossfade width in frames.

    Raises:
        ConfigurationError: If ``seconds`` is negative.

    Example:
        >>> transition_frames(30)
        8
    """
    if seconds < 0:
        raise ConfigurationError(f"transition seconds must be >= 0, got {seconds}")
    return seconds_to_frames(seconds, fps)


def total_frames(scenes: Iterable[BaseScene], fps: float) -> int:
    """Composition length: the sum of base frames.

    Crossfades overlap neighbors without extending the total.
    """
    return sum(ms_to_frames(scene.duration_ms, fps) for scene in scenes)
