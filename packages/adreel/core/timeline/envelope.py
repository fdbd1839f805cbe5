"""Per-scene crossfade opacity envelope."""

from __future__ import annotations

from adreel.core.curves.interpolate import ramp


def fade_in(frame: float, window: float) -> float:
    """0 → 1 over ``[0, window]``, flat outside. A zero window means no fade."""
    if window <= 0:
        return 1.0
    return ramp(frame, 0, window)


def fade_out(frame: float, end: float, window: float) -> float:
    """1 → 0 over ``[end - window, end]``, flat outside. A zero window means no fade."""
    if window <= 0:
        return 1.0 if frame < end else 0.0
    return ramp(frame, end - window, end, 1.0, 0.0)


def transition_opacity(frame: float, duration: int, transition_frames: int) -> float:
    """Compositing opacity of a scene at local ``frame``.

    ``min(fade_in, fade_out)``: linear ramps at entry and exit, each
    ``transition_frames`` wide. When ``duration < 2 * transition_frames`` the
    ramps overlap and the result is a lower plateau or a triangular pulse.

    Example:
        >>> transition_opacity(4, 104, 8)
        0.5
        >>> transition_opacity(50, 104, 8)
        1.0
    """
    return min(fade_in(frame, transition_frames), fade_out(frame, duration, transition_frames))
