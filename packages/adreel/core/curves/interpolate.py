"""Clamped piecewise-linear interpolation over frame numbers.

Every animated value in adreel is ``interpolate(frame, inputs, outputs)``:
inputs are keyframe positions (frames), outputs the values at those keyframes.
Results are clamped to the first/last output outside the keyframe span, so
no animator can produce out-of-range opacities for any frame.
"""

from __future__ import annotations

from collections.abc import Sequence

from adreel.core.curves.easing import EasingFn, linear


def interpolate(
    x: float,
    input_range: Sequence[float],
    output_range: Sequence[float],
    easing: EasingFn = linear,
) -> float:
    """Interpolate ``x`` through keyframes, easing within each segment.

    Zero-width segments act as steps: the output jumps to the segment's end
    value once ``x`` reaches it.

    Args:
        x: Input position (usually a frame number).
        input_range: Non-decreasing keyframe positions (at least 2).
        output_range: Values at each keyframe (same length as input_range).
        easing: Applied to normalized progress inside a segment.

    Returns:
        Interpolated value, clamped outside the keyframe span.

    Raises:
        ValueError: If ranges differ in length, have fewer than 2 entries,
            or input_range decreases.

    Example:
        >>> interpolate(5, [0, 10], [0.0, 1.0])
        0.5
        >>> interpolate(25, [0, 10, 20], [0.0, 1.0, 1.0])
        1.0
    """
    if len(input_range) != len(output_range):
        raise ValueError("input_range and output_range must have the same length")
    if len(input_range) < 2:
        raise ValueError("input_range must have at least 2 entries")
    for a, b in zip(input_range, input_range[1:], strict=False):
        if b < a:
            raise ValueError(f"input_range must be non-decreasing, got {list(input_range)}")

    if x <= input_range[0]:
        return float(output_range[0])
    if x >= input_range[-1]:
        return float(output_range[-1])

    for i in range(len(input_range) - 1):
        x0, x1 = input_range[i], input_range[i + 1]
        if x0 <= x < x1:
            y0, y1 = output_range[i], output_range[i + 1]
            progress = (x - x0) / (x1 - x0)
            return float(y0) + (float(y1) - float(y0)) * easing(progress)

    return float(output_range[-1])


def ramp(
    x: float,
    start: float,
    end: float,
    from_value: float = 0.0,
    to_value: float = 1.0,
    easing: EasingFn = linear,
) -> float:
    """Two-keyframe :func:`interpolate`; the common appear/fade case."""
    return interpolate(x, (start, end), (from_value, to_value), easing)
