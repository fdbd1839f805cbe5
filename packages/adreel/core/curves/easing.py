"""Easing functions mapping normalized progress [0, 1] to eased progress.

Polynomial easings are backed by easing-functions. The elastic "pop" and the
``ease`` bezier have no equivalent there and are defined here.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any

from easing_functions import CubicEaseInOut, CubicEaseOut

EasingFn = Callable[[float], float]

_EASING_DEFAULTS: dict[str, float] = {
    "start": 0.0,
    "end": 1.0,
    "duration": 1.0,
}


def _make_easing(easing_cls: type[Any]) -> EasingFn:
    obj = easing_cls(**_EASING_DEFAULTS)
    return lambda t: float(obj.ease(t))


def linear(t: float) -> float:
    return t


ease_out_cubic: EasingFn = _make_easing(CubicEaseOut)
ease_in_out_cubic: EasingFn = _make_easing(CubicEaseInOut)


def in_out(easing: EasingFn) -> EasingFn:
    """Make a symmetric in-out easing from an ease-in easing."""

    def _in_out(t: float) -> float:
        if t < 0.5:
            return easing(t * 2) / 2
        return 1 - easing((1 - t) * 2) / 2

    return _in_out


def elastic(bounciness: float = 1.0) -> EasingFn:
    """Spring-like easing that overshoots 1 once before settling.

    With bounciness 1 the peak is about 1.06 near t=0.6; it is exactly 0 at
    t=0 and exactly 1 at t=1.
    """
    p = bounciness * math.pi

    def _elastic(t: float) -> float:
        return 1 - math.cos(t * math.pi / 2) ** 3 * math.cos(t * p)

    return _elastic


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> EasingFn:
    """CSS-style cubic bezier timing function through (0,0) and (1,1).

    Solves x(s) = t for the curve parameter with Newton's method, falling back
    to bisection when the slope is too flat.

    Raises:
        ValueError: If x1 or x2 is outside [0, 1].
    """
    if not (0.0 <= x1 <= 1.0 and 0.0 <= x2 <= 1.0):
        raise ValueError("bezier x values must be in [0, 1]")

    cx = 3 * x1
    bx = 3 * (x2 - x1) - cx
    ax = 1 - cx - bx
    cy = 3 * y1
    by = 3 * (y2 - y1) - cy
    ay = 1 - cy - by

    def sample_x(s: float) -> float:
        return ((ax * s + bx) * s + cx) * s

    def sample_y(s: float) -> float:
        return ((ay * s + by) * s + cy) * s

    def slope_x(s: float) -> float:
        return (3 * ax * s + 2 * bx) * s + cx

    def solve(t: float) -> float:
        s = t
        for _ in range(8):
            err = sample_x(s) - t
            if abs(err) < 1e-7:
                return s
            d = slope_x(s)
            if abs(d) < 1e-6:
                break
            s -= err / d

        lo, hi = 0.0, 1.0
        s = t
        while hi - lo > 1e-7:
            x = sample_x(s)
            if abs(x - t) < 1e-7:
                return s
            if x < t:
                lo = s
            else:
                hi = s
            s = (lo + hi) / 2
        return s

    def _bezier(t: float) -> float:
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0
        return sample_y(solve(t))

    return _bezier


# Animated-style "ease" (an ease-in), not the CSS keyword
ease: EasingFn = cubic_bezier(0.42, 0.0, 1.0, 1.0)
ease_in_out: EasingFn = in_out(ease)
