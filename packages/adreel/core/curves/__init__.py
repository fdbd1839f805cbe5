"""Easing and interpolation primitives."""

from adreel.core.curves.easing import (
    EasingFn,
    cubic_bezier,
    ease,
    ease_in_out,
    ease_in_out_cubic,
    ease_out_cubic,
    elastic,
    in_out,
    linear,
)
from adreel.core.curves.interpolate import interpolate, ramp

__all__ = [
    "EasingFn",
    "cubic_bezier",
    "ease",
    "ease_in_out",
    "ease_in_out_cubic",
    "ease_out_cubic",
    "elastic",
    "in_out",
    "interpolate",
    "linear",
    "ramp",
]
