"""Shared utilities for adreel."""

from adreel.core.utils.formatting import format_grouped, initial_of
from adreel.core.utils.math import clamp, clamp01, round_half_up

__all__ = [
    "clamp",
    "clamp01",
    "format_grouped",
    "initial_of",
    "round_half_up",
]
