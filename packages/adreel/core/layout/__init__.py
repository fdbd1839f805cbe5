"""Responsive sizing and font helpers."""

from adreel.core.layout.fonts import pick_font
from adreel.core.layout.responsive import clamp_px, percent_of, scale_by_width

__all__ = ["clamp_px", "percent_of", "pick_font", "scale_by_width"]
