"""Color contrast resolution and pattern overlays."""

from adreel.core.color.contrast import (
    BLACK,
    WHITE,
    contrast_ratio,
    ensure_readable,
    hex_to_rgba,
    luminance,
    parse_hex,
    readable_text_on,
)

__all__ = [
    "BLACK",
    "WHITE",
    "contrast_ratio",
    "ensure_readable",
    "hex_to_rgba",
    "luminance",
    "parse_hex",
    "readable_text_on",
]
