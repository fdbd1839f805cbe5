"""WCAG-style luminance and contrast helpers.

Colors are hex strings: ``#abc``, ``abc``, ``#aabbcc`` or ``aabbcc``.
The fallback for an unreadable color is binary (pure black or pure white);
there is no blending toward the background.
"""

from __future__ import annotations

import re

from adreel.core.errors import MalformedColorError
from adreel.core.utils.math import clamp01

BLACK = "#000000"
WHITE = "#FFFFFF"

_HEX_RE = re.compile(r"^#?([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")


def parse_hex(color: str) -> tuple[int, int, int]:
    """Parse a hex color into 0-255 RGB channels.

    Raises:
        MalformedColorError: If ``color`` is not a 3- or 6-digit hex string.

    Example:
        >>> parse_hex("#0af")
        (0, 170, 255)
    """
    if not isinstance(color, str):
        raise MalformedColorError(color)
    match = _HEX_RE.match(color.strip())
    if match is None:
        raise MalformedColorError(color)

    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def _srgb_to_linear(channel: int) -> float:
    cs = channel / 255
    return cs / 12.92 if cs <= 0.04045 else ((cs + 0.055) / 1.055) ** 2.4


def luminance(color: str) -> float:
    """Relative luminance in [0, 1]."""
    r, g, b = parse_hex(color)
    return (
        0.2126 * _srgb_to_linear(r)
        + 0.7152 * _srgb_to_linear(g)
        + 0.0722 * _srgb_to_linear(b)
    )


def contrast_ratio(fg: str, bg: str) -> float:
    """Contrast ratio in [1, 21]; symmetric in its arguments."""
    l1 = luminance(fg)
    l2 = luminance(bg)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def readable_text_on(bg: str) -> str:
    """Black on light backgrounds, white on dark ones."""
    return BLACK if luminance(bg) > 0.5 else WHITE


def ensure_readable(wanted: str, bg: str, min_ratio: float) -> str:
    """Return ``wanted`` if it meets ``min_ratio`` against ``bg``, else black/white.

    Re-applying to its own output is a no-op whenever the output passed.

    Example:
        >>> ensure_readable("#555555", "#000000", 4.5)
        '#FFFFFF'
    """
    if contrast_ratio(wanted, bg) >= min_ratio:
        return wanted
    return readable_text_on(bg)


def hex_to_rgba(color: str, alpha: float) -> str:
    """CSS ``rgba()`` string for a hex color; alpha is clamped to [0, 1]."""
    r, g, b = parse_hex(color)
    return f"rgba({r}, {g}, {b}, {clamp01(alpha):g})"
