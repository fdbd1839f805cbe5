"""Text formatting helpers for values painted by the renderer."""

from __future__ import annotations


def format_grouped(value: int | float, thousands_sep: str = ",") -> str:
    """Format a number with digit grouping, en-US style by default.

    Integral values are printed without a fractional part.

    Example:
        >>> format_grouped(12800)
        '12,800'
        >>> format_grouped(1234567, thousands_sep=".")
        '1.234.567'
    """
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    whole, dot, frac = f"{value:,}".partition(".")
    if thousands_sep != ",":
        whole = whole.replace(",", thousands_sep)
    return whole + dot + frac


def initial_of(name: str | None, fallback: str = "A") -> str:
    """Uppercased first character of a name, or ``fallback`` when empty."""
    stripped = (name or "").strip()
    if not stripped:
        return fallback
    return stripped[0].upper()
