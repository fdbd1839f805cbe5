"""Font family stacks."""

from __future__ import annotations

import re

BASE_FONT_STACK = (
    '-apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Helvetica, Arial, sans-serif'
)

_NEEDS_NO_QUOTES = re.compile(r"['\",]")
_HAS_SPACE = re.compile(r"\s")


def _maybe_quote(name: str) -> str:
    # Already quoted, or already a stack: leave alone.
    if _NEEDS_NO_QUOTES.search(name):
        return name
    if _HAS_SPACE.search(name):
        return f'"{name}"'
    return name


def pick_font(brand_family: str | None = None) -> str:
    """CSS font-family stack with the brand family (if any) first.

    Example:
        >>> pick_font("Open Sans").split(",")[0]
        '"Open Sans"'
    """
    if not brand_family or not brand_family.strip():
        return BASE_FONT_STACK
    return f"{_maybe_quote(brand_family.strip())}, {BASE_FONT_STACK}"
