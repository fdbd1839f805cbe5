"""Exception hierarchy for adreel.

Everything in the core is total for well-formed input; these errors mark the
few places where input is not well-formed and the caller has to decide.
"""

from __future__ import annotations


class AdReelError(Exception):
    """Base class for all adreel errors."""


class ConfigurationError(AdReelError):
    """Raised for invalid setup: empty asset category, bad durations, bad bounds.

    Surfaced before any frame is computed; never patched silently.
    """


class MalformedColorError(AdReelError, ValueError):
    """Raised when a hex color string cannot be parsed.

    Attributes:
        color: The offending input.
    """

    def __init__(self, color: object) -> None:
        self.color = color
        super().__init__(f"Malformed hex color: {color!r}")


class AssetNotFoundError(AdReelError, KeyError):
    """Raised when an asset id is not present in the library."""

    def __init__(self, asset_id: str, category: str) -> None:
        self.asset_id = asset_id
        self.category = category
        super().__init__(f"{category} asset '{asset_id}' not found")

    def __str__(self) -> str:
        return str(self.args[0])
