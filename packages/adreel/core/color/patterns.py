"""Background pattern overlays (dots or grid lines) derived from brand colors."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from adreel.core.color.contrast import hex_to_rgba
from adreel.core.spec.models import PatternSpec, PatternType

DEFAULT_PATTERN_OPACITY = 0.12
DEFAULT_PATTERN_SIZE = 24


class PatternOverlay(BaseModel):
    """Resolved overlay a renderer tiles over the scene background.

    Attributes:
        kind: ``dots`` (1px dot per cell) or ``grid`` (1px horizontal and
            vertical lines per cell).
        rgba: CSS rgba() color including the overlay alpha.
        spacing: Cell size in pixels.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: PatternType
    rgba: str
    spacing: int = Field(..., gt=0)
    line_width: int = 1


def resolve_pattern(accent: str, pattern: PatternSpec | None) -> PatternOverlay | None:
    """Resolve a pattern spec against the brand accent.

    Returns None when there is no pattern or its type is ``none``.
    """
    if pattern is None or pattern.type == PatternType.NONE:
        return None

    color = pattern.color or accent
    alpha = pattern.opacity if pattern.opacity is not None else DEFAULT_PATTERN_OPACITY
    size = pattern.size or DEFAULT_PATTERN_SIZE

    return PatternOverlay(kind=pattern.type, rgba=hex_to_rgba(color, alpha), spacing=size)
