"""Asset catalog models.

The library is a static, versionable document loaded once and never mutated;
all models are frozen.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Tone(str, Enum):
    """Mood an asset suits."""

    CALM = "calm"
    BOLD = "bold"
    PLAYFUL = "playful"


class AspectRatio(str, Enum):
    """Canvas aspect ratios an asset is designed for."""

    SQUARE = "1x1"
    PORTRAIT = "9x16"
    LANDSCAPE = "16x9"


class AssetCategory(str, Enum):
    """Selectable asset categories."""

    ICONS = "icons"
    BACKGROUNDS = "backgrounds"
    MUSIC = "music"
    SFX = "sfx"


class AssetItem(BaseModel):
    """Single catalog entry.

    Missing ``tags``/``tone``/``ar`` mean "suits anything" for filtering.

    Attributes:
        id: Stable identifier.
        src: URL or logical static path.
        tags: Free-form topic tags.
        tone: Tones the asset suits.
        ar: Aspect ratios the asset suits.
        bpm: Tempo, music only.
        weight: Relative pick weight; values below 1 count as 1.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(..., min_length=1)
    src: str = Field(..., min_length=1)
    tags: tuple[str, ...] | None = None
    tone: tuple[Tone, ...] | None = None
    ar: tuple[AspectRatio, ...] | None = None
    bpm: float | None = Field(default=None, gt=0)
    weight: int | None = None

    @property
    def effective_weight(self) -> int:
        return max(1, self.weight if self.weight is not None else 1)


class TransitionItem(BaseModel):
    """Named transition timing."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(..., min_length=1)
    type: Literal["crossfade"] = "crossfade"
    ms: int = Field(..., ge=0)


class AssetLibrary(BaseModel):
    """Static asset catalog with four selectable categories and a transitions table."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    icons: tuple[AssetItem, ...] = ()
    backgrounds: tuple[AssetItem, ...] = ()
    music: tuple[AssetItem, ...] = ()
    sfx: tuple[AssetItem, ...] = ()
    transitions: tuple[TransitionItem, ...] = ()

    def items(self, category: AssetCategory | str) -> tuple[AssetItem, ...]:
        """Items of one category."""
        return getattr(self, AssetCategory(category).value)
