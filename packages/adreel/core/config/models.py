"""Configuration models for adreel.

All models are frozen. Defaults reproduce the tuned behavior of the reference
ads; override them per render through a JSON/YAML file or in code.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from adreel.core.assets.models import Tone


class CanvasPreset(str, Enum):
    """Canvas sizes the layouts are tuned for."""

    PORTRAIT = "9x16"
    SQUARE = "1x1"
    LANDSCAPE = "16x9"

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) in pixels."""
        return _PRESET_SIZES[self]


_PRESET_SIZES: dict[CanvasPreset, tuple[int, int]] = {
    CanvasPreset.PORTRAIT: (1080, 1920),
    CanvasPreset.SQUARE: (1080, 1080),
    CanvasPreset.LANDSCAPE: (1920, 1080),
}


class TimingConfig(BaseModel):
    """Crossfade and audio fade timing, in seconds."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    transition_seconds: float = Field(
        default=0.25, ge=0.0, description="Crossfade overlap between adjacent scenes"
    )
    audio_intro_seconds: float = Field(
        default=0.20, ge=0.0, description="Background music fade-in window"
    )
    audio_outro_seconds: float = Field(
        default=0.22, ge=0.0, description="Background music fade-out window"
    )
    default_audio_volume: float = Field(
        default=0.6,
        ge=0.0,
        le=1.0,
        description="Music volume when the ad's audio block gives none",
    )


class EnrichmentConfig(BaseModel):
    """Defaults and thresholds applied by spec enrichment."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    default_background: str = Field(default="#000000", description="Dark neutral background")
    default_primary: str = Field(default="#ffffff")
    default_secondary: str = Field(default="#00E0FF")

    primary_min_ratio: float = Field(default=4.5, ge=1.0, le=21.0, description="Body text")
    secondary_min_ratio: float = Field(
        default=3.0, ge=1.0, le=21.0, description="Decorative accent"
    )

    default_music_tone: Tone = Field(default=Tone.CALM)
    default_music_volume: float = Field(default=0.55, ge=0.0, le=1.0)


class CarouselConstants(BaseModel):
    """Carousel track sizing and scroll constants.

    ``min_overflow`` and ``end_margin_px`` were tuned by eye on the three
    canvas presets; keep them unless re-tuning against real renders.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    landscape_aspect: float = Field(default=1.4, gt=0.0)
    pad_factor: float = Field(default=0.08, ge=0.0)
    end_margin_px: int = Field(default=40, ge=0)
    min_card_px: int = Field(default=240, gt=0)
    max_card_px_landscape: int = Field(default=560, gt=0)
    max_card_px_other: int = Field(default=440, gt=0)
    card_share_landscape: float = Field(default=0.38, gt=0.0, le=1.0)
    card_share_other: float = Field(default=0.42, gt=0.0, le=1.0)
    gap_px_landscape: int = Field(default=22, ge=0)
    gap_px_other: int = Field(default=18, ge=0)
    min_overflow: float = Field(default=0.18, ge=0.0)
    card_aspect: float = Field(default=0.62, gt=0.0, description="Card height / width")
    scroll_seconds_landscape: float = Field(default=3.0, gt=0.0)
    scroll_seconds_other: float = Field(default=2.0, gt=0.0)

    @model_validator(mode="after")
    def _validate_card_bounds(self) -> CarouselConstants:
        if self.min_card_px > min(self.max_card_px_landscape, self.max_card_px_other):
            raise ValueError("min_card_px must not exceed the max card widths")
        return self


class CtaConstants(BaseModel):
    """Call-to-action timings. Fixed frame counts, deliberately not fps-scaled."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    snap_frames: int = Field(default=12, gt=0, description="Headline/button appear ramp")
    pulse_amplitude: float = Field(default=0.02, ge=0.0)
    pulse_period_divisor: float = Field(
        default=6.0, gt=0.0, description="Pulse is sin(frame / divisor)"
    )


class RenderConfig(BaseModel):
    """Top-level render configuration: frame rate, canvas, and tuning blocks.

    Example:
        >>> cfg = RenderConfig.for_preset(CanvasPreset.SQUARE)
        >>> (cfg.width, cfg.height)
        (1080, 1080)
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    fps: int = Field(default=30, gt=0)
    width: int = Field(default=1080, gt=0)
    height: int = Field(default=1920, gt=0)

    timing: TimingConfig = Field(default_factory=TimingConfig)
    enrichment: EnrichmentConfig = Field(default_factory=EnrichmentConfig)
    carousel: CarouselConstants = Field(default_factory=CarouselConstants)
    cta: CtaConstants = Field(default_factory=CtaConstants)

    @classmethod
    def for_preset(cls, preset: CanvasPreset, fps: int = 30) -> RenderConfig:
        """Config sized for one of the canvas presets."""
        width, height = CanvasPreset(preset).size
        return cls(fps=fps, width=width, height=height)
