"""Per-frame assembly of an ad.

:class:`AdComposition` resolves everything that is fixed for the whole ad
(colors, font stack, logo placement, timeline, audio envelope) once, and
:meth:`AdComposition.frame` answers "what is on screen at frame f": the music
volume and one layer per visible scene, in paint order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field

from adreel.core.assets.refs import AssetRef, normalize_asset_ref
from adreel.core.audio.envelope import AudioEnvelope
from adreel.core.color.contrast import ensure_readable
from adreel.core.color.patterns import PatternOverlay, resolve_pattern
from adreel.core.config.models import RenderConfig
from adreel.core.layout.fonts import pick_font
from adreel.core.layout.responsive import clamp_px
from adreel.core.scenes.context import FrameContext, SceneColors
from adreel.core.scenes.params import RenderParams
from adreel.core.scenes.registry import AnimatorRegistry, build_default_registry
from adreel.core.spec.models import AdSpec, Brand, SceneType
from adreel.core.timeline.composer import Timeline, compose_timeline
from adreel.core.timeline.envelope import transition_opacity
from adreel.core.timeline.frames import transition_frames

logger = logging.getLogger(__name__)


class LogoPlacement(BaseModel):
    """Brand logo pinned to the top-left corner for the whole ad."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    ref: AssetRef
    top: float
    left: float
    width: float


class SceneLayer(BaseModel):
    """One visible scene at one frame.

    Attributes:
        index: Scene position in the ad.
        scene_type: Variant, for dispatching to a painter.
        local_frame: Frame relative to the scene's start.
        opacity: Crossfade opacity in [0, 1].
        params: Animator output.
        pattern: Background overlay, if the scene or brand asks for one.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    index: int = Field(..., ge=0)
    scene_type: SceneType
    local_frame: int = Field(..., ge=0)
    opacity: float = Field(..., ge=0.0, le=1.0)
    params: RenderParams = Field(..., discriminator="type")
    pattern: PatternOverlay | None = None


class FrameState(BaseModel):
    """Everything painted at one absolute frame. Later layers paint on top."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    frame: int
    volume: float = Field(..., ge=0.0, le=1.0)
    layers: tuple[SceneLayer, ...] = ()


def resolve_colors(brand: Brand | None, config: RenderConfig | None = None) -> SceneColors:
    """Text, accent and background colors for a brand, made readable."""
    e = (config or RenderConfig()).enrichment
    brand = brand or Brand()
    background = brand.background or e.default_background
    return SceneColors(
        text=ensure_readable(brand.primary or e.default_primary, background, e.primary_min_ratio),
        accent=ensure_readable(
            brand.secondary or e.default_secondary, background, e.secondary_min_ratio
        ),
        background=background,
    )


def place_logo(logo: str | None, width: int, height: int) -> LogoPlacement | None:
    ref = normalize_asset_ref(logo)
    if ref is None:
        return None
    return LogoPlacement(
        ref=ref,
        top=clamp_px(height * 0.03, 18, 42),
        left=clamp_px(width * 0.04, 18, 42),
        width=min(width * 0.15, 140),
    )


class AdComposition:
    """A spec laid out on a canvas at a frame rate.

    Pass an enriched spec; colors are still made readable here, so an
    unenriched spec renders legibly but without music.

    Example:
        >>> comp = AdComposition(enriched, RenderConfig.for_preset(CanvasPreset.PORTRAIT))
        >>> [layer.index for layer in comp.frame(0).layers]
        [0]
    """

    def __init__(
        self,
        spec: AdSpec,
        config: RenderConfig | None = None,
        registry: AnimatorRegistry | None = None,
    ) -> None:
        self.spec = spec
        self.config = config or RenderConfig()
        self._registry = registry or build_default_registry(self.config)

        fps = self.config.fps
        self.transition_frames = transition_frames(fps, self.config.timing.transition_seconds)
        self.timeline: Timeline = compose_timeline(spec.scenes, fps, self.transition_frames)
        self.audio_envelope = AudioEnvelope.for_spec(spec, fps, self.config.timing)

        brand = spec.brand or Brand()
        self.colors = resolve_colors(brand, self.config)
        self.font_family = pick_font(brand.font_family)
        self.logo = place_logo(brand.logo, self.config.width, self.config.height)
        self.music = normalize_asset_ref(spec.audio.music if spec.audio else None)
        self._brand_pattern = brand.pattern
        self._brand_logo = brand.logo

        logger.debug(
            "Composition %dx%d @ %d fps: %d scenes, %d frames, music=%s",
            self.config.width,
            self.config.height,
            fps,
            len(self.timeline.windows),
            self.duration_in_frames,
            self.music.path if self.music else None,
        )

    @property
    def duration_in_frames(self) -> int:
        """Sum of the scenes' base frames."""
        return self.timeline.base_total

    def volume_at(self, frame: int) -> float:
        """Music volume at ``frame``; 0 when there is no track."""
        if self.music is None:
            return 0.0
        return self.audio_envelope.volume_at(frame)

    def frame(self, frame: int) -> FrameState:
        """Layers and volume at absolute ``frame``."""
        layers = []
        for window, local in self.timeline.active_at(frame):
            scene = window.scene
            ctx = FrameContext(
                frame=local,
                fps=self.config.fps,
                width=self.config.width,
                height=self.config.height,
                colors=self.colors,
                logo=self._brand_logo,
            )
            layers.append(
                SceneLayer(
                    index=window.index,
                    scene_type=SceneType(scene.type),
                    local_frame=local,
                    opacity=transition_opacity(local, window.duration, self.transition_frames),
                    params=self._registry.animate(scene, ctx),
                    pattern=resolve_pattern(
                        self.colors.accent, scene.pattern or self._brand_pattern
                    ),
                )
            )
        return FrameState(frame=frame, volume=self.volume_at(frame), layers=tuple(layers))

    def frames(self) -> Iterator[FrameState]:
        """Every frame of the composition in order."""
        for f in range(self.duration_in_frames):
            yield self.frame(f)
