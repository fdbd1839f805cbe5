"""Frame context shared by all scene animators, plus the common appear ramp."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from adreel.core.color.contrast import ensure_readable
from adreel.core.curves.easing import EasingFn, ease_out_cubic, linear
from adreel.core.curves.interpolate import ramp
from adreel.core.utils.math import round_half_up


class SceneColors(BaseModel):
    """Resolved colors for a scene.

    Attributes:
        text: Primary text color, already readable on ``background``.
        accent: Accent color (buttons, highlights).
        background: Canvas background.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    text: str
    accent: str
    background: str

    def readable(self, color: str | None = None, min_ratio: float = 4.5) -> str:
        """``color`` (default: the text color) if readable on the background, else black/white."""
        return ensure_readable(color or self.text, self.background, min_ratio)


class FrameContext(BaseModel):
    """Everything an animator may depend on besides the scene itself.

    Attributes:
        frame: Local frame within the scene (0 = scene start).
        fps: Frames per second.
        width: Canvas width in px.
        height: Canvas height in px.
        colors: Resolved scene colors.
        logo: Brand logo reference, used by the outro.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    frame: int = Field(..., ge=0)
    fps: int = Field(..., gt=0)
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    colors: SceneColors
    logo: str | None = None

    def frames(self, seconds: float) -> int:
        """``seconds`` at this frame rate, rounded half-up."""
        return round_half_up(seconds * self.fps)

    def at(self, frame: int) -> FrameContext:
        """Same context at another local frame."""
        return self.model_copy(update={"frame": frame})


class Appear(BaseModel):
    """Opacity and vertical offset of an element entering the frame."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    opacity: float = Field(..., ge=0.0, le=1.0)
    offset_y: float = 0.0


def staggered(frame: int, index: int, stagger_frames: int) -> int:
    """Local frame of the ``index``-th element when each waits ``stagger_frames``."""
    return max(0, frame - index * stagger_frames)


def appear(
    frame: float,
    ramp_frames: int,
    offset_from: float = 0.0,
    opacity_easing: EasingFn = linear,
) -> Appear:
    """Opacity 0 → 1 and offset ``offset_from`` → 0 over ``ramp_frames``.

    The offset eases out (cubic); the opacity uses ``opacity_easing``.
    """
    opacity = ramp(frame, 0, ramp_frames, easing=opacity_easing)
    offset = ramp(frame, 0, ramp_frames, offset_from, 0.0, easing=ease_out_cubic)
    return Appear(opacity=opacity, offset_y=offset)
