"""Timeline composition: frame ranges for each scene with crossfade overlap.

For scene ``i`` with ``base_i = ms_to_frames(duration_ms_i, fps)`` and
crossfade width ``T``:

- ``start_0 = 0``
- ``start_i = max(0, start_{i-1} + duration_{i-1} - T)``
- ``duration_i = base_i + T``, except the last scene where it is ``base_i``

Adjacent scenes therefore overlap by exactly ``T`` frames and the last scene
ends at the sum of base frames.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from adreel.core.errors import ConfigurationError
from adreel.core.spec.models import Scene
from adreel.core.timeline.frames import ms_to_frames
from adreel.core.utils.logging import log_performance

logger = logging.getLogger(__name__)


class SceneWindow(BaseModel):
    """Frame range one scene occupies on the composed timeline.

    Attributes:
        index: Position in the scene list.
        start: First frame (absolute).
        duration: Frames the scene is on screen, including its outgoing
            crossfade.
        base_frames: Frames from the scene's own duration, without overlap.
        scene: The scene itself.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    index: int = Field(..., ge=0)
    start: int = Field(..., ge=0)
    duration: int = Field(..., ge=1)
    base_frames: int = Field(..., ge=1)
    scene: Scene

    @property
    def end(self) -> int:
        """One past the last frame."""
        return self.start + self.duration

    def contains(self, frame: int) -> bool:
        return self.start <= frame < self.end

    def local_frame(self, frame: int) -> int:
        """Frame relative to the window start."""
        return frame - self.start


class Timeline(BaseModel):
    """Composed frame ranges for an ordered scene list."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    fps: int = Field(..., gt=0)
    transition_frames: int = Field(..., ge=0)
    windows: tuple[SceneWindow, ...] = Field(..., min_length=1)

    @property
    def end_frame(self) -> int:
        """One past the last frame any scene occupies."""
        return max(w.end for w in self.windows)

    @property
    def base_total(self) -> int:
        """Sum of base frames; the composition length."""
        return sum(w.base_frames for w in self.windows)

    def active_at(self, frame: int) -> list[tuple[SceneWindow, int]]:
        """Windows visible at ``frame`` with their local frame, in scene order.

        During a crossfade two windows are returned; the later one paints on top.
        """
        return [(w, w.local_frame(frame)) for w in self.windows if w.contains(frame)]


def _check_inputs(scenes: Sequence[Scene], fps: int, transition_frames: int) -> None:
    if fps <= 0:
        raise ConfigurationError(f"fps must be > 0, got {fps}")
    if transition_frames < 0:
        raise ConfigurationError(f"transition_frames must be >= 0, got {transition_frames}")
    if not scenes:
        raise ConfigurationError("Cannot compose a timeline with no scenes")
    bad = [i for i, s in enumerate(scenes) if not s.duration_ms > 0]
    if bad:
        raise ConfigurationError(f"Scenes with non-positive durationMs: {bad}")


@log_performance
def compose_timeline(scenes: Sequence[Scene], fps: int, transition_frames: int) -> Timeline:
    """Compute each scene's start frame and on-screen duration.

    Args:
        scenes: Ordered scenes from an enriched spec.
        fps: Frames per second.
        transition_frames: Crossfade width in frames.

    Returns:
        Timeline with one window per scene.

    Raises:
        ConfigurationError: For no scenes, a non-positive scene duration,
            ``fps <= 0`` or a negative transition width.

    Example:
        >>> tl = compose_timeline([HeroTextScene(headline="Hi", duration_ms=3200),
        ...                        CtaOutroScene(duration_ms=1400)], fps=30,
        ...                       transition_frames=8)
        >>> [(w.start, w.duration) for w in tl.windows]
        [(0, 104), (96, 42)]
    """
    _check_inputs(scenes, fps, transition_frames)

    windows: list[SceneWindow] = []
    cursor = 0
    last = len(scenes) - 1

    for i, scene in enumerate(scenes):
        base = ms_to_frames(scene.duration_ms, fps)
        start = 0 if i == 0 else max(0, cursor - transition_frames)
        duration = base if i == last else base + transition_frames
        windows.append(
            SceneWindow(index=i, start=start, duration=duration, base_frames=base, scene=scene)
        )
        cursor = start + duration

    timeline = Timeline(fps=fps, transition_frames=transition_frames, windows=tuple(windows))
    logger.debug(
        "Composed %d scenes at %d fps (T=%d): ends at frame %d",
        len(windows),
        fps,
        transition_frames,
        timeline.end_frame,
    )
    return timeline
