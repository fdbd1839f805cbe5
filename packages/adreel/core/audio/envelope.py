"""Background-music volume envelope over the whole ad.

Fades in from 0 to the target volume over the intro window and multiplies by
a 1 → 0 fade over the outro window that ends exactly at ``total_frames``.
"""

from __future__ import annotations

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from adreel.core.config.models import TimingConfig
from adreel.core.curves.interpolate import ramp
from adreel.core.spec.models import AdSpec
from adreel.core.timeline.frames import seconds_to_frames, total_frames


def audio_volume(
    frame: float,
    total_frames: int,
    intro_frames: int,
    outro_frames: int,
    volume: float,
) -> float:
    """Volume multiplier at absolute ``frame``.

    ``min(fade_in, fade_out)`` where fade_in rises 0 → ``volume`` over
    ``[0, intro_frames]`` and fade_out falls 1 → 0 over the last
    ``outro_frames`` before ``total_frames``.

    Example:
        >>> audio_volume(0, 300, 6, 7, 0.6)
        0.0
        >>> audio_volume(150, 300, 6, 7, 0.6)
        0.6
    """
    if intro_frames > 0:
        fade_in = ramp(frame, 0, intro_frames, 0.0, volume)
    else:
        fade_in = volume

    outro_start = total_frames - outro_frames
    if outro_frames > 0:
        fade_out = ramp(max(0.0, frame - outro_start), 0, outro_frames, 1.0, 0.0)
    else:
        fade_out = 1.0 if frame < total_frames else 0.0

    return min(fade_in, fade_out)


class AudioEnvelope(BaseModel):
    """Resolved envelope parameters for one ad.

    Example:
        >>> env = AudioEnvelope.for_spec(spec, fps=30)
        >>> env.volume_at(0)
        0.0
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    total_frames: int = Field(..., ge=0)
    intro_frames: int = Field(..., ge=0)
    outro_frames: int = Field(..., ge=0)
    volume: float = Field(..., ge=0.0, le=1.0)

    @classmethod
    def for_spec(
        cls,
        spec: AdSpec,
        fps: int,
        timing: TimingConfig | None = None,
    ) -> AudioEnvelope:
        """Envelope for a spec: base frames of all scenes plus one crossfade."""
        timing = timing or TimingConfig()
        xfade = seconds_to_frames(timing.transition_seconds, fps)
        volume = (
            spec.audio.volume
            if spec.audio is not None and spec.audio.volume is not None
            else timing.default_audio_volume
        )
        return cls(
            total_frames=total_frames(spec.scenes, fps) + xfade,
            intro_frames=seconds_to_frames(timing.audio_intro_seconds, fps),
            outro_frames=seconds_to_frames(timing.audio_outro_seconds, fps),
            volume=volume,
        )

    def volume_at(self, frame: float) -> float:
        return audio_volume(
            frame, self.total_frames, self.intro_frames, self.outro_frames, self.volume
        )

    def sample(self, n_frames: int | None = None) -> np.ndarray:
        """Per-frame volumes for frames ``0 .. n_frames - 1``.

        Defaults to the envelope's full length. Useful for baking a gain
        automation track in one pass.
        """
        n = self.total_frames if n_frames is None else n_frames
        frames = np.arange(n, dtype=float)

        if self.intro_frames > 0:
            fade_in = np.interp(frames, [0, self.intro_frames], [0.0, self.volume])
        else:
            fade_in = np.full(n, self.volume)

        outro_start = self.total_frames - self.outro_frames
        if self.outro_frames > 0:
            fade_out = np.interp(frames, [outro_start, self.total_frames], [1.0, 0.0])
        else:
            fade_out = np.where(frames < self.total_frames, 1.0, 0.0)

        return np.minimum(fade_in, fade_out)
