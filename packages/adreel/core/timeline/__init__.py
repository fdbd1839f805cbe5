"""Scene scheduling and crossfade envelopes."""

from adreel.core.timeline.composer import SceneWindow, Timeline, compose_timeline
from adreel.core.timeline.envelope import fade_in, fade_out, transition_opacity
from adreel.core.timeline.frames import (
    ms_to_frames,
    seconds_to_frames,
    total_frames,
    transition_frames,
)

__all__ = [
    "SceneWindow",
    "Timeline",
    "compose_timeline",
    "fade_in",
    "fade_out",
    "ms_to_frames",
    "seconds_to_frames",
    "total_frames",
    "transition_frames",
    "transition_opacity",
]
