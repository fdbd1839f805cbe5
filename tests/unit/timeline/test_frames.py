"""Tests for millisecond/second to frame conversions."""

from __future__ import annotations

import pytest

from adreel.core.errors import ConfigurationError
from adreel.core.spec.models import CtaOutroScene, HeroTextScene
from adreel.core.timeline.frames import (
    ms_to_frames,
    seconds_to_frames,
    total_frames,
    transition_frames,
)


class TestMsToFrames:
    """Tests for ms_to_frames."""

    def test_round_trip_example(self) -> None:
        """3200 ms at 30 fps is 96 frames."""
        assert ms_to_frames(3200, 30) == 96

    def test_half_rounds_up(self) -> None:
        """50 ms at 30 fps is 1.5 frames, rounded to 2."""
        assert ms_to_frames(50, 30) == 2

    def test_minimum_one_frame(self) -> None:
        """Very short scenes still get one frame."""
        assert ms_to_frames(1, 30) == 1
        assert ms_to_frames(0.001, 24) == 1


class TestTransitionFrames:
    """Tests for transition_frames and seconds_to_frames."""

    @pytest.mark.parametrize(("fps", "expected"), [(30, 8), (24, 6), (60, 15), (50, 13)])
    def test_default_quarter_second(self, fps: int, expected: int) -> None:
        """round(0.25 * fps), halves up."""
        assert transition_frames(fps) == expected

    def test_zero_is_allowed(self) -> None:
        """A zero-width crossfade is a hard cut."""
        assert transition_frames(30, 0.0) == 0

    def test_negative_raises(self) -> None:
        """Negative widths are configuration errors."""
        with pytest.raises(ConfigurationError):
            transition_frames(30, -0.1)

    def test_seconds_to_frames_may_be_zero(self) -> None:
        """Short windows can round to zero frames."""
        assert seconds_to_frames(0.01, 30) == 0


class TestTotalFrames:
    """Tests for total_frames."""

    def test_sum_of_base_frames(self) -> None:
        """Crossfades do not add to the total."""
        scenes = [
            HeroTextScene(headline="Hi", duration_ms=3200),
            CtaOutroScene(duration_ms=1400),
        ]
        assert total_frames(scenes, 30) == 96 + 42

    def test_empty(self) -> None:
        """No scenes, no frames."""
        assert total_frames([], 30) == 0
