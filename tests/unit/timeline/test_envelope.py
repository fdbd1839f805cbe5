"""Tests for the per-scene crossfade envelope."""

from __future__ import annotations

import pytest

from adreel.core.timeline.envelope import fade_in, fade_out, transition_opacity


class TestTransitionOpacity:
    """Tests for transition_opacity."""

    def test_starts_at_zero(self) -> None:
        """Every scene fades in from 0."""
        assert transition_opacity(0, 104, 8) == 0.0

    def test_midway_through_fade_in(self) -> None:
        """Linear ramp over the transition width."""
        assert transition_opacity(4, 104, 8) == pytest.approx(0.5)

    def test_plateau(self) -> None:
        """Full opacity between the ramps."""
        assert transition_opacity(50, 104, 8) == 1.0

    def test_ends_at_zero(self) -> None:
        """Opacity reaches 0 at the end of the window."""
        assert transition_opacity(104, 104, 8) == 0.0
        assert transition_opacity(100, 104, 8) == pytest.approx(0.5)

    @pytest.mark.parametrize(("duration", "t"), [(104, 8), (10, 8), (3, 8), (1, 8), (42, 0)])
    def test_range_and_unimodal(self, duration: int, t: int) -> None:
        """In [0, 1], rising then falling."""
        values = [transition_opacity(f, duration, t) for f in range(-2, duration + 3)]
        assert all(0.0 <= v <= 1.0 for v in values)
        peak = values.index(max(values))
        assert all(b >= a for a, b in zip(values[:peak], values[1 : peak + 1], strict=False))
        assert all(b <= a for a, b in zip(values[peak:], values[peak + 1 :], strict=False))

    def test_short_scene_is_a_pulse(self) -> None:
        """When the ramps overlap the peak stays below 1."""
        values = [transition_opacity(f, 10, 8) for f in range(11)]
        assert max(values) < 1.0
        assert max(values) == pytest.approx(0.625)

    def test_zero_window_means_no_fade(self) -> None:
        """T = 0 is a hard cut: full opacity for the whole window."""
        assert transition_opacity(0, 42, 0) == 1.0
        assert transition_opacity(41, 42, 0) == 1.0
        assert transition_opacity(42, 42, 0) == 0.0


class TestFades:
    """Tests for fade_in and fade_out."""

    def test_fade_in(self) -> None:
        """0 -> 1 over the window."""
        assert fade_in(2, 8) == pytest.approx(0.25)
        assert fade_in(20, 8) == 1.0

    def test_fade_out(self) -> None:
        """1 -> 0 over the last window frames."""
        assert fade_out(94, 100, 8) == pytest.approx(0.75)
        assert fade_out(10, 100, 8) == 1.0
