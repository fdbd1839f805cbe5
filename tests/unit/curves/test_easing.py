"""Tests for easing functions."""

from __future__ import annotations

import pytest

from adreel.core.curves.easing import (
    cubic_bezier,
    ease,
    ease_in_out,
    ease_in_out_cubic,
    ease_out_cubic,
    elastic,
    in_out,
    linear,
)

EASINGS = [linear, ease_out_cubic, ease_in_out_cubic, ease, ease_in_out, elastic(1)]


class TestEndpoints:
    """All easings map 0 to 0 and 1 to 1."""

    @pytest.mark.parametrize("fn", EASINGS)
    def test_zero_and_one(self, fn) -> None:
        """Endpoints are fixed."""
        assert fn(0.0) == pytest.approx(0.0, abs=1e-9)
        assert fn(1.0) == pytest.approx(1.0, abs=1e-9)


class TestCubic:
    """Tests for the polynomial easings."""

    def test_ease_out_cubic_values(self) -> None:
        """1 - (1 - t)^3."""
        assert ease_out_cubic(0.5) == pytest.approx(0.875)

    def test_ease_in_out_cubic_values(self) -> None:
        """4t^3 below the midpoint, symmetric above."""
        assert ease_in_out_cubic(0.25) == pytest.approx(0.0625)
        assert ease_in_out_cubic(0.5) == pytest.approx(0.5)
        assert ease_in_out_cubic(0.75) == pytest.approx(0.9375)

    def test_monotonic(self) -> None:
        """Cubic easings never decrease."""
        for fn in (ease_out_cubic, ease_in_out_cubic):
            values = [fn(i / 100) for i in range(101)]
            assert all(b >= a - 1e-12 for a, b in zip(values, values[1:], strict=False))


class TestElastic:
    """Tests for the elastic spring."""

    def test_overshoots(self) -> None:
        """The spring passes 1 before settling."""
        spring = elastic(1)
        assert max(spring(i / 100) for i in range(101)) > 1.0

    def test_title_scale_peak(self) -> None:
        """Scale 0.92 -> 1.06 peaks above 1.06 and ends exactly at 1.06."""
        spring = elastic(1)
        scale = [0.92 + 0.14 * spring(i / 100) for i in range(101)]
        assert scale[-1] == pytest.approx(1.06)
        assert max(scale) > 1.06


class TestBezier:
    """Tests for cubic_bezier and the ease curves."""

    def test_linear_bezier(self) -> None:
        """Control points on the diagonal give the identity."""
        fn = cubic_bezier(0.25, 0.25, 0.75, 0.75)
        for t in (0.1, 0.3, 0.5, 0.9):
            assert fn(t) == pytest.approx(t, abs=1e-5)

    def test_ease_is_ease_in(self) -> None:
        """ease is bezier(0.42, 0, 1, 1): slow start, about 0.315 at t=0.5."""
        assert ease(0.5) == pytest.approx(0.3153, abs=2e-3)
        assert ease(0.25) < 0.25

    def test_ease_in_out_quarter(self) -> None:
        """A quarter of the way in, ease_in_out is about 0.157."""
        assert ease_in_out(0.25) == pytest.approx(0.157, abs=2e-3)
        assert ease_in_out(0.75) == pytest.approx(0.843, abs=2e-3)

    def test_in_out_is_point_symmetric(self) -> None:
        """in_out(f)(t) + in_out(f)(1 - t) == 1."""
        fn = in_out(ease)
        for t in (0.1, 0.2, 0.4):
            assert fn(t) + fn(1 - t) == pytest.approx(1.0)
        assert ease_in_out(0.5) == pytest.approx(0.5)

    def test_bad_control_points(self) -> None:
        """x control values outside [0, 1] are rejected."""
        with pytest.raises(ValueError):
            cubic_bezier(1.5, 0, 0.5, 1)
