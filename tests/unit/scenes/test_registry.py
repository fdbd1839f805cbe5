"""Tests for the scene animator registry."""

from __future__ import annotations

import pytest

from adreel.core.config.models import CarouselConstants, RenderConfig
from adreel.core.errors import AdReelError
from adreel.core.scenes.context import FrameContext
from adreel.core.scenes.params import CarouselParams, CtaOutroParams, HeroTextParams
from adreel.core.scenes.registry import (
    AnimatorRegistry,
    SceneAnimatorNotFoundError,
    animate_scene,
    build_default_registry,
)
from adreel.core.scenes.text import TitleAnimator
from adreel.core.spec.models import CarouselScene, CtaOutroScene, HeroTextScene, SceneType


class TestAnimatorRegistry:
    """Tests for AnimatorRegistry."""

    def test_register_and_get(self) -> None:
        """Registered animators are found by enum or string."""
        registry = AnimatorRegistry()
        animator = TitleAnimator()
        registry.register(animator)
        assert registry.get(SceneType.TITLE) is animator
        assert registry.get("title") is animator
        assert registry.has("title")
        assert registry.list_types() == ["title"]

    def test_empty_registry_missing_everything(self) -> None:
        """An empty registry reports every scene type as missing."""
        assert AnimatorRegistry().missing() == list(SceneType)

    def test_unregistered_type(self) -> None:
        """A known but unregistered type raises with the available list."""
        registry = AnimatorRegistry()
        registry.register(TitleAnimator())
        with pytest.raises(SceneAnimatorNotFoundError) as exc_info:
            registry.get("cta")
        assert exc_info.value.scene_type == "cta"
        assert str(exc_info.value) == "Scene animator 'cta' not found. Available: title"

    def test_unknown_type(self) -> None:
        """Unknown types raise; the error is a KeyError and an AdReelError."""
        registry = build_default_registry()
        assert not registry.has("feature")
        with pytest.raises(KeyError):
            registry.get("feature")
        with pytest.raises(AdReelError, match="Available: .*carousel"):
            registry.get("feature")


class TestDefaultRegistry:
    """Tests for build_default_registry and animate_scene."""

    def test_covers_every_scene_type(self) -> None:
        """Every variant has an animator."""
        registry = build_default_registry()
        assert registry.missing() == []
        assert sorted(registry.list_types()) == sorted(t.value for t in SceneType)

    def test_config_constants_reach_animators(self, portrait_ctx: FrameContext) -> None:
        """Carousel constants from the render config are used."""
        config = RenderConfig(carousel=CarouselConstants(scroll_seconds_other=1.0))
        registry = build_default_registry(config)
        scene = CarouselScene(images=("/a.jpg", "/b.jpg", "/c.jpg"), duration_ms=3000)
        params = registry.animate(scene, portrait_ctx.at(30))
        assert isinstance(params, CarouselParams)
        assert params.progress == 1.0

    @pytest.mark.parametrize(
        ("scene", "params_type"),
        [
            (HeroTextScene(headline="Hi", duration_ms=1000), HeroTextParams),
            (CarouselScene(images=("/a.jpg",), duration_ms=1000), CarouselParams),
            (CtaOutroScene(duration_ms=1000), CtaOutroParams),
        ],
    )
    def test_animate_scene_dispatch(
        self, portrait_ctx: FrameContext, scene: object, params_type: type
    ) -> None:
        """Dispatch is by scene type and params carry the same type tag."""
        params = animate_scene(scene, portrait_ctx)
        assert isinstance(params, params_type)
        assert params.type == scene.type  # type: ignore[attr-defined]
