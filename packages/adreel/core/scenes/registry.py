"""Animator registry.

One animator per scene variant, looked up by ``scene.type``. The default
registry covers every :class:`SceneType`; building it fails loudly if a
variant has no animator, so a new scene type cannot silently render nothing.
"""

from __future__ import annotations

from typing import Any, Protocol

from adreel.core.config.models import RenderConfig
from adreel.core.errors import AdReelError, ConfigurationError
from adreel.core.scenes.carousel import CarouselAnimator
from adreel.core.scenes.context import FrameContext
from adreel.core.scenes.cta import CtaAnimator, CtaOutroAnimator
from adreel.core.scenes.grid import IconListAnimator, StatCounterAnimator
from adreel.core.scenes.params import RenderParams
from adreel.core.scenes.split import SplitFeatureAnimator, TestimonialAnimator
from adreel.core.scenes.text import HeroTextAnimator, TitleAnimator
from adreel.core.spec.models import SceneType


class SceneAnimator(Protocol):
    """Maps (scene, frame context) to render params. Pure and deterministic."""

    scene_type: SceneType

    def animate(self, scene: Any, ctx: FrameContext) -> RenderParams: ...


class SceneAnimatorNotFoundError(AdReelError, KeyError):
    """Raised when no animator is registered for a scene type.

    Attributes:
        scene_type: The type that was not found.
        available: Registered scene types.

    Example:
        >>> raise SceneAnimatorNotFoundError("feature", ["cta", "title"])
        SceneAnimatorNotFoundError: Scene animator 'feature' not found. Available: cta, title
    """

    def __init__(self, scene_type: str, available: list[str] | None = None) -> None:
        self.scene_type = scene_type
        self.available = available or []

        message = f"Scene animator '{scene_type}' not found."
        if self.available:
            message += f" Available: {', '.join(sorted(self.available))}"
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0])


class AnimatorRegistry:
    """Registry of scene animators keyed by scene type.

    Example:
        >>> registry = AnimatorRegistry()
        >>> registry.register(TitleAnimator())
        >>> registry.has("title")
        True
    """

    def __init__(self) -> None:
        self._animators: dict[SceneType, SceneAnimator] = {}

    def register(self, animator: SceneAnimator) -> None:
        self._animators[SceneType(animator.scene_type)] = animator

    def get(self, scene_type: SceneType | str) -> SceneAnimator:
        """Animator for ``scene_type``.

        Raises:
            SceneAnimatorNotFoundError: If nothing is registered for it.
        """
        try:
            key = SceneType(scene_type)
        except ValueError:
            key = None
        if key is None or key not in self._animators:
            raise SceneAnimatorNotFoundError(str(scene_type), available=self.list_types())
        return self._animators[key]

    def has(self, scene_type: SceneType | str) -> bool:
        try:
            return SceneType(scene_type) in self._animators
        except ValueError:
            return False

    def list_types(self) -> list[str]:
        return [t.value for t in self._animators]

    def missing(self) -> list[SceneType]:
        """Scene types with no registered animator."""
        return [t for t in SceneType if t not in self._animators]

    def animate(self, scene: Any, ctx: FrameContext) -> RenderParams:
        return self.get(scene.type).animate(scene, ctx)


def build_default_registry(config: RenderConfig | None = None) -> AnimatorRegistry:
    """Registry with an animator for every scene variant.

    Raises:
        ConfigurationError: If any :class:`SceneType` is left without an animator.
    """
    config = config or RenderConfig()

    registry = AnimatorRegistry()
    for animator in (
        TitleAnimator(),
        HeroTextAnimator(),
        IconListAnimator(),
        StatCounterAnimator(),
        SplitFeatureAnimator(),
        TestimonialAnimator(),
        CarouselAnimator(config.carousel),
        CtaAnimator(config.cta),
        CtaOutroAnimator(),
    ):
        registry.register(animator)

    missing = registry.missing()
    if missing:
        raise ConfigurationError(
            f"No animator registered for scene types: {', '.join(t.value for t in missing)}"
        )
    return registry


_default_registry: AnimatorRegistry | None = None


def animate_scene(scene: Any, ctx: FrameContext) -> RenderParams:
    """Animate ``scene`` with the default animators and default constants."""
    global _default_registry
    if _default_registry is None:
        _default_registry = build_default_registry()
    return _default_registry.animate(scene, ctx)
