"""Per-scene animators: (scene, local frame, canvas) -> render params."""

from adreel.core.scenes.carousel import CarouselAnimator, scroll_offset, size_carousel_track
from adreel.core.scenes.context import Appear, FrameContext, SceneColors, appear, staggered
from adreel.core.scenes.cta import CtaAnimator, CtaOutroAnimator
from adreel.core.scenes.grid import IconListAnimator, StatCounterAnimator, count_up
from adreel.core.scenes.params import CarouselTrack, RenderParams
from adreel.core.scenes.registry import (
    AnimatorRegistry,
    SceneAnimator,
    SceneAnimatorNotFoundError,
    animate_scene,
    build_default_registry,
)
from adreel.core.scenes.split import SplitFeatureAnimator, TestimonialAnimator
from adreel.core.scenes.text import HeroTextAnimator, TitleAnimator

__all__ = [
    "AnimatorRegistry",
    "Appear",
    "CarouselAnimator",
    "CarouselTrack",
    "CtaAnimator",
    "CtaOutroAnimator",
    "FrameContext",
    "HeroTextAnimator",
    "IconListAnimator",
    "RenderParams",
    "SceneAnimator",
    "SceneAnimatorNotFoundError",
    "SceneColors",
    "SplitFeatureAnimator",
    "StatCounterAnimator",
    "TestimonialAnimator",
    "TitleAnimator",
    "animate_scene",
    "appear",
    "build_default_registry",
    "count_up",
    "scroll_offset",
    "size_carousel_track",
    "staggered",
]
