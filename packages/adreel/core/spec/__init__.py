"""Ad specification models, loading, validation and enrichment."""

from adreel.core.spec.enrichment import ValidationIssue, enrich_spec, validate_spec
from adreel.core.spec.loader import load_spec
from adreel.core.spec.models import (
    AdSpec,
    AudioSpec,
    Brand,
    CarouselScene,
    CtaOutroScene,
    CtaScene,
    HeroTextScene,
    IconItem,
    IconListScene,
    MediaRef,
    PatternSpec,
    PatternType,
    Scene,
    SceneType,
    SplitFeatureScene,
    StatCounterScene,
    StatItem,
    TestimonialScene,
    TitleScene,
)

__all__ = [
    "AdSpec",
    "AudioSpec",
    "Brand",
    "CarouselScene",
    "CtaOutroScene",
    "CtaScene",
    "HeroTextScene",
    "IconItem",
    "IconListScene",
    "MediaRef",
    "PatternSpec",
    "PatternType",
    "Scene",
    "SceneType",
    "SplitFeatureScene",
    "StatCounterScene",
    "StatItem",
    "TestimonialScene",
    "TitleScene",
    "ValidationIssue",
    "enrich_spec",
    "load_spec",
    "validate_spec",
]
