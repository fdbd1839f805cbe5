"""Configuration management for adreel."""

from adreel.core.config.loader import load_render_config
from adreel.core.config.models import (
    CanvasPreset,
    CarouselConstants,
    CtaConstants,
    EnrichmentConfig,
    RenderConfig,
    TimingConfig,
)

__all__ = [
    "load_render_config",
    "CanvasPreset",
    "CarouselConstants",
    "CtaConstants",
    "EnrichmentConfig",
    "RenderConfig",
    "TimingConfig",
]
