"""Shared pytest fixtures for adreel tests."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Any

import pytest

from adreel.core.assets.loader import load_default_library
from adreel.core.assets.models import AssetItem, AssetLibrary, Tone, TransitionItem
from adreel.core.assets.selector import AssetSelector
from adreel.core.scenes.context import FrameContext, SceneColors
from adreel.core.spec.models import AdSpec

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Asset Fixtures
# ============================================================================


@pytest.fixture
def rng() -> random.Random:
    """Seeded RNG so picks are reproducible."""
    return random.Random(1234)


@pytest.fixture
def default_library() -> AssetLibrary:
    """The library bundled with the package."""
    return load_default_library()


@pytest.fixture
def small_library() -> AssetLibrary:
    """Hand-built library with one untagged item per category."""
    return AssetLibrary(
        icons=(
            AssetItem(id="icon.a", src="icons/a.svg", tags=("speed",), tone=(Tone.BOLD,)),
            AssetItem(id="icon.b", src="icons/b.svg"),
        ),
        backgrounds=(AssetItem(id="bg.a", src="bg/a.jpg"),),
        music=(
            AssetItem(id="music.calm", src="music/calm.mp3", tone=(Tone.CALM,)),
            AssetItem(id="music.bold", src="music/bold.mp3", tone=(Tone.BOLD,)),
        ),
        sfx=(),
        transitions=(TransitionItem(id="xfade.default", ms=250),),
    )


@pytest.fixture
def selector(default_library: AssetLibrary, rng: random.Random) -> AssetSelector:
    """Selector over the bundled library with a seeded RNG."""
    return AssetSelector(default_library, rng=rng)


# ============================================================================
# Spec Fixtures
# ============================================================================


@pytest.fixture
def demo_spec_data() -> dict[str, Any]:
    """Demo ad document as it would appear in a JSON spec file (camelCase keys)."""
    return {
        "brand": {
            "primary": "#FFFFFF",
            "secondary": "#00E0FF",
            "background": "#0F0F0F",
            "fontFamily": "Inter",
            "logo": "/demo/logo.png",
        },
        "scenes": [
            {"type": "hero_text", "headline": "Ship faster", "durationMs": 3200},
            {
                "type": "stat_counter",
                "title": "By the numbers",
                "items": [
                    {"label": "Teams", "value": 12800, "suffix": "+"},
                    {"label": "Uptime", "value": 99, "suffix": "%"},
                ],
                "durationMs": 2600,
            },
            {
                "type": "carousel",
                "title": "Gallery",
                "images": ["/demo/shot-1.jpg", "/demo/shot-2.jpg", "/demo/shot-3.jpg"],
                "durationMs": 3000,
            },
            {"type": "cta_outro", "url": "example.com", "durationMs": 1400},
        ],
    }


@pytest.fixture
def demo_spec(demo_spec_data: dict[str, Any]) -> AdSpec:
    """Parsed demo spec (not enriched)."""
    return AdSpec.model_validate(demo_spec_data)


# ============================================================================
# Animator Fixtures
# ============================================================================


@pytest.fixture
def dark_colors() -> SceneColors:
    """White text and cyan accent on near-black."""
    return SceneColors(text="#FFFFFF", accent="#00E0FF", background="#0F0F0F")


@pytest.fixture
def portrait_ctx(dark_colors: SceneColors) -> FrameContext:
    """Frame 0 on a 1080x1920 canvas at 30 fps."""
    return FrameContext(frame=0, fps=30, width=1080, height=1920, colors=dark_colors)


@pytest.fixture
def landscape_ctx(dark_colors: SceneColors) -> FrameContext:
    """Frame 0 on a 1920x1080 canvas at 30 fps."""
    return FrameContext(frame=0, fps=30, width=1920, height=1080, colors=dark_colors)
