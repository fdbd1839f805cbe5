"""Tests for asset filtering and weighted selection."""

from __future__ import annotations

import logging
import random
from collections import Counter

import pytest

from adreel.core.assets.models import (
    AssetCategory,
    AssetItem,
    AssetLibrary,
    AspectRatio,
    Tone,
)
from adreel.core.assets.selector import AssetSelector, matches
from adreel.core.errors import AssetNotFoundError, ConfigurationError


class TestMatches:
    """Tests for matches (permissive by absence)."""

    def test_untagged_item_passes_tag_filter(self) -> None:
        """An item without tags passes any tag filter."""
        assert matches(AssetItem(id="a", src="a"), tags=["speed"])

    def test_tag_overlap_required(self) -> None:
        """Tagged items must share at least one tag."""
        item = AssetItem(id="a", src="a", tags=("speed", "power"))
        assert matches(item, tags=["power", "x"])
        assert not matches(item, tags=["love"])

    def test_empty_tag_filter_accepts_all(self) -> None:
        """No requested tags means no tag filtering."""
        assert matches(AssetItem(id="a", src="a", tags=("speed",)), tags=[])

    def test_tone_filter(self) -> None:
        """Tone must be listed when the item declares tones."""
        item = AssetItem(id="a", src="a", tone=(Tone.CALM,))
        assert matches(item, tone=Tone.CALM)
        assert not matches(item, tone=Tone.BOLD)
        assert matches(AssetItem(id="b", src="b"), tone=Tone.BOLD)

    def test_aspect_ratio_filter(self) -> None:
        """Aspect ratio must be listed when the item declares ratios."""
        item = AssetItem(id="a", src="a", ar=(AspectRatio.LANDSCAPE,))
        assert matches(item, aspect_ratio=AspectRatio.LANDSCAPE)
        assert not matches(item, aspect_ratio=AspectRatio.PORTRAIT)

    def test_string_values_accepted(self) -> None:
        """Enum values given as strings are coerced."""
        item = AssetItem(id="a", src="a", tone=(Tone.CALM,), ar=(AspectRatio.SQUARE,))
        assert matches(item, tone="calm", aspect_ratio="1x1")  # type: ignore[arg-type]


class TestAssetSelector:
    """Tests for AssetSelector."""

    def test_pick_respects_filters(self, default_library: AssetLibrary) -> None:
        """Calm music never yields a bold-only track."""
        selector = AssetSelector(default_library, rng=random.Random(0))
        for _ in range(50):
            assert Tone.CALM in selector.pick_music(Tone.CALM).tone

    def test_pick_is_reproducible(self, default_library: AssetLibrary) -> None:
        """Same seed, same sequence."""
        a = AssetSelector(default_library, rng=random.Random(42))
        b = AssetSelector(default_library, rng=random.Random(42))
        assert [a.pick_music().id for _ in range(10)] == [b.pick_music().id for _ in range(10)]

    def test_weights_bias_selection(self) -> None:
        """An item with weight 3 is drawn about three times as often."""
        library = AssetLibrary(
            music=(
                AssetItem(id="heavy", src="h.mp3", weight=3),
                AssetItem(id="light", src="l.mp3"),
            )
        )
        selector = AssetSelector(library, rng=random.Random(7))
        counts = Counter(selector.pick(AssetCategory.MUSIC).id for _ in range(4000))
        assert counts["heavy"] / 4000 == pytest.approx(0.75, abs=0.05)

    def test_zero_or_negative_weight_counts_as_one(self) -> None:
        """Weights below 1 still give the item a chance."""
        assert AssetItem(id="a", src="a", weight=0).effective_weight == 1
        assert AssetItem(id="a", src="a", weight=-3).effective_weight == 1
        assert AssetItem(id="a", src="a").effective_weight == 1

    def test_fallback_to_full_category(
        self, small_library: AssetLibrary, caplog: pytest.LogCaptureFixture
    ) -> None:
        """With no match the whole category is used and a warning logged."""
        selector = AssetSelector(small_library, rng=random.Random(3))
        with caplog.at_level(logging.WARNING, logger="adreel.core.assets.selector"):
            item = selector.pick(AssetCategory.MUSIC, tone=Tone.PLAYFUL)
        assert item.id in {"music.calm", "music.bold"}
        assert "picking from full category" in caplog.text

    def test_untagged_item_survives_tag_filter(self, small_library: AssetLibrary) -> None:
        """Untagged icons stay candidates under any tag filter."""
        selector = AssetSelector(small_library, rng=random.Random(1))
        ids = {selector.pick_icon(tags=["love"], tone=Tone.CALM).id for _ in range(30)}
        assert ids == {"icon.b"}

    def test_empty_category_raises(self, small_library: AssetLibrary) -> None:
        """An empty category is a configuration error."""
        selector = AssetSelector(small_library)
        with pytest.raises(ConfigurationError, match="sfx"):
            selector.pick(AssetCategory.SFX)

    def test_pick_background_by_aspect(self, default_library: AssetLibrary) -> None:
        """Landscape backgrounds come from the 16x9 (or unconstrained) items."""
        selector = AssetSelector(default_library, rng=random.Random(5))
        for _ in range(20):
            bg = selector.pick_background(AspectRatio.LANDSCAPE, tone=Tone.CALM)
            assert bg.id == "bg.gradient_wide"

    def test_transition_lookup(self, selector: AssetSelector) -> None:
        """Transitions are looked up by id."""
        assert selector.transition("xfade.default").ms == 250

    def test_unknown_transition_raises(self, selector: AssetSelector) -> None:
        """Unknown ids raise AssetNotFoundError, a KeyError."""
        with pytest.raises(AssetNotFoundError) as exc_info:
            selector.transition("xfade.nope")
        assert isinstance(exc_info.value, KeyError)
        assert str(exc_info.value) == "transition asset 'xfade.nope' not found"
