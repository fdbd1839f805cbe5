"""Weighted random asset selection over an injected, read-only library.

Filtering is permissive by absence: an item without tags/tone/aspect ratios
passes that filter. Surviving items are replicated ``max(1, weight)`` times and
one is drawn uniformly. If nothing survives, the draw falls back to the whole
category, so a non-empty category always yields an asset.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable

from adreel.core.assets.models import (
    AssetCategory,
    AssetItem,
    AssetLibrary,
    AspectRatio,
    Tone,
    TransitionItem,
)
from adreel.core.errors import AssetNotFoundError, ConfigurationError

logger = logging.getLogger(__name__)


def matches(
    item: AssetItem,
    tags: Iterable[str] = (),
    tone: Tone | None = None,
    aspect_ratio: AspectRatio | None = None,
) -> bool:
    """Whether an item passes the tag, tone and aspect-ratio filters.

    An empty ``tags`` filter accepts every item; otherwise the item must share
    at least one tag (an untagged item passes).
    """
    wanted_tags = set(tags)
    if wanted_tags and item.tags is not None and not wanted_tags.intersection(item.tags):
        return False
    if tone is not None and item.tone is not None and Tone(tone) not in item.tone:
        return False
    if (
        aspect_ratio is not None
        and item.ar is not None
        and AspectRatio(aspect_ratio) not in item.ar
    ):
        return False
    return True


class AssetSelector:
    """Picks fallback assets from a library.

    The only source of randomness in adreel; pass a seeded ``random.Random``
    for reproducible picks.

    Example:
        >>> selector = AssetSelector(library, rng=random.Random(7))
        >>> track = selector.pick_music(Tone.CALM)
    """

    def __init__(self, library: AssetLibrary, rng: random.Random | None = None) -> None:
        self._library = library
        self._rng = rng if rng is not None else random.Random()

    @property
    def library(self) -> AssetLibrary:
        return self._library

    def pick(
        self,
        category: AssetCategory | str,
        *,
        tags: Iterable[str] = (),
        tone: Tone | None = None,
        aspect_ratio: AspectRatio | None = None,
    ) -> AssetItem:
        """Pick one weighted item from ``category`` that satisfies the filters.

        Raises:
            ConfigurationError: If the category is empty.
        """
        category = AssetCategory(category)
        items = self._library.items(category)
        if not items:
            raise ConfigurationError(f"Asset category '{category.value}' is empty")

        tags = tuple(tags)
        candidates = [i for i in items if matches(i, tags, tone, aspect_ratio)]
        if not candidates:
            logger.warning(
                "No %s asset matches tags=%s tone=%s ar=%s; picking from full category",
                category.value,
                list(tags),
                tone,
                aspect_ratio,
            )
            candidates = list(items)

        expanded = [item for item in candidates for _ in range(item.effective_weight)]
        chosen = expanded[self._rng.randrange(len(expanded))]
        logger.debug(
            "Picked %s asset %s from %d candidates", category.value, chosen.id, len(candidates)
        )
        return chosen

    def pick_icon(self, tags: Iterable[str] = (), tone: Tone = Tone.CALM) -> AssetItem:
        return self.pick(AssetCategory.ICONS, tags=tags, tone=tone)

    def pick_background(self, aspect_ratio: AspectRatio, tone: Tone = Tone.CALM) -> AssetItem:
        return self.pick(AssetCategory.BACKGROUNDS, tone=tone, aspect_ratio=aspect_ratio)

    def pick_music(self, tone: Tone = Tone.CALM) -> AssetItem:
        return self.pick(AssetCategory.MUSIC, tone=tone)

    def transition(self, transition_id: str) -> TransitionItem:
        """Look up a transition timing by id.

        Raises:
            AssetNotFoundError: If no transition has that id.
        """
        for item in self._library.transitions:
            if item.id == transition_id:
                return item
        raise AssetNotFoundError(transition_id, "transition")
