"""Horizontally scrolling image carousel.

The track is sized so it overflows the viewport (the scroll is visible even on
wide canvases) and scrolls just far enough that the last card ends up fully
inside the viewport with a margin to spare.
"""

from __future__ import annotations

import logging
import math

from adreel.core.assets.refs import normalize_asset_ref
from adreel.core.config.models import CarouselConstants
from adreel.core.curves.easing import ease_in_out_cubic
from adreel.core.layout.responsive import percent_of, scale_by_width
from adreel.core.scenes.context import FrameContext
from adreel.core.scenes.params import CarouselParams, CarouselTrack, TextElement
from adreel.core.spec.models import CarouselScene, SceneType
from adreel.core.utils.math import round_half_up

logger = logging.getLogger(__name__)


def _track_width(n_cards: int, card_width: int, gap: int) -> int:
    if n_cards == 0:
        return 0
    return n_cards * card_width + (n_cards - 1) * gap


def size_carousel_track(
    n_cards: int,
    width: int,
    height: int,
    constants: CarouselConstants | None = None,
) -> CarouselTrack:
    """Card and track geometry for ``n_cards`` on a ``width`` x ``height`` canvas.

    Cards start at a share of the visible width, clamped to [min, max]. If the
    track would then fit inside the viewport, cards grow toward a track of
    ``(1 + min_overflow) * visible`` but never beyond the max card width, so
    with few cards on a wide canvas the overflow target can be missed.

    Example:
        >>> track = size_carousel_track(5, 1080, 1920)
        >>> (track.card_width, track.gap)
        (364, 18)
    """
    c = constants or CarouselConstants()

    landscape = width / height >= c.landscape_aspect
    pad_left = round_half_up(width * c.pad_factor)
    pad_right = pad_left + c.end_margin_px
    visible = max(0, width - pad_left - pad_right)

    gap = c.gap_px_landscape if landscape else c.gap_px_other
    max_card = c.max_card_px_landscape if landscape else c.max_card_px_other
    share = c.card_share_landscape if landscape else c.card_share_other

    card = math.floor(visible * share)
    card = min(max_card, max(c.min_card_px, card))

    track = _track_width(n_cards, card, gap)
    if n_cards > 0 and track <= visible:
        target = visible * (1 + c.min_overflow)
        candidate = math.floor((target - (n_cards - 1) * gap) / n_cards)
        card = min(max_card, max(card, candidate))
        track = _track_width(n_cards, card, gap)
        if track <= visible:
            logger.debug(
                "Carousel track %dpx still fits viewport %dpx (%d cards, max card %dpx)",
                track,
                visible,
                n_cards,
                max_card,
            )

    max_shift = max(0, math.ceil(track - visible) + c.end_margin_px)

    return CarouselTrack(
        landscape=landscape,
        visible_width=visible,
        pad_left=pad_left,
        pad_right=pad_right,
        gap=gap,
        card_width=card,
        card_height=round_half_up(card * c.card_aspect),
        track_width=track,
        max_shift=max_shift,
    )


def scroll_offset(frame: int, scroll_frames: int, max_shift: int) -> tuple[int, float]:
    """Track translation (px, <= 0) and linear progress at ``frame``."""
    progress = min(1.0, frame / max(1, scroll_frames))
    return -round_half_up(ease_in_out_cubic(progress) * max_shift), progress


class CarouselAnimator:
    """Scrolls the card track from 0 to ``-max_shift`` with an ease-in-out."""

    scene_type = SceneType.CAROUSEL

    def __init__(self, constants: CarouselConstants | None = None) -> None:
        self._constants = constants or CarouselConstants()

    def animate(self, scene: CarouselScene, ctx: FrameContext) -> CarouselParams:
        c = self._constants
        track = size_carousel_track(len(scene.images), ctx.width, ctx.height, c)

        seconds = c.scroll_seconds_landscape if track.landscape else c.scroll_seconds_other
        offset_x, progress = scroll_offset(ctx.frame, ctx.frames(seconds), track.max_shift)

        title = None
        if scene.title:
            title = TextElement(
                text=scene.title,
                font_size=scale_by_width(ctx.width, 0.055, 22, 52),
                color=ctx.colors.readable(),
            )

        images = tuple(
            ref for ref in (normalize_asset_ref(src) for src in scene.images) if ref is not None
        )
        return CarouselParams(
            title=title,
            top_padding=percent_of(ctx.width, 9 if track.landscape else 18),
            track=track,
            images=images,
            offset_x=offset_x,
            progress=progress,
        )
