"""Render parameter models emitted by scene animators.

These are everything a renderer needs to paint one scene at one frame:
sizes in px, opacities in [0, 1], offsets, colors and display strings.
All models are frozen.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from adreel.core.assets.refs import AssetRef


class _Params(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class Padding(_Params):
    top: int
    right: int
    bottom: int
    left: int


class TextElement(_Params):
    """A block of text with its animation state."""

    text: str
    font_size: float = Field(..., gt=0.0)
    color: str
    opacity: float = Field(default=1.0, ge=0.0, le=1.0)
    offset_y: float = 0.0
    scale: float = 1.0


# =============================================================================
# title / hero_text
# =============================================================================


class TitleParams(_Params):
    type: Literal["title"] = "title"
    headline: TextElement
    subtext: TextElement | None = None


class HeroTextParams(_Params):
    type: Literal["hero_text"] = "hero_text"
    headline: TextElement
    subheadline: TextElement | None = None


# =============================================================================
# icon_list / stat_counter
# =============================================================================


class IconCellParams(_Params):
    icon: AssetRef
    label: TextElement
    cell_size: float = Field(..., ge=0.0)
    icon_size: float = Field(..., ge=0.0)
    opacity: float = Field(..., ge=0.0, le=1.0)
    offset_y: float


class IconListParams(_Params):
    type: Literal["icon_list"] = "icon_list"
    title: TextElement | None = None
    columns: int = Field(..., ge=1)
    gap: int
    max_width: int
    cells: tuple[IconCellParams, ...] = ()


class StatCellParams(_Params):
    """One counter.

    Attributes:
        value: Currently displayed number (integer while counting, the exact
            target once complete).
        value_text: ``value`` with digit grouping.
        suffix: Optional glyph painted after the number (``+``, ``%``).
        progress: Count-up progress in [0, 1].
    """

    value: float
    value_text: str
    suffix: str | None = None
    value_font_size: float = Field(..., gt=0.0)
    value_color: str
    label: TextElement
    cell_width: float = Field(..., ge=0.0)
    opacity: float = Field(..., ge=0.0, le=1.0)
    offset_y: float
    progress: float = Field(..., ge=0.0, le=1.0)


class StatCounterParams(_Params):
    type: Literal["stat_counter"] = "stat_counter"
    title: TextElement | None = None
    columns: int = Field(..., ge=1)
    gap: int
    max_width: int
    cells: tuple[StatCellParams, ...] = ()


# =============================================================================
# split_feature / testimonial
# =============================================================================


class SplitFeatureParams(_Params):
    type: Literal["split_feature"] = "split_feature"
    stacked: bool
    opacity: float = Field(..., ge=0.0, le=1.0)
    padding: Padding
    column_ratios: tuple[float, ...]
    gap: int
    title: TextElement
    body: TextElement | None = None
    media: AssetRef | None = None
    media_max_width: int
    media_radius: int = 16


class AvatarParams(_Params):
    """Avatar circle: an image, or the name's initial when there is none."""

    size: int = Field(..., gt=0)
    src: AssetRef | None = None
    initial: str | None = None
    initial_font_size: float
    initial_color: str
    align: Literal["center", "end"]


class TestimonialParams(_Params):
    __test__ = False  # not a pytest class

    type: Literal["testimonial"] = "testimonial"
    stacked: bool
    opacity: float = Field(..., ge=0.0, le=1.0)
    padding: Padding
    column_ratios: tuple[float, ...]
    gap: int
    avatar: AvatarParams
    quote: TextElement
    attribution: TextElement


# =============================================================================
# carousel
# =============================================================================


class CarouselTrack(_Params):
    """Static carousel geometry for a canvas.

    Attributes:
        landscape: Whether the canvas counts as landscape.
        visible_width: Viewport width the track scrolls through.
        pad_left: Track padding before the first card.
        pad_right: Track padding after the last card.
        gap: Gap between cards.
        card_width: Card width.
        card_height: Card height.
        track_width: Total width of all cards and gaps.
        max_shift: Scroll distance at the end of the animation.
    """

    landscape: bool
    visible_width: int = Field(..., ge=0)
    pad_left: int
    pad_right: int
    gap: int
    card_width: int = Field(..., gt=0)
    card_height: int = Field(..., gt=0)
    track_width: int = Field(..., ge=0)
    max_shift: int = Field(..., ge=0)

    @property
    def overflow(self) -> int:
        """How far the track extends past the viewport (negative if it fits)."""
        return self.track_width - self.visible_width


class CarouselParams(_Params):
    type: Literal["carousel"] = "carousel"
    title: TextElement | None = None
    top_padding: int
    track: CarouselTrack
    images: tuple[AssetRef, ...] = ()
    offset_x: int
    progress: float = Field(..., ge=0.0, le=1.0)


# =============================================================================
# cta / cta_outro
# =============================================================================


class ButtonParams(_Params):
    label: str
    background: str
    text_color: str
    scale: float
    opacity: float = Field(..., ge=0.0, le=1.0)
    padding_y: int = 16
    padding_x: int = 28
    radius: int = 12


class CtaParams(_Params):
    type: Literal["cta"] = "cta"
    headline: TextElement
    button: ButtonParams


class CtaOutroParams(_Params):
    type: Literal["cta_outro"] = "cta_outro"
    opacity: float = Field(..., ge=0.0, le=1.0)
    logo: AssetRef | None = None
    logo_width: float
    url: TextElement | None = None


RenderParams = (
    TitleParams
    | HeroTextParams
    | IconListParams
    | StatCounterParams
    | SplitFeatureParams
    | TestimonialParams
    | CarouselParams
    | CtaParams
    | CtaOutroParams
)
