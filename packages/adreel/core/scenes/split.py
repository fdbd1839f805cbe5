"""Animators for two-column scenes: split_feature and testimonial.

Below ``NARROW_WIDTH`` the columns stack into one. Both scenes fade in as a
whole; padding is a percentage of the canvas width.
"""

from __future__ import annotations

from adreel.core.assets.refs import normalize_asset_ref
from adreel.core.curves.interpolate import ramp
from adreel.core.layout.responsive import percent_of, scale_by_width
from adreel.core.scenes.context import FrameContext
from adreel.core.scenes.params import (
    AvatarParams,
    Padding,
    SplitFeatureParams,
    TestimonialParams,
    TextElement,
)
from adreel.core.spec.models import SceneType, SplitFeatureScene, TestimonialScene
from adreel.core.utils.formatting import initial_of

NARROW_WIDTH = 900


def _padding(width: int, vertical_pct: float, horizontal_pct: float) -> Padding:
    v = percent_of(width, vertical_pct)
    h = percent_of(width, horizontal_pct)
    return Padding(top=v, right=h, bottom=v, left=h)


def _fade(ctx: FrameContext) -> float:
    return ramp(ctx.frame, 0, ctx.frames(0.35))


class SplitFeatureAnimator:
    """Title and body beside an optional image."""

    scene_type = SceneType.SPLIT_FEATURE

    def animate(self, scene: SplitFeatureScene, ctx: FrameContext) -> SplitFeatureParams:
        narrow = ctx.width < NARROW_WIDTH
        color = ctx.colors.readable()

        body = None
        if scene.body:
            body = TextElement(
                text=scene.body,
                font_size=scale_by_width(ctx.width, 0.028, 14, 26),
                color=color,
                opacity=0.9,
            )

        return SplitFeatureParams(
            stacked=narrow,
            opacity=_fade(ctx),
            padding=_padding(ctx.width, 7, 6) if narrow else _padding(ctx.width, 8, 7),
            column_ratios=(1.0,) if narrow else (1.1, 1.0),
            gap=24 if narrow else 40,
            title=TextElement(
                text=scene.title,
                font_size=scale_by_width(ctx.width, 0.06, 22, 56),
                color=color,
            ),
            body=body,
            media=normalize_asset_ref(scene.media.src) if scene.media else None,
            media_max_width=520 if narrow else 600,
        )


class TestimonialAnimator:
    """Quote with attribution beside an avatar (or the speaker's initial)."""

    __test__ = False  # not a pytest class

    scene_type = SceneType.TESTIMONIAL

    def animate(self, scene: TestimonialScene, ctx: FrameContext) -> TestimonialParams:
        narrow = ctx.width < NARROW_WIDTH
        color = ctx.colors.readable()

        avatar_ref = normalize_asset_ref(scene.avatar)
        avatar = AvatarParams(
            size=140 if narrow else 180,
            src=avatar_ref,
            initial=None if avatar_ref else initial_of(scene.name),
            initial_font_size=40 if narrow else 52,
            initial_color=color,
            align="center" if narrow else "end",
        )

        attribution = scene.name
        if scene.role:
            attribution = f"{scene.name} · {scene.role}"

        return TestimonialParams(
            stacked=narrow,
            opacity=_fade(ctx),
            padding=_padding(ctx.width, 8, 7) if narrow else _padding(ctx.width, 8, 10),
            column_ratios=(1.0,) if narrow else (0.9, 1.1),
            gap=24 if narrow else 40,
            avatar=avatar,
            quote=TextElement(
                text=f"“{scene.quote}”",
                font_size=scale_by_width(ctx.width, 0.05, 20, 44),
                color=color,
            ),
            attribution=TextElement(
                text=attribution,
                font_size=scale_by_width(ctx.width, 0.028, 14, 24),
                color=color,
                opacity=0.9,
            ),
        )
