"""Animators for the text-only scenes: title and hero_text."""

from __future__ import annotations

from adreel.core.curves.easing import ease_in_out, elastic
from adreel.core.curves.interpolate import ramp
from adreel.core.layout.responsive import scale_by_width
from adreel.core.scenes.context import FrameContext, appear
from adreel.core.scenes.params import HeroTextParams, TextElement, TitleParams
from adreel.core.spec.models import HeroTextScene, SceneType, TitleScene
from adreel.core.utils.math import clamp01


class TitleAnimator:
    """Headline that fades in and springs slightly past full size.

    The subtext has no delay of its own: it shares the headline ramp and runs
    0.2 brighter, capped at 1.

    Attributes:
        scene_type: SceneType.TITLE
    """

    scene_type = SceneType.TITLE

    def __init__(self) -> None:
        self._spring = elastic(1)

    def animate(self, scene: TitleScene, ctx: FrameContext) -> TitleParams:
        opacity = ramp(ctx.frame, 0, ctx.frames(0.3), easing=ease_in_out)
        scale = ramp(ctx.frame, 0, ctx.frames(0.6), 0.92, 1.06, easing=self._spring)
        color = ctx.colors.readable()

        headline = TextElement(
            text=scene.text,
            font_size=scale_by_width(ctx.width, 0.09, 28, 84),
            color=color,
            opacity=opacity,
            scale=scale,
        )
        subtext = None
        if scene.subtext:
            subtext = TextElement(
                text=scene.subtext,
                font_size=scale_by_width(ctx.width, 0.04, 16, 34),
                color=color,
                opacity=clamp01(opacity + 0.2),
            )
        return TitleParams(headline=headline, subtext=subtext)


class HeroTextAnimator:
    """Headline rising into place, subheadline following after a short delay.

    Opacities ramp linearly; only the vertical offset eases out.
    """

    scene_type = SceneType.HERO_TEXT

    def animate(self, scene: HeroTextScene, ctx: FrameContext) -> HeroTextParams:
        color = ctx.colors.readable()

        head = appear(ctx.frame, ctx.frames(0.35), offset_from=24)
        headline = TextElement(
            text=scene.headline,
            font_size=scale_by_width(ctx.width, 0.10, 30, 96),
            color=color,
            opacity=head.opacity,
            offset_y=head.offset_y,
        )

        subheadline = None
        if scene.subheadline:
            delay = ctx.frames(0.18)
            sub = appear(max(0, ctx.frame - delay), ctx.frames(0.3), offset_from=18)
            subheadline = TextElement(
                text=scene.subheadline,
                font_size=scale_by_width(ctx.width, 0.045, 16, 40),
                color=color,
                opacity=sub.opacity,
                offset_y=sub.offset_y,
            )
        return HeroTextParams(headline=headline, subheadline=subheadline)
