"""Call-to-action scenes: the button card and the closing logo/URL outro."""

from __future__ import annotations

import math

from adreel.core.assets.refs import normalize_asset_ref
from adreel.core.color.contrast import readable_text_on
from adreel.core.config.models import CtaConstants
from adreel.core.curves.interpolate import ramp
from adreel.core.layout.responsive import scale_by_width
from adreel.core.scenes.context import FrameContext
from adreel.core.scenes.params import ButtonParams, CtaOutroParams, CtaParams, TextElement
from adreel.core.spec.models import CtaOutroScene, CtaScene, SceneType


class CtaAnimator:
    """Headline and accent button snapping in, then the button pulses.

    The snap is a fixed frame count, not scaled by fps.
    """

    scene_type = SceneType.CTA

    def __init__(self, constants: CtaConstants | None = None) -> None:
        self._constants = constants or CtaConstants()

    def pulse(self, frame: int) -> float:
        """Button scale: ``1 + amplitude * sin(frame / divisor)``."""
        c = self._constants
        return 1 + c.pulse_amplitude * math.sin(frame / c.pulse_period_divisor)

    def animate(self, scene: CtaScene, ctx: FrameContext) -> CtaParams:
        opacity = ramp(ctx.frame, 0, self._constants.snap_frames)
        accent = ctx.colors.accent

        return CtaParams(
            headline=TextElement(
                text=scene.headline,
                font_size=scale_by_width(ctx.width, 0.065, 24, 64),
                color=ctx.colors.readable(),
                opacity=opacity,
            ),
            button=ButtonParams(
                label=scene.button,
                background=accent,
                text_color=readable_text_on(accent),
                scale=self.pulse(ctx.frame),
                opacity=opacity,
            ),
        )


class CtaOutroAnimator:
    """Brand logo and optional URL fading in together."""

    scene_type = SceneType.CTA_OUTRO

    def animate(self, scene: CtaOutroScene, ctx: FrameContext) -> CtaOutroParams:
        url = None
        if scene.url:
            url = TextElement(
                text=scene.url,
                font_size=scale_by_width(ctx.width, 0.04, 18, 40),
                color=ctx.colors.readable(),
            )
        return CtaOutroParams(
            opacity=ramp(ctx.frame, 0, ctx.frames(0.25)),
            logo=normalize_asset_ref(ctx.logo),
            logo_width=min(260, ctx.width * 0.28),
            url=url,
        )
