"""Animators for grid scenes: icon_list and stat_counter.

Cells enter one after another. Each cell's local clock starts ``index *
stagger`` frames into the scene and is clamped at 0 before that.
"""

from __future__ import annotations

from adreel.core.assets.refs import normalize_asset_ref
from adreel.core.curves.easing import ease_out_cubic
from adreel.core.curves.interpolate import interpolate, ramp
from adreel.core.layout.responsive import clamp_px, scale_by_width
from adreel.core.scenes.context import FrameContext, appear, staggered
from adreel.core.scenes.params import (
    IconCellParams,
    IconListParams,
    StatCellParams,
    StatCounterParams,
    TextElement,
)
from adreel.core.spec.models import IconListScene, SceneType, StatCounterScene
from adreel.core.utils.formatting import format_grouped
from adreel.core.utils.math import clamp, round_half_up

ICON_GRID_GAP = 22
ICON_GRID_MAX_WIDTH = 1200
STAT_GRID_MAX_WIDTH = 1400
STAT_NARROW_WIDTH = 1200


def _grid_title(title: str | None, ctx: FrameContext) -> TextElement | None:
    if not title:
        return None
    return TextElement(
        text=title,
        font_size=scale_by_width(ctx.width, 0.06, 24, 56),
        color=ctx.colors.readable(),
    )


class IconListAnimator:
    """Grid of icons with labels, 2 to 4 columns (3 by default)."""

    scene_type = SceneType.ICON_LIST

    def animate(self, scene: IconListScene, ctx: FrameContext) -> IconListParams:
        columns = clamp(scene.columns or 3, 2, 4)
        cell_size = max(0.0, min(ctx.width / columns - 40, 260))
        stagger = ctx.frames(0.06)

        cells = []
        for i, item in enumerate(scene.items):
            local = staggered(ctx.frame, i, stagger)
            cells.append(
                IconCellParams(
                    icon=normalize_asset_ref(item.icon),
                    label=TextElement(
                        text=item.label,
                        font_size=clamp_px(cell_size * 0.09, 14, 22),
                        color=ctx.colors.readable(item.color),
                    ),
                    cell_size=cell_size,
                    icon_size=cell_size * 0.45,
                    opacity=interpolate(local, (0, 10, 20), (0, 1, 1)),
                    offset_y=ramp(local, 0, 20, 12, 0, easing=ease_out_cubic),
                )
            )

        return IconListParams(
            title=_grid_title(scene.title, ctx),
            columns=columns,
            gap=ICON_GRID_GAP,
            max_width=ICON_GRID_MAX_WIDTH,
            cells=tuple(cells),
        )


def count_up(target: float, local_frame: int, count_frames: int) -> tuple[float, float]:
    """Displayed value and progress of a counter ``local_frame`` frames in.

    While counting the value is ``round(target * ease_out_cubic(progress))``,
    which never decreases. Once progress reaches 1 the exact target is shown.

    Example:
        >>> count_up(12800, 54, 54)
        (12800, 1.0)
    """
    progress = min(1.0, local_frame / max(1, count_frames))
    if progress >= 1.0:
        return target, 1.0
    return round_half_up(target * ease_out_cubic(progress)), progress


class StatCounterAnimator:
    """Numbers counting up from zero to their targets, staggered per cell."""

    scene_type = SceneType.STAT_COUNTER

    def animate(self, scene: StatCounterScene, ctx: FrameContext) -> StatCounterParams:
        n = len(scene.items)
        narrow = ctx.width < STAT_NARROW_WIDTH
        columns = max(1, min(2, n) if narrow else min(4, n))
        cell_width = max(0.0, min(420, ctx.width / columns - 40))

        stagger = ctx.frames(0.08)
        count_frames = max(1, ctx.frames(1.8))
        appear_frames = ctx.frames(0.3)

        cells = []
        for i, item in enumerate(scene.items):
            local = staggered(ctx.frame, i, stagger)
            value, progress = count_up(item.value, local, count_frames)
            entry = appear(local, appear_frames, offset_from=16)
            color = ctx.colors.readable(item.color)
            cells.append(
                StatCellParams(
                    value=value,
                    value_text=format_grouped(value),
                    suffix=item.suffix or None,
                    value_font_size=clamp_px(cell_width * 0.15, 28, 64),
                    value_color=color,
                    label=TextElement(
                        text=item.label,
                        font_size=clamp_px(cell_width * 0.08, 12, 22),
                        color=ctx.colors.readable(),
                    ),
                    cell_width=cell_width,
                    opacity=entry.opacity,
                    offset_y=entry.offset_y,
                    progress=progress,
                )
            )

        return StatCounterParams(
            title=_grid_title(scene.title, ctx),
            columns=columns,
            gap=28 if narrow else 22,
            max_width=STAT_GRID_MAX_WIDTH,
            cells=tuple(cells),
        )
