from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from luvatrix_guide.axis.labels import tick_label
from luvatrix_guide.scene import Figure, LineFigure
from luvatrix_guide.styles import StrokeStyle
from luvatrix_guide.ticks import TickInfo

if TYPE_CHECKING:
    from luvatrix_guide.coord import RectCoordConv


def render_vertical_axis(
    ticks: Sequence[TickInfo],
    position: float,
    flip: bool,
    line: StrokeStyle | None,
    coord: "RectCoordConv",
) -> list[Figure]:
    region = coord.region
    x = region.left + region.width * position
    # Ticks and labels sit left of the line unless flipped.
    side = 1.0 if flip else -1.0

    figures: list[Figure] = []
    if line is not None:
        figures.append(LineFigure((x, region.bottom), (x, region.top), line))

    for tick in ticks:
        y = coord.vertical_at(tick.position)
        end_x = x
        if tick.tick_line is not None:
            end_x = x + side * tick.tick_line.length
            figures.append(LineFigure((x, y), (end_x, y), tick.tick_line.style))
        if tick.has_label:
            figures.append(tick_label(tick, (end_x, y), (side, 0.0)))
    return figures
