from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from luvatrix_guide.axis.labels import tick_label
from luvatrix_guide.scene import Figure, LineFigure
from luvatrix_guide.styles import StrokeStyle
from luvatrix_guide.ticks import TickInfo

if TYPE_CHECKING:
    from luvatrix_guide.coord import RectCoordConv


def render_horizontal_axis(
    ticks: Sequence[TickInfo],
    position: float,
    flip: bool,
    line: StrokeStyle | None,
    coord: "RectCoordConv",
) -> list[Figure]:
    region = coord.region
    y = region.bottom - region.height * position
    # Ticks and labels hang below the line unless flipped.
    side = -1.0 if flip else 1.0

    figures: list[Figure] = []
    if line is not None:
        figures.append(LineFigure((region.left, y), (region.right, y), line))

    for tick in ticks:
        x = coord.horizontal_at(tick.position)
        end_y = y
        if tick.tick_line is not None:
            end_y = y + side * tick.tick_line.length
            figures.append(LineFigure((x, y), (x, end_y), tick.tick_line.style))
        if tick.has_label:
            figures.append(tick_label(tick, (x, end_y), (0.0, side)))
    return figures
