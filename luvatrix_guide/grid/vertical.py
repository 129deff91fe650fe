from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from luvatrix_guide.scene import Figure, LineFigure
from luvatrix_guide.ticks import TickInfo

if TYPE_CHECKING:
    from luvatrix_guide.coord import RectCoordConv


def render_vertical_grid(ticks: Sequence[TickInfo], coord: "RectCoordConv") -> list[Figure]:
    region = coord.region
    figures: list[Figure] = []
    for tick in ticks:
        if tick.grid is None:
            continue
        y = coord.vertical_at(tick.position)
        figures.append(LineFigure((region.left, y), (region.right, y), tick.grid))
    return figures
