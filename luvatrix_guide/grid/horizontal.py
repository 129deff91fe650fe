from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from luvatrix_guide.scene import Figure, LineFigure
from luvatrix_guide.ticks import TickInfo

if TYPE_CHECKING:
    from luvatrix_guide.coord import RectCoordConv


def render_horizontal_grid(ticks: Sequence[TickInfo], coord: "RectCoordConv") -> list[Figure]:
    """Grid for a horizontal axis: one vertical line per tick across the whole region."""
    region = coord.region
    figures: list[Figure] = []
    for tick in ticks:
        if tick.grid is None:
            continue
        x = coord.horizontal_at(tick.position)
        figures.append(LineFigure((x, region.bottom), (x, region.top), tick.grid))
    return figures
