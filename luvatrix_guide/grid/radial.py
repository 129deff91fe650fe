from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from luvatrix_guide.scene import ArcFigure, CircleFigure, Figure
from luvatrix_guide.ticks import TickInfo

if TYPE_CHECKING:
    from luvatrix_guide.coord import PolarCoordConv


def render_radial_grid(ticks: Sequence[TickInfo], coord: "PolarCoordConv") -> list[Figure]:
    """Grid for a radial axis: rings over the full angle range at each tick radius."""
    center = coord.center
    figures: list[Figure] = []
    for tick in ticks:
        if tick.grid is None:
            continue
        radius = coord.convert_radius(tick.position)
        if coord.is_full_circle:
            figures.append(CircleFigure(center, radius, tick.grid))
        else:
            figures.append(ArcFigure(center, radius, coord.start_angle, coord.end_angle, tick.grid))
    return figures
