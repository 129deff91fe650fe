from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from luvatrix_guide.scene import Figure, LineFigure
from luvatrix_guide.ticks import TickInfo

if TYPE_CHECKING:
    from luvatrix_guide.coord import PolarCoordConv


def render_circular_grid(ticks: Sequence[TickInfo], coord: "PolarCoordConv") -> list[Figure]:
    """Grid for a circular axis: spokes over the full radius range at each tick angle."""
    figures: list[Figure] = []
    for tick in ticks:
        if tick.grid is None:
            continue
        angle = coord.convert_angle(tick.position)
        figures.append(
            LineFigure(
                coord.polar_to_offset(angle, coord.start_radius),
                coord.polar_to_offset(angle, coord.end_radius),
                tick.grid,
            )
        )
    return figures
