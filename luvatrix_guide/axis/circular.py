from __future__ import annotations

import math
from typing import TYPE_CHECKING, Sequence

from luvatrix_guide.axis.labels import direction_align, tick_label
from luvatrix_guide.scene import ArcFigure, CircleFigure, Figure, LineFigure
from luvatrix_guide.styles import StrokeStyle
from luvatrix_guide.ticks import TickInfo

if TYPE_CHECKING:
    from luvatrix_guide.coord import PolarCoordConv


def render_circular_axis(
    ticks: Sequence[TickInfo],
    position: float,
    flip: bool,
    line: StrokeStyle | None,
    coord: "PolarCoordConv",
) -> list[Figure]:
    """Axis along the angle dimension, an arc at the radius picked by `position`."""
    center = coord.center
    radius = coord.convert_radius(position)
    # Outward unless flipped.
    side = -1.0 if flip else 1.0

    figures: list[Figure] = []
    if line is not None:
        if coord.is_full_circle:
            figures.append(CircleFigure(center, radius, line))
        else:
            figures.append(ArcFigure(center, radius, coord.start_angle, coord.end_angle, line))

    for tick in ticks:
        angle = coord.convert_angle(tick.position)
        start = coord.polar_to_offset(angle, radius)
        end = start
        if tick.tick_line is not None:
            end = coord.polar_to_offset(angle, radius + side * tick.tick_line.length)
            figures.append(LineFigure(start, end, tick.tick_line.style))
        if tick.has_label:
            align = direction_align(side * math.cos(angle), side * math.sin(angle))
            figures.append(tick_label(tick, end, align))
    return figures
