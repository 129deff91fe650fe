from __future__ import annotations

import math
from typing import TYPE_CHECKING, Sequence

from luvatrix_guide.axis.labels import direction_align, tick_label
from luvatrix_guide.scene import Figure, LineFigure
from luvatrix_guide.styles import StrokeStyle
from luvatrix_guide.ticks import TickInfo

if TYPE_CHECKING:
    from luvatrix_guide.coord import PolarCoordConv


def render_radial_axis(
    ticks: Sequence[TickInfo],
    position: float,
    flip: bool,
    line: StrokeStyle | None,
    coord: "PolarCoordConv",
) -> list[Figure]:
    """Axis along the radius dimension, a ray at the angle picked by `position`."""
    angle = coord.convert_angle(position)
    # Unit tangent towards decreasing angle, i.e. anticlockwise on the y-down canvas.
    tx, ty = math.sin(angle), -math.cos(angle)
    if flip:
        tx, ty = -tx, -ty

    figures: list[Figure] = []
    if line is not None:
        figures.append(
            LineFigure(
                coord.polar_to_offset(angle, coord.start_radius),
                coord.polar_to_offset(angle, coord.end_radius),
                line,
            )
        )

    for tick in ticks:
        start = coord.polar_to_offset(angle, coord.convert_radius(tick.position))
        end = start
        if tick.tick_line is not None:
            length = tick.tick_line.length
            end = (start[0] + tx * length, start[1] + ty * length)
            figures.append(LineFigure(start, end, tick.tick_line.style))
        if tick.has_label:
            figures.append(tick_label(tick, end, direction_align(tx, ty)))
    return figures
