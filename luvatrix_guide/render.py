from __future__ import annotations

import logging
from typing import Sequence

from luvatrix_guide.coord import CoordConv
from luvatrix_guide.dims import Dim
from luvatrix_guide.scene import AxisScene, GridScene
from luvatrix_guide.styles import StrokeStyle
from luvatrix_guide.ticks import TickInfo

LOGGER = logging.getLogger(__name__)


def render_axis(
    coord: CoordConv,
    dim: Dim,
    position: float,
    flip: bool,
    line: StrokeStyle | None,
    ticks: Sequence[TickInfo],
    *,
    layer: int = 0,
) -> AxisScene:
    figures = coord.render_axis(dim, position, flip, line, ticks)
    LOGGER.debug("axis on %s canvas dim: %d figures", coord.canvas_dim(dim), len(figures))
    return AxisScene(layer=layer, figures=tuple(figures))


def render_grid(coord: CoordConv, dim: Dim, ticks: Sequence[TickInfo], *, layer: int = 0) -> GridScene:
    figures = coord.render_grid(dim, ticks)
    LOGGER.debug("grid on %s canvas dim: %d figures", coord.canvas_dim(dim), len(figures))
    return GridScene(layer=layer, figures=tuple(figures))
