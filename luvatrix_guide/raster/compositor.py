from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Iterable

import numpy as np
from PIL import Image

from luvatrix_guide.raster.canvas import new_canvas
from luvatrix_guide.raster.draw_lines import arc_points, dash_polyline, draw_polyline
from luvatrix_guide.raster.draw_text import draw_label
from luvatrix_guide.scene import ArcFigure, CircleFigure, Figure, LineFigure, Scene, TextFigure, sorted_scenes
from luvatrix_guide.styles import RGBA, Point, StrokeStyle

LOGGER = logging.getLogger(__name__)


def composite(
    scenes: Iterable[Scene],
    width: int,
    height: int,
    background: RGBA = (12, 16, 23, 255),
) -> np.ndarray:
    """Paints scenes in (intrinsic layer, layer) order onto a new (H, W, 4) uint8 canvas."""
    canvas = new_canvas(width, height, color=background)
    for scene in sorted_scenes(scenes):
        for figure in scene.figures:
            paint_figure(canvas, figure)
    return canvas


def paint_figure(canvas: np.ndarray, figure: Figure) -> None:
    if isinstance(figure, LineFigure):
        _stroke(canvas, [figure.start, figure.end], figure.style)
    elif isinstance(figure, ArcFigure):
        _stroke(canvas, arc_points(figure.center, figure.radius, figure.start_angle, figure.end_angle), figure.style)
    elif isinstance(figure, CircleFigure):
        _stroke(canvas, arc_points(figure.center, figure.radius, 0.0, 2.0 * math.pi), figure.style)
    elif isinstance(figure, TextFigure):
        draw_label(canvas, figure.text, figure.anchor, figure.style, figure.align)
    else:
        raise TypeError(f"unsupported figure: {type(figure).__name__}")


def _stroke(canvas: np.ndarray, points: list[Point], style: StrokeStyle) -> None:
    width = max(1, int(round(style.width)))
    runs = [points] if style.dash is None else dash_polyline(points, style.dash)
    for run in runs:
        draw_polyline(canvas, run, style.color, width=width)


def save_png(rgba: np.ndarray, path: str | Path) -> Path:
    if rgba.dtype != np.uint8 or rgba.ndim != 3 or rgba.shape[2] != 4:
        raise ValueError("rgba must be a uint8 array of shape (H, W, 4)")
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(np.ascontiguousarray(rgba)).save(out)
    LOGGER.info("wrote %dx%d guide image to %s", rgba.shape[1], rgba.shape[0], out)
    return out
