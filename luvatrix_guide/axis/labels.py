from __future__ import annotations

import math

from luvatrix_guide.scene import TextFigure
from luvatrix_guide.styles import Alignment, Point
from luvatrix_guide.ticks import TickInfo


def tick_label(tick: TickInfo, anchor: Point, default_align: Alignment) -> TextFigure:
    assert tick.label is not None and tick.text
    dx, dy = tick.label.offset
    align = tick.label.align if tick.label.align is not None else default_align
    return TextFigure(
        text=tick.text,
        anchor=(anchor[0] + dx, anchor[1] + dy),
        style=tick.label,
        align=align,
    )


def direction_align(dx: float, dy: float) -> Alignment:
    """Alignment that pushes a text box away from its anchor along (dx, dy)."""
    norm = math.hypot(dx, dy)
    if norm == 0:
        return (0.0, 0.0)
    return (_snap(dx / norm), _snap(dy / norm))


def _snap(v: float) -> float:
    # Trig noise such as cos(pi/2) = 6e-17 would otherwise tilt centered labels.
    return 0.0 if abs(v) < 1e-9 else v
