from .canvas import new_canvas
from .compositor import composite, paint_figure, save_png
from .draw_lines import arc_points, dash_polyline, draw_polyline
from .draw_text import draw_label

__all__ = [
    "arc_points",
    "composite",
    "dash_polyline",
    "draw_label",
    "draw_polyline",
    "new_canvas",
    "paint_figure",
    "save_png",
]
