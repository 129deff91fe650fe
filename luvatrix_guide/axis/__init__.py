from .circular import render_circular_axis
from .horizontal import render_horizontal_axis
from .radial import render_radial_axis
from .vertical import render_vertical_axis

__all__ = [
    "render_circular_axis",
    "render_horizontal_axis",
    "render_radial_axis",
    "render_vertical_axis",
]
