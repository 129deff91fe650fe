from .circular import render_circular_grid
from .horizontal import render_horizontal_grid
from .radial import render_radial_grid
from .vertical import render_vertical_grid

__all__ = [
    "render_circular_grid",
    "render_horizontal_grid",
    "render_radial_grid",
    "render_vertical_grid",
]
