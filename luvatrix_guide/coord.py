from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import math
from typing import TYPE_CHECKING, Sequence

from luvatrix_guide.axis import render_circular_axis, render_horizontal_axis, render_radial_axis, render_vertical_axis
from luvatrix_guide.dims import CanvasDim, Dim
from luvatrix_guide.errors import GuideConfigError
from luvatrix_guide.grid import render_circular_grid, render_horizontal_grid, render_radial_grid, render_vertical_grid
from luvatrix_guide.styles import Point, StrokeStyle

if TYPE_CHECKING:
    from luvatrix_guide.scene import Figure
    from luvatrix_guide.ticks import TickInfo


FULL_TURN = 2.0 * math.pi
_ANGLE_EPS = 1e-9


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise GuideConfigError("region width/height must be > 0")

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center(self) -> Point:
        return (self.left + self.width / 2.0, self.top + self.height / 2.0)


def _check_finite_range(value: tuple[float, float], name: str) -> tuple[float, float]:
    lo, hi = float(value[0]), float(value[1])
    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise GuideConfigError(f"{name} must be finite")
    return (lo, hi)


class CoordConv(ABC):
    """Converts normalized, dimension-relative positions into canvas geometry."""

    def __init__(self, region: Rect, transposed: bool = False) -> None:
        self.region = region
        self.transposed = transposed

    def canvas_dim(self, dim: Dim) -> CanvasDim:
        """The canvas axis a logical dimension currently maps to."""
        if self.transposed:
            return "vertical" if dim == "primary" else "horizontal"
        return "horizontal" if dim == "primary" else "vertical"

    @abstractmethod
    def convert(self, point: Point) -> Point:
        """Maps a normalized (primary, cross) pair to a canvas point."""
        raise NotImplementedError

    @abstractmethod
    def render_axis(
        self,
        dim: Dim,
        position: float,
        flip: bool,
        line: StrokeStyle | None,
        ticks: Sequence["TickInfo"],
    ) -> list["Figure"]:
        raise NotImplementedError

    @abstractmethod
    def render_grid(self, dim: Dim, ticks: Sequence["TickInfo"]) -> list["Figure"]:
        raise NotImplementedError

    def _canvas_ratios(self, point: Point) -> tuple[float, float]:
        primary, cross = point
        if self.transposed:
            return (cross, primary)
        return (primary, cross)


class RectCoordConv(CoordConv):
    def __init__(
        self,
        region: Rect,
        transposed: bool = False,
        horizontal_range: tuple[float, float] = (0.0, 1.0),
        vertical_range: tuple[float, float] = (0.0, 1.0),
    ) -> None:
        super().__init__(region, transposed)
        self.horizontal_range = _check_finite_range(horizontal_range, "horizontal_range")
        self.vertical_range = _check_finite_range(vertical_range, "vertical_range")

    def horizontal_at(self, ratio: float) -> float:
        lo, hi = self.horizontal_range
        return self.region.left + self.region.width * (lo + ratio * (hi - lo))

    def vertical_at(self, ratio: float) -> float:
        lo, hi = self.vertical_range
        return self.region.bottom - self.region.height * (lo + ratio * (hi - lo))

    def convert(self, point: Point) -> Point:
        h, v = self._canvas_ratios(point)
        return (self.horizontal_at(h), self.vertical_at(v))

    def render_axis(self, dim, position, flip, line, ticks):
        if self.canvas_dim(dim) == "horizontal":
            return render_horizontal_axis(ticks, position, flip, line, self)
        return render_vertical_axis(ticks, position, flip, line, self)

    def render_grid(self, dim, ticks):
        if self.canvas_dim(dim) == "horizontal":
            return render_horizontal_grid(ticks, self)
        return render_vertical_grid(ticks, self)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, RectCoordConv)
            and self.region == other.region
            and self.transposed == other.transposed
            and self.horizontal_range == other.horizontal_range
            and self.vertical_range == other.vertical_range
        )

    def __hash__(self) -> int:
        return hash(("rect", self.region, self.transposed, self.horizontal_range, self.vertical_range))


class PolarCoordConv(CoordConv):
    """Polar coordinates; the horizontal canvas dim is the angle, the vertical one the radius.

    Radii are ratios of half the shorter region side. Angles are radians and
    grow clockwise on the y-down canvas.
    """

    def __init__(
        self,
        region: Rect,
        transposed: bool = False,
        start_angle: float = -math.pi / 2,
        end_angle: float = 3 * math.pi / 2,
        start_radius: float = 0.0,
        end_radius: float = 1.0,
    ) -> None:
        super().__init__(region, transposed)
        self.start_angle, self.end_angle = _check_finite_range((start_angle, end_angle), "angle range")
        if self.start_angle == self.end_angle:
            raise GuideConfigError("angle range must not be empty")
        start_radius, end_radius = _check_finite_range((start_radius, end_radius), "radius range")
        if start_radius < 0 or end_radius < 0:
            raise GuideConfigError("radius ratios must be >= 0")
        max_radius = min(region.width, region.height) / 2.0
        self.start_radius = start_radius * max_radius
        self.end_radius = end_radius * max_radius

    @property
    def center(self) -> Point:
        return self.region.center

    @property
    def angle_range(self) -> tuple[float, float]:
        return (self.start_angle, self.end_angle)

    @property
    def radius_range(self) -> tuple[float, float]:
        return (self.start_radius, self.end_radius)

    @property
    def is_full_circle(self) -> bool:
        return abs(self.end_angle - self.start_angle) >= FULL_TURN - _ANGLE_EPS

    def convert_angle(self, ratio: float) -> float:
        return self.start_angle + (self.end_angle - self.start_angle) * ratio

    def convert_radius(self, ratio: float) -> float:
        return self.start_radius + (self.end_radius - self.start_radius) * ratio

    def polar_to_offset(self, angle: float, radius: float) -> Point:
        cx, cy = self.center
        return (cx + math.cos(angle) * radius, cy + math.sin(angle) * radius)

    def convert(self, point: Point) -> Point:
        a, r = self._canvas_ratios(point)
        return self.polar_to_offset(self.convert_angle(a), self.convert_radius(r))

    def render_axis(self, dim, position, flip, line, ticks):
        if self.canvas_dim(dim) == "horizontal":
            return render_circular_axis(ticks, position, flip, line, self)
        return render_radial_axis(ticks, position, flip, line, self)

    def render_grid(self, dim, ticks):
        if self.canvas_dim(dim) == "horizontal":
            return render_circular_grid(ticks, self)
        return render_radial_grid(ticks, self)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, PolarCoordConv)
            and self.region == other.region
            and self.transposed == other.transposed
            and self.angle_range == other.angle_range
            and self.radius_range == other.radius_range
        )

    def __hash__(self) -> int:
        return hash(("polar", self.region, self.transposed, self.angle_range, self.radius_range))
