from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Union

from luvatrix_guide.styles import Alignment, LabelStyle, Point, StrokeStyle


class IntrinsicLayers:
    background = 0
    grid = 1
    mark = 2
    axis = 3
    label = 4
    annotation = 5
    tooltip = 6
    crosshair = 7


@dataclass(frozen=True)
class LineFigure:
    start: Point
    end: Point
    style: StrokeStyle


@dataclass(frozen=True)
class ArcFigure:
    """Arc around `center`; angles are radians, clockwise on the y-down canvas."""

    center: Point
    radius: float
    start_angle: float
    end_angle: float
    style: StrokeStyle


@dataclass(frozen=True)
class CircleFigure:
    center: Point
    radius: float
    style: StrokeStyle


@dataclass(frozen=True)
class TextFigure:
    text: str
    anchor: Point
    style: LabelStyle
    align: Alignment


Figure = Union[LineFigure, ArcFigure, CircleFigure, TextFigure]


@dataclass(frozen=True)
class Scene:
    """An ordered bundle of figures produced by one renderer for one render pass."""

    layer: int = 0
    figures: tuple[Figure, ...] = field(default_factory=tuple)

    intrinsic_layer = IntrinsicLayers.background

    @property
    def sort_key(self) -> tuple[int, int]:
        return (self.intrinsic_layer, self.layer)


@dataclass(frozen=True)
class AxisScene(Scene):
    intrinsic_layer = IntrinsicLayers.axis


@dataclass(frozen=True)
class GridScene(Scene):
    intrinsic_layer = IntrinsicLayers.grid


def sorted_scenes(scenes: Iterable[Scene]) -> list[Scene]:
    return sorted(scenes, key=lambda s: s.sort_key)
