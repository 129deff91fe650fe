from luvatrix_guide.coord import CoordConv, PolarCoordConv, Rect, RectCoordConv
from luvatrix_guide.errors import GuideConfigError, GuideError, MissingScaleError
from luvatrix_guide.guide import AxisGuide, resolve_guides
from luvatrix_guide.operators import GuideOperators, GuideScenes, render_guides
from luvatrix_guide.render import render_axis, render_grid
from luvatrix_guide.resolve import FixedStyle, MappedStyle, NoStyle, StyleSpec, resolve_style, style_spec
from luvatrix_guide.scales import LinearScale, OrdinalScale, Scale, ScaleTable, TimeScale
from luvatrix_guide.scene import (
    ArcFigure,
    AxisScene,
    CircleFigure,
    Figure,
    GridScene,
    IntrinsicLayers,
    LineFigure,
    Scene,
    TextFigure,
)
from luvatrix_guide.styles import LabelStyle, StrokeStyle, TickLine
from luvatrix_guide.ticks import TickInfo, build_tick_infos

__all__ = [
    "ArcFigure",
    "AxisGuide",
    "AxisScene",
    "CircleFigure",
    "CoordConv",
    "Figure",
    "FixedStyle",
    "GridScene",
    "GuideConfigError",
    "GuideError",
    "GuideOperators",
    "GuideScenes",
    "IntrinsicLayers",
    "LabelStyle",
    "LineFigure",
    "LinearScale",
    "MappedStyle",
    "MissingScaleError",
    "NoStyle",
    "OrdinalScale",
    "PolarCoordConv",
    "Rect",
    "RectCoordConv",
    "Scale",
    "ScaleTable",
    "Scene",
    "StrokeStyle",
    "StyleSpec",
    "TextFigure",
    "TickInfo",
    "TickLine",
    "TimeScale",
    "build_tick_infos",
    "render_axis",
    "render_grid",
    "render_guides",
    "resolve_guides",
    "resolve_style",
    "style_spec",
]
