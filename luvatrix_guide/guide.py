from __future__ import annotations

from dataclasses import dataclass, replace
import math
from typing import Mapping, Sequence

from luvatrix_guide.dims import DIMS, Dim
from luvatrix_guide.errors import GuideConfigError
from luvatrix_guide.resolve import NO_STYLE, StyleMapper, StyleSpec, is_style_spec, style_spec
from luvatrix_guide.styles import LabelStyle, StrokeStyle, TickLine


@dataclass(frozen=True)
class AxisGuide:
    """Configuration of an axis and its grid.

    There can be multiple axes in one dimension.

    `position` is the ratio in the crossing dimension where the axis line
    stands: to region boundaries for rectangular coordinates and to angle or
    radius boundaries for polar ones. `flip` moves tick lines and labels to
    the other side of the axis line. The default side is bottom for
    horizontal axes, left for vertical axes, outer for circular axes and
    anticlockwise for radial axes. A None `line` draws no axis line.
    """

    dim: Dim | None = None
    variable: str | None = None
    position: float = 0.0
    flip: bool = False
    line: StrokeStyle | None = None
    tick_line: StyleSpec = NO_STYLE
    label: StyleSpec = NO_STYLE
    grid: StyleSpec = NO_STYLE
    layer: int = 0
    grid_layer: int = 0

    def __post_init__(self) -> None:
        if self.dim is not None and self.dim not in DIMS:
            raise GuideConfigError(f"dim must be one of {DIMS}, got {self.dim!r}")
        if self.variable is not None and not self.variable:
            raise GuideConfigError("variable must be a non-empty string")
        if not isinstance(self.position, (int, float)) or not math.isfinite(self.position):
            raise GuideConfigError("position must be a finite number")
        if self.position < 0.0 or self.position > 1.0:
            raise GuideConfigError("position must be within [0, 1]")
        for name in ("tick_line", "label", "grid"):
            if not is_style_spec(getattr(self, name)):
                raise GuideConfigError(f"{name} must be NoStyle, FixedStyle or MappedStyle")
        if not isinstance(self.layer, int) or not isinstance(self.grid_layer, int):
            raise GuideConfigError("layer and grid_layer must be ints")

    @classmethod
    def create(
        cls,
        *,
        dim: Dim | None = None,
        variable: str | None = None,
        position: float | None = None,
        flip: bool | None = None,
        line: StrokeStyle | None = None,
        tick_line: TickLine | None = None,
        tick_line_mapper: StyleMapper | None = None,
        label: LabelStyle | None = None,
        label_mapper: StyleMapper | None = None,
        grid: StrokeStyle | None = None,
        grid_mapper: StyleMapper | None = None,
        layer: int | None = None,
        grid_layer: int | None = None,
    ) -> "AxisGuide":
        return cls(
            dim=dim,
            variable=variable,
            position=0.0 if position is None else float(position),
            flip=bool(flip),
            line=line,
            tick_line=style_spec(tick_line, tick_line_mapper, name="tick_line"),
            label=style_spec(label, label_mapper, name="label"),
            grid=style_spec(grid, grid_mapper, name="grid"),
            layer=0 if layer is None else layer,
            grid_layer=0 if grid_layer is None else grid_layer,
        )


def resolve_guides(guides: Sequence[AxisGuide], variables_by_dim: Mapping[Dim, Sequence[str]]) -> list[AxisGuide]:
    """Fills absent dims from declaration order and absent variables from the dim's first variable."""
    out: list[AxisGuide] = []
    for i, guide in enumerate(guides):
        dim = guide.dim
        if dim is None:
            dim = "primary" if i == 0 else "cross"
        variable = guide.variable
        if variable is None:
            candidates = variables_by_dim.get(dim, ())
            if not candidates:
                raise GuideConfigError(f"no variable assigned to dim `{dim}` for axis {i}")
            variable = candidates[0]
        out.append(replace(guide, dim=dim, variable=variable))
    return out
