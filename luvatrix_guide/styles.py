from __future__ import annotations

from dataclasses import dataclass, field
import math

from luvatrix_guide.errors import GuideConfigError


RGBA = tuple[int, int, int, int]
Point = tuple[float, float]

# (ax, ay) in [-1, 1]: the side of the anchor a text box extends to.
# (0, 1) centers the box below the anchor, (-1, 0) puts it to the left.
Alignment = tuple[float, float]

DEFAULT_STROKE_COLOR: RGBA = (124, 138, 156, 255)
DEFAULT_TEXT_COLOR: RGBA = (208, 218, 232, 255)
DEFAULT_FONT_FAMILY = "Comic Mono"
DEFAULT_FONT_SIZE_PX = 10.0
DEFAULT_TICK_LENGTH = 5.0


def _check_color(color: RGBA, name: str) -> None:
    if len(color) != 4 or any(int(c) != c or c < 0 or c > 255 for c in color):
        raise GuideConfigError(f"{name} must be an RGBA tuple of ints in [0, 255]")


@dataclass(frozen=True)
class StrokeStyle:
    color: RGBA = DEFAULT_STROKE_COLOR
    width: float = 1.0
    dash: tuple[float, ...] | None = None

    def __post_init__(self) -> None:
        _check_color(self.color, "stroke color")
        if not math.isfinite(self.width) or self.width <= 0:
            raise GuideConfigError("stroke width must be > 0")
        if self.dash is not None and (not self.dash or any(d <= 0 for d in self.dash)):
            raise GuideConfigError("dash lengths must be > 0")


@dataclass(frozen=True)
class LabelStyle:
    color: RGBA = DEFAULT_TEXT_COLOR
    font_size_px: float = DEFAULT_FONT_SIZE_PX
    font_family: str = DEFAULT_FONT_FAMILY
    offset: Point = (0.0, 0.0)
    # Quarter turns only; the raster compositor rotates glyph masks by 90 degree steps.
    rotate_deg: int = 0
    align: Alignment | None = None

    def __post_init__(self) -> None:
        _check_color(self.color, "label color")
        if not math.isfinite(self.font_size_px) or self.font_size_px <= 0:
            raise GuideConfigError("font_size_px must be > 0")
        if self.rotate_deg % 90 != 0:
            raise GuideConfigError("rotate_deg must be a multiple of 90")
        if self.align is not None and any(abs(a) > 1.0 for a in self.align):
            raise GuideConfigError("label align components must be within [-1, 1]")


@dataclass(frozen=True)
class TickLine:
    """Style and length of a single axis tick line."""

    style: StrokeStyle = field(default_factory=StrokeStyle)
    length: float = DEFAULT_TICK_LENGTH

    def __post_init__(self) -> None:
        if not math.isfinite(self.length) or self.length < 0:
            raise GuideConfigError("tick line length must be >= 0")
