from __future__ import annotations

from dataclasses import dataclass, replace
import logging
import math

from luvatrix_guide.errors import GuideError, MissingScaleError
from luvatrix_guide.resolve import NO_STYLE, StyleSpec, resolve_style
from luvatrix_guide.scales import ScaleTable
from luvatrix_guide.styles import LabelStyle, StrokeStyle, TickLine

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickInfo:
    """Information of a single tick, shared by the axis and grid renderers."""

    position: float
    text: str | None
    tick_line: TickLine | None = None
    label: LabelStyle | None = None
    grid: StrokeStyle | None = None

    @property
    def has_label(self) -> bool:
        return self.label is not None and self.text is not None and len(self.text) > 0


def build_tick_infos(
    variable: str,
    scales: ScaleTable,
    tick_line: StyleSpec = NO_STYLE,
    label: StyleSpec = NO_STYLE,
    grid: StyleSpec = NO_STYLE,
) -> list[TickInfo]:
    try:
        scale = scales[variable]
    except KeyError:
        raise MissingScaleError(variable) from None

    bare: list[TickInfo] = []
    for value in scale.ticks:
        position = float(scale.normalize(scale.convert(value)))
        if not math.isfinite(position):
            raise GuideError(f"tick {value!r} of `{variable}` has a non-finite position ({position})")
        if position < 0.0 or position > 1.0:
            LOGGER.debug("tick %r of `%s` lies outside the scale range (position=%s)", value, variable, position)
        bare.append(TickInfo(position=position, text=scale.format(value)))

    total = len(bare)
    ticks = [
        replace(
            tick,
            tick_line=resolve_style(tick_line, tick.text, i, total),
            label=resolve_style(label, tick.text, i, total),
            grid=resolve_style(grid, tick.text, i, total),
        )
        for i, tick in enumerate(bare)
    ]
    LOGGER.debug("built %d ticks for `%s`", total, variable)
    return ticks
