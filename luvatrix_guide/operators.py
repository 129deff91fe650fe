from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any

from luvatrix_guide.coord import CoordConv
from luvatrix_guide.errors import GuideConfigError
from luvatrix_guide.guide import AxisGuide
from luvatrix_guide.render import render_axis, render_grid
from luvatrix_guide.scales import ScaleTable
from luvatrix_guide.scene import AxisScene, GridScene
from luvatrix_guide.ticks import TickInfo, build_tick_infos

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class GuideScenes:
    axis: AxisScene
    grid: GridScene


@dataclass
class _StageCache:
    key: tuple[Any, ...] | None = None
    # Scale objects are compared by identity: a changed scale is a new snapshot.
    scale: Any = None
    value: Any = None
    evaluations: int = 0

    def invalidate(self) -> None:
        self.key = None
        self.scale = None
        self.value = None


@dataclass
class GuideOperators:
    """Tick building plus axis and grid rendering for one guide, re-run only when inputs change.

    The guide must already carry its `dim` and `variable` (see `resolve_guides`).
    Each recomputation produces new scenes; earlier ones are never touched.
    """

    guide: AxisGuide
    _ticks: _StageCache = field(default_factory=_StageCache)
    _axis: _StageCache = field(default_factory=_StageCache)
    _grid: _StageCache = field(default_factory=_StageCache)
    _ticks_version: int = 0

    def __post_init__(self) -> None:
        self._check_resolved(self.guide)

    @staticmethod
    def _check_resolved(guide: AxisGuide) -> None:
        if guide.dim is None or guide.variable is None:
            raise GuideConfigError("guide dim and variable must be resolved before rendering")

    @property
    def evaluations(self) -> dict[str, int]:
        return {
            "ticks": self._ticks.evaluations,
            "axis": self._axis.evaluations,
            "grid": self._grid.evaluations,
        }

    @property
    def ticks(self) -> list[TickInfo] | None:
        return self._ticks.value

    def set_guide(self, guide: AxisGuide) -> None:
        self._check_resolved(guide)
        self.guide = guide

    def invalidate(self) -> None:
        self._ticks.invalidate()
        self._axis.invalidate()
        self._grid.invalidate()

    def update(self, scales: ScaleTable, coord: CoordConv) -> GuideScenes:
        ticks = self._update_ticks(scales)
        guide = self.guide
        assert guide.dim is not None

        axis_key = (self._ticks_version, coord, guide.dim, guide.position, guide.flip, guide.line, guide.layer)
        if self._axis.key != axis_key or self._axis.value is None:
            self._axis.value = render_axis(
                coord, guide.dim, guide.position, guide.flip, guide.line, ticks, layer=guide.layer
            )
            self._axis.key = axis_key
            self._axis.evaluations += 1

        grid_key = (self._ticks_version, coord, guide.dim, guide.grid_layer)
        if self._grid.key != grid_key or self._grid.value is None:
            self._grid.value = render_grid(coord, guide.dim, ticks, layer=guide.grid_layer)
            self._grid.key = grid_key
            self._grid.evaluations += 1

        return GuideScenes(axis=self._axis.value, grid=self._grid.value)

    def _update_ticks(self, scales: ScaleTable) -> list[TickInfo]:
        guide = self.guide
        assert guide.variable is not None
        scale = scales.get(guide.variable)
        key = (guide.variable, guide.tick_line, guide.label, guide.grid)
        cache = self._ticks
        if cache.value is not None and cache.key == key and cache.scale is scale and scale is not None:
            LOGGER.debug("ticks for `%s` unchanged", guide.variable)
            return cache.value
        ticks = build_tick_infos(guide.variable, scales, guide.tick_line, guide.label, guide.grid)
        cache.key = key
        cache.scale = scale
        cache.value = ticks
        cache.evaluations += 1
        self._ticks_version += 1
        return ticks


def render_guides(
    guides: list[AxisGuide],
    scales: ScaleTable,
    coord: CoordConv,
) -> list[GuideScenes]:
    """One-shot rendering of resolved guides without caching."""
    return [GuideOperators(guide).update(scales, coord) for guide in guides]
