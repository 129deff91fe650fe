from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
import tomllib
from typing import Any, Mapping

from luvatrix_guide.coord import CoordConv, PolarCoordConv, Rect, RectCoordConv
from luvatrix_guide.dims import DIMS, Dim
from luvatrix_guide.errors import GuideConfigError
from luvatrix_guide.guide import AxisGuide, resolve_guides
from luvatrix_guide.scales import LinearScale, OrdinalScale, Scale
from luvatrix_guide.styles import RGBA, LabelStyle, StrokeStyle, TickLine

LOGGER = logging.getLogger(__name__)

DEFAULT_BACKGROUND: RGBA = (12, 16, 23, 255)


@dataclass(frozen=True)
class ChartConfig:
    width: int
    height: int
    coord: CoordConv
    scales: dict[str, Scale]
    guides: list[AxisGuide]
    background: RGBA = DEFAULT_BACKGROUND


def load_chart_config(path: str | Path) -> ChartConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"guide config not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    LOGGER.debug("loaded guide config %s", config_path)
    return parse_chart_config(raw)


def parse_chart_config(raw: Mapping[str, Any]) -> ChartConfig:
    try:
        width = int(raw["width"])
        height = int(raw["height"])
    except KeyError as exc:
        raise GuideConfigError(f"config missing required field: {exc.args[0]}") from exc
    if width <= 0 or height <= 0:
        raise GuideConfigError("width and height must be > 0")

    coord = _parse_coord(_table(raw.get("coord", {}), "coord"), width, height)

    scales: dict[str, Scale] = {}
    variables_by_dim: dict[Dim, list[str]] = {"primary": [], "cross": []}
    for name, entry in _table(raw.get("scales", {}), "scales").items():
        entry = _table(entry, f"scales.{name}")
        scales[name] = _parse_scale(name, entry)
        dim = entry.get("dim")
        if dim is not None:
            if dim not in DIMS:
                raise GuideConfigError(f"scales.{name}.dim must be one of {DIMS}")
            variables_by_dim[dim].append(name)

    axes = raw.get("axes", [])
    if not isinstance(axes, list):
        raise GuideConfigError("`axes` must be an array of tables")
    guides = resolve_guides([_parse_axis(i, _table(a, f"axes[{i}]")) for i, a in enumerate(axes)], variables_by_dim)

    background = _parse_color(raw["background"], "background") if "background" in raw else DEFAULT_BACKGROUND
    return ChartConfig(width=width, height=height, coord=coord, scales=scales, guides=guides, background=background)


def _table(value: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise GuideConfigError(f"`{name}` must be a table")
    return value


def _parse_coord(entry: Mapping[str, Any], width: int, height: int) -> CoordConv:
    left, top, right, bottom = _parse_padding(entry.get("padding", 0))
    region = Rect(left=left, top=top, width=width - left - right, height=height - top - bottom)
    transposed = bool(entry.get("transposed", False))
    kind = entry.get("type", "rect")
    if kind == "rect":
        return RectCoordConv(
            region,
            transposed=transposed,
            horizontal_range=tuple(entry.get("horizontal_range", (0.0, 1.0))),
            vertical_range=tuple(entry.get("vertical_range", (0.0, 1.0))),
        )
    if kind == "polar":
        kwargs = {k: float(entry[k]) for k in ("start_angle", "end_angle", "start_radius", "end_radius") if k in entry}
        return PolarCoordConv(region, transposed=transposed, **kwargs)
    raise GuideConfigError(f"unknown coord type: {kind!r}")


def _parse_padding(value: Any) -> tuple[float, float, float, float]:
    if isinstance(value, (int, float)):
        p = float(value)
        return (p, p, p, p)
    if isinstance(value, list) and len(value) == 4:
        return tuple(float(v) for v in value)  # type: ignore[return-value]
    raise GuideConfigError("coord.padding must be a number or [left, top, right, bottom]")


def _parse_scale(name: str, entry: Mapping[str, Any]) -> Scale:
    kind = entry.get("type", "linear")
    if kind == "linear":
        try:
            vmin = float(entry["min"])
            vmax = float(entry["max"])
        except KeyError as exc:
            raise GuideConfigError(f"scales.{name} missing required field: {exc.args[0]}") from exc
        return LinearScale(
            vmin,
            vmax,
            tick_count=int(entry.get("tick_count", 5)),
            ticks=entry.get("ticks"),
            nice=bool(entry.get("nice", False)),
        )
    if kind == "ordinal":
        values = entry.get("values")
        if not isinstance(values, list):
            raise GuideConfigError(f"scales.{name}.values must be an array")
        return OrdinalScale(values, ticks=entry.get("ticks"), align=float(entry.get("align", 0.5)))
    raise GuideConfigError(f"unknown scale type for `{name}`: {kind!r}")


def _parse_axis(index: int, entry: Mapping[str, Any]) -> AxisGuide:
    line = _parse_stroke(entry["line"], f"axes[{index}].line") if "line" in entry else None
    grid = _parse_stroke(entry["grid"], f"axes[{index}].grid") if "grid" in entry else None
    tick_line = None
    if "tick_line" in entry:
        tl = _table(entry["tick_line"], f"axes[{index}].tick_line")
        tick_line = TickLine(style=_parse_stroke(tl, f"axes[{index}].tick_line"), length=float(tl.get("length", 5.0)))
    label = None
    if "label" in entry:
        lb = _table(entry["label"], f"axes[{index}].label")
        kwargs: dict[str, Any] = {}
        if "color" in lb:
            kwargs["color"] = _parse_color(lb["color"], f"axes[{index}].label.color")
        if "font_size_px" in lb:
            kwargs["font_size_px"] = float(lb["font_size_px"])
        if "font_family" in lb:
            kwargs["font_family"] = str(lb["font_family"])
        if "offset" in lb:
            kwargs["offset"] = tuple(float(v) for v in lb["offset"])
        if "rotate_deg" in lb:
            kwargs["rotate_deg"] = int(lb["rotate_deg"])
        if "align" in lb:
            kwargs["align"] = tuple(float(v) for v in lb["align"])
        label = LabelStyle(**kwargs)
    return AxisGuide.create(
        dim=entry.get("dim"),
        variable=entry.get("variable"),
        position=entry.get("position"),
        flip=entry.get("flip"),
        line=line,
        tick_line=tick_line,
        label=label,
        grid=grid,
        layer=entry.get("layer"),
        grid_layer=entry.get("grid_layer"),
    )


def _parse_stroke(value: Any, name: str) -> StrokeStyle:
    entry = _table(value, name)
    kwargs: dict[str, Any] = {}
    if "color" in entry:
        kwargs["color"] = _parse_color(entry["color"], f"{name}.color")
    if "width" in entry:
        kwargs["width"] = float(entry["width"])
    if "dash" in entry:
        kwargs["dash"] = tuple(float(v) for v in entry["dash"])
    return StrokeStyle(**kwargs)


def _parse_color(value: Any, name: str) -> RGBA:
    if not isinstance(value, list) or len(value) not in (3, 4):
        raise GuideConfigError(f"{name} must be [r, g, b] or [r, g, b, a]")
    if len(value) == 3:
        r, g, b = value
        return (int(r), int(g), int(b), 255)
    r, g, b, a = value
    return (int(r), int(g), int(b), int(a))
