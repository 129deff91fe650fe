from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Hashable, Mapping, Protocol, Sequence

import numpy as np

from luvatrix_guide.errors import GuideConfigError


class Scale(Protocol):
    """Maps domain values to a range and back to a 0..1 position, and enumerates tick values."""

    @property
    def ticks(self) -> Sequence[Any]:
        ...

    def convert(self, value: Any) -> float:
        ...

    def normalize(self, scaled: float) -> float:
        ...

    def format(self, value: Any) -> str | None:
        ...


ScaleTable = Mapping[str, Scale]
Formatter = Callable[[Any], "str | None"]


def _check_range(range_: tuple[float, float]) -> tuple[float, float]:
    lo, hi = float(range_[0]), float(range_[1])
    if not (np.isfinite(lo) and np.isfinite(hi)):
        raise GuideConfigError("scale range must be finite")
    if lo < 0.0 or hi > 1.0 or lo >= hi:
        raise GuideConfigError("scale range must satisfy 0 <= lo < hi <= 1")
    return (lo, hi)


class LinearScale:
    """Continuous scale; `convert` yields the position ratio directly, so `normalize` is the identity."""

    def __init__(
        self,
        min: float,
        max: float,
        *,
        tick_count: int = 5,
        ticks: Sequence[float] | None = None,
        range: tuple[float, float] = (0.0, 1.0),
        formatter: Formatter | None = None,
        nice: bool = False,
    ) -> None:
        vmin = float(min)
        vmax = float(max)
        if not (np.isfinite(vmin) and np.isfinite(vmax)):
            raise GuideConfigError("linear scale bounds must be finite")
        if vmin > vmax:
            raise GuideConfigError("linear scale min must be <= max")
        if tick_count <= 0:
            raise GuideConfigError("tick_count must be > 0")
        self.range = _check_range(range)
        self._formatter = formatter
        if ticks is not None:
            tick_arr = np.asarray(list(ticks), dtype=np.float64)
        else:
            tick_arr = generate_nice_ticks(vmin, vmax, tick_count)
        if nice and tick_arr.size > 0:
            vmin = min(vmin, float(tick_arr[0]))
            vmax = max(vmax, float(tick_arr[-1]))
        if vmin == vmax:
            vmin -= 1.0
            vmax += 1.0
        self.min = vmin
        self.max = vmax
        self._ticks = ticks_within_range(tick_arr, vmin=vmin, vmax=vmax)
        self._step = float(abs(self._ticks[1] - self._ticks[0])) if self._ticks.size > 1 else None

    @property
    def ticks(self) -> list[float]:
        return [float(v) for v in self._ticks.tolist()]

    def convert(self, value: float) -> float:
        lo, hi = self.range
        ratio = (float(value) - self.min) / (self.max - self.min)
        return lo + ratio * (hi - lo)

    def normalize(self, scaled: float) -> float:
        return scaled

    def format(self, value: float) -> str | None:
        if self._formatter is not None:
            return self._formatter(value)
        return format_tick(float(value), step=self._step)


class OrdinalScale:
    """Discrete scale; `convert` yields the band index and `normalize` places it inside the band."""

    def __init__(
        self,
        values: Sequence[Hashable],
        *,
        ticks: Sequence[Hashable] | None = None,
        align: float = 0.5,
        range: tuple[float, float] = (0.0, 1.0),
        formatter: Formatter | None = None,
    ) -> None:
        if not values:
            raise GuideConfigError("ordinal scale needs at least one value")
        if len(set(values)) != len(values):
            raise GuideConfigError("ordinal scale values must be unique")
        if align < 0.0 or align > 1.0:
            raise GuideConfigError("align must be within [0, 1]")
        self.values = list(values)
        self.align = float(align)
        self.range = _check_range(range)
        self._formatter = formatter
        self._index = {v: i for i, v in enumerate(self.values)}
        self._ticks = list(ticks) if ticks is not None else list(self.values)
        unknown = [t for t in self._ticks if t not in self._index]
        if unknown:
            raise GuideConfigError(f"ordinal ticks not in values: {unknown!r}")

    @property
    def ticks(self) -> list[Hashable]:
        return list(self._ticks)

    def convert(self, value: Hashable) -> float:
        try:
            return float(self._index[value])
        except KeyError as exc:
            raise GuideConfigError(f"value {value!r} is not in the ordinal scale") from exc

    def normalize(self, scaled: float) -> float:
        lo, hi = self.range
        count = len(self.values)
        if count == 1:
            ratio = 0.5
        else:
            ratio = (scaled + self.align) / count
        return lo + ratio * (hi - lo)

    def format(self, value: Hashable) -> str | None:
        if self._formatter is not None:
            return self._formatter(value)
        return str(value)


class TimeScale:
    """Continuous scale over datetimes with evenly spaced ticks."""

    def __init__(
        self,
        min: datetime,
        max: datetime,
        *,
        tick_count: int = 5,
        ticks: Sequence[datetime] | None = None,
        range: tuple[float, float] = (0.0, 1.0),
        fmt: str = "%Y-%m-%d",
    ) -> None:
        if min > max:
            raise GuideConfigError("time scale min must be <= max")
        if tick_count <= 0:
            raise GuideConfigError("tick_count must be > 0")
        self.min = min
        self.max = max
        self.range = _check_range(range)
        self.fmt = fmt
        t0 = _epoch_seconds(min)
        t1 = _epoch_seconds(max)
        self._t0 = t0
        self._span = (t1 - t0) if t1 > t0 else 1.0
        if ticks is not None:
            self._ticks = [t for t in ticks if min <= t <= max]
        elif tick_count == 1 or t1 == t0:
            self._ticks = [min]
        else:
            self._ticks = [_from_epoch_seconds(float(s), min.tzinfo) for s in np.linspace(t0, t1, tick_count)]

    @property
    def ticks(self) -> list[datetime]:
        return list(self._ticks)

    def convert(self, value: datetime) -> float:
        lo, hi = self.range
        ratio = (_epoch_seconds(value) - self._t0) / self._span
        return lo + ratio * (hi - lo)

    def normalize(self, scaled: float) -> float:
        return scaled

    def format(self, value: datetime) -> str | None:
        return value.strftime(self.fmt)


def _epoch_seconds(value: datetime) -> float:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.timestamp()


def _from_epoch_seconds(seconds: float, tz) -> datetime:
    # Naive datetimes are treated as UTC throughout.
    if tz is None:
        return datetime.fromtimestamp(seconds, tz=timezone.utc).replace(tzinfo=None)
    return datetime.fromtimestamp(seconds, tz=tz)


def ticks_within_range(ticks: np.ndarray, *, vmin: float, vmax: float) -> np.ndarray:
    if ticks.size == 0:
        return ticks
    span = max(1e-12, abs(vmax - vmin))
    eps = span * 1e-9
    mask = (ticks >= (vmin - eps)) & (ticks <= (vmax + eps))
    return ticks[mask]


def generate_nice_ticks(vmin: float, vmax: float, target: int) -> np.ndarray:
    if target <= 0:
        raise ValueError("target must be > 0")
    if vmin == vmax:
        return np.asarray([vmin], dtype=np.float64)

    span = _nice_number(vmax - vmin, round_result=False)
    step = _nice_number(span / max(target - 1, 1), round_result=True)
    tick_min = np.floor(vmin / step) * step
    tick_max = np.ceil(vmax / step) * step

    ticks = np.arange(tick_min, tick_max + 0.5 * step, step, dtype=np.float64)
    # Snap floating-point drift so values like -4.44e-16 become 0.
    ticks = np.rint(ticks / step) * step
    ticks[np.isclose(ticks, 0.0, rtol=0.0, atol=step * 1e-9)] = 0.0
    return ticks


def format_tick(value: float, *, step: float | None = None) -> str:
    if not np.isfinite(value):
        return str(value)
    if step is not None and np.isfinite(step) and step > 0 and abs(value) <= step * 1e-9:
        value = 0.0
    abs_v = abs(value)
    decimals = _decimals_from_step(step) if step is not None else 6
    if abs_v != 0 and (abs_v >= 1e6 or (step is not None and abs(step) < 1e-4) or abs_v < 1e-6):
        return f"{value:.4e}"

    d = Decimal(str(value))
    quant = Decimal("1").scaleb(-decimals)
    try:
        q = d.quantize(quant)
    except InvalidOperation:
        q = d
    out = format(q, "f")
    # Only fractional values lose trailing zeros; 30 and 40 stay as is.
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out


def _nice_number(value: float, *, round_result: bool) -> float:
    exp = np.floor(np.log10(value))
    frac = value / (10**exp)

    if round_result:
        if frac < 1.5:
            nice_frac = 1.0
        elif frac < 3.0:
            nice_frac = 2.0
        elif frac < 7.0:
            nice_frac = 5.0
        else:
            nice_frac = 10.0
    else:
        if frac <= 1.0:
            nice_frac = 1.0
        elif frac <= 2.0:
            nice_frac = 2.0
        elif frac <= 5.0:
            nice_frac = 5.0
        else:
            nice_frac = 10.0

    return float(nice_frac * (10**exp))


def _decimals_from_step(step: float) -> int:
    if step <= 0 or not np.isfinite(step):
        return 6
    d = Decimal(str(step)).normalize()
    exp = d.as_tuple().exponent
    decimals = max(0, -int(exp))
    return min(12, decimals)
