from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from luvatrix_guide.errors import GuideConfigError


S = TypeVar("S")

# Gets a style from an axis value text. `index` and `total` are the current
# and total count of all ticks; returning None suppresses that tick's visual.
StyleMapper = Callable[[Union[str, None], int, int], Union[S, None]]


@dataclass(frozen=True)
class NoStyle:
    pass


@dataclass(frozen=True)
class FixedStyle(Generic[S]):
    style: S


@dataclass(frozen=True)
class MappedStyle(Generic[S]):
    mapper: StyleMapper

    def __post_init__(self) -> None:
        if not callable(self.mapper):
            raise GuideConfigError("style mapper must be callable")


StyleSpec = Union[NoStyle, FixedStyle, MappedStyle]

NO_STYLE = NoStyle()


def style_spec(fixed: S | None, mapper: StyleMapper | None, *, name: str) -> StyleSpec:
    """Builds the tagged variant from a fixed value and a mapper, at most one of which may be set."""
    if fixed is not None and mapper is not None:
        raise GuideConfigError(f"only one of `{name}` and `{name}_mapper` can be set")
    if fixed is not None:
        return FixedStyle(fixed)
    if mapper is not None:
        return MappedStyle(mapper)
    return NO_STYLE


def resolve_style(spec: StyleSpec, text: str | None, index: int, total: int):
    if isinstance(spec, FixedStyle):
        return spec.style
    if isinstance(spec, MappedStyle):
        return spec.mapper(text, index, total)
    return None


def is_style_spec(value: object) -> bool:
    return isinstance(value, (NoStyle, FixedStyle, MappedStyle))
