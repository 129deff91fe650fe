from __future__ import annotations


class GuideError(Exception):
    """Base error for axis and grid guide computation."""


class GuideConfigError(GuideError, ValueError):
    pass


class MissingScaleError(GuideError, KeyError):
    def __init__(self, variable: str) -> None:
        super().__init__(variable)
        self.variable = variable

    def __str__(self) -> str:
        return f"no scale bound to variable `{self.variable}`"
