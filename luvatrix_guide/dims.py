from __future__ import annotations

from typing import Literal


Dim = Literal["primary", "cross"]
CanvasDim = Literal["horizontal", "vertical"]

DIMS: tuple[Dim, Dim] = ("primary", "cross")
