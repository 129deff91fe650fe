from __future__ import annotations

import math
from typing import Sequence

from luvatrix_guide.raster.canvas import draw_pixel
from luvatrix_guide.styles import RGBA, Point


def draw_polyline(dst, points: Sequence[Point], color: RGBA, width: int = 1) -> None:
    if len(points) < 2:
        return
    for (x0, y0), (x1, y1) in zip(points[:-1], points[1:]):
        _draw_line_segment(dst, int(round(x0)), int(round(y0)), int(round(x1)), int(round(y1)), color=color, width=width)


def dash_polyline(points: Sequence[Point], dash: Sequence[float]) -> list[list[Point]]:
    """Splits a polyline into the visible runs of an on/off dash pattern."""
    runs: list[list[Point]] = []
    pattern = list(dash) if len(dash) % 2 == 0 else list(dash) * 2
    idx = 0
    left = pattern[0]
    on = True
    current: list[Point] = [points[0]] if points else []
    for (x0, y0), (x1, y1) in zip(points[:-1], points[1:]):
        seg = math.hypot(x1 - x0, y1 - y0)
        done = 0.0
        while seg - done > left:
            done += left
            p = (x0 + (x1 - x0) * done / seg, y0 + (y1 - y0) * done / seg)
            if on:
                current.append(p)
                runs.append(current)
                current = []
            else:
                current = [p]
            on = not on
            idx = (idx + 1) % len(pattern)
            left = pattern[idx]
        left -= seg - done
        if on:
            current.append((x1, y1))
    if on and len(current) >= 2:
        runs.append(current)
    return runs


def arc_points(center: Point, radius: float, start_angle: float, end_angle: float) -> list[Point]:
    span = end_angle - start_angle
    count = max(8, int(math.ceil(abs(span) * max(radius, 1.0) / 2.0)))
    cx, cy = center
    return [
        (cx + math.cos(start_angle + span * i / count) * radius, cy + math.sin(start_angle + span * i / count) * radius)
        for i in range(count + 1)
    ]


def _draw_line_segment(dst, x0: int, y0: int, x1: int, y1: int, color: RGBA, width: int) -> None:
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        _draw_square_brush(dst, x0, y0, color=color, width=width)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def _draw_square_brush(dst, x: int, y: int, color: RGBA, width: int) -> None:
    radius = max(0, width // 2)
    for yy in range(y - radius, y + radius + 1):
        for xx in range(x - radius, x + radius + 1):
            draw_pixel(dst, xx, yy, color)
