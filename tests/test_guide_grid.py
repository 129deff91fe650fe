from __future__ import annotations

import math
import unittest

from luvatrix_guide import (
    ArcFigure,
    CircleFigure,
    FixedStyle,
    IntrinsicLayers,
    LinearScale,
    LineFigure,
    MappedStyle,
    PolarCoordConv,
    Rect,
    RectCoordConv,
    StrokeStyle,
    build_tick_infos,
    render_grid,
)
from luvatrix_guide.resolve import NO_STYLE

GRID = StrokeStyle(color=(44, 53, 66, 255))


def _ticks(grid=FixedStyle(GRID)):
    return build_tick_infos("x", {"x": LinearScale(0, 100, ticks=[0, 50, 100])}, NO_STYLE, NO_STYLE, grid)


class RectGridTests(unittest.TestCase):
    def setUp(self) -> None:
        self.coord = RectCoordConv(Rect(10, 20, 300, 200))

    def test_horizontal_grid_spans_region_height(self) -> None:
        scene = render_grid(self.coord, "primary", _ticks())
        self.assertEqual(
            list(scene.figures),
            [
                LineFigure((10, 220), (10, 20), GRID),
                LineFigure((160, 220), (160, 20), GRID),
                LineFigure((310, 220), (310, 20), GRID),
            ],
        )

    def test_vertical_grid_spans_region_width(self) -> None:
        scene = render_grid(self.coord, "cross", _ticks())
        self.assertEqual(
            [(f.start, f.end) for f in scene.figures],
            [((10, 220), (310, 220)), ((10, 120), (310, 120)), ((10, 20), (310, 20))],
        )

    def test_ticks_without_grid_draw_nothing(self) -> None:
        scene = render_grid(self.coord, "primary", _ticks(grid=MappedStyle(lambda t, i, n: GRID if i == 1 else None)))
        self.assertEqual(len(scene.figures), 1)
        self.assertEqual(render_grid(self.coord, "primary", _ticks(grid=NO_STYLE)).figures, ())

    def test_grid_scene_layers(self) -> None:
        scene = render_grid(self.coord, "primary", _ticks(), layer=-2)
        self.assertEqual(scene.intrinsic_layer, IntrinsicLayers.grid)
        self.assertEqual(scene.layer, -2)
        self.assertLess(scene.intrinsic_layer, IntrinsicLayers.axis)


class PolarGridTests(unittest.TestCase):
    def test_circular_grid_spokes_cover_radius_range(self) -> None:
        coord = PolarCoordConv(Rect(0, 0, 200, 200), start_angle=0.0, end_angle=2 * math.pi, start_radius=0.2)
        scene = render_grid(coord, "primary", _ticks())
        first = scene.figures[0]
        self.assertIsInstance(first, LineFigure)
        self.assertAlmostEqual(first.start[0], 120.0)
        self.assertAlmostEqual(first.end[0], 200.0)
        second = scene.figures[1]
        self.assertAlmostEqual(second.start[0], 80.0)
        self.assertAlmostEqual(second.end[0], 0.0)

    def test_radial_grid_rings_cover_angle_range(self) -> None:
        coord = PolarCoordConv(Rect(0, 0, 200, 200))
        scene = render_grid(coord, "cross", _ticks())
        self.assertEqual(
            list(scene.figures),
            [
                CircleFigure((100.0, 100.0), 0.0, GRID),
                CircleFigure((100.0, 100.0), 50.0, GRID),
                CircleFigure((100.0, 100.0), 100.0, GRID),
            ],
        )

    def test_radial_grid_on_partial_angle_range_uses_arcs(self) -> None:
        coord = PolarCoordConv(Rect(0, 0, 200, 200), start_angle=0.0, end_angle=math.pi / 2)
        scene = render_grid(coord, "cross", _ticks())
        self.assertTrue(all(isinstance(f, ArcFigure) for f in scene.figures))
        self.assertEqual([f.radius for f in scene.figures], [0.0, 50.0, 100.0])
        self.assertEqual({(f.start_angle, f.end_angle) for f in scene.figures}, {(0.0, math.pi / 2)})


if __name__ == "__main__":
    unittest.main()
