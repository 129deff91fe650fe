from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

from luvatrix_guide import (
    AxisGuide,
    FixedStyle,
    GuideConfigError,
    LabelStyle,
    MappedStyle,
    NoStyle,
    PolarCoordConv,
    RectCoordConv,
    StrokeStyle,
    TickLine,
    resolve_guides,
    style_spec,
)
from luvatrix_guide.config import load_chart_config, parse_chart_config


class AxisGuideConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        guide = AxisGuide.create()
        self.assertEqual(guide.position, 0.0)
        self.assertFalse(guide.flip)
        self.assertIsNone(guide.line)
        self.assertIsInstance(guide.tick_line, NoStyle)
        self.assertIsInstance(guide.label, NoStyle)
        self.assertIsInstance(guide.grid, NoStyle)
        self.assertEqual((guide.layer, guide.grid_layer), (0, 0))

    def test_fixed_and_mapper_are_mutually_exclusive(self) -> None:
        mapper = lambda text, index, total: None  # noqa: E731
        with self.assertRaises(GuideConfigError):
            AxisGuide.create(tick_line=TickLine(), tick_line_mapper=mapper)
        with self.assertRaises(GuideConfigError):
            AxisGuide.create(label=LabelStyle(), label_mapper=mapper)
        with self.assertRaises(ValueError):
            AxisGuide.create(grid=StrokeStyle(), grid_mapper=mapper)

    def test_create_builds_tagged_variants(self) -> None:
        mapper = lambda text, index, total: None  # noqa: E731
        guide = AxisGuide.create(tick_line=TickLine(), label_mapper=mapper)
        self.assertIsInstance(guide.tick_line, FixedStyle)
        self.assertIsInstance(guide.label, MappedStyle)
        self.assertIs(guide.label.mapper, mapper)

    def test_position_must_be_a_ratio(self) -> None:
        with self.assertRaises(GuideConfigError):
            AxisGuide(position=1.5)
        with self.assertRaises(GuideConfigError):
            AxisGuide(position=float("nan"))

    def test_rejects_unknown_dim_and_raw_styles(self) -> None:
        with self.assertRaises(GuideConfigError):
            AxisGuide(dim="z")  # type: ignore[arg-type]
        with self.assertRaises(GuideConfigError):
            AxisGuide(grid=StrokeStyle())  # type: ignore[arg-type]

    def test_mapper_must_be_callable(self) -> None:
        with self.assertRaises(GuideConfigError):
            style_spec(None, "not callable", name="grid")  # type: ignore[arg-type]

    def test_style_validation(self) -> None:
        with self.assertRaises(GuideConfigError):
            TickLine(length=-1.0)
        with self.assertRaises(GuideConfigError):
            StrokeStyle(width=0.0)
        with self.assertRaises(GuideConfigError):
            LabelStyle(rotate_deg=45)
        self.assertEqual(TickLine().length, 5.0)

    def test_resolve_guides_fills_dim_and_variable(self) -> None:
        guides = resolve_guides(
            [AxisGuide(), AxisGuide(), AxisGuide(dim="primary", variable="t")],
            {"primary": ["x", "t"], "cross": ["y"]},
        )
        self.assertEqual([(g.dim, g.variable) for g in guides], [("primary", "x"), ("cross", "y"), ("primary", "t")])

    def test_resolve_guides_requires_a_variable(self) -> None:
        with self.assertRaises(GuideConfigError):
            resolve_guides([AxisGuide(dim="cross")], {"primary": ["x"]})


class ChartConfigFileTests(unittest.TestCase):
    def test_parse_rect_config(self) -> None:
        config = parse_chart_config(
            {
                "width": 320,
                "height": 220,
                "coord": {"type": "rect", "padding": 10},
                "scales": {
                    "x": {"type": "linear", "min": 0, "max": 100, "ticks": [0, 50, 100], "dim": "primary"},
                    "y": {"type": "ordinal", "values": ["a", "b"], "dim": "cross"},
                },
                "axes": [
                    {"line": {"color": [255, 255, 255]}, "tick_line": {"length": 6}, "label": {"font_size_px": 12}},
                    {"flip": True, "grid": {"width": 2, "dash": [4, 2]}},
                ],
            }
        )
        self.assertIsInstance(config.coord, RectCoordConv)
        self.assertEqual(config.coord.region.width, 300)
        first, second = config.guides
        self.assertEqual((first.dim, first.variable), ("primary", "x"))
        self.assertEqual(first.line, StrokeStyle(color=(255, 255, 255, 255)))
        self.assertEqual(first.tick_line, FixedStyle(TickLine(length=6.0)))
        self.assertEqual((second.dim, second.variable), ("cross", "y"))
        self.assertTrue(second.flip)
        self.assertEqual(second.grid, FixedStyle(StrokeStyle(width=2.0, dash=(4.0, 2.0))))

    def test_missing_size_is_reported(self) -> None:
        with self.assertRaises(GuideConfigError) as ctx:
            parse_chart_config({"width": 10})
        self.assertIn("height", str(ctx.exception))

    def test_unknown_scale_type(self) -> None:
        with self.assertRaises(GuideConfigError):
            parse_chart_config({"width": 10, "height": 10, "scales": {"x": {"type": "log"}}})

    def test_load_polar_config_from_toml(self) -> None:
        text = """
width = 200
height = 200

[coord]
type = "polar"
start_angle = 0.0
end_angle = 3.141592653589793

[scales.angle]
min = 0
max = 10
dim = "primary"

[[axes]]
position = 1.0
line = { width = 1 }
"""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "guide.toml"
            path.write_text(text, encoding="utf-8")
            config = load_chart_config(path)
        self.assertIsInstance(config.coord, PolarCoordConv)
        self.assertFalse(config.coord.is_full_circle)
        self.assertEqual(config.guides[0].variable, "angle")
        self.assertEqual(config.guides[0].position, 1.0)

    def test_bundled_examples_load(self) -> None:
        examples = Path(__file__).resolve().parents[1] / "examples"
        rect = load_chart_config(examples / "rect_guides.toml")
        self.assertEqual([(g.dim, g.variable) for g in rect.guides], [("primary", "time"), ("cross", "value")])
        polar = load_chart_config(examples / "polar_guides.toml")
        self.assertTrue(polar.coord.is_full_circle)
        self.assertEqual(len(polar.scales["month"].ticks), 12)

    def test_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_chart_config("/nonexistent/guide.toml")


if __name__ == "__main__":
    unittest.main()
