from __future__ import annotations

from datetime import datetime
import unittest

from luvatrix_guide import (
    FixedStyle,
    GuideError,
    LabelStyle,
    LinearScale,
    MappedStyle,
    MissingScaleError,
    OrdinalScale,
    StrokeStyle,
    TickLine,
    TimeScale,
    build_tick_infos,
)
from luvatrix_guide.resolve import NO_STYLE


class _OvershootScale:
    """Scale whose tick list runs past its own range."""

    def __init__(self, ticks: list[float]) -> None:
        self.ticks = ticks

    def convert(self, value: float) -> float:
        return value

    def normalize(self, scaled: float) -> float:
        return scaled

    def format(self, value: float) -> str:
        return f"{value:g}"


class TickInfoBuilderTests(unittest.TestCase):
    def test_linear_ticks_keep_scale_order_and_positions(self) -> None:
        scales = {"x": LinearScale(0, 100, ticks=[0, 50, 100])}
        ticks = build_tick_infos("x", scales)
        self.assertEqual([t.position for t in ticks], [0.0, 0.5, 1.0])
        self.assertEqual([t.text for t in ticks], ["0", "50", "100"])
        for tick in ticks:
            self.assertIsNone(tick.tick_line)
            self.assertIsNone(tick.label)
            self.assertIsNone(tick.grid)

    def test_nice_tick_generation_for_three_ticks(self) -> None:
        scale = LinearScale(0, 100, tick_count=3)
        self.assertEqual(scale.ticks, [0.0, 50.0, 100.0])

    def test_linear_labels_use_tick_step_decimals(self) -> None:
        scale = LinearScale(0, 1, ticks=[0.0, 0.1, 0.2, 0.1 + 0.2])
        ticks = build_tick_infos("x", {"x": scale})
        self.assertEqual([t.text for t in ticks], ["0", "0.1", "0.2", "0.3"])

    def test_one_record_per_tick_within_unit_range(self) -> None:
        scale = LinearScale(-3.2, 17.9, tick_count=7)
        ticks = build_tick_infos("v", {"v": scale})
        self.assertEqual(len(ticks), len(scale.ticks))
        positions = [t.position for t in ticks]
        self.assertEqual(positions, sorted(positions))
        self.assertTrue(all(0.0 <= p <= 1.0 for p in positions))

    def test_ordinal_positions_sit_in_band_centers(self) -> None:
        ticks = build_tick_infos("c", {"c": OrdinalScale(["a", "b", "c", "d"])})
        self.assertEqual([t.position for t in ticks], [0.125, 0.375, 0.625, 0.875])
        self.assertEqual([t.text for t in ticks], ["a", "b", "c", "d"])

    def test_time_ticks_are_evenly_spaced(self) -> None:
        scale = TimeScale(datetime(2024, 1, 1), datetime(2024, 1, 5), tick_count=5)
        ticks = build_tick_infos("t", {"t": scale})
        self.assertEqual([t.text for t in ticks], ["2024-01-01", "2024-01-02", "2024-01-03", "2024-01-04", "2024-01-05"])
        for tick, expected in zip(ticks, [0.0, 0.25, 0.5, 0.75, 1.0]):
            self.assertAlmostEqual(tick.position, expected)

    def test_fixed_styles_are_shared_instances(self) -> None:
        tick_line = TickLine(length=7.0)
        label = LabelStyle()
        grid = StrokeStyle(width=2.0)
        ticks = build_tick_infos(
            "x",
            {"x": LinearScale(0, 100, ticks=[0, 50, 100])},
            FixedStyle(tick_line),
            FixedStyle(label),
            FixedStyle(grid),
        )
        for tick in ticks:
            self.assertIs(tick.tick_line, tick_line)
            self.assertIs(tick.label, label)
            self.assertIs(tick.grid, grid)
            self.assertTrue(tick.has_label)

    def test_mapper_sees_text_index_and_total(self) -> None:
        calls: list[tuple[str | None, int, int]] = []
        grid = StrokeStyle()

        def mapper(text, index, total):
            calls.append((text, index, total))
            return grid if index == 1 else None

        ticks = build_tick_infos("x", {"x": LinearScale(0, 100, ticks=[0, 50, 100])}, NO_STYLE, NO_STYLE, MappedStyle(mapper))
        self.assertEqual(calls, [("0", 0, 3), ("50", 1, 3), ("100", 2, 3)])
        self.assertEqual([t.grid for t in ticks], [None, grid, None])

    def test_mapper_suppresses_even_ticks(self) -> None:
        odd = TickLine(style=StrokeStyle(color=(255, 0, 0, 255)))
        ticks = build_tick_infos(
            "x",
            {"x": LinearScale(0, 30, ticks=[0, 10, 20, 30])},
            MappedStyle(lambda text, index, total: odd if index % 2 == 1 else None),
        )
        self.assertEqual(len(ticks), 4)
        self.assertIsNone(ticks[0].tick_line)
        self.assertIs(ticks[1].tick_line, odd)
        self.assertIsNone(ticks[2].tick_line)
        self.assertIs(ticks[3].tick_line, odd)

    def test_missing_scale_is_a_lookup_failure(self) -> None:
        with self.assertRaises(MissingScaleError) as ctx:
            build_tick_infos("y", {"x": LinearScale(0, 1)})
        self.assertIsInstance(ctx.exception, KeyError)
        self.assertEqual(ctx.exception.variable, "y")

    def test_empty_text_has_no_label(self) -> None:
        scale = LinearScale(0, 1, ticks=[0, 1], formatter=lambda v: "" if v == 0 else "one")
        ticks = build_tick_infos("x", {"x": scale}, NO_STYLE, FixedStyle(LabelStyle()))
        self.assertFalse(ticks[0].has_label)
        self.assertTrue(ticks[1].has_label)

    def test_ticks_outside_range_keep_their_index_and_total(self) -> None:
        seen: list[tuple[str, int, int]] = []

        def mapper(text, index, total):
            seen.append((text, index, total))
            return None

        scale = _OvershootScale([-0.25, 0.0, 0.5, 1.0, 1.25])
        ticks = build_tick_infos("x", {"x": scale}, MappedStyle(mapper))
        self.assertEqual([t.position for t in ticks], [-0.25, 0.0, 0.5, 1.0, 1.25])
        self.assertEqual([(i, n) for _, i, n in seen], [(i, 5) for i in range(5)])
        self.assertEqual(seen[0][0], "-0.25")

    def test_non_finite_position_is_rejected(self) -> None:
        scale = _OvershootScale([float("nan"), 0.5])
        with self.assertRaises(GuideError):
            build_tick_infos("x", {"x": scale})


if __name__ == "__main__":
    unittest.main()
