from __future__ import annotations

from dataclasses import dataclass
import math
import unittest

import numpy as np

from linegraph import (
    DataPoint,
    LineGraphDataError,
    RecordingSurface,
    SeriesStyle,
    compute_layout,
    normalize_points,
    render_line,
)


@dataclass
class _Sample:
    x: float
    y: float


class NormalizePointsTests(unittest.TestCase):
    def test_accepts_pairs_points_and_objects(self) -> None:
        points = normalize_points([(0, 1), DataPoint(2.0, 3.0), _Sample(4, 5.5)])
        self.assertEqual(points, (DataPoint(0.0, 1.0), DataPoint(2.0, 3.0), DataPoint(4.0, 5.5)))

    def test_accepts_numpy_array(self) -> None:
        arr = np.asarray([[0, 1], [1, 4], [2, 9]], dtype=np.int64)
        points = normalize_points(arr)
        self.assertEqual(points[2], DataPoint(2.0, 9.0))
        self.assertIsInstance(points[0].x, float)

    def test_empty_sequence_is_allowed(self) -> None:
        self.assertEqual(normalize_points([]), ())

    def test_non_finite_values_pass_through(self) -> None:
        points = normalize_points([(0.0, float("nan"))])
        self.assertTrue(math.isnan(points[0].y))

    def test_rejects_bad_array_shape(self) -> None:
        with self.assertRaisesRegex(LineGraphDataError, "shape"):
            normalize_points(np.zeros((3, 3)))

    def test_rejects_wrong_arity(self) -> None:
        with self.assertRaisesRegex(LineGraphDataError, "exactly 2 values"):
            normalize_points([(1, 2, 3)])

    def test_rejects_non_numeric(self) -> None:
        with self.assertRaisesRegex(LineGraphDataError, "must be numeric"):
            normalize_points([(1, "2")])
        with self.assertRaisesRegex(LineGraphDataError, "must be numeric"):
            normalize_points([(True, 2)])

    def test_rejects_unsupported_input(self) -> None:
        with self.assertRaises(LineGraphDataError):
            normalize_points(None)
        with self.assertRaises(LineGraphDataError):
            normalize_points("1,2")
        with self.assertRaises(LineGraphDataError):
            normalize_points([object()])


class ComputeLayoutTests(unittest.TestCase):
    def test_bounds_from_points(self) -> None:
        layout = compute_layout([DataPoint(0, 0), DataPoint(1, 1), DataPoint(2, 0)], 100, 120, border=10)
        self.assertEqual((layout.min_x, layout.min_y), (0.0, 0.0))
        self.assertEqual((layout.range_x, layout.range_y), (2.0, 1.0))
        self.assertEqual(layout.graph_width_px, 98.0)
        self.assertEqual(layout.graph_height_px, 100.0)
        self.assertEqual(layout.baseline_px, 110.0)

    def test_horizontal_start_reserves_left_space(self) -> None:
        layout = compute_layout([DataPoint(0, 0), DataPoint(1, 1)], 100, 100, horizontal_start=30)
        self.assertEqual(layout.horizontal_start_px, 30.0)
        self.assertEqual(layout.graph_width_px, 68.0)

    def test_flat_series_gets_unit_range(self) -> None:
        layout = compute_layout([DataPoint(3, 7)], 50, 50)
        self.assertEqual((layout.range_x, layout.range_y), (1.0, 1.0))

    def test_ignores_non_finite_points_for_bounds(self) -> None:
        layout = compute_layout([DataPoint(0, 0), DataPoint(float("nan"), 5), DataPoint(4, 2)], 50, 50)
        self.assertEqual((layout.range_x, layout.range_y), (4.0, 2.0))

    def test_rejects_empty_series(self) -> None:
        with self.assertRaisesRegex(LineGraphDataError, "empty series"):
            compute_layout([], 10, 10)
        with self.assertRaisesRegex(LineGraphDataError, "no finite points"):
            compute_layout([DataPoint(float("nan"), 0.0)], 10, 10)


class RenderLineTests(unittest.TestCase):
    def test_render_line_fits_series_into_viewport(self) -> None:
        surface = RecordingSurface()
        render_line(surface, [(0, 0), (1, 1), (2, 0)], width=100, height=100, style=SeriesStyle(line_thickness=3))
        lines = surface.lines()
        self.assertEqual(len(lines), 2)
        xs = [v for line in lines for v in (line.x1, line.x2)]
        ys = [v for line in lines for v in (line.y1, line.y2)]
        self.assertEqual(min(xs), 1.0)
        self.assertEqual(max(xs), 99.0)
        self.assertEqual((min(ys), max(ys)), (0.0, 100.0))

    def test_render_line_returns_configured_renderer(self) -> None:
        surface = RecordingSurface()
        renderer = render_line(
            surface,
            np.asarray([[0.0, 1.0], [1.0, 2.0]]),
            width=64,
            height=32,
            config={"draw_data_points": True, "draw_data_point_index": True},
        )
        self.assertTrue(renderer.draw_data_points)
        self.assertEqual([t.text for t in surface.texts()], ["1", "2"])


if __name__ == "__main__":
    unittest.main()
