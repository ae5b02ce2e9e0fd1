from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

import numpy as np
from PIL import Image

from linegraph import DataPoint, LayoutParams, LineSeriesRenderer, RasterSurface, SeriesStyle
from linegraph.raster.canvas import new_canvas
from linegraph.raster.draw_text import draw_text, text_size

WHITE = (255, 255, 255, 255)
RED = (255, 0, 0, 255)


class RasterSurfaceTests(unittest.TestCase):
    def test_new_canvas_fills_color(self) -> None:
        canvas = new_canvas(4, 3, color=(1, 2, 3, 4))
        self.assertEqual(canvas.shape, (3, 4, 4))
        self.assertTrue(np.all(canvas[:, :, 2] == 3))

    def test_rejects_empty_surface(self) -> None:
        with self.assertRaises(ValueError):
            RasterSurface(0, 10)

    def test_horizontal_line(self) -> None:
        surface = RasterSurface(20, 10)
        surface.draw_line_segment(2.0, 5.0, 17.0, 5.0, RED, 1.0)
        self.assertTrue(np.all(surface.canvas[5, 2:18, 0] == 255))
        self.assertEqual(int(surface.canvas[5, 1, 0]), 0)
        self.assertEqual(int(surface.canvas[4, 10, 0]), 0)

    def test_line_width_expands_brush(self) -> None:
        surface = RasterSurface(20, 10)
        surface.draw_line_segment(2.0, 5.0, 17.0, 5.0, RED, 3.0)
        self.assertTrue(np.all(surface.canvas[4:7, 10, 0] == 255))
        self.assertEqual(int(surface.canvas[3, 10, 0]), 0)

    def test_line_far_outside_canvas_is_clipped(self) -> None:
        surface = RasterSurface(20, 10)
        surface.draw_line_segment(-1e9, 5.0, 1e9, 5.0, RED, 1.0)
        self.assertTrue(np.all(surface.canvas[5, :, 0] == 255))

    def test_translucent_line_blends_once(self) -> None:
        surface = RasterSurface(20, 10)
        surface.draw_line_segment(2.0, 5.0, 17.0, 5.0, (255, 255, 255, 128), 3.0)
        self.assertAlmostEqual(int(surface.canvas[5, 10, 0]), 128, delta=1)
        self.assertEqual(int(surface.canvas[5, 10, 3]), 255)

    def test_filled_circle_and_ring(self) -> None:
        surface = RasterSurface(31, 31)
        surface.draw_circle(15.0, 15.0, 4.0, WHITE, True)
        self.assertEqual(int(surface.canvas[15, 15, 0]), 255)
        self.assertEqual(int(surface.canvas[15, 19, 0]), 255)
        self.assertEqual(int(surface.canvas[15, 20, 0]), 0)

        surface.clear()
        surface.draw_circle(15.0, 15.0, 10.0, WHITE, False, 1.0)
        self.assertEqual(int(surface.canvas[15, 15, 0]), 0)
        self.assertEqual(int(surface.canvas[15, 25, 0]), 255)
        self.assertEqual(int(surface.canvas[5, 15, 0]), 255)

    def test_polygon_fill(self) -> None:
        surface = RasterSurface(20, 20)
        surface.draw_filled_polygon([(2.0, 2.0), (12.0, 2.0), (12.0, 12.0), (2.0, 12.0)], WHITE)
        self.assertEqual(int(surface.canvas[7, 7, 0]), 255)
        self.assertEqual(int(surface.canvas[2, 2, 0]), 255)
        self.assertEqual(int(surface.canvas[0, 0, 0]), 0)
        self.assertEqual(int(surface.canvas[15, 15, 0]), 0)

    def test_polygon_stroke_covers_outline(self) -> None:
        surface = RasterSurface(20, 20)
        surface.draw_filled_polygon([(2.0, 2.0), (12.0, 2.0), (12.0, 12.0), (2.0, 12.0)], WHITE, 3.0)
        self.assertEqual(int(surface.canvas[13, 7, 0]), 255)
        self.assertEqual(int(surface.canvas[7, 1, 0]), 255)

    def test_triangle_fill_follows_edges(self) -> None:
        surface = RasterSurface(30, 30)
        surface.draw_filled_polygon([(0.0, 20.0), (10.0, 0.0), (20.0, 20.0)], WHITE)
        self.assertEqual(int(surface.canvas[15, 10, 0]), 255)
        self.assertEqual(int(surface.canvas[2, 2, 0]), 0)
        self.assertEqual(int(surface.canvas[2, 18, 0]), 0)

    def test_non_finite_primitives_leave_canvas_untouched(self) -> None:
        surface = RasterSurface(16, 16)
        before = surface.to_rgba()
        nan = float("nan")
        inf = float("inf")
        surface.draw_line_segment(nan, 1.0, 5.0, 5.0, RED, 1.0)
        surface.draw_circle(inf, 4.0, 3.0, RED, True)
        surface.draw_filled_polygon([(0.0, 0.0), (nan, 5.0), (5.0, 5.0)], RED)
        surface.draw_text("1", nan, 3.0, RED, 10.0)
        self.assertTrue(np.array_equal(before, surface.canvas))

    def test_text_is_centered_on_anchor(self) -> None:
        canvas = new_canvas(80, 40)
        draw_text(canvas, 40, 20, "88", WHITE, font_size_px=20.0, h_align="center", v_align="center")
        ys, xs = np.nonzero(canvas[:, :, 0])
        self.assertGreater(xs.size, 0)
        w, h = text_size("88", font_size_px=20.0)
        self.assertGreaterEqual(int(xs.min()), 40 - w // 2 - 1)
        self.assertLessEqual(int(xs.max()), 40 + w // 2 + 1)
        self.assertLess(int(ys.min()), 20)
        self.assertGreater(int(ys.max()), 20 - h // 2)

    def test_text_rejects_unknown_alignment(self) -> None:
        with self.assertRaises(ValueError):
            draw_text(new_canvas(10, 10), 5, 5, "1", WHITE, h_align="middle")

    def test_full_series_render_and_png_export(self) -> None:
        surface = RasterSurface(160, 120)
        renderer = LineSeriesRenderer(
            {"draw_background": True, "draw_data_points": True, "draw_data_point_index": True, "data_points_radius": 8}
        )
        layout = LayoutParams(
            graph_width_px=150.0,
            graph_height_px=100.0,
            border_px=10.0,
            min_x=0.0,
            min_y=0.0,
            range_x=3.0,
            range_y=2.0,
        )
        points = [DataPoint(0.0, 0.5), DataPoint(1.0, 2.0), DataPoint(2.0, 1.0), DataPoint(3.0, 1.5)]
        renderer.render_series(surface, points, layout, SeriesStyle(line_thickness=2.0, line_color=RED))

        self.assertTrue(np.any(surface.canvas[:, :, 0] > 0))
        # Fill reaches the baseline row below the first point.
        self.assertGreater(int(surface.canvas[108, 60, 0]), 0)
        with tempfile.TemporaryDirectory() as tmp:
            out = surface.save_png(Path(tmp) / "series.png")
            with Image.open(out) as image:
                self.assertEqual(image.size, (160, 120))
                self.assertEqual(image.mode, "RGBA")


if __name__ == "__main__":
    unittest.main()
