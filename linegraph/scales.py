from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from linegraph.series import DataPoint, LayoutParams


def map_to_screen(xs: np.ndarray, ys: np.ndarray, layout: LayoutParams) -> tuple[np.ndarray, np.ndarray]:
    # Zero ranges give inf/nan here on purpose; the surface decides what to do with them.
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        rat_x = (xs - layout.min_x) / np.float64(layout.range_x)
        rat_y = (ys - layout.min_y) / np.float64(layout.range_y)
        px = layout.graph_width_px * rat_x
        py = layout.graph_height_px * rat_y
        screen_x = px + (layout.horizontal_start_px + 1)
        screen_y = (layout.border_px - py) + layout.graph_height_px
    return screen_x, screen_y


def map_points(points: Sequence[DataPoint], layout: LayoutParams) -> tuple[np.ndarray, np.ndarray]:
    xs = np.fromiter((p.x for p in points), dtype=np.float64, count=len(points))
    ys = np.fromiter((p.y for p in points), dtype=np.float64, count=len(points))
    return map_to_screen(xs, ys, layout)
