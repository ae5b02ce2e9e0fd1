from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from linegraph.errors import LineGraphDataError
from linegraph.series import DataPoint, LayoutParams


def compute_layout(
    points: Sequence[DataPoint],
    width: float,
    height: float,
    *,
    border: float = 0.0,
    horizontal_start: float = 0.0,
) -> LayoutParams:
    """Bounds and plotting area for ``points`` inside a ``width`` x ``height`` viewport.

    ``border`` pads the top and bottom of the plotting area; ``horizontal_start``
    reserves room on the left. The last column stays inside the viewport. A flat
    axis gets a range of 1 so the renderer never divides by zero.
    """
    if len(points) == 0:
        raise LineGraphDataError("empty series")

    xs = np.fromiter((p.x for p in points), dtype=np.float64, count=len(points))
    ys = np.fromiter((p.y for p in points), dtype=np.float64, count=len(points))
    mask = np.isfinite(xs) & np.isfinite(ys)
    if not np.any(mask):
        raise LineGraphDataError("series contains no finite points")

    min_x = float(np.min(xs[mask]))
    max_x = float(np.max(xs[mask]))
    min_y = float(np.min(ys[mask]))
    max_y = float(np.max(ys[mask]))
    range_x = max_x - min_x
    range_y = max_y - min_y
    if range_x == 0:
        range_x = 1.0
    if range_y == 0:
        range_y = 1.0

    return LayoutParams(
        graph_width_px=float(width) - horizontal_start - 2,
        graph_height_px=float(height) - 2 * border,
        border_px=float(border),
        min_x=min_x,
        min_y=min_y,
        range_x=range_x,
        range_y=range_y,
        horizontal_start_px=float(horizontal_start),
    )
