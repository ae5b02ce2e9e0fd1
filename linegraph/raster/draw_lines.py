from __future__ import annotations

import math

import numpy as np

from linegraph.raster.canvas import blend_mask
from linegraph.series import RGBA


def draw_line_segment(
    dst: np.ndarray, x0: float, y0: float, x1: float, y1: float, color: RGBA, width: float = 1.0
) -> None:
    mask = np.zeros(dst.shape[:2], dtype=bool)
    stamp_line_segment(mask, x0, y0, x1, y1, width)
    blend_mask(dst, mask, color)


def stamp_line_segment(mask: np.ndarray, x0: float, y0: float, x1: float, y1: float, width: float) -> None:
    """Set every pixel a ``width`` square brush covers along the segment."""
    radius = max(0, int(round(width)) // 2)
    h, w = mask.shape
    clipped = _clip_segment(x0, y0, x1, y1, -radius - 1, -radius - 1, w + radius, h + radius)
    if clipped is None:
        return
    ix0, iy0, ix1, iy1 = (int(round(v)) for v in clipped)

    dx = abs(ix1 - ix0)
    sx = 1 if ix0 < ix1 else -1
    dy = -abs(iy1 - iy0)
    sy = 1 if iy0 < iy1 else -1
    err = dx + dy

    while True:
        _stamp_square_brush(mask, ix0, iy0, radius)
        if ix0 == ix1 and iy0 == iy1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            ix0 += sx
        if e2 <= dx:
            err += dx
            iy0 += sy


def _stamp_square_brush(mask: np.ndarray, x: int, y: int, radius: int) -> None:
    ya = max(0, y - radius)
    yb = min(mask.shape[0], y + radius + 1)
    xa = max(0, x - radius)
    xb = min(mask.shape[1], x + radius + 1)
    if ya < yb and xa < xb:
        mask[ya:yb, xa:xb] = True


def _clip_segment(
    x0: float, y0: float, x1: float, y1: float, xmin: float, ymin: float, xmax: float, ymax: float
) -> tuple[float, float, float, float] | None:
    # Liang-Barsky against the padded canvas rectangle.
    dx = x1 - x0
    dy = y1 - y0
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x0 - xmin), (dx, xmax - x0), (-dy, y0 - ymin), (dy, ymax - y0)):
        if p == 0:
            if q < 0:
                return None
            continue
        t = q / p
        if p < 0:
            t0 = max(t0, t)
        else:
            t1 = min(t1, t)
        if t0 > t1:
            return None
    out = (x0 + t0 * dx, y0 + t0 * dy, x0 + t1 * dx, y0 + t1 * dy)
    if not all(math.isfinite(v) for v in out):
        return None
    return out
