from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from linegraph.raster.canvas import blend_mask
from linegraph.raster.draw_lines import stamp_line_segment
from linegraph.series import RGBA


def draw_circle(
    dst: np.ndarray, cx: float, cy: float, r: float, color: RGBA, *, filled: bool, width: float = 1.0
) -> None:
    mask = np.zeros(dst.shape[:2], dtype=bool)
    stamp_circle(mask, cx, cy, r, filled=filled, width=width)
    blend_mask(dst, mask, color)


def stamp_circle(mask: np.ndarray, cx: float, cy: float, r: float, *, filled: bool, width: float = 1.0) -> None:
    if r < 0:
        return
    half = max(0.5, width / 2.0)
    reach = r + (0.0 if filled else half)
    h, w = mask.shape
    ya = max(0, int(math.floor(cy - reach)))
    yb = min(h, int(math.ceil(cy + reach)) + 1)
    xa = max(0, int(math.floor(cx - reach)))
    xb = min(w, int(math.ceil(cx + reach)) + 1)
    if ya >= yb or xa >= xb:
        return

    yy, xx = np.ogrid[ya:yb, xa:xb]
    dist = np.hypot(xx - cx, yy - cy)
    if filled:
        region = dist <= r
    else:
        region = np.abs(dist - r) <= half
    mask[ya:yb, xa:xb] |= region


def draw_polygon(dst: np.ndarray, vertices: Sequence[tuple[float, float]], color: RGBA, stroke_width: float = 0.0) -> None:
    """Even-odd fill of ``vertices``; a positive ``stroke_width`` also covers the outline."""
    if len(vertices) < 3:
        return
    mask = np.zeros(dst.shape[:2], dtype=bool)
    stamp_polygon(mask, vertices)
    if stroke_width > 0:
        closed = list(vertices) + [vertices[0]]
        for (x0, y0), (x1, y1) in zip(closed[:-1], closed[1:]):
            stamp_line_segment(mask, x0, y0, x1, y1, stroke_width)
    blend_mask(dst, mask, color)


def stamp_polygon(mask: np.ndarray, vertices: Sequence[tuple[float, float]]) -> None:
    pts = np.asarray(vertices, dtype=np.float64)
    xs0 = pts[:, 0]
    ys0 = pts[:, 1]
    xs1 = np.roll(xs0, -1)
    ys1 = np.roll(ys0, -1)

    h, w = mask.shape
    row_min = max(0, int(math.ceil(float(np.min(ys0)))))
    row_max = min(h - 1, int(math.floor(float(np.max(ys0)))))
    if row_min > row_max:
        return

    # Horizontal edges never cross a scanline.
    sloped = ys0 != ys1
    xs0, ys0, xs1, ys1 = xs0[sloped], ys0[sloped], xs1[sloped], ys1[sloped]
    inv_slope = (xs1 - xs0) / (ys1 - ys0)
    lo = np.minimum(ys0, ys1)
    hi = np.maximum(ys0, ys1)

    for row in range(row_min, row_max + 1):
        active = (lo <= row) & (row < hi)
        if not np.any(active):
            continue
        crossings = np.sort(xs0[active] + (row - ys0[active]) * inv_slope[active])
        for xa, xb in zip(crossings[0::2], crossings[1::2]):
            start = max(0, int(math.ceil(xa)))
            stop = min(w - 1, int(math.floor(xb)))
            if start <= stop:
                mask[row, start : stop + 1] = True
