from __future__ import annotations

import numpy as np

from linegraph.series import RGBA


def new_canvas(width: int, height: int, color: RGBA = (0, 0, 0, 255)) -> np.ndarray:
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    canvas[:, :, 0] = color[0]
    canvas[:, :, 1] = color[1]
    canvas[:, :, 2] = color[2]
    canvas[:, :, 3] = color[3]
    return canvas


def blend_mask(dst: np.ndarray, mask: np.ndarray, color: RGBA) -> None:
    """Blend ``color`` wherever the full-canvas boolean ``mask`` is set."""
    if mask.shape != dst.shape[:2]:
        raise ValueError(f"mask shape {mask.shape} does not match canvas {dst.shape[:2]}")
    rows = np.flatnonzero(mask.any(axis=1))
    if rows.size == 0:
        return
    cols = np.flatnonzero(mask.any(axis=0))
    y0, y1 = int(rows[0]), int(rows[-1]) + 1
    x0, x1 = int(cols[0]), int(cols[-1]) + 1
    blend_coverage(dst, x0, y0, mask[y0:y1, x0:x1].astype(np.float32), color)


def blend_coverage(dst: np.ndarray, x: int, y: int, cov: np.ndarray, color: RGBA) -> None:
    """Source-over composite of ``color`` scaled by ``cov`` (0..1) placed at ``(x, y)``."""
    h, w = cov.shape
    if h <= 0 or w <= 0:
        return

    x0 = max(0, x)
    y0 = max(0, y)
    x1 = min(dst.shape[1], x + w)
    y1 = min(dst.shape[0], y + h)
    if x1 <= x0 or y1 <= y0:
        return

    sx0 = x0 - x
    sy0 = y0 - y
    cov = cov[sy0 : sy0 + (y1 - y0), sx0 : sx0 + (x1 - x0)]

    src_alpha = (color[3] / 255.0) * cov
    if not np.any(src_alpha > 0):
        return

    patch = dst[y0:y1, x0:x1]
    dst_rgb = patch[:, :, :3].astype(np.float32)
    dst_alpha = patch[:, :, 3].astype(np.float32) / 255.0

    src_rgb = np.asarray(color[:3], dtype=np.float32).reshape(1, 1, 3)
    out_alpha = src_alpha + dst_alpha * (1.0 - src_alpha)
    out_rgb_num = src_rgb * src_alpha[:, :, None] + dst_rgb * dst_alpha[:, :, None] * (1.0 - src_alpha[:, :, None])
    safe_alpha = np.where(out_alpha > 1e-6, out_alpha, 1.0)
    out_rgb = out_rgb_num / safe_alpha[:, :, None]

    patch[:, :, :3] = np.clip(np.rint(out_rgb), 0, 255).astype(np.uint8)
    patch[:, :, 3] = np.clip(np.rint(out_alpha * 255.0), 0, 255).astype(np.uint8)
