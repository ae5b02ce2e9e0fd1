from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Sequence

import numpy as np
from PIL import Image

from linegraph.raster.canvas import new_canvas
from linegraph.raster.draw_lines import draw_line_segment
from linegraph.raster.draw_shapes import draw_circle, draw_polygon
from linegraph.raster.draw_text import DEFAULT_FONT_FAMILY, draw_text
from linegraph.series import RGBA
from linegraph.surface import DrawSurface, HAlign, VAlign

LOGGER = logging.getLogger(__name__)


class RasterSurface(DrawSurface):
    """Software rasterizer over an ``(H, W, 4)`` uint8 RGBA canvas."""

    def __init__(
        self,
        width: int,
        height: int,
        background: RGBA = (0, 0, 0, 255),
        *,
        font_family: str = DEFAULT_FONT_FAMILY,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("surface width/height must be > 0")
        self.width = int(width)
        self.height = int(height)
        self.background = background
        self.font_family = font_family
        self.canvas = new_canvas(self.width, self.height, background)

    def clear(self) -> None:
        self.canvas = new_canvas(self.width, self.height, self.background)

    def draw_line_segment(self, x1: float, y1: float, x2: float, y2: float, color: RGBA, width: float) -> None:
        if not _finite(x1, y1, x2, y2, width):
            LOGGER.debug("skipping non-finite line segment (%s, %s) -> (%s, %s)", x1, y1, x2, y2)
            return
        draw_line_segment(self.canvas, x1, y1, x2, y2, color, width)

    def draw_circle(self, cx: float, cy: float, r: float, color: RGBA, filled: bool, width: float = 1.0) -> None:
        if not _finite(cx, cy, r, width):
            LOGGER.debug("skipping non-finite circle at (%s, %s) r=%s", cx, cy, r)
            return
        draw_circle(self.canvas, cx, cy, r, color, filled=filled, width=width)

    def draw_filled_polygon(
        self, vertices: Sequence[tuple[float, float]], color: RGBA, stroke_width: float = 0.0
    ) -> None:
        if not all(_finite(x, y) for x, y in vertices) or not _finite(stroke_width):
            LOGGER.debug("skipping polygon with non-finite vertices (%d vertices)", len(vertices))
            return
        draw_polygon(self.canvas, vertices, color, stroke_width)

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        color: RGBA,
        size: float,
        h_align: HAlign = "center",
        v_align: VAlign = "center",
    ) -> None:
        if not _finite(x, y, size):
            LOGGER.debug("skipping non-finite text %r at (%s, %s)", text, x, y)
            return
        draw_text(
            self.canvas,
            x,
            y,
            text,
            color,
            font_size_px=size,
            font_family=self.font_family,
            h_align=h_align,
            v_align=v_align,
        )

    def to_rgba(self) -> np.ndarray:
        return self.canvas.copy()

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.canvas)

    def save_png(self, path: str | Path) -> Path:
        out = Path(path)
        self.to_image().save(out, format="PNG")
        return out


def _finite(*values: float) -> bool:
    return all(math.isfinite(float(v)) for v in values)
