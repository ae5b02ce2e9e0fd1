from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Sequence
import xml.etree.ElementTree as ET

from linegraph.series import RGBA
from linegraph.surface import DrawSurface, HAlign, VAlign

LOGGER = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"

_TEXT_ANCHOR = {"left": "start", "center": "middle", "right": "end"}
_BASELINE = {"top": "hanging", "center": "central", "bottom": "text-after-edge"}


class SvgSurface(DrawSurface):
    """Vector backend that collects primitives as SVG elements."""

    def __init__(self, width: float, height: float, background: RGBA | None = None) -> None:
        self.width = float(width)
        self.height = float(height)
        self._root = ET.Element(
            "svg",
            {
                "xmlns": SVG_NS,
                "width": _fmt(self.width),
                "height": _fmt(self.height),
                "viewBox": f"0 0 {_fmt(self.width)} {_fmt(self.height)}",
            },
        )
        if background is not None:
            rect = ET.SubElement(
                self._root,
                "rect",
                {"x": "0", "y": "0", "width": _fmt(self.width), "height": _fmt(self.height)},
            )
            _apply_paint(rect, "fill", background)

    def draw_line_segment(self, x1: float, y1: float, x2: float, y2: float, color: RGBA, width: float) -> None:
        if not _finite(x1, y1, x2, y2, width):
            LOGGER.debug("skipping non-finite line segment (%s, %s) -> (%s, %s)", x1, y1, x2, y2)
            return
        elem = ET.SubElement(
            self._root,
            "line",
            {
                "x1": _fmt(x1),
                "y1": _fmt(y1),
                "x2": _fmt(x2),
                "y2": _fmt(y2),
                "stroke-width": _fmt(width),
            },
        )
        _apply_paint(elem, "stroke", color)

    def draw_circle(self, cx: float, cy: float, r: float, color: RGBA, filled: bool, width: float = 1.0) -> None:
        if not _finite(cx, cy, r, width):
            LOGGER.debug("skipping non-finite circle at (%s, %s) r=%s", cx, cy, r)
            return
        elem = ET.SubElement(self._root, "circle", {"cx": _fmt(cx), "cy": _fmt(cy), "r": _fmt(r)})
        if filled:
            _apply_paint(elem, "fill", color)
        else:
            elem.set("fill", "none")
            elem.set("stroke-width", _fmt(width))
            _apply_paint(elem, "stroke", color)

    def draw_filled_polygon(
        self, vertices: Sequence[tuple[float, float]], color: RGBA, stroke_width: float = 0.0
    ) -> None:
        if not all(_finite(x, y) for x, y in vertices) or not _finite(stroke_width):
            LOGGER.debug("skipping polygon with non-finite vertices (%d vertices)", len(vertices))
            return
        points = " ".join(f"{_fmt(x)},{_fmt(y)}" for x, y in vertices)
        elem = ET.SubElement(self._root, "polygon", {"points": points, "fill-rule": "evenodd"})
        _apply_paint(elem, "fill", color)
        if stroke_width > 0:
            elem.set("stroke-width", _fmt(stroke_width))
            _apply_paint(elem, "stroke", color)

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
        if h_align not in _TEXT_ANCHOR or v_align not in _BASELINE:
            raise ValueError(f"unsupported text alignment: {h_align!r}/{v_align!r}")
        if not _finite(x, y, size):
            LOGGER.debug("skipping non-finite text %r at (%s, %s)", text, x, y)
            return
        elem = ET.SubElement(
            self._root,
            "text",
            {
                "x": _fmt(x),
                "y": _fmt(y),
                "font-size": _fmt(size),
                "text-anchor": _TEXT_ANCHOR[h_align],
                "dominant-baseline": _BASELINE[v_align],
            },
        )
        elem.text = text
        _apply_paint(elem, "fill", color)

    def to_markup(self) -> str:
        return ET.tostring(self._root, encoding="unicode")

    def save(self, path: str | Path) -> Path:
        out = Path(path)
        out.write_text(self.to_markup(), encoding="utf-8")
        return out


def _apply_paint(elem: ET.Element, attr: str, color: RGBA) -> None:
    r, g, b, a = color
    elem.set(attr, f"rgb({r},{g},{b})")
    if a < 255:
        elem.set(f"{attr}-opacity", _fmt(a / 255.0))


def _fmt(value: float) -> str:
    out = f"{float(value):.3f}".rstrip("0").rstrip(".")
    return "0" if out == "-0" else out


def _finite(*values: float) -> bool:
    return all(math.isfinite(float(v)) for v in values)
