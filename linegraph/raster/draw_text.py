from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from linegraph.raster.canvas import blend_coverage
from linegraph.series import RGBA


DEFAULT_FONT_FAMILY = "DejaVu Sans"
DEFAULT_FONT_SIZE_PX = 10.0
FONT_FALLBACK_PATTERNS = (
    "dejavusans",
    "dejavu sans",
    "helvetica",
    "arial",
    "liberationsans",
    "menlo",
)


def draw_text(
    dst: np.ndarray,
    x: float,
    y: float,
    text: str,
    color: RGBA,
    *,
    font_size_px: float = DEFAULT_FONT_SIZE_PX,
    font_family: str = DEFAULT_FONT_FAMILY,
    h_align: str = "left",
    v_align: str = "top",
) -> None:
    """Draw ``text`` with its box anchored at ``(x, y)`` per the alignment."""
    if not text:
        return
    font = _load_font(font_family=font_family, font_size_px=font_size_px)
    mask = _render_mask(text=text, font=font)
    h, w = mask.shape
    left = int(round(x - _align_offset(w, h_align, ("left", "center", "right"))))
    top = int(round(y - _align_offset(h, v_align, ("top", "center", "bottom"))))
    blend_coverage(dst, left, top, mask.astype(np.float32) / 255.0, color)


def text_size(
    text: str,
    *,
    font_size_px: float = DEFAULT_FONT_SIZE_PX,
    font_family: str = DEFAULT_FONT_FAMILY,
) -> tuple[int, int]:
    font = _load_font(font_family=font_family, font_size_px=font_size_px)
    if not text:
        ascent, descent = font.getmetrics()
        return (0, max(1, int(ascent + descent)))
    left, top, right, bottom = font.getbbox(text)
    return (max(0, int(right - left)), max(1, int(bottom - top)))


def _align_offset(extent: int, align: str, names: tuple[str, str, str]) -> float:
    if align == names[0]:
        return 0.0
    if align == names[1]:
        return extent / 2.0
    if align == names[2]:
        return float(extent)
    raise ValueError(f"alignment must be one of {names}, got {align!r}")


@lru_cache(maxsize=128)
def _render_mask(text: str, font: ImageFont.FreeTypeFont | ImageFont.ImageFont) -> np.ndarray:
    left, top, right, bottom = font.getbbox(text)
    width = max(1, int(right - left))
    height = max(1, int(bottom - top))
    image = Image.new("L", (width, height), 0)
    draw = ImageDraw.Draw(image)
    draw.text((-left, -top), text, fill=255, font=font)
    return np.asarray(image, dtype=np.uint8)


@lru_cache(maxsize=64)
def _load_font(font_family: str, font_size_px: float) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    size = max(1, int(round(font_size_px)))
    font_path = _resolve_font_path(font_family)
    if font_path is None:
        return ImageFont.load_default()
    try:
        return ImageFont.truetype(str(font_path), size=size)
    except OSError:
        return ImageFont.load_default()


def _resolve_font_path(font_family: str) -> Path | None:
    wanted = font_family.strip().lower() if font_family.strip() else DEFAULT_FONT_FAMILY.lower()
    patterns = (wanted,) + FONT_FALLBACK_PATTERNS

    font_dirs = [
        Path.home() / "Library" / "Fonts",
        Path("/Library/Fonts"),
        Path("/System/Library/Fonts"),
        Path("/usr/share/fonts"),
        Path("/usr/local/share/fonts"),
    ]

    candidates: list[Path] = []
    for base in font_dirs:
        if not base.exists():
            continue
        for ext in ("*.ttf", "*.otf", "*.ttc"):
            candidates.extend(base.rglob(ext))

    for pattern in patterns:
        p = pattern.replace(" ", "")
        for path in candidates:
            stem = path.stem.lower().replace(" ", "")
            if p in stem:
                return path
    return None
