from __future__ import annotations

from dataclasses import asdict, dataclass
import math
from numbers import Integral, Real
import re
from typing import Any, Mapping

from linegraph.series import RGBA

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")


@dataclass
class RenderConfig:
    """Renderer state that persists between render passes."""

    background_color: RGBA = (20, 40, 60, 128)
    background_stroke_width: float = 4.0
    draw_background: bool = False
    stroke_background: bool = False
    draw_data_points: bool = False
    draw_data_point_index: bool = False
    data_points_radius: float = 10.0


DEFAULT_RENDER_CONFIG = RenderConfig()


def parse_hex_color(value: str) -> RGBA:
    if not _HEX_COLOR.match(value):
        raise ValueError(f"`{value}` must be a hex color (#RRGGBB or #RRGGBBAA)")
    digits = value[1:]
    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    a = int(digits[6:8], 16) if len(digits) == 8 else 255
    return (r, g, b, a)


def coerce_color(value: Any, *, key: str) -> RGBA:
    if isinstance(value, str):
        try:
            return parse_hex_color(value)
        except ValueError:
            raise ValueError(f"Setting `{key}` must be a hex color (#RRGGBB or #RRGGBBAA)") from None
    if isinstance(value, (tuple, list)) and len(value) == 4:
        if all(isinstance(c, Integral) and not isinstance(c, bool) and 0 <= c <= 255 for c in value):
            return (int(value[0]), int(value[1]), int(value[2]), int(value[3]))
    raise ValueError(f"Setting `{key}` must be a hex color or an RGBA tuple of 0..255 ints")


def coerce_length(value: Any, *, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(float(value)) or float(value) < 0:
        raise ValueError(f"Setting `{key}` must be a finite non-negative number")
    return float(value)


def validate_render_config(overrides: Mapping[str, Any] | None = None) -> RenderConfig:
    """Validate and merge user overrides against the renderer defaults."""

    raw: dict[str, Any] = asdict(DEFAULT_RENDER_CONFIG)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown render setting: {key}")
            raw[key] = value

    for key in ("draw_background", "stroke_background", "draw_data_points", "draw_data_point_index"):
        if not isinstance(raw[key], bool):
            raise ValueError(f"Setting `{key}` must be a bool")

    for key in ("background_stroke_width", "data_points_radius"):
        coerce_length(raw[key], key=key)

    return RenderConfig(
        background_color=coerce_color(raw["background_color"], key="background_color"),
        background_stroke_width=float(raw["background_stroke_width"]),
        draw_background=raw["draw_background"],
        stroke_background=raw["stroke_background"],
        draw_data_points=raw["draw_data_points"],
        draw_data_point_index=raw["draw_data_point_index"],
        data_points_radius=float(raw["data_points_radius"]),
    )
