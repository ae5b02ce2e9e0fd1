from linegraph.adapters.normalize import normalize_points
from linegraph.api import render_line
from linegraph.config import DEFAULT_RENDER_CONFIG, RenderConfig, parse_hex_color, validate_render_config
from linegraph.errors import LineGraphDataError
from linegraph.layout import compute_layout
from linegraph.raster.surface import RasterSurface
from linegraph.renderer import LineSeriesRenderer
from linegraph.series import RGBA, DataPoint, LayoutParams, SeriesStyle
from linegraph.surface import DrawSurface, RecordingSurface
from linegraph.svg import SvgSurface

__all__ = [
    "DEFAULT_RENDER_CONFIG",
    "DataPoint",
    "DrawSurface",
    "LayoutParams",
    "LineGraphDataError",
    "LineSeriesRenderer",
    "RGBA",
    "RasterSurface",
    "RecordingSurface",
    "RenderConfig",
    "SeriesStyle",
    "SvgSurface",
    "compute_layout",
    "normalize_points",
    "parse_hex_color",
    "render_line",
    "validate_render_config",
]
