from __future__ import annotations

from typing import Any, Mapping

from linegraph.adapters.normalize import normalize_points
from linegraph.config import RenderConfig
from linegraph.layout import compute_layout
from linegraph.renderer import LineSeriesRenderer
from linegraph.series import SeriesStyle
from linegraph.surface import DrawSurface


def render_line(
    surface: DrawSurface,
    points: Any,
    *,
    width: float,
    height: float,
    style: SeriesStyle | None = None,
    config: RenderConfig | Mapping[str, Any] | None = None,
    border: float = 0.0,
    horizontal_start: float = 0.0,
) -> LineSeriesRenderer:
    """Normalize ``points``, fit them to the viewport and render one series."""
    series = normalize_points(points)
    layout = compute_layout(series, width, height, border=border, horizontal_start=horizontal_start)
    renderer = LineSeriesRenderer(config)
    renderer.render_series(surface, series, layout, style or SeriesStyle())
    return renderer
