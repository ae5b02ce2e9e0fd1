from __future__ import annotations

from dataclasses import replace
import logging
import math
from typing import Any, Mapping, Sequence

from linegraph.config import RenderConfig, coerce_color, coerce_length, validate_render_config
from linegraph.scales import map_points
from linegraph.series import RGBA, DataPoint, LayoutParams, SeriesStyle
from linegraph.surface import DrawSurface

LOGGER = logging.getLogger(__name__)


class LineSeriesRenderer:
    """Draws one data series as a polyline with optional markers and fill.

    Only the ``RenderConfig`` survives between calls; points, layout and style
    are supplied fresh to every :meth:`render_series` pass.
    """

    def __init__(self, config: RenderConfig | Mapping[str, Any] | None = None) -> None:
        if not isinstance(config, RenderConfig):
            config = validate_render_config(config)
        self._config = replace(config)

    @property
    def config(self) -> RenderConfig:
        return self._config

    @property
    def background_color(self) -> RGBA:
        return self._config.background_color

    @background_color.setter
    def background_color(self, color: RGBA | str) -> None:
        self._config.background_color = coerce_color(color, key="background_color")

    @property
    def background_stroke_width(self) -> float:
        return self._config.background_stroke_width

    @background_stroke_width.setter
    def background_stroke_width(self, width: float) -> None:
        self._config.background_stroke_width = coerce_length(width, key="background_stroke_width")

    @property
    def data_points_radius(self) -> float:
        return self._config.data_points_radius

    @data_points_radius.setter
    def data_points_radius(self, radius: float) -> None:
        self._config.data_points_radius = coerce_length(radius, key="data_points_radius")

    @property
    def draw_background(self) -> bool:
        return self._config.draw_background

    @draw_background.setter
    def draw_background(self, enabled: bool) -> None:
        self._config.draw_background = bool(enabled)

    @property
    def stroke_background(self) -> bool:
        return self._config.stroke_background

    @stroke_background.setter
    def stroke_background(self, enabled: bool) -> None:
        self._config.stroke_background = bool(enabled)

    @property
    def draw_data_points(self) -> bool:
        return self._config.draw_data_points

    @draw_data_points.setter
    def draw_data_points(self, enabled: bool) -> None:
        self._config.draw_data_points = bool(enabled)

    @property
    def draw_data_point_index(self) -> bool:
        return self._config.draw_data_point_index

    @draw_data_point_index.setter
    def draw_data_point_index(self, enabled: bool) -> None:
        self._config.draw_data_point_index = bool(enabled)

    def render_series(
        self,
        surface: DrawSurface,
        points: Sequence[DataPoint],
        layout: LayoutParams,
        style: SeriesStyle,
    ) -> None:
        cfg = replace(self._config)
        radius = cfg.data_points_radius
        if cfg.draw_data_points:
            layout = layout.with_marker_inset(radius, style.line_thickness)

        LOGGER.debug(
            "rendering series: points=%d markers=%s labels=%s fill=%s",
            len(points),
            cfg.draw_data_points,
            cfg.draw_data_point_index,
            cfg.draw_background,
        )

        xs, ys = map_points(points, layout)
        n = len(points)
        path: list[tuple[float, float]] = []
        last_unmod: tuple[float, float] | None = None

        for i in range(1, n):
            start_x, start_y = float(xs[i - 1]), float(ys[i - 1])
            end_x, end_y = float(xs[i]), float(ys[i])

            if cfg.draw_data_points:
                self._draw_data_point(surface, cfg, style, i, start_x, start_y)
                last_unmod = (end_x, end_y)
                # Keep the segment out of both marker discs.
                theta = math.atan2(end_y - start_y, end_x - start_x)
                dx = math.cos(theta) * radius
                dy = math.sin(theta) * radius
                start_x += dx
                start_y += dy
                end_x -= dx
                end_y -= dy

            surface.draw_line_segment(start_x, start_y, end_x, end_y, style.line_color, style.line_thickness)
            if cfg.draw_background:
                path.append((start_x, start_y))
                path.append((end_x, end_y))

        # Labels run 1..n; a series with fewer than two points gets no marker.
        if last_unmod is not None:
            self._draw_data_point(surface, cfg, style, n, last_unmod[0], last_unmod[1])

        if path:
            baseline = layout.baseline_px
            path.append((path[-1][0], baseline))
            path.append((path[0][0], baseline))
            stroke_width = cfg.background_stroke_width if cfg.stroke_background else 0.0
            surface.draw_filled_polygon(path, cfg.background_color, stroke_width)

    def draw_data_point(self, surface: DrawSurface, style: SeriesStyle, index: int, x: float, y: float) -> None:
        self._draw_data_point(surface, self._config, style, index, x, y)

    @staticmethod
    def _draw_data_point(
        surface: DrawSurface,
        cfg: RenderConfig,
        style: SeriesStyle,
        index: int,
        x: float,
        y: float,
    ) -> None:
        radius = cfg.data_points_radius
        surface.draw_circle(x, y, radius, cfg.background_color, True)
        surface.draw_circle(x, y, radius, style.line_color, False, style.line_thickness)
        if cfg.draw_data_point_index:
            surface.draw_text(str(index), x, y, style.text_color, radius, "center", "center")
