from __future__ import annotations

from dataclasses import dataclass, replace


RGBA = tuple[int, int, int, int]


@dataclass(frozen=True)
class DataPoint:
    x: float
    y: float


@dataclass(frozen=True)
class SeriesStyle:
    line_thickness: float = 1.0
    line_color: RGBA = (62, 149, 255, 255)
    text_color: RGBA = (255, 255, 255, 255)


@dataclass(frozen=True)
class LayoutParams:
    """Pixel-space layout of the plotting area for one series.

    ``range_x`` and ``range_y`` must be non-zero; they are divisors in the
    point mapping and are not checked.
    """

    graph_width_px: float
    graph_height_px: float
    border_px: float
    min_x: float
    min_y: float
    range_x: float
    range_y: float
    horizontal_start_px: float = 0.0

    @property
    def baseline_px(self) -> float:
        return self.graph_height_px + self.border_px

    def with_marker_inset(self, radius: float, thickness: float) -> "LayoutParams":
        return replace(
            self,
            graph_width_px=self.graph_width_px - (radius * 2 + thickness),
            horizontal_start_px=self.horizontal_start_px + radius,
        )
