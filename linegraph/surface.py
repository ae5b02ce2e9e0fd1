from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol, Sequence, Union

from linegraph.series import RGBA


HAlign = Literal["left", "center", "right"]
VAlign = Literal["top", "center", "bottom"]


class DrawSurface(Protocol):
    """Backend-agnostic 2D sink for the primitives a series render pass emits.

    Coordinates are pixel space with the origin at the top left. Backends must
    tolerate non-finite coordinates (clip or skip), never raise on them.
    """

    def draw_line_segment(self, x1: float, y1: float, x2: float, y2: float, color: RGBA, width: float) -> None:
        ...

    def draw_circle(self, cx: float, cy: float, r: float, color: RGBA, filled: bool, width: float = 1.0) -> None:
        ...

    def draw_filled_polygon(
        self, vertices: Sequence[tuple[float, float]], color: RGBA, stroke_width: float = 0.0
    ) -> None:
        ...

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
        ...


@dataclass(frozen=True)
class LineCommand:
    x1: float
    y1: float
    x2: float
    y2: float
    color: RGBA
    width: float


@dataclass(frozen=True)
class CircleCommand:
    cx: float
    cy: float
    r: float
    color: RGBA
    filled: bool
    width: float


@dataclass(frozen=True)
class PolygonCommand:
    vertices: tuple[tuple[float, float], ...]
    color: RGBA
    stroke_width: float


@dataclass(frozen=True)
class TextCommand:
    text: str
    x: float
    y: float
    color: RGBA
    size: float
    h_align: HAlign
    v_align: VAlign


DrawCommand = Union[LineCommand, CircleCommand, PolygonCommand, TextCommand]


class RecordingSurface(DrawSurface):
    """Keeps every primitive as a display list instead of rasterizing it."""

    def __init__(self) -> None:
        self.commands: list[DrawCommand] = []

    def draw_line_segment(self, x1: float, y1: float, x2: float, y2: float, color: RGBA, width: float) -> None:
        self.commands.append(LineCommand(float(x1), float(y1), float(x2), float(y2), color, float(width)))

    def draw_circle(self, cx: float, cy: float, r: float, color: RGBA, filled: bool, width: float = 1.0) -> None:
        self.commands.append(CircleCommand(float(cx), float(cy), float(r), color, filled, float(width)))

    def draw_filled_polygon(
        self, vertices: Sequence[tuple[float, float]], color: RGBA, stroke_width: float = 0.0
    ) -> None:
        frozen = tuple((float(x), float(y)) for x, y in vertices)
        self.commands.append(PolygonCommand(frozen, color, float(stroke_width)))

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
        self.commands.append(TextCommand(text, float(x), float(y), color, float(size), h_align, v_align))

    def lines(self) -> list[LineCommand]:
        return [c for c in self.commands if isinstance(c, LineCommand)]

    def circles(self) -> list[CircleCommand]:
        return [c for c in self.commands if isinstance(c, CircleCommand)]

    def polygons(self) -> list[PolygonCommand]:
        return [c for c in self.commands if isinstance(c, PolygonCommand)]

    def texts(self) -> list[TextCommand]:
        return [c for c in self.commands if isinstance(c, TextCommand)]

    def clear(self) -> None:
        self.commands.clear()
