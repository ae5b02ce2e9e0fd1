from __future__ import annotations

import argparse
import logging
import math
from pathlib import Path

from linegraph import DataPoint, RasterSurface, SeriesStyle, SvgSurface, render_line


def _sample_points(count: int) -> list[DataPoint]:
    return [DataPoint(float(i), math.sin(i / 2.0) * 3.0 + i * 0.25) for i in range(count)]


def main() -> None:
    parser = argparse.ArgumentParser(prog="line-graph-demo")
    parser.add_argument("output", type=Path, help="output file (.png or .svg)")
    parser.add_argument("--width", type=int, default=640)
    parser.add_argument("--height", type=int, default=360)
    parser.add_argument("--points", type=int, default=12)
    parser.add_argument("--markers", action="store_true")
    parser.add_argument("--labels", action="store_true")
    parser.add_argument("--fill", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    background = (12, 16, 24, 255)
    if args.output.suffix.lower() == ".svg":
        surface = SvgSurface(args.width, args.height, background=background)
    else:
        surface = RasterSurface(args.width, args.height, background=background)

    render_line(
        surface,
        _sample_points(args.points),
        width=args.width,
        height=args.height,
        border=20,
        horizontal_start=10,
        style=SeriesStyle(line_thickness=3.0, line_color=(255, 170, 70, 255), text_color=(248, 250, 252, 255)),
        config={
            "draw_data_points": args.markers or args.labels,
            "draw_data_point_index": args.labels,
            "draw_background": args.fill,
            "data_points_radius": 12.0,
        },
    )

    if isinstance(surface, SvgSurface):
        out = surface.save(args.output)
    else:
        out = surface.save_png(args.output)
    print(f"wrote {out}")


if __name__ == "__main__":
    main()
