from .canvas import blend_coverage, blend_mask, new_canvas
from .draw_lines import draw_line_segment
from .draw_shapes import draw_circle, draw_polygon
from .draw_text import draw_text, text_size
from .surface import RasterSurface

__all__ = [
    "RasterSurface",
    "blend_coverage",
    "blend_mask",
    "draw_circle",
    "draw_line_segment",
    "draw_polygon",
    "draw_text",
    "new_canvas",
    "text_size",
]
