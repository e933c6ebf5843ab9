from .canvas import ClipBox, blend_mask, draw_hline, draw_pixel, draw_vline, new_canvas
from .draw_lines import dash_polyline, draw_polyline
from .draw_shapes import fill_circle, fill_rect, stroke_rect
from .draw_text import draw_text, nearest_quarter_turn, text_size

__all__ = [
    "ClipBox",
    "blend_mask",
    "dash_polyline",
    "draw_hline",
    "draw_pixel",
    "draw_polyline",
    "draw_text",
    "draw_vline",
    "fill_circle",
    "fill_rect",
    "nearest_quarter_turn",
    "new_canvas",
    "stroke_rect",
    "text_size",
]
