from .commands import (
    Canvas,
    CubicTo,
    DrawCircle,
    DrawCommand,
    DrawLine,
    DrawPath,
    DrawRect,
    DrawText,
    LineTo,
    MoveTo,
    PathOp,
    RecordingCanvas,
    draw_all,
    path_vertices,
)
from .raster import RasterCanvas, flatten_path, save_png
from .svg import SvgCanvas, path_data

__all__ = [
    "Canvas",
    "CubicTo",
    "DrawCircle",
    "DrawCommand",
    "DrawLine",
    "DrawPath",
    "DrawRect",
    "DrawText",
    "LineTo",
    "MoveTo",
    "PathOp",
    "RasterCanvas",
    "RecordingCanvas",
    "SvgCanvas",
    "draw_all",
    "flatten_path",
    "path_data",
    "path_vertices",
    "save_png",
]
