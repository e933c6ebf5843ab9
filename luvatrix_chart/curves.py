from __future__ import annotations

from collections.abc import Sequence
import math

from luvatrix_chart.canvas.commands import (
    CubicTo,
    DrawCircle,
    DrawCommand,
    DrawPath,
    DrawRect,
    LineTo,
    MoveTo,
    PathOp,
    path_vertices,
)
from luvatrix_chart.color import RGBA, resolve_color
from luvatrix_chart.elements import SERIES_DASH_ARRAY, InterpolationKind
from luvatrix_chart.layout import PlotRect
from luvatrix_chart.mapping import PlotMapper
from luvatrix_chart.series import Series


Point = tuple[float, float]

BEZIER_CONTROL_FRACTION = 0.25
SPLINE_TENSION = 0.5
CROSS_STROKE_WIDTH = 1.0

__all__ = [
    "CubicTo",
    "LineTo",
    "MoveTo",
    "PathOp",
    "build_path",
    "marker_commands",
    "path_vertices",
    "series_commands",
]


def build_path(points: Sequence[Point], interpolation: InterpolationKind = "linear") -> tuple[PathOp, ...]:
    """Path ops through already-mapped pixel points."""
    if len(points) < 2:
        return ()
    if interpolation == "step":
        return _step_path(points)
    if interpolation == "bezier":
        return _bezier_path(points)
    if interpolation == "spline":
        if len(points) < 3:
            return _linear_path(points)
        return _spline_path(points)
    if interpolation == "linear":
        return _linear_path(points)
    raise ValueError(f"unsupported interpolation: {interpolation!r}")


def series_commands(series: Series, mapper: PlotMapper, clip: PlotRect | None = None) -> list[DrawCommand]:
    style = series.style
    color = resolve_color(style.color)
    out: list[DrawCommand] = []

    if style.line != "none":
        dash = SERIES_DASH_ARRAY if style.line == "dashed" else None
        for xs, ys in series.finite_runs():
            if xs.size < 2:
                continue
            ops = build_path(mapper.map_points(xs, ys), style.interpolation)
            out.append(DrawPath(ops=ops, stroke=color, fill=None, width=style.line_width, dash=dash, clip=clip))

    if style.marker != "none":
        xs, ys = series.points()
        for px, py in mapper.map_points(xs, ys):
            out.extend(marker_commands(style.marker, px, py, style.marker_size, color, clip))
    return out


def marker_commands(
    marker: str, x: float, y: float, size: float, color: RGBA, clip: PlotRect | None = None
) -> list[DrawCommand]:
    half = size / 2.0
    if marker == "circle":
        return [DrawCircle(cx=x, cy=y, r=half, fill=color, clip=clip)]
    if marker == "square":
        return [DrawRect(x=x - half, y=y - half, width=size, height=size, fill=color, clip=clip)]
    if marker == "cross":
        ops = (
            MoveTo(x - half, y - half),
            LineTo(x + half, y + half),
            MoveTo(x - half, y + half),
            LineTo(x + half, y - half),
        )
        return [DrawPath(ops=ops, stroke=color, fill=None, width=CROSS_STROKE_WIDTH, clip=clip)]
    return []


def _linear_path(points: Sequence[Point]) -> tuple[PathOp, ...]:
    first = points[0]
    return (MoveTo(*first),) + tuple(LineTo(x, y) for x, y in points[1:])


def _step_path(points: Sequence[Point]) -> tuple[PathOp, ...]:
    ops: list[PathOp] = [MoveTo(*points[0])]
    for (_, cy), (nx, ny) in zip(points[:-1], points[1:]):
        ops.append(LineTo(nx, cy))
        ops.append(LineTo(nx, ny))
    return tuple(ops)


def _bezier_path(points: Sequence[Point]) -> tuple[PathOp, ...]:
    # Tangents follow the neighbours; control arms are a quarter of the chord.
    ops: list[PathOp] = [MoveTo(*points[0])]
    last = len(points) - 1
    for i in range(1, len(points)):
        current = points[i - 1]
        upcoming = points[i]
        before = points[i - 2] if i > 1 else current
        after = points[i + 1] if i < last else upcoming
        arm = math.dist(current, upcoming) * BEZIER_CONTROL_FRACTION
        ux1, uy1 = _unit(upcoming[0] - before[0], upcoming[1] - before[1])
        ux2, uy2 = _unit(after[0] - current[0], after[1] - current[1])
        ops.append(
            CubicTo(
                current[0] + ux1 * arm,
                current[1] + uy1 * arm,
                upcoming[0] - ux2 * arm,
                upcoming[1] - uy2 * arm,
                upcoming[0],
                upcoming[1],
            )
        )
    return tuple(ops)


def _spline_path(points: Sequence[Point]) -> tuple[PathOp, ...]:
    ops: list[PathOp] = [MoveTo(*points[0])]
    last = len(points) - 1
    t = SPLINE_TENSION
    for i in range(1, len(points)):
        p0 = points[i - 2] if i > 1 else points[i - 1]
        p1 = points[i - 1]
        p2 = points[i]
        p3 = points[i + 1] if i < last else points[i]
        ops.append(
            CubicTo(
                p1[0] + t * (p2[0] - p0[0]) / 6.0,
                p1[1] + t * (p2[1] - p0[1]) / 6.0,
                p2[0] - t * (p3[0] - p1[0]) / 6.0,
                p2[1] - t * (p3[1] - p1[1]) / 6.0,
                p2[0],
                p2[1],
            )
        )
    return tuple(ops)


def _unit(dx: float, dy: float) -> Point:
    length = math.hypot(dx, dy)
    if length <= 0:
        return (0.0, 0.0)
    return (dx / length, dy / length)
