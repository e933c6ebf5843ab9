from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from luvatrix_chart.raster.canvas import RGBA, ClipBox, draw_pixel


Point = tuple[float, float]


def draw_polyline(
    dst: np.ndarray,
    xs: np.ndarray,
    ys: np.ndarray,
    color: RGBA,
    width: int = 1,
    clip: ClipBox | None = None,
) -> None:
    if xs.size < 2:
        return
    px = np.rint(xs).astype(np.int64)
    py = np.rint(ys).astype(np.int64)
    for i in range(px.size - 1):
        _draw_line_segment(dst, int(px[i]), int(py[i]), int(px[i + 1]), int(py[i + 1]), color=color, width=width, clip=clip)


def dash_polyline(points: Sequence[Point], pattern: Sequence[float]) -> list[list[Point]]:
    """Split a polyline into the "on" pieces of an on/off dash pattern."""
    if len(points) < 2:
        return []
    if not pattern or sum(pattern) <= 0:
        return [list(points)]
    # Odd-length patterns repeat to an even length, as in SVG.
    if len(pattern) % 2 == 1:
        pattern = list(pattern) * 2

    pieces: list[list[Point]] = []
    index = 0
    remaining = float(pattern[0])
    drawing = True
    current: list[Point] = [points[0]]
    for (x0, y0), (x1, y1) in zip(points[:-1], points[1:]):
        seg_len = float(np.hypot(x1 - x0, y1 - y0))
        pos = 0.0
        while seg_len - pos > remaining:
            pos += remaining
            t = pos / seg_len
            split = (x0 + (x1 - x0) * t, y0 + (y1 - y0) * t)
            if drawing:
                current.append(split)
                pieces.append(current)
            current = [split]
            drawing = not drawing
            index = (index + 1) % len(pattern)
            remaining = float(pattern[index])
        remaining -= seg_len - pos
        if drawing:
            current.append((x1, y1))
        else:
            current = [(x1, y1)]
    if drawing and len(current) >= 2:
        pieces.append(current)
    return pieces


def _draw_line_segment(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA, width: int, clip: ClipBox | None) -> None:
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        _draw_square_brush(dst, x0, y0, color=color, width=width, clip=clip)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def _draw_square_brush(dst: np.ndarray, x: int, y: int, color: RGBA, width: int, clip: ClipBox | None) -> None:
    radius = max(0, width // 2)
    for yy in range(y - radius, y + radius + 1):
        for xx in range(x - radius, x + radius + 1):
            draw_pixel(dst, xx, yy, color, clip)
