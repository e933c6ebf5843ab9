from __future__ import annotations

import numpy as np

from luvatrix_chart.raster.canvas import RGBA, ClipBox, blend_mask, draw_hline, draw_vline


def fill_rect(dst: np.ndarray, x: int, y: int, width: int, height: int, color: RGBA, clip: ClipBox | None = None) -> None:
    if width <= 0 or height <= 0:
        return
    mask = np.full((height, width), 255, dtype=np.uint8)
    blend_mask(dst, x, y, mask, color, clip)


def stroke_rect(
    dst: np.ndarray,
    x: int,
    y: int,
    width: int,
    height: int,
    color: RGBA,
    line_width: int = 1,
    clip: ClipBox | None = None,
) -> None:
    x1 = x + width
    y1 = y + height
    for offset in range(-(line_width // 2), line_width - line_width // 2):
        draw_hline(dst, x, x1, y + offset, color, clip)
        draw_hline(dst, x, x1, y1 + offset, color, clip)
        draw_vline(dst, x + offset, y, y1, color, clip)
        draw_vline(dst, x1 + offset, y, y1, color, clip)


def fill_circle(dst: np.ndarray, cx: float, cy: float, r: float, color: RGBA, clip: ClipBox | None = None) -> None:
    if r <= 0:
        return
    x0 = int(np.floor(cx - r))
    y0 = int(np.floor(cy - r))
    size = int(np.ceil(2 * r)) + 2
    yy, xx = np.mgrid[0:size, 0:size]
    dist2 = (xx + x0 + 0.5 - cx) ** 2 + (yy + y0 + 0.5 - cy) ** 2
    mask = np.where(dist2 <= r * r, 255, 0).astype(np.uint8)
    blend_mask(dst, x0, y0, mask, color, clip)
