from __future__ import annotations

import numpy as np


RGBA = tuple[int, int, int, int]
# (x0, y0, x1, y1), end-exclusive pixel bounds.
ClipBox = tuple[int, int, int, int]


def new_canvas(width: int, height: int, color: RGBA = (255, 255, 255, 255)) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise ValueError("canvas width and height must be > 0")
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    canvas[:, :, 0] = color[0]
    canvas[:, :, 1] = color[1]
    canvas[:, :, 2] = color[2]
    canvas[:, :, 3] = color[3]
    return canvas


def full_clip(dst: np.ndarray) -> ClipBox:
    return (0, 0, dst.shape[1], dst.shape[0])


def intersect_clip(dst: np.ndarray, clip: ClipBox | None) -> ClipBox:
    if clip is None:
        return full_clip(dst)
    x0, y0, x1, y1 = clip
    return (max(0, x0), max(0, y0), min(dst.shape[1], x1), min(dst.shape[0], y1))


def draw_pixel(dst: np.ndarray, x: int, y: int, color: RGBA, clip: ClipBox | None = None) -> None:
    x0, y0, x1, y1 = intersect_clip(dst, clip)
    if y < y0 or y >= y1 or x < x0 or x >= x1:
        return
    a = color[3] / 255.0
    inv = 1.0 - a
    current = dst[y, x, :3].astype(np.float32)
    dst[y, x, 0:3] = (np.asarray(color[0:3], dtype=np.float32) * a + current * inv).astype(np.uint8)
    dst[y, x, 3] = 255


def draw_hline(dst: np.ndarray, x0: int, x1: int, y: int, color: RGBA, clip: ClipBox | None = None) -> None:
    cx0, cy0, cx1, cy1 = intersect_clip(dst, clip)
    if y < cy0 or y >= cy1:
        return
    xa = max(cx0, min(x0, x1))
    xb = min(cx1 - 1, max(x0, x1))
    if xa > xb:
        return
    _blend_segment(dst[y, xa : xb + 1], color)


def draw_vline(dst: np.ndarray, x: int, y0: int, y1: int, color: RGBA, clip: ClipBox | None = None) -> None:
    cx0, cy0, cx1, cy1 = intersect_clip(dst, clip)
    if x < cx0 or x >= cx1:
        return
    ya = max(cy0, min(y0, y1))
    yb = min(cy1 - 1, max(y0, y1))
    if ya > yb:
        return
    _blend_segment(dst[ya : yb + 1, x], color)


def blend_mask(
    dst: np.ndarray,
    x: int,
    y: int,
    mask: np.ndarray,
    color: RGBA,
    clip: ClipBox | None = None,
) -> None:
    """Composite ``color`` through an 8-bit coverage mask placed at (x, y)."""
    h, w = mask.shape
    if h <= 0 or w <= 0:
        return
    cx0, cy0, cx1, cy1 = intersect_clip(dst, clip)
    x0 = max(cx0, x)
    y0 = max(cy0, y)
    x1 = min(cx1, x + w)
    y1 = min(cy1, y + h)
    if x1 <= x0 or y1 <= y0:
        return

    cov = mask[y0 - y : y1 - y, x0 - x : x1 - x].astype(np.float32) / 255.0
    src_alpha = (color[3] / 255.0) * cov
    if not np.any(src_alpha > 0):
        return

    patch = dst[y0:y1, x0:x1]
    dst_rgb = patch[:, :, :3].astype(np.float32)
    dst_alpha = patch[:, :, 3].astype(np.float32) / 255.0
    src_rgb = np.asarray(color[:3], dtype=np.float32).reshape(1, 1, 3)
    out_alpha = src_alpha + dst_alpha * (1.0 - src_alpha)
    out_rgb_num = src_rgb * src_alpha[:, :, None] + dst_rgb * dst_alpha[:, :, None] * (1.0 - src_alpha[:, :, None])
    safe_alpha = np.where(out_alpha > 1e-6, out_alpha, 1.0)
    out_rgb = out_rgb_num / safe_alpha[:, :, None]

    patch[:, :, :3] = np.clip(out_rgb, 0, 255).astype(np.uint8)
    patch[:, :, 3] = np.clip(out_alpha * 255.0, 0, 255).astype(np.uint8)


def _blend_segment(segment: np.ndarray, color: RGBA) -> None:
    a = color[3] / 255.0
    inv = 1.0 - a
    segment[..., :3] = (np.asarray(color[0:3], dtype=np.float32) * a + segment[..., :3].astype(np.float32) * inv).astype(np.uint8)
    segment[..., 3] = 255
