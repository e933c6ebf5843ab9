from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from PIL import Image

from luvatrix_chart.canvas.commands import (
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
)
from luvatrix_chart.color import RGBA
from luvatrix_chart.layout import PlotRect
from luvatrix_chart.raster import (
    ClipBox,
    dash_polyline,
    draw_polyline,
    draw_text,
    fill_circle,
    fill_rect,
    nearest_quarter_turn,
    new_canvas,
    stroke_rect,
    text_size,
)


LOGGER = logging.getLogger(__name__)

CUBIC_STEPS = 16
SUPERSCRIPT_SCALE = 0.7
SUPERSCRIPT_RISE = 0.4


class RasterCanvas:
    """Rasterizes draw commands into an RGBA ``uint8`` array of shape (H, W, 4)."""

    def __init__(self, width: float, height: float, *, scale: float = 1.0, background: RGBA | None = None) -> None:
        if scale <= 0:
            raise ValueError("scale must be > 0")
        self.scale = float(scale)
        w = max(1, int(round(width * self.scale)))
        h = max(1, int(round(height * self.scale)))
        self._buffer = new_canvas(w, h, background if background is not None else (255, 255, 255, 255))

    @property
    def size(self) -> tuple[int, int]:
        return (self._buffer.shape[1], self._buffer.shape[0])

    def draw(self, command: DrawCommand) -> None:
        if isinstance(command, DrawRect):
            self._draw_rect(command)
        elif isinstance(command, DrawLine):
            self._draw_line(command)
        elif isinstance(command, DrawPath):
            self._draw_path(command)
        elif isinstance(command, DrawCircle):
            self._draw_circle(command)
        elif isinstance(command, DrawText):
            self._draw_text(command)
        else:
            raise TypeError(f"unsupported draw command: {type(command).__name__}")

    def to_rgba(self) -> np.ndarray:
        return self._buffer.copy()

    def save(self, path: str | Path) -> Path:
        return save_png(self._buffer, path)

    def _px(self, value: float) -> int:
        return int(round(value * self.scale))

    def _width(self, value: float) -> int:
        return max(1, int(round(value * self.scale)))

    def _clip(self, rect: PlotRect | None) -> ClipBox | None:
        if rect is None:
            return None
        return (self._px(rect.x), self._px(rect.y), self._px(rect.right) + 1, self._px(rect.bottom) + 1)

    def _draw_rect(self, cmd: DrawRect) -> None:
        clip = self._clip(cmd.clip)
        x, y = self._px(cmd.x), self._px(cmd.y)
        w, h = self._px(cmd.width), self._px(cmd.height)
        if cmd.fill is not None:
            fill_rect(self._buffer, x, y, w, h, cmd.fill, clip)
        if cmd.stroke is not None:
            stroke_rect(self._buffer, x, y, w, h, cmd.stroke, self._width(cmd.stroke_width), clip)

    def _draw_line(self, cmd: DrawLine) -> None:
        points = [(cmd.x1 * self.scale, cmd.y1 * self.scale), (cmd.x2 * self.scale, cmd.y2 * self.scale)]
        self._stroke([points], cmd.stroke, cmd.width, cmd.dash, self._clip(cmd.clip))

    def _draw_path(self, cmd: DrawPath) -> None:
        if cmd.fill is not None:
            LOGGER.debug("raster paths are stroked only; fill ignored")
        if cmd.stroke is None:
            return
        subpaths = [[(x * self.scale, y * self.scale) for x, y in sub] for sub in flatten_path(cmd.ops)]
        self._stroke(subpaths, cmd.stroke, cmd.width, cmd.dash, self._clip(cmd.clip))

    def _draw_circle(self, cmd: DrawCircle) -> None:
        clip = self._clip(cmd.clip)
        cx, cy, r = cmd.cx * self.scale, cmd.cy * self.scale, cmd.r * self.scale
        if cmd.stroke is not None:
            fill_circle(self._buffer, cx, cy, r + cmd.stroke_width * self.scale / 2.0, cmd.stroke, clip)
        if cmd.fill is not None:
            inner = r - cmd.stroke_width * self.scale / 2.0 if cmd.stroke is not None else r
            fill_circle(self._buffer, cx, cy, inner, cmd.fill, clip)

    def _draw_text(self, cmd: DrawText) -> None:
        if not cmd.text and not cmd.superscript:
            return
        # SVG rotation is clockwise; mask rotation is counter-clockwise.
        rotate = nearest_quarter_turn(-cmd.rotation)
        size = cmd.size * self.scale
        sup_size = size * SUPERSCRIPT_SCALE
        base_w, base_h = text_size(cmd.text, font_family=cmd.font, font_size_px=size)
        sup_w = 0
        if cmd.superscript:
            sup_w, _ = text_size(cmd.superscript, font_family=cmd.font, font_size_px=sup_size)
        total_w = base_w + sup_w
        x, y = cmd.x * self.scale, cmd.y * self.scale

        if rotate % 180 != 0:
            # Rotated labels are only ever centred on their anchor.
            w, h = text_size(cmd.text, font_family=cmd.font, font_size_px=size, rotate_deg=rotate)
            draw_text(
                self._buffer,
                int(round(x - w / 2.0)),
                int(round(y - h / 2.0)),
                cmd.text,
                cmd.color,
                font_family=cmd.font,
                font_size_px=size,
                rotate_deg=rotate,
            )
            return

        left = x - _anchor_offset(cmd.anchor, total_w)
        top = y - _baseline_offset(cmd.baseline, base_h)
        draw_text(self._buffer, int(round(left)), int(round(top)), cmd.text, cmd.color, font_family=cmd.font, font_size_px=size)
        if cmd.superscript:
            draw_text(
                self._buffer,
                int(round(left + base_w)),
                int(round(top - size * SUPERSCRIPT_RISE + base_h * 0.1)),
                cmd.superscript,
                cmd.color,
                font_family=cmd.font,
                font_size_px=sup_size,
            )

    def _stroke(
        self,
        subpaths: list[list[tuple[float, float]]],
        color: RGBA,
        width: float,
        dash: str | None,
        clip: ClipBox | None,
    ) -> None:
        pattern = [float(v) * self.scale for v in dash.split()] if dash else []
        brush = self._width(width)
        for sub in subpaths:
            pieces = dash_polyline(sub, pattern) if pattern else [sub]
            for piece in pieces:
                if len(piece) < 2:
                    continue
                xs = np.asarray([p[0] for p in piece], dtype=np.float64)
                ys = np.asarray([p[1] for p in piece], dtype=np.float64)
                draw_polyline(self._buffer, xs, ys, color, width=brush, clip=clip)


def flatten_path(ops: tuple[PathOp, ...] | list[PathOp], steps: int = CUBIC_STEPS) -> list[list[tuple[float, float]]]:
    """Approximate a path as polylines, one per ``MoveTo``."""
    subpaths: list[list[tuple[float, float]]] = []
    current: list[tuple[float, float]] = []
    for op in ops:
        if isinstance(op, MoveTo):
            if len(current) >= 2:
                subpaths.append(current)
            current = [(op.x, op.y)]
        elif isinstance(op, LineTo):
            current.append((op.x, op.y))
        elif isinstance(op, CubicTo):
            if not current:
                current = [(op.x, op.y)]
                continue
            x0, y0 = current[-1]
            for t in np.linspace(0.0, 1.0, steps + 1)[1:]:
                u = 1.0 - t
                bx = u**3 * x0 + 3 * u * u * t * op.c1x + 3 * u * t * t * op.c2x + t**3 * op.x
                by = u**3 * y0 + 3 * u * u * t * op.c1y + 3 * u * t * t * op.c2y + t**3 * op.y
                current.append((float(bx), float(by)))
        else:
            raise TypeError(f"unsupported path op: {type(op).__name__}")
    if len(current) >= 2:
        subpaths.append(current)
    return subpaths


def save_png(rgba: np.ndarray, path: str | Path) -> Path:
    out = Path(path)
    Image.fromarray(np.ascontiguousarray(rgba, dtype=np.uint8)).save(out, format="PNG")
    return out


def _anchor_offset(anchor: str, width: float) -> float:
    if anchor == "middle":
        return width / 2.0
    if anchor == "end":
        return width
    return 0.0


def _baseline_offset(baseline: str, height: float) -> float:
    if baseline in {"hanging", "text-before-edge"}:
        return 0.0
    if baseline == "middle":
        return height / 2.0
    return height
