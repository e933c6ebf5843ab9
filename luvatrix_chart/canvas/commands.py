from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal, Protocol, TypeAlias

from luvatrix_chart.color import RGBA
from luvatrix_chart.layout import PlotRect


TextAnchor = Literal["start", "middle", "end"]
TextBaseline = Literal["auto", "middle", "hanging", "text-after-edge", "text-before-edge"]


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class CubicTo:
    c1x: float
    c1y: float
    c2x: float
    c2y: float
    x: float
    y: float


PathOp: TypeAlias = MoveTo | LineTo | CubicTo


def path_vertices(ops: Iterable[PathOp]) -> list[tuple[float, float]]:
    """On-curve points of a path in drawing order (control points excluded)."""
    return [(op.x, op.y) for op in ops]


@dataclass(frozen=True)
class DrawRect:
    x: float
    y: float
    width: float
    height: float
    fill: RGBA | None = None
    stroke: RGBA | None = None
    stroke_width: float = 1.0
    clip: PlotRect | None = None


@dataclass(frozen=True)
class DrawLine:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: RGBA
    width: float = 1.0
    dash: str | None = None
    clip: PlotRect | None = None


@dataclass(frozen=True)
class DrawPath:
    ops: tuple[PathOp, ...]
    stroke: RGBA | None
    fill: RGBA | None = None
    width: float = 1.0
    dash: str | None = None
    clip: PlotRect | None = None

    def vertices(self) -> list[tuple[float, float]]:
        return path_vertices(self.ops)


@dataclass(frozen=True)
class DrawCircle:
    cx: float
    cy: float
    r: float
    fill: RGBA | None
    stroke: RGBA | None = None
    stroke_width: float = 1.0
    clip: PlotRect | None = None


@dataclass(frozen=True)
class DrawText:
    x: float
    y: float
    text: str
    font: str
    size: float
    color: RGBA
    anchor: TextAnchor = "start"
    baseline: TextBaseline = "auto"
    rotation: float = 0.0
    superscript: str | None = None


DrawCommand: TypeAlias = DrawRect | DrawLine | DrawPath | DrawCircle | DrawText


class Canvas(Protocol):
    def draw(self, command: DrawCommand) -> None:
        ...


def draw_all(canvas: Canvas, commands: Iterable[DrawCommand]) -> Canvas:
    for command in commands:
        canvas.draw(command)
    return canvas


class RecordingCanvas:
    """Keeps every command in emission order."""

    def __init__(self) -> None:
        self.commands: list[DrawCommand] = []

    def draw(self, command: DrawCommand) -> None:
        self.commands.append(command)

    def of_type(self, kind: type) -> list[DrawCommand]:
        return [c for c in self.commands if isinstance(c, kind)]

    def __len__(self) -> int:
        return len(self.commands)
