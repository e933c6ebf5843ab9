from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging

from luvatrix_chart.canvas.commands import DrawCommand, DrawLine, DrawRect, DrawText
from luvatrix_chart.color import resolve_color
from luvatrix_chart.elements import GRID_DASH_ARRAYS, AxisKind, GridKind, ScaleKind, TickKind
from luvatrix_chart.layout import PlotLayout, PlotRect
from luvatrix_chart.mapping import AxisMapper
from luvatrix_chart.scales import TickSet
from luvatrix_chart.style import AxisConfig, GridConfig, LabelConfig, TickConfig, TitleConfig


LOGGER = logging.getLogger(__name__)

# Screen positions this close to a plot edge count as on it.
EDGE_TOLERANCE = 0.1
MAJOR_TICK_WIDTH = 1.0
MINOR_TICK_WIDTH = 0.5
SCALE_FACTOR_TEXT = "×10"


@dataclass(frozen=True)
class AxisTicks:
    """One axis's tick set together with the mapper that places it."""

    ticks: TickSet
    mapper: AxisMapper
    scale: ScaleKind = "none"
    minor_enabled: bool = False


def axis_line_commands(axis: AxisKind, config: AxisConfig, rect: PlotRect) -> list[DrawCommand]:
    color = resolve_color(config.color)
    if axis == "box":
        return [
            DrawRect(
                x=rect.x,
                y=rect.y,
                width=rect.width,
                height=rect.height,
                fill=None,
                stroke=color,
                stroke_width=config.line_width,
            )
        ]
    return [
        DrawLine(rect.x, rect.bottom, rect.right, rect.bottom, stroke=color, width=config.line_width),
        DrawLine(rect.x, rect.y, rect.x, rect.bottom, stroke=color, width=config.line_width),
    ]


def tick_and_grid_commands(
    x_axis: AxisTicks,
    y_axis: AxisTicks,
    rect: PlotRect,
    *,
    axis: AxisKind = "box",
    tick: TickKind = "inward",
    grid: GridKind = "solid",
    tick_config: TickConfig = TickConfig(),
    grid_config: GridConfig = GridConfig(),
    font: str = "Times New Roman",
) -> list[DrawCommand]:
    """Gridlines first, then tick marks and labels, then scale annotations."""
    out: list[DrawCommand] = []
    out.extend(_x_major(x_axis, rect, axis, tick, grid, tick_config, grid_config, font))
    out.extend(_y_major(y_axis, rect, axis, tick, grid, tick_config, grid_config, font))
    out.extend(_scale_annotations(x_axis, y_axis, rect, tick_config, font))
    if x_axis.minor_enabled:
        out.extend(_x_minor(x_axis, rect, axis, tick, grid, tick_config, grid_config))
    if y_axis.minor_enabled:
        out.extend(_y_minor(y_axis, rect, axis, tick, grid, tick_config, grid_config))
    LOGGER.debug(
        "axis commands: %d (x ticks %d, y ticks %d)",
        len(out),
        len(x_axis.ticks.major),
        len(y_axis.ticks.major),
    )
    return out


def title_commands(title: str, layout: PlotLayout, config: TitleConfig, font: str) -> list[DrawCommand]:
    if not title:
        return []
    return [
        DrawText(
            x=layout.rect.center_x,
            y=layout.margin.top * 0.5,
            text=title,
            font=font,
            size=config.font_size,
            color=resolve_color(config.color),
            anchor="middle",
            baseline="middle",
        )
    ]


def x_label_commands(label: str, layout: PlotLayout, config: LabelConfig, font: str) -> list[DrawCommand]:
    if not label:
        return []
    return [
        DrawText(
            x=layout.rect.center_x,
            y=layout.rect.bottom + layout.margin.bottom * 0.6,
            text=label,
            font=font,
            size=config.font_size,
            color=resolve_color(config.color),
            anchor="middle",
            baseline="middle",
        )
    ]


def y_label_commands(label: str, layout: PlotLayout, config: LabelConfig, font: str) -> list[DrawCommand]:
    if not label:
        return []
    # An outside-left legend sits in front of the label column.
    x = layout.left_reserve + layout.base_margin.left * 0.3
    return [
        DrawText(
            x=x,
            y=layout.rect.center_y,
            text=label,
            font=font,
            size=config.font_size,
            color=resolve_color(config.color),
            anchor="middle",
            baseline="middle",
            rotation=-90.0,
        )
    ]


def _visible(pos: float, start: float, end: float) -> bool:
    return start - EDGE_TOLERANCE <= pos <= end + EDGE_TOLERANCE


def _near(a: float, b: float) -> bool:
    return abs(a - b) < EDGE_TOLERANCE


def _direction(tick: TickKind) -> float:
    return -1.0 if tick == "inward" else 1.0


def _x_major(
    axis_ticks: AxisTicks,
    rect: PlotRect,
    axis: AxisKind,
    tick: TickKind,
    grid: GridKind,
    tick_config: TickConfig,
    grid_config: GridConfig,
    font: str,
) -> list[DrawCommand]:
    out: list[DrawCommand] = []
    grid_color = resolve_color(grid_config.color)
    line_color = resolve_color(tick_config.line_color)
    label_color = resolve_color(tick_config.label_color)
    dash = GRID_DASH_ARRAYS[grid]
    sign = _direction(tick)
    label_y = rect.bottom + tick_config.font_size * 0.4 + 5.0

    for value, label in zip(axis_ticks.ticks.major, axis_ticks.ticks.labels):
        sx = axis_ticks.mapper.map(value)
        if not _visible(sx, rect.x, rect.right):
            continue
        if grid != "none":
            skip = _near(sx, rect.x) or (axis == "box" and _near(sx, rect.right))
            if not skip:
                out.append(DrawLine(sx, rect.y, sx, rect.bottom, stroke=grid_color, width=grid_config.line_width, dash=dash))
        if tick != "none":
            out.append(
                DrawLine(sx, rect.bottom, sx, rect.bottom + tick_config.length * sign, stroke=line_color, width=MAJOR_TICK_WIDTH)
            )
            if axis == "box":
                out.append(
                    DrawLine(sx, rect.y, sx, rect.y - tick_config.length * sign, stroke=line_color, width=MAJOR_TICK_WIDTH)
                )
        out.append(
            DrawText(
                x=sx,
                y=label_y,
                text=label.text,
                font=font,
                size=tick_config.font_size,
                color=label_color,
                anchor="middle",
                baseline="hanging",
                superscript=label.superscript,
            )
        )
    return out


def _y_major(
    axis_ticks: AxisTicks,
    rect: PlotRect,
    axis: AxisKind,
    tick: TickKind,
    grid: GridKind,
    tick_config: TickConfig,
    grid_config: GridConfig,
    font: str,
) -> list[DrawCommand]:
    out: list[DrawCommand] = []
    grid_color = resolve_color(grid_config.color)
    line_color = resolve_color(tick_config.line_color)
    label_color = resolve_color(tick_config.label_color)
    dash = GRID_DASH_ARRAYS[grid]
    sign = _direction(tick)
    label_x = rect.x - tick_config.text_padding - tick_config.length

    for value, label in zip(axis_ticks.ticks.major, axis_ticks.ticks.labels):
        sy = axis_ticks.mapper.map(value)
        if not _visible(sy, rect.y, rect.bottom):
            continue
        if grid != "none":
            skip = _near(sy, rect.bottom) or (axis == "box" and _near(sy, rect.y))
            if not skip:
                out.append(DrawLine(rect.x, sy, rect.right, sy, stroke=grid_color, width=grid_config.line_width, dash=dash))
        if tick != "none":
            out.append(DrawLine(rect.x, sy, rect.x - tick_config.length * sign, sy, stroke=line_color, width=MAJOR_TICK_WIDTH))
            if axis == "box":
                out.append(
                    DrawLine(rect.right, sy, rect.right + tick_config.length * sign, sy, stroke=line_color, width=MAJOR_TICK_WIDTH)
                )
        out.append(
            DrawText(
                x=label_x,
                y=sy,
                text=label.text,
                font=font,
                size=tick_config.font_size,
                color=label_color,
                anchor="end",
                baseline="middle",
                superscript=label.superscript,
            )
        )
    return out


def _x_minor(
    axis_ticks: AxisTicks,
    rect: PlotRect,
    axis: AxisKind,
    tick: TickKind,
    grid: GridKind,
    tick_config: TickConfig,
    grid_config: GridConfig,
) -> list[DrawCommand]:
    out: list[DrawCommand] = []
    grid_color = resolve_color(grid_config.minor_color)
    tick_color = resolve_color(tick_config.minor_tick_color)
    dash = GRID_DASH_ARRAYS[grid]
    sign = _direction(tick)
    length = tick_config.minor_tick_length
    for value in axis_ticks.ticks.minor:
        sx = axis_ticks.mapper.map(value)
        if not _visible(sx, rect.x, rect.right):
            continue
        if grid != "none":
            out.append(DrawLine(sx, rect.y, sx, rect.bottom, stroke=grid_color, width=grid_config.minor_line_width, dash=dash))
        if tick != "none":
            out.append(DrawLine(sx, rect.bottom, sx, rect.bottom + length * sign, stroke=tick_color, width=MINOR_TICK_WIDTH))
            if axis == "box":
                out.append(DrawLine(sx, rect.y, sx, rect.y - length * sign, stroke=tick_color, width=MINOR_TICK_WIDTH))
    return out


def _y_minor(
    axis_ticks: AxisTicks,
    rect: PlotRect,
    axis: AxisKind,
    tick: TickKind,
    grid: GridKind,
    tick_config: TickConfig,
    grid_config: GridConfig,
) -> list[DrawCommand]:
    out: list[DrawCommand] = []
    grid_color = resolve_color(grid_config.minor_color)
    tick_color = resolve_color(tick_config.minor_tick_color)
    dash = GRID_DASH_ARRAYS[grid]
    sign = _direction(tick)
    length = tick_config.minor_tick_length
    for value in axis_ticks.ticks.minor:
        sy = axis_ticks.mapper.map(value)
        if not _visible(sy, rect.y, rect.bottom):
            continue
        if grid != "none":
            out.append(DrawLine(rect.x, sy, rect.right, sy, stroke=grid_color, width=grid_config.minor_line_width, dash=dash))
        if tick != "none":
            out.append(DrawLine(rect.x, sy, rect.x - length * sign, sy, stroke=tick_color, width=MINOR_TICK_WIDTH))
            if axis == "box":
                out.append(DrawLine(rect.right, sy, rect.right + length * sign, sy, stroke=tick_color, width=MINOR_TICK_WIDTH))
    return out


def _scale_annotations(
    x_axis: AxisTicks,
    y_axis: AxisTicks,
    rect: PlotRect,
    tick_config: TickConfig,
    font: str,
) -> Sequence[DrawCommand]:
    out: list[DrawCommand] = []
    color = resolve_color(tick_config.label_color)
    if _has_factor(y_axis):
        out.append(
            DrawText(
                x=rect.x + tick_config.text_padding,
                y=rect.y - tick_config.text_padding,
                text=SCALE_FACTOR_TEXT,
                font=font,
                size=tick_config.font_size,
                color=color,
                anchor="start",
                baseline="text-after-edge",
                superscript=str(y_axis.ticks.exponent),
            )
        )
    if _has_factor(x_axis):
        out.append(
            DrawText(
                x=rect.right - tick_config.text_padding,
                y=rect.bottom + tick_config.font_size + tick_config.text_padding * 2.0,
                text=SCALE_FACTOR_TEXT,
                font=font,
                size=tick_config.font_size,
                color=color,
                anchor="end",
                baseline="text-before-edge",
                superscript=str(x_axis.ticks.exponent),
            )
        )
    return out


def _has_factor(axis_ticks: AxisTicks) -> bool:
    return axis_ticks.scale in {"scientific", "engineering"} and axis_ticks.ticks.exponent != 0
