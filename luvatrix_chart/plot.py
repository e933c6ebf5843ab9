from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
import logging
import math
from pathlib import Path
from typing import Any

import numpy as np
from PIL import Image

from luvatrix_chart.canvas import DrawCommand, DrawRect, RasterCanvas, SvgCanvas, draw_all, save_png
from luvatrix_chart.color import Color, resolve_color
from luvatrix_chart.compose import (
    AxisTicks,
    axis_line_commands,
    legend_commands,
    tick_and_grid_commands,
    title_commands,
    x_label_commands,
    y_label_commands,
)
from luvatrix_chart.config import load_plot_options
from luvatrix_chart.curves import series_commands
from luvatrix_chart.elements import (
    AXES,
    GRIDS,
    LEGEND_PLACEMENTS,
    MINOR_GRIDS,
    SCALES,
    TICKS,
    AxisKind,
    GridKind,
    LegendPlacement,
    MinorGridKind,
    Range,
    ScaleKind,
    TickKind,
    check_choice,
)
from luvatrix_chart.layout import compute_plot_rect, legend_anchor, plan_legend
from luvatrix_chart.limits import axis_epsilon, resolve_range
from luvatrix_chart.mapping import PlotMapper
from luvatrix_chart.scales import build_tick_set, target_tick_count
from luvatrix_chart.series import Series
from luvatrix_chart.style import (
    AxisConfig,
    GridConfig,
    LabelConfig,
    LegendConfig,
    Margin,
    TickConfig,
    TitleConfig,
)


LOGGER = logging.getLogger(__name__)

WHITE = (255, 255, 255, 255)
DEFAULT_FONT = "Times New Roman"


@dataclass(frozen=True)
class Plot:
    """Declarative chart description; rendering never mutates it."""

    series: tuple[Series, ...] = ()
    dimensions: tuple[int, int] = (800, 600)
    title: str = ""
    x_label: str = ""
    y_label: str = ""
    x_range: Range = None
    y_range: Range = None
    legend: LegendPlacement = "none"
    axis: AxisKind = "box"
    tick: TickKind = "inward"
    grid: GridKind = "solid"
    minor_grid: MinorGridKind = "none"
    x_scale: ScaleKind = "none"
    y_scale: ScaleKind = "none"
    font: str = DEFAULT_FONT
    background: Color = "white"
    margin: Margin = field(default_factory=Margin)
    tick_style: TickConfig = field(default_factory=TickConfig)
    grid_style: GridConfig = field(default_factory=GridConfig)
    legend_style: LegendConfig = field(default_factory=LegendConfig)
    axis_style: AxisConfig = field(default_factory=AxisConfig)
    title_style: TitleConfig = field(default_factory=TitleConfig)
    x_label_style: LabelConfig = field(default_factory=LabelConfig)
    y_label_style: LabelConfig = field(default_factory=LabelConfig)

    def __post_init__(self) -> None:
        object.__setattr__(self, "series", tuple(self.series))
        for entry in self.series:
            if not isinstance(entry, Series):
                raise TypeError(f"series entries must be Series, got {type(entry).__name__}")
        width, height = self.dimensions
        if width <= 0 or height <= 0:
            raise ValueError("dimensions must be > 0")
        object.__setattr__(self, "dimensions", (int(width), int(height)))
        check_choice("legend placement", self.legend, LEGEND_PLACEMENTS)
        check_choice("axis", self.axis, AXES)
        check_choice("tick", self.tick, TICKS)
        check_choice("grid", self.grid, GRIDS)
        check_choice("minor grid", self.minor_grid, MINOR_GRIDS)
        check_choice("x scale", self.x_scale, SCALES)
        check_choice("y scale", self.y_scale, SCALES)
        for name in ("x_range", "y_range"):
            value = getattr(self, name)
            if value is None:
                continue
            lo, hi = value
            if not (math.isfinite(lo) and math.isfinite(hi)):
                raise ValueError(f"{name} bounds must be finite")
            object.__setattr__(self, name, (float(lo), float(hi)))

    @classmethod
    def from_toml(cls, path: str | Path, series: Iterable[Series] = (), **overrides: Any) -> "Plot":
        options = load_plot_options(path)
        options.update(overrides)
        return cls(series=tuple(series), **options)

    def render(self) -> list[DrawCommand]:
        """Resolve ranges, ticks and layout, then emit draw commands in paint order."""
        legend_box = plan_legend(self.series, self.legend, self.legend_style)
        layout = compute_plot_rect(
            self.dimensions,
            self.margin,
            legend_box,
            legend_padding=self.legend_style.padding,
        )
        rect = layout.rect

        x_epsilon = axis_epsilon(self.series, "x")
        y_epsilon = axis_epsilon(self.series, "y")
        x_domain = resolve_range(self.series, "x", self.x_range, self.x_scale, epsilon=x_epsilon)
        y_domain = resolve_range(self.series, "y", self.y_range, self.y_scale, epsilon=y_epsilon)
        LOGGER.debug("domains x=%s y=%s", x_domain.as_tuple(), y_domain.as_tuple())

        mapper = PlotMapper.build(
            rect,
            x_domain,
            y_domain,
            x_scale=self.x_scale,
            y_scale=self.y_scale,
            x_epsilon=x_epsilon,
            y_epsilon=y_epsilon,
        )
        x_minor = self.minor_grid in {"x", "both"}
        y_minor = self.minor_grid in {"y", "both"}
        x_ticks = build_tick_set(
            x_domain,
            self.x_scale,
            target_tick_count(rect.width, self.tick_style.density_x),
            minor=x_minor,
            minor_per_interval=self.tick_style.minor_per_interval,
        )
        y_ticks = build_tick_set(
            y_domain,
            self.y_scale,
            target_tick_count(rect.height, self.tick_style.density_y),
            minor=y_minor,
            minor_per_interval=self.tick_style.minor_per_interval,
        )
        LOGGER.debug("ticks x=%d y=%d", len(x_ticks.major), len(y_ticks.major))

        width, height = self.dimensions
        commands: list[DrawCommand] = [
            DrawRect(x=0.0, y=0.0, width=float(width), height=float(height), fill=resolve_color(self.background, default=WHITE))
        ]
        commands.extend(title_commands(self.title, layout, self.title_style, self.font))
        commands.extend(x_label_commands(self.x_label, layout, self.x_label_style, self.font))
        commands.extend(y_label_commands(self.y_label, layout, self.y_label_style, self.font))
        commands.extend(axis_line_commands(self.axis, self.axis_style, rect))
        commands.extend(
            tick_and_grid_commands(
                AxisTicks(x_ticks, mapper.x, self.x_scale, x_minor),
                AxisTicks(y_ticks, mapper.y, self.y_scale, y_minor),
                rect,
                axis=self.axis,
                tick=self.tick,
                grid=self.grid,
                tick_config=self.tick_style,
                grid_config=self.grid_style,
                font=self.font,
            )
        )
        for entry in self.series:
            commands.extend(series_commands(entry, mapper, clip=rect))
        if legend_box is not None:
            anchor = legend_anchor(layout, legend_box, self.legend_style.padding)
            commands.extend(legend_commands(self.series, legend_box, anchor, self.legend_style, self.font))
        LOGGER.debug("rendered %d commands", len(commands))
        return commands

    def to_svg(self) -> str:
        width, height = self.dimensions
        canvas = SvgCanvas(width, height)
        draw_all(canvas, self.render())
        return canvas.to_markup()

    def to_rgba(self, scale: float = 1.0) -> np.ndarray:
        width, height = self.dimensions
        commands = self.render()
        canvas = RasterCanvas(width, height, scale=scale, background=resolve_color(self.background, default=WHITE))
        draw_all(canvas, commands)
        return canvas.to_rgba()

    def save(self, path: str | Path, scale: float = 1.0) -> Path:
        out = Path(path)
        suffix = out.suffix.lower()
        if suffix == ".svg":
            out.write_text(self.to_svg(), encoding="utf-8")
            return out
        rgba = self.to_rgba(scale=scale)
        if suffix == ".png":
            return save_png(rgba, out)
        image = Image.fromarray(rgba)
        if suffix in {".jpg", ".jpeg", ".bmp"}:
            image = image.convert("RGB")
        image.save(out)
        return out
