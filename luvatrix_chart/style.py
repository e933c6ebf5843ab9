from __future__ import annotations

from dataclasses import dataclass

from luvatrix_chart.color import Color


@dataclass(frozen=True)
class Margin:
    top: float = 60.0
    bottom: float = 70.0
    left: float = 80.0
    right: float = 30.0


@dataclass(frozen=True)
class TickConfig:
    font_size: float = 10.0
    label_color: Color = "black"
    line_color: Color = "black"
    length: float = 5.0
    text_padding: float = 3.0
    # Pixels of axis length per major tick.
    density_x: float = 50.0
    density_y: float = 50.0
    minor_tick_length: float = 3.0
    minor_tick_color: Color = "black"
    minor_per_interval: int = 4


@dataclass(frozen=True)
class GridConfig:
    color: Color = "lightgray"
    line_width: float = 0.5
    minor_color: Color = "lightgray"
    minor_line_width: float = 0.3


@dataclass(frozen=True)
class LegendConfig:
    font_size: float = 12.0
    text_color: Color = "black"
    border_color: Color = "black"
    background: Color = "white"
    padding: float = 10.0
    item_height: float = 18.0
    color_swatch_width: float = 15.0
    text_offset: float = 5.0


@dataclass(frozen=True)
class AxisConfig:
    color: Color = "black"
    line_width: float = 1.5


@dataclass(frozen=True)
class TitleConfig:
    font_size: float = 20.0
    color: Color = "black"


@dataclass(frozen=True)
class LabelConfig:
    font_size: float = 14.0
    color: Color = "black"
