from __future__ import annotations

from collections.abc import Sequence

from luvatrix_chart.canvas.commands import DrawCommand, DrawRect, DrawText
from luvatrix_chart.color import resolve_color
from luvatrix_chart.layout import LegendBox
from luvatrix_chart.series import Series
from luvatrix_chart.style import LegendConfig


SWATCH_HEIGHT_FRACTION = 0.8
BORDER_WIDTH = 1.0


def legend_commands(
    series: Sequence[Series],
    legend: LegendBox | None,
    anchor: tuple[float, float],
    config: LegendConfig,
    font: str,
) -> list[DrawCommand]:
    if legend is None or not series:
        return []
    x, y = anchor
    out: list[DrawCommand] = [
        DrawRect(
            x=x,
            y=y,
            width=legend.width,
            height=legend.height,
            fill=resolve_color(config.background, default=(255, 255, 255, 255)),
            stroke=resolve_color(config.border_color),
            stroke_width=BORDER_WIDTH,
        )
    ]
    text_color = resolve_color(config.text_color)
    swatch_h = config.item_height * SWATCH_HEIGHT_FRACTION
    swatch_x = x + config.padding
    for index, entry in enumerate(series):
        item_y = y + config.padding + index * config.item_height
        out.append(
            DrawRect(
                x=swatch_x,
                y=item_y + (config.item_height - swatch_h) / 2.0,
                width=config.color_swatch_width,
                height=swatch_h,
                fill=resolve_color(entry.color),
            )
        )
        out.append(
            DrawText(
                x=swatch_x + config.color_swatch_width + config.text_offset,
                y=item_y + config.item_height / 2.0,
                text=entry.name,
                font=font,
                size=config.font_size,
                color=text_color,
                anchor="start",
                baseline="middle",
            )
        )
    return out
