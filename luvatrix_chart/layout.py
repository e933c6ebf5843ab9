from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging

from luvatrix_chart.elements import (
    LEFT_OUTSIDE_PLACEMENTS,
    RIGHT_OUTSIDE_PLACEMENTS,
    LegendPlacement,
)
from luvatrix_chart.errors import PlotAreaTooSmallError
from luvatrix_chart.series import Series
from luvatrix_chart.style import LegendConfig, Margin


LOGGER = logging.getLogger(__name__)

TEXT_WIDTH_FACTOR = 0.6


def estimate_text_width(text: str, font_size: float) -> float:
    """Crude advance-width estimate; real glyph metrics are not needed for layout."""
    return len(text) * font_size * TEXT_WIDTH_FACTOR


@dataclass(frozen=True)
class PlotRect:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2.0

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2.0


@dataclass(frozen=True)
class LegendBox:
    placement: LegendPlacement
    width: float
    height: float
    items: int


@dataclass(frozen=True)
class PlotLayout:
    width: float
    height: float
    rect: PlotRect
    margin: Margin
    base_margin: Margin

    @property
    def left_reserve(self) -> float:
        """Extra left margin taken by an outside legend."""
        return self.margin.left - self.base_margin.left


def plan_legend(series: Sequence[Series], placement: LegendPlacement, config: LegendConfig) -> LegendBox | None:
    if placement == "none" or not series:
        return None
    name_w = max(estimate_text_width(entry.name, config.font_size) for entry in series)
    return LegendBox(
        placement=placement,
        width=config.color_swatch_width + config.text_offset + name_w,
        height=len(series) * config.item_height + config.padding * 2.0,
        items=len(series),
    )


def compute_plot_rect(
    dimensions: tuple[int, int],
    margin: Margin,
    legend: LegendBox | None = None,
    *,
    legend_padding: float = 0.0,
) -> PlotLayout:
    total_w, total_h = dimensions
    left = margin.left
    right = margin.right
    if legend is not None:
        if legend.placement in RIGHT_OUTSIDE_PLACEMENTS:
            right += legend.width + legend_padding
        elif legend.placement in LEFT_OUTSIDE_PLACEMENTS:
            left += legend.width + legend_padding

    width = float(total_w) - left - right
    height = float(total_h) - margin.top - margin.bottom
    if width <= 0 or height <= 0:
        raise PlotAreaTooSmallError(width, height)

    rect = PlotRect(x=left, y=margin.top, width=width, height=height)
    LOGGER.debug("plot area %s", rect)
    return PlotLayout(
        width=float(total_w),
        height=float(total_h),
        rect=rect,
        margin=Margin(top=margin.top, bottom=margin.bottom, left=left, right=right),
        base_margin=margin,
    )


def legend_anchor(layout: PlotLayout, legend: LegendBox, padding: float) -> tuple[float, float]:
    """Top-left corner of the legend box for its placement."""
    rect = layout.rect
    placement = legend.placement
    inside_right = rect.right - legend.width - padding
    inside_left = rect.x + padding
    outside_right = layout.width - layout.margin.right + padding
    outside_left = padding
    center_x = rect.x + (rect.width - legend.width) / 2.0
    top = rect.y + padding
    bottom = rect.bottom - legend.height - padding
    middle = rect.y + (rect.height - legend.height) / 2.0

    anchors: dict[str, tuple[float, float]] = {
        "top-right-inside": (inside_right, top),
        "top-right-outside": (outside_right, top),
        "top-left-inside": (inside_left, top),
        "top-left-outside": (outside_left, top),
        "bottom-right-inside": (inside_right, bottom),
        "bottom-right-outside": (outside_right, bottom),
        "bottom-left-inside": (inside_left, bottom),
        "bottom-left-outside": (outside_left, bottom),
        "right-center-inside": (inside_right, middle),
        "right-center-outside": (outside_right, middle),
        "left-center-inside": (inside_left, middle),
        "left-center-outside": (outside_left, middle),
        "top-center": (center_x, top),
        "bottom-center": (center_x, bottom),
    }
    if placement not in anchors:
        raise ValueError(f"legend placement has no anchor: {placement!r}")
    return anchors[placement]
