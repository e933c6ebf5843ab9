from __future__ import annotations

from typing import Literal, get_args


ScaleKind = Literal["none", "scientific", "engineering", "log", "pi"]
AxisKind = Literal["bottom-left", "box"]
TickKind = Literal["inward", "outward", "none"]
GridKind = Literal["solid", "dashed", "dotted", "none"]
MinorGridKind = Literal["none", "x", "y", "both"]
LineKind = Literal["none", "solid", "dashed"]
MarkerKind = Literal["none", "circle", "square", "cross"]
InterpolationKind = Literal["linear", "step", "bezier", "spline"]
LegendPlacement = Literal[
    "none",
    "top-right-inside",
    "top-right-outside",
    "top-left-inside",
    "top-left-outside",
    "bottom-right-inside",
    "bottom-right-outside",
    "bottom-left-inside",
    "bottom-left-outside",
    "right-center-inside",
    "right-center-outside",
    "left-center-inside",
    "left-center-outside",
    "top-center",
    "bottom-center",
]
AxisName = Literal["x", "y"]
Range = tuple[float, float] | None

SCALES: tuple[str, ...] = get_args(ScaleKind)
AXES: tuple[str, ...] = get_args(AxisKind)
TICKS: tuple[str, ...] = get_args(TickKind)
GRIDS: tuple[str, ...] = get_args(GridKind)
MINOR_GRIDS: tuple[str, ...] = get_args(MinorGridKind)
LINES: tuple[str, ...] = get_args(LineKind)
MARKERS: tuple[str, ...] = get_args(MarkerKind)
INTERPOLATIONS: tuple[str, ...] = get_args(InterpolationKind)
LEGEND_PLACEMENTS: tuple[str, ...] = get_args(LegendPlacement)

RIGHT_OUTSIDE_PLACEMENTS = frozenset({"top-right-outside", "right-center-outside", "bottom-right-outside"})
LEFT_OUTSIDE_PLACEMENTS = frozenset({"top-left-outside", "left-center-outside", "bottom-left-outside"})

GRID_DASH_ARRAYS: dict[str, str | None] = {
    "solid": None,
    "dashed": "4 4",
    "dotted": "1 2",
    "none": None,
}
SERIES_DASH_ARRAY = "5 5"


def check_choice(name: str, value: str, allowed: tuple[str, ...]) -> None:
    if value not in allowed:
        raise ValueError(f"unsupported {name}: {value!r} (expected one of {', '.join(allowed)})")
