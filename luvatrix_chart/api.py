from __future__ import annotations

from typing import Any

from luvatrix_chart.adapters import normalize_xy
from luvatrix_chart.plot import Plot
from luvatrix_chart.series import Series, SeriesStyle


DEFAULT_ASPECT_RATIO = 4.0 / 3.0
DEFAULT_WIDTH = 800


def series(y: Any = None, x: Any = None, data: Any = None, *, name: str = "", **style: Any) -> Series:
    """Build a series from lists, numpy arrays, pandas columns or torch tensors."""
    source_name = y if isinstance(y, str) else None
    series_data = normalize_xy(y, x=x, data=data, source_name=source_name)
    if not name and source_name is not None:
        name = source_name
    return Series(data=series_data, style=SeriesStyle(**style), name=name)


def plot(
    *series_list: Series,
    width: int | None = None,
    height: int | None = None,
    aspect_ratio: float = DEFAULT_ASPECT_RATIO,
    **options: Any,
) -> Plot:
    dimensions = _resolve_dimensions(width, height, aspect_ratio)
    return Plot(series=series_list, dimensions=dimensions, **options)


def _resolve_dimensions(width: int | None, height: int | None, aspect_ratio: float) -> tuple[int, int]:
    if aspect_ratio <= 0:
        raise ValueError("aspect_ratio must be > 0")
    if width is not None and height is not None:
        return width, height
    if height is not None:
        if height <= 0:
            raise ValueError("height must be > 0")
        return max(1, int(round(height * aspect_ratio))), height
    if width is None:
        width = DEFAULT_WIDTH
    elif width <= 0:
        raise ValueError("width must be > 0")
    return width, max(1, int(round(width / aspect_ratio)))
