from luvatrix_chart.api import plot, series
from luvatrix_chart.canvas import DrawCircle, DrawLine, DrawPath, DrawRect, DrawText, RasterCanvas, RecordingCanvas, SvgCanvas
from luvatrix_chart.config import load_plot_options
from luvatrix_chart.errors import PlotAreaTooSmallError, PlotConfigError, PlotDataError
from luvatrix_chart.plot import Plot
from luvatrix_chart.series import Series, SeriesData, SeriesStyle
from luvatrix_chart.style import AxisConfig, GridConfig, LabelConfig, LegendConfig, Margin, TickConfig, TitleConfig

__all__ = [
    "AxisConfig",
    "DrawCircle",
    "DrawLine",
    "DrawPath",
    "DrawRect",
    "DrawText",
    "GridConfig",
    "LabelConfig",
    "LegendConfig",
    "Margin",
    "Plot",
    "PlotAreaTooSmallError",
    "PlotConfigError",
    "PlotDataError",
    "RasterCanvas",
    "RecordingCanvas",
    "Series",
    "SeriesData",
    "SeriesStyle",
    "SvgCanvas",
    "TickConfig",
    "TitleConfig",
    "load_plot_options",
    "plot",
    "series",
]
