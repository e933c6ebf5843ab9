from __future__ import annotations


class PlotDataError(ValueError):
    pass


class PlotConfigError(ValueError):
    pass


class PlotAreaTooSmallError(PlotDataError):
    """Raised when margins and legend leave no drawable plot area."""

    def __init__(self, width: float, height: float) -> None:
        super().__init__(
            f"plot area is too small (width: {width:g}, height: {height:g}); check dimensions and margins"
        )
        self.width = width
        self.height = height
