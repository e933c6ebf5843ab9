from __future__ import annotations

from dataclasses import dataclass
import math
from typing import TYPE_CHECKING

import numpy as np

from luvatrix_chart.elements import ScaleKind
from luvatrix_chart.limits import AxisDomain
from luvatrix_chart.values import FLOAT64

if TYPE_CHECKING:
    from luvatrix_chart.layout import PlotRect


LOG_VALUE_FLOOR = 0.001
LOG_DOMAIN_FALLBACK = (1.0, 10.0)


@dataclass(frozen=True)
class AxisMapper:
    """Maps data values on one axis to pixel positions along a plot edge.

    ``start``/``length`` describe the pixel interval. Inverted axes (screen Y)
    put ``vmin`` at ``start + length``. Log axes clamp non-positive input to
    ``LOG_VALUE_FLOOR`` and non-positive bounds to ``LOG_DOMAIN_FALLBACK``;
    if clamping leaves the bounds out of order the whole fallback is used.
    """

    vmin: float
    vmax: float
    start: float
    length: float
    log: bool = False
    inverted: bool = False
    epsilon: float = FLOAT64.epsilon

    @property
    def center(self) -> float:
        return self.start + self.length / 2.0

    def _bounds(self) -> tuple[float, float]:
        if not self.log:
            return self.vmin, self.vmax
        lo = self.vmin if self.vmin > 0 else LOG_DOMAIN_FALLBACK[0]
        hi = self.vmax if self.vmax > 0 else LOG_DOMAIN_FALLBACK[1]
        clamped = self.vmin <= 0 or self.vmax <= 0
        if clamped and lo >= hi:
            lo, hi = LOG_DOMAIN_FALLBACK
        return math.log10(lo), math.log10(hi)

    def is_degenerate(self) -> bool:
        if abs(self.vmax - self.vmin) < self.epsilon:
            return True
        lo, hi = self._bounds()
        return lo == hi

    def map(self, value: float) -> float:
        return float(self.map_many(np.asarray([value], dtype=np.float64))[0])

    def map_many(self, values: np.ndarray) -> np.ndarray:
        values = np.asarray(values, dtype=np.float64)
        if self.is_degenerate():
            return np.full(values.shape, self.center, dtype=np.float64)
        lo, hi = self._bounds()
        if self.log:
            values = np.log10(np.where(values > 0, values, LOG_VALUE_FLOOR))
        frac = (values - lo) / (hi - lo) * self.length
        if self.inverted:
            return self.start + self.length - frac
        return self.start + frac


@dataclass(frozen=True)
class PlotMapper:
    x: AxisMapper
    y: AxisMapper

    @classmethod
    def build(
        cls,
        rect: "PlotRect",
        x_domain: AxisDomain,
        y_domain: AxisDomain,
        *,
        x_scale: ScaleKind = "none",
        y_scale: ScaleKind = "none",
        x_epsilon: float = FLOAT64.epsilon,
        y_epsilon: float = FLOAT64.epsilon,
    ) -> "PlotMapper":
        return cls(
            x=AxisMapper(
                vmin=x_domain.vmin,
                vmax=x_domain.vmax,
                start=rect.x,
                length=rect.width,
                log=x_scale == "log",
                epsilon=x_epsilon,
            ),
            y=AxisMapper(
                vmin=y_domain.vmin,
                vmax=y_domain.vmax,
                start=rect.y,
                length=rect.height,
                log=y_scale == "log",
                inverted=True,
                epsilon=y_epsilon,
            ),
        )

    def map_x(self, value: float) -> float:
        return self.x.map(value)

    def map_y(self, value: float) -> float:
        return self.y.map(value)

    def map_points(self, xs: np.ndarray, ys: np.ndarray) -> list[tuple[float, float]]:
        px = self.x.map_many(xs)
        py = self.y.map_many(ys)
        return list(zip(px.tolist(), py.tolist()))
