from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging
import math

import numpy as np

from luvatrix_chart.elements import AxisName, Range, ScaleKind
from luvatrix_chart.series import Series
from luvatrix_chart.values import common_epsilon


LOGGER = logging.getLogger(__name__)

DEFAULT_DOMAIN = (0.0, 1.0)
DEGENERATE_PAD = 0.5
LOG_DEGENERATE_FACTOR = 10.0


@dataclass(frozen=True)
class AxisDomain:
    vmin: float
    vmax: float

    @property
    def span(self) -> float:
        return self.vmax - self.vmin

    def as_tuple(self) -> tuple[float, float]:
        return (self.vmin, self.vmax)


def series_extent(series: Sequence[Series], axis: AxisName) -> tuple[float, float] | None:
    lows: list[float] = []
    highs: list[float] = []
    for entry in series:
        xs, ys = entry.points()
        values = xs if axis == "x" else ys
        if values.size == 0:
            continue
        lows.append(float(np.min(values)))
        highs.append(float(np.max(values)))
    if not lows:
        return None
    return min(lows), max(highs)


def axis_epsilon(series: Sequence[Series], axis: AxisName) -> float:
    """Coarsest epsilon among the scalar kinds plotted on ``axis``."""
    return common_epsilon(entry.data.kind_for(axis) for entry in series)


def resolve_range(
    series: Sequence[Series],
    axis: AxisName,
    manual: Range = None,
    scale: ScaleKind = "none",
    *,
    epsilon: float | None = None,
) -> AxisDomain:
    """Effective data domain for one axis.

    A manual range wins verbatim. Otherwise the union of all finite points is
    used, padded when it collapses to a point and snapped outward to whole
    decades on log axes with positive data. Collapsed positive data on a log
    axis is widened by a decade either side instead of by 0.5, which could
    push the lower bound to zero or below.
    """
    if manual is not None:
        lo, hi = manual
        return AxisDomain(vmin=float(lo), vmax=float(hi))

    extent = series_extent(series, axis)
    if extent is None:
        return AxisDomain(*DEFAULT_DOMAIN)
    vmin, vmax = extent

    eps = epsilon if epsilon is not None else axis_epsilon(series, axis)
    if (vmax - vmin) < eps:
        if scale == "log" and vmin > 0:
            LOGGER.debug("%s log domain collapsed at %g, widening by a decade", axis, vmin)
            vmin /= LOG_DEGENERATE_FACTOR
            vmax *= LOG_DEGENERATE_FACTOR
        else:
            LOGGER.debug("%s domain collapsed at %g, padding by %g", axis, vmin, DEGENERATE_PAD)
            vmin -= DEGENERATE_PAD
            vmax += DEGENERATE_PAD

    if scale == "log" and vmin > 0:
        vmin = 10.0 ** math.floor(math.log10(vmin))
        vmax = 10.0 ** math.ceil(math.log10(vmax))

    return AxisDomain(vmin=vmin, vmax=vmax)
