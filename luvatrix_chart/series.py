from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from luvatrix_chart.color import Color
from luvatrix_chart.elements import (
    INTERPOLATIONS,
    LINES,
    MARKERS,
    AxisName,
    InterpolationKind,
    LineKind,
    MarkerKind,
    check_choice,
)
from luvatrix_chart.values import FLOAT64, ScalarKind


@dataclass(frozen=True)
class SeriesData:
    x: np.ndarray
    y: np.ndarray
    mask: np.ndarray
    x_kind: ScalarKind = FLOAT64
    y_kind: ScalarKind = FLOAT64
    source_name: str | None = None

    def __len__(self) -> int:
        return int(self.x.size)

    def kind_for(self, axis: AxisName) -> ScalarKind:
        return self.x_kind if axis == "x" else self.y_kind


@dataclass(frozen=True)
class SeriesStyle:
    color: Color = "black"
    line: LineKind = "solid"
    line_width: float = 1.0
    marker: MarkerKind = "none"
    marker_size: float = 4.0
    interpolation: InterpolationKind = "linear"

    def __post_init__(self) -> None:
        check_choice("line style", self.line, LINES)
        check_choice("marker", self.marker, MARKERS)
        check_choice("interpolation", self.interpolation, INTERPOLATIONS)
        if self.line_width < 0:
            raise ValueError("line_width must be >= 0")
        if self.marker_size < 0:
            raise ValueError("marker_size must be >= 0")


@dataclass(frozen=True)
class Series:
    data: SeriesData
    style: SeriesStyle = field(default_factory=SeriesStyle)
    name: str = ""

    @classmethod
    def from_points(cls, points: Iterable[tuple[Any, Any]], *, name: str = "", **style: Any) -> "Series":
        from luvatrix_chart.adapters import normalize_points

        return cls(data=normalize_points(points), style=SeriesStyle(**style), name=name)

    @property
    def color(self) -> Color:
        return self.style.color

    @property
    def is_empty(self) -> bool:
        return not bool(np.any(self.data.mask))

    def points(self) -> tuple[np.ndarray, np.ndarray]:
        """Finite (x, y) pairs in data order."""
        mask = self.data.mask
        return self.data.x[mask], self.data.y[mask]

    def finite_runs(self) -> list[tuple[np.ndarray, np.ndarray]]:
        """Contiguous finite stretches; a NaN gap splits the drawn line."""
        out: list[tuple[np.ndarray, np.ndarray]] = []
        for start, stop in _contiguous_true_runs(self.data.mask):
            out.append((self.data.x[start:stop], self.data.y[start:stop]))
        return out


def _contiguous_true_runs(mask: np.ndarray) -> list[tuple[int, int]]:
    idx = np.flatnonzero(mask)
    if idx.size == 0:
        return []
    runs: list[tuple[int, int]] = []
    start = int(idx[0])
    prev = int(idx[0])
    for v in idx[1:]:
        iv = int(v)
        if iv == prev + 1:
            prev = iv
            continue
        runs.append((start, prev + 1))
        start = iv
        prev = iv
    runs.append((start, prev + 1))
    return runs
