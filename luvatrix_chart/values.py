from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Protocol

import numpy as np


class PlotValue(Protocol):
    """Anything orderable with + - * / that converts to a float can be plotted."""

    def __lt__(self, other: Any) -> bool: ...

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __float__(self) -> float: ...


@dataclass(frozen=True)
class ScalarKind:
    name: str
    epsilon: float
    min_value: float
    max_value: float
    integral: bool = False


def _float_kind(dtype: type[np.floating]) -> ScalarKind:
    info = np.finfo(dtype)
    return ScalarKind(
        name=np.dtype(dtype).name,
        epsilon=float(info.eps),
        min_value=float(info.min),
        max_value=float(info.max),
    )


def _int_kind(dtype: type[np.integer]) -> ScalarKind:
    info = np.iinfo(dtype)
    return ScalarKind(
        name=np.dtype(dtype).name,
        epsilon=1.0,
        min_value=float(info.min),
        max_value=float(info.max),
        integral=True,
    )


FLOAT32 = _float_kind(np.float32)
FLOAT64 = _float_kind(np.float64)
INT32 = _int_kind(np.int32)
INT64 = _int_kind(np.int64)

RENDER_DTYPE = np.float64


def scalar_kind_for(dtype: Any) -> ScalarKind:
    dt = np.dtype(dtype)
    if dt == np.float32:
        return FLOAT32
    if dt == np.int32:
        return INT32
    if dt.kind in {"i", "u", "b"}:
        return INT64
    return FLOAT64


def to_render_scalar(values: Any) -> np.ndarray:
    return np.asarray(values, dtype=RENDER_DTYPE)


def common_epsilon(kinds: Iterable[ScalarKind]) -> float:
    # The coarsest kind decides when a span counts as empty.
    eps = [kind.epsilon for kind in kinds]
    if not eps:
        return FLOAT64.epsilon
    return max(eps)
