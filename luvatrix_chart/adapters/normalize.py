from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from luvatrix_chart.errors import PlotDataError
from luvatrix_chart.series import SeriesData
from luvatrix_chart.values import FLOAT64, ScalarKind, scalar_kind_for, to_render_scalar


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def normalize_xy(
    y: Any = None,
    *,
    x: Any = None,
    data: Any = None,
    source_name: str | None = None,
) -> SeriesData:
    y_values = _resolve_input(y=y, key="y", data=data)
    if y_values is None:
        raise PlotDataError("y input is required")

    y_arr, y_kind = _coerce_1d_numeric(y_values, label="y")

    if x is None:
        x_arr = np.arange(y_arr.size, dtype=np.float64)
        x_kind = FLOAT64
    else:
        x_values = _resolve_input(y=x, key="x", data=data)
        x_arr, x_kind = _coerce_1d_numeric(x_values, label="x")

    if x_arr.shape != y_arr.shape:
        raise PlotDataError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")

    mask = np.isfinite(x_arr) & np.isfinite(y_arr)
    return SeriesData(x=x_arr, y=y_arr, mask=mask, x_kind=x_kind, y_kind=y_kind, source_name=source_name)


def normalize_points(points: Iterable[tuple[Any, Any]]) -> SeriesData:
    pairs = list(points)
    for i, pair in enumerate(pairs):
        if len(pair) != 2:
            raise PlotDataError(f"point {i} is not an (x, y) pair: {pair!r}")
    xs = [p[0] for p in pairs]
    ys = [p[1] for p in pairs]
    return normalize_xy(ys, x=xs)


def _resolve_input(y: Any, key: str, data: Any) -> Any:
    if data is not None:
        if pd is None:
            raise PlotDataError("pandas is required when using `data=`")
        if not isinstance(data, pd.DataFrame):
            raise PlotDataError("`data` must be a pandas DataFrame")
        if isinstance(y, str):
            if y not in data.columns:
                raise PlotDataError(f"column not found: {y}")
            return data[y]
        if y is None:
            if key == "y":
                numeric_cols = [c for c in data.columns if _is_numeric_dtype(data[c])]
                if len(numeric_cols) != 1:
                    raise PlotDataError("when y is omitted, data must have exactly one numeric column")
                return data[numeric_cols[0]]
            return None
        return y

    if pd is not None and isinstance(y, pd.DataFrame):
        numeric_cols = [c for c in y.columns if _is_numeric_dtype(y[c])]
        if len(numeric_cols) != 1:
            raise PlotDataError("1-D DataFrame input must contain exactly one numeric column")
        return y[numeric_cols[0]]

    return y


def _is_numeric_dtype(series: Any) -> bool:
    if pd is None:
        return False
    try:
        return bool(pd.api.types.is_numeric_dtype(series))
    except Exception:
        return False


def _coerce_1d_numeric(value: Any, *, label: str) -> tuple[np.ndarray, ScalarKind]:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        arr = tensor.numpy()
        return to_render_scalar(arr), scalar_kind_for(arr.dtype)

    if pd is not None and isinstance(value, pd.Series):
        if value.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value.to_numpy(), label=label)

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        if len(value) == 0:
            return np.zeros(0, dtype=np.float64), FLOAT64
        probe = np.asarray(value)
        if probe.ndim == 1 and probe.dtype.kind in {"i", "u", "f", "b"}:
            return _coerce_ndarray(probe, label=label)
        return _coerce_ndarray(np.asarray(value, dtype=object), label=label)

    raise PlotDataError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> tuple[np.ndarray, ScalarKind]:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return to_render_scalar(arr), scalar_kind_for(arr.dtype)
    if arr.ndim != 1:
        raise PlotDataError(f"{label} must be 1-D")

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise PlotDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out, FLOAT64
