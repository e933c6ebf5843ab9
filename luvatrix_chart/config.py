from __future__ import annotations

from dataclasses import fields
import logging
from pathlib import Path
import tomllib
from typing import Any

from luvatrix_chart.errors import PlotConfigError
from luvatrix_chart.style import (
    AxisConfig,
    GridConfig,
    LabelConfig,
    LegendConfig,
    Margin,
    TickConfig,
    TitleConfig,
)


LOGGER = logging.getLogger(__name__)

STYLE_TABLES: dict[str, type] = {
    "margin": Margin,
    "tick_style": TickConfig,
    "grid_style": GridConfig,
    "legend_style": LegendConfig,
    "axis_style": AxisConfig,
    "title_style": TitleConfig,
    "x_label_style": LabelConfig,
    "y_label_style": LabelConfig,
}
PLOT_KEYS = frozenset(
    {
        "dimensions",
        "title",
        "x_label",
        "y_label",
        "x_range",
        "y_range",
        "legend",
        "axis",
        "tick",
        "grid",
        "minor_grid",
        "x_scale",
        "y_scale",
        "font",
        "background",
    }
)
PAIR_KEYS = frozenset({"dimensions", "x_range", "y_range"})


def load_plot_options(path: str | Path) -> dict[str, Any]:
    """Read plot keyword options from a TOML file.

    Top-level keys are plot options; the tables in ``STYLE_TABLES`` build the
    matching style dataclasses. The result can be splatted into ``Plot``.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"plot config not found: {config_path}")
    with config_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise PlotConfigError(f"invalid TOML in {config_path}: {exc}") from exc
    options = parse_plot_options(raw)
    LOGGER.debug("loaded %d plot options from %s", len(options), config_path)
    return options


def parse_plot_options(raw: dict[str, Any]) -> dict[str, Any]:
    options: dict[str, Any] = {}
    for key, value in raw.items():
        if key in STYLE_TABLES:
            if not isinstance(value, dict):
                raise PlotConfigError(f"[{key}] must be a table")
            options[key] = _build_style(key, STYLE_TABLES[key], value)
        elif key in PLOT_KEYS:
            options[key] = _coerce_plot_value(key, value)
        else:
            raise PlotConfigError(f"unknown plot option: {key!r}")
    return options


def _build_style(table: str, cls: type, values: dict[str, Any]) -> Any:
    allowed = {f.name for f in fields(cls)}
    unknown = sorted(set(values) - allowed)
    if unknown:
        raise PlotConfigError(f"unknown key(s) in [{table}]: {', '.join(unknown)}")
    kwargs = {name: tuple(v) if isinstance(v, list) else v for name, v in values.items()}
    return cls(**kwargs)


def _coerce_plot_value(key: str, value: Any) -> Any:
    if key in PAIR_KEYS:
        if not isinstance(value, list) or len(value) != 2:
            raise PlotConfigError(f"{key} must be a two-element array")
        if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in value):
            raise PlotConfigError(f"{key} must contain numbers")
        return (value[0], value[1])
    if key == "background" and isinstance(value, list):
        return tuple(value)
    if not isinstance(value, str) and key != "background":
        raise PlotConfigError(f"{key} must be a string")
    return value
