from .axes import (
    AxisTicks,
    axis_line_commands,
    tick_and_grid_commands,
    title_commands,
    x_label_commands,
    y_label_commands,
)
from .legend import legend_commands

__all__ = [
    "AxisTicks",
    "axis_line_commands",
    "legend_commands",
    "tick_and_grid_commands",
    "title_commands",
    "x_label_commands",
    "y_label_commands",
]
