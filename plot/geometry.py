"""Per-paint plot geometry: axes, gridlines, tick labels and the curve.

build_plot_geometry() turns the immutable plot state plus the current
client size into pixel coordinates. It has no Qt dependency; the canvas
only strokes what it returns.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from plot.config import PlotConfig
from plot.mapping import (
    DrawableRect, drawable_rect,
    map_world_to_screen_x, map_world_to_screen_y,
    x_tick_values, y_tick_values,
    format_x_label, format_y_label,
)
from plot.sampling import YRange

# Gap between an axis and its tick labels
LABEL_OFFSET = 5


class Line(NamedTuple):
    x1: float
    y1: float
    x2: float
    y2: float


class TickLabel(NamedTuple):
    """Tick label text and its anchor point.

    X labels are centred horizontally on the anchor with their top edge
    at anchor y. Y labels end at anchor x and are centred vertically on
    anchor y.
    """

    text: str
    x: float
    y: float


class PlotGeometry(NamedTuple):
    """Everything drawn in one paint pass, in pixel coordinates."""

    rect: DrawableRect
    x_axis: Line
    y_axis: Line
    x_grid: list[Line]
    x_labels: list[TickLabel]
    y_grid: list[Line]
    y_labels: list[TickLabel]
    curve_x: np.ndarray
    curve_y: np.ndarray


def build_plot_geometry(
    config: PlotConfig,
    y_range: YRange,
    samples: tuple[np.ndarray, np.ndarray],
    client_width: int,
    client_height: int,
) -> PlotGeometry | None:
    """Compute the pixel geometry for a client area of the given size.

    Returns None when the client area leaves no room inside the padding.
    Tick positions are truncated to whole pixels; curve points are not.
    """
    rect = drawable_rect(client_width, client_height, config.padding)
    if rect is None:
        return None

    y_min, y_max = y_range

    def to_x(x):
        return map_world_to_screen_x(
            x, config.x_min, config.x_max, rect.width, config.padding,
        )

    def to_y(y):
        return map_world_to_screen_y(y, y_min, y_max, rect.height, config.padding)

    # X axis along the bottom, vertical gridlines at each X tick
    x_axis = Line(rect.left, rect.bottom, rect.right, rect.bottom)
    x_grid = []
    x_labels = []
    for tick in x_tick_values(config.x_min, config.x_max, config.dx):
        sx = int(to_x(tick))
        x_grid.append(Line(sx, rect.top, sx, rect.bottom))
        x_labels.append(
            TickLabel(format_x_label(tick), sx, rect.bottom + LABEL_OFFSET)
        )

    # Y axis along the left, horizontal gridlines at each Y tick
    y_axis = Line(rect.left, rect.top, rect.left, rect.bottom)
    y_grid = []
    y_labels = []
    for tick in y_tick_values(y_min, y_max, config.y_intervals):
        sy = int(to_y(tick))
        y_grid.append(Line(rect.left, sy, rect.right, sy))
        y_labels.append(
            TickLabel(format_y_label(tick), rect.left - LABEL_OFFSET, sy)
        )

    xs, ys = samples
    if len(xs) < 2:
        curve_x = np.empty(0, dtype=np.float64)
        curve_y = np.empty(0, dtype=np.float64)
    else:
        curve_x = np.asarray(to_x(xs), dtype=np.float64)
        curve_y = np.asarray(to_y(ys), dtype=np.float64)

    return PlotGeometry(
        rect=rect,
        x_axis=x_axis,
        y_axis=y_axis,
        x_grid=x_grid,
        x_labels=x_labels,
        y_grid=y_grid,
        y_labels=y_labels,
        curve_x=curve_x,
        curve_y=curve_y,
    )
