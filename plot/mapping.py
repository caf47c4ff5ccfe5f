"""World-to-screen coordinate mapping and axis tick placement.

Screen coordinates have their origin at the top-left with Y growing
downward, so the Y mapping is inverted. Both mappers accept either
floats or numpy arrays.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

# Y ranges narrower than this are treated as flat
DEGENERATE_RANGE_EPS = 1e-9


class DrawableRect(NamedTuple):
    """Pixel rectangle the plot is drawn into."""

    left: int
    top: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height


def drawable_rect(
    client_width: int, client_height: int, padding: int,
) -> DrawableRect | None:
    """Return the padded plot area, or None if there is no room to draw."""
    width = client_width - 2 * padding
    height = client_height - 2 * padding
    if width <= 0 or height <= 0:
        return None
    return DrawableRect(padding, padding, width, height)


def map_world_to_screen_x(x, x_min, x_max, drawable_width, padding):
    """Map world X to pixel X. Linear and increasing."""
    return padding + (x - x_min) * drawable_width / (x_max - x_min)


def map_world_to_screen_y(y, y_min, y_max, drawable_height, padding):
    """Map world Y to pixel Y, with y_max at the top of the plot area.

    A near-zero Y range maps every value to the vertical midpoint.
    """
    y_range = y_max - y_min
    if abs(y_range) < DEGENERATE_RANGE_EPS:
        mid = padding + drawable_height / 2.0
        if np.ndim(y) == 0:
            return mid
        return np.full(np.shape(y), mid, dtype=np.float64)
    return padding + (y_max - y) * drawable_height / y_range


def x_tick_values(x_min: float, x_max: float, dx: float) -> list[float]:
    """X tick positions: x_min, x_min + dx, ... while <= x_max.

    Accumulates by repeated addition, so x_max itself is only a tick
    when the running sum lands on it without overshooting.
    """
    ticks = []
    x = x_min
    while x <= x_max:
        ticks.append(x)
        x += dx
    return ticks


def y_tick_values(y_min: float, y_max: float, intervals: int) -> list[float]:
    """Evenly spaced Y ticks spanning [y_min, y_max], both ends included."""
    return [y_min + i * (y_max - y_min) / intervals for i in range(intervals + 1)]


def format_x_label(x: float) -> str:
    return f"{x:.1f}"


def format_y_label(y: float) -> str:
    return f"{y:.3f}"
