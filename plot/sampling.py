"""Y-range probing and curve sampling over the X domain.

Both walk the domain by repeated addition of a fixed step, starting at
exactly x_min and continuing while x <= x_max. Accumulated rounding
means the last point may fall one step short of x_max.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, NamedTuple

import numpy as np

from function import f

logger = logging.getLogger(__name__)

# Relative padding applied above and below the sampled extrema
Y_PADDING_FRACTION = 0.1
# Absolute padding used when every probe returns the same value
FLAT_Y_PADDING = 0.1


class YRange(NamedTuple):
    """Vertical display range in world coordinates."""

    y_min: float
    y_max: float

    @property
    def span(self) -> float:
        return self.y_max - self.y_min


def generate_samples(
    x_min: float,
    x_max: float,
    step_count: int,
    func: Callable[[float], float] = f,
) -> Iterator[tuple[float, float]]:
    """Yield (x, func(x)) pairs from x_min while x <= x_max.

    The step is (x_max - x_min) / step_count and x advances by repeated
    addition, so the number of pairs is step_count or step_count + 1
    depending on rounding.
    """
    step = (x_max - x_min) / step_count
    x = x_min
    while x <= x_max:
        yield x, func(x)
        x += step


class SampleSequence:
    """Restartable, immutable sequence of (x, y) curve samples.

    Each iteration restarts generate_samples from x_min.
    """

    def __init__(self, x_min, x_max, step_count, func=f):
        self._x_min = x_min
        self._x_max = x_max
        self._step_count = step_count
        self._func = func
        self._length = None

    @property
    def step(self) -> float:
        return (self._x_max - self._x_min) / self._step_count

    def __iter__(self):
        return generate_samples(
            self._x_min, self._x_max, self._step_count, self._func,
        )

    def __len__(self):
        if self._length is None:
            self._length = sum(1 for _ in self)
        return self._length

    def to_arrays(self) -> tuple[np.ndarray, np.ndarray]:
        """Return (xs, ys) as float64 arrays in sample order."""
        pairs = list(self)
        if not pairs:
            empty = np.empty(0, dtype=np.float64)
            return empty, empty.copy()
        xs, ys = zip(*pairs)
        return np.array(xs, dtype=np.float64), np.array(ys, dtype=np.float64)


def compute_y_range(
    x_min: float,
    x_max: float,
    num_probes: int,
    func: Callable[[float], float] = f,
) -> YRange:
    """Find the padded vertical display range of func over [x_min, x_max].

    Probes func at the repeated-addition points of num_probes steps plus
    the exact x_max endpoint. The extrema are padded by 10% of their
    spread on both sides, or by a flat 0.1 when the spread is zero. A
    negative lower bound is then clamped to exactly 0, since the plotted
    function is non-negative.
    """
    lo = hi = func(x_min)
    count = 0
    for _, y in generate_samples(x_min, x_max, num_probes, func):
        lo = min(lo, y)
        hi = max(hi, y)
        count += 1

    y_end = func(x_max)
    lo = min(lo, y_end)
    hi = max(hi, y_end)

    buffer = (hi - lo) * Y_PADDING_FRACTION
    if buffer == 0:
        buffer = FLAT_Y_PADDING
    y_min = lo - buffer
    y_max = hi + buffer

    if y_min < 0:
        y_min = 0.0

    logger.debug(
        "Y range from %d probes: raw [%.6f, %.6f] -> padded [%.6f, %.6f]",
        count + 1, lo, hi, y_min, y_max,
    )
    return YRange(y_min, y_max)
