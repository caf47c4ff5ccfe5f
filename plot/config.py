"""Plot configuration: the fixed domain, layout and window constants."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PlotConfig:
    """Immutable description of the plot.

    Held by the window for its whole lifetime; pixel geometry is derived
    from it on every paint.
    """

    x_min: float = 3.8
    x_max: float = 7.6
    dx: float = 0.6            # X tick spacing
    padding: int = 60          # pixels between client edge and plot area
    num_probes: int = 1000     # Y-range probing resolution
    sample_steps: int = 2000   # curve sampling resolution
    y_intervals: int = 5       # Y ticks = y_intervals + 1
    width: int = 800
    height: int = 600
    title: str = "Графік функції y = cos²(x) / (x² + 1)"

    def __post_init__(self):
        if not self.x_min < self.x_max:
            raise ValueError(
                f"x_min must be less than x_max, got {self.x_min} >= {self.x_max}"
            )
        if self.dx <= 0:
            raise ValueError(f"dx must be positive, got {self.dx}")
        if self.padding < 0:
            raise ValueError(f"padding must be non-negative, got {self.padding}")
        for name in ("num_probes", "sample_steps", "y_intervals"):
            value = getattr(self, name)
            if value < 1:
                raise ValueError(f"{name} must be at least 1, got {value}")

    @property
    def x_span(self) -> float:
        return self.x_max - self.x_min


DEFAULT_CONFIG = PlotConfig()
