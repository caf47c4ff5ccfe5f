"""App window: a single resizable main window hosting the plot canvas.

The Y range and curve samples are computed once here and handed to the
canvas, which keeps them for the window's lifetime.
"""

import logging

from PyQt6.QtWidgets import QMainWindow

from plot.canvas import PlotCanvas
from plot.config import DEFAULT_CONFIG
from plot.sampling import SampleSequence, compute_y_range

logger = logging.getLogger(__name__)


class PlotWindow(QMainWindow):
    """Top-level window showing y = cos²(x) / (x² + 1)."""

    def __init__(self, config=DEFAULT_CONFIG):
        super().__init__()
        self.config = config
        self.setWindowTitle(config.title)
        self.resize(config.width, config.height)

        y_range = compute_y_range(config.x_min, config.x_max, config.num_probes)
        samples = SampleSequence(config.x_min, config.x_max, config.sample_steps)

        self.canvas = PlotCanvas(config, y_range, samples)
        self.setCentralWidget(self.canvas)

        logger.info(
            "Plotting x in [%.1f, %.1f], y in [%.4f, %.4f] with %d samples",
            config.x_min, config.x_max, y_range.y_min, y_range.y_max,
            self.canvas.sample_count,
        )
