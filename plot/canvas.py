"""Plot canvas: QPainter rendering of the function graph.

Holds the plot configuration, Y range and curve samples for its
lifetime and strokes a freshly computed PlotGeometry on every paint.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, QPointF, QRectF
from PyQt6.QtGui import (
    QPainter, QPen, QColor, QFont, QFontMetrics, QPalette, QPolygonF,
)
from PyQt6.QtWidgets import QWidget

from plot.config import PlotConfig
from plot.geometry import PlotGeometry, build_plot_geometry
from plot.sampling import SampleSequence, YRange

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = QColor(255, 255, 255)
AXIS_COLOR = QColor(0, 0, 0)
GRID_COLOR = QColor(211, 211, 211)
LABEL_COLOR = QColor(0, 0, 0)
CURVE_COLOR = QColor(0, 0, 255)

AXIS_WIDTH = 2.0
GRID_WIDTH = 1.0
CURVE_WIDTH = 2.0

LABEL_FONT_FAMILY = "Arial"
LABEL_FONT_SIZE = 8


class PlotCanvas(QWidget):
    """Custom widget that draws axes, grid and the sampled curve."""

    def __init__(self, config: PlotConfig, y_range: YRange,
                 samples: SampleSequence, parent=None):
        super().__init__(parent)
        self.config = config
        self.y_range = y_range
        self._samples = samples.to_arrays()

        palette = self.palette()
        palette.setColor(QPalette.ColorRole.Window, BACKGROUND_COLOR)
        self.setPalette(palette)
        self.setAutoFillBackground(True)

    @property
    def sample_count(self) -> int:
        return len(self._samples[0])

    def geometry_for_size(self, width: int, height: int) -> PlotGeometry | None:
        """Pixel geometry for a client area of the given size."""
        return build_plot_geometry(
            self.config, self.y_range, self._samples, width, height,
        )

    # -- Qt events --

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.fillRect(self.rect(), BACKGROUND_COLOR)

            geometry = self.geometry_for_size(self.width(), self.height())
            if geometry is None:
                logger.debug(
                    "Client area %dx%d too small to plot",
                    self.width(), self.height(),
                )
                return

            self._draw_axes_and_grid(painter, geometry)
            self._draw_curve(painter, geometry)
        finally:
            painter.end()

    # -- Drawing --

    def _draw_axes_and_grid(self, painter: QPainter, geometry: PlotGeometry) -> None:
        axis_pen = QPen(AXIS_COLOR)
        axis_pen.setWidthF(AXIS_WIDTH)

        grid_pen = QPen(GRID_COLOR)
        grid_pen.setWidthF(GRID_WIDTH)
        grid_pen.setStyle(Qt.PenStyle.DashLine)

        font = QFont(LABEL_FONT_FAMILY, LABEL_FONT_SIZE)
        painter.setFont(font)
        fm = QFontMetrics(font)
        text_h = fm.height()

        # -- X axis, vertical gridlines, labels below --
        painter.setPen(axis_pen)
        self._draw_line(painter, geometry.x_axis)
        for line, label in zip(geometry.x_grid, geometry.x_labels):
            painter.setPen(grid_pen)
            self._draw_line(painter, line)
            painter.setPen(LABEL_COLOR)
            tw = fm.horizontalAdvance(label.text)
            painter.drawText(
                QRectF(label.x - tw / 2, label.y, tw, text_h),
                Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop,
                label.text,
            )

        # -- Y axis, horizontal gridlines, labels to the left --
        painter.setPen(axis_pen)
        self._draw_line(painter, geometry.y_axis)
        for line, label in zip(geometry.y_grid, geometry.y_labels):
            painter.setPen(grid_pen)
            self._draw_line(painter, line)
            painter.setPen(LABEL_COLOR)
            tw = fm.horizontalAdvance(label.text)
            painter.drawText(
                QRectF(label.x - tw, label.y - text_h / 2, tw, text_h),
                Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter,
                label.text,
            )

    def _draw_curve(self, painter: QPainter, geometry: PlotGeometry) -> None:
        if len(geometry.curve_x) < 2:
            return

        polygon = QPolygonF()
        for px, py in zip(geometry.curve_x.tolist(), geometry.curve_y.tolist()):
            polygon.append(QPointF(px, py))

        curve_pen = QPen(CURVE_COLOR)
        curve_pen.setWidthF(CURVE_WIDTH)
        painter.setPen(curve_pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawPolyline(polygon)

    @staticmethod
    def _draw_line(painter: QPainter, line) -> None:
        painter.drawLine(QPointF(line.x1, line.y1), QPointF(line.x2, line.y2))
