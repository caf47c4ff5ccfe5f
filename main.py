"""Entry point for the function plot window."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from app_window import PlotWindow


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    app = QApplication(sys.argv)
    window = PlotWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
