import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from PySide6 import QtCore, QtWidgets

from curvist.core import StrokeParams
from curvist.menu import Bar, StylePickerWidget
from curvist.widgets import CurveCanvasWidget, CurveToolController

logger = logging.getLogger(__name__)


class CurveEditorWidget(QtWidgets.QWidget):
    def __init__(self):
        super().__init__()

        self.layout = QtWidgets.QVBoxLayout(self)

        self.canvas = CurveCanvasWidget(parent=self)
        self.style_picker = StylePickerWidget(StrokeParams())
        self.controller = CurveToolController(
            self.canvas,
            lambda: self.style_picker.params,
            on_finish_curve=self._on_finish_curve,
            parent=self,
        )
        self.top_bar = Bar(self.controller, self.style_picker)

        self.layout.addWidget(self.top_bar, alignment=QtCore.Qt.AlignmentFlag.AlignTop)
        self.layout.addWidget(self.canvas, stretch=1)

        self.controller.attach()

    def _on_finish_curve(self, points):
        logger.info("curve finished: %s", [(round(x, 1), round(y, 1)) for x, y in points])

    def closeEvent(self, event):
        self.controller.detach()
        super().closeEvent(event)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Draw and reshape smooth curves")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--stylesheet",
        type=Path,
        help="Optional Qt stylesheet (.qss) applied to the application",
    )
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([sys.argv[0]])

    if args.stylesheet is not None:
        try:
            app.setStyleSheet(args.stylesheet.read_text(encoding="utf-8"))
        except OSError as exc:
            logger.warning("Could not load stylesheet %s: %s", args.stylesheet, exc)

    widget = CurveEditorWidget()
    widget.resize(800, 600)
    widget.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
