from PySide6 import QtWidgets, QtCore, QtGui

from curvist.core.render import Command, replay
from curvist.widgets.surface import QPainterSurface


class CurveCanvasWidget(QtWidgets.QWidget):
    """
    Drawing surface. Holds the last frame produced by the renderer and
    replays it on every paint; it has no editing logic of its own.
    """

    def __init__(self, background: str = "#ffffff", parent=None):
        super().__init__(parent)
        self._background = QtGui.QColor(background)
        self._commands: list[Command] = []

        self.setMouseTracking(True)
        self.setFocusPolicy(QtCore.Qt.FocusPolicy.StrongFocus)
        self.setCursor(QtCore.Qt.CursorShape.CrossCursor)

    # --- public API -------------------------
    @property
    def commands(self) -> list[Command]:
        return list(self._commands)

    def present(self, commands: list[Command]) -> None:
        self._commands = list(commands)
        self.update()

    # --- size hints -------------------------
    def sizeHint(self):
        return QtCore.QSize(800, 600)

    def minimumSizeHint(self):
        return QtCore.QSize(200, 200)

    # --- painting ---------------------------
    def paintEvent(self, _):
        p = QtGui.QPainter(self)
        p.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        surface = QPainterSurface(p, QtCore.QRectF(self.rect()), self._background)
        if self._commands:
            replay(self._commands, surface)
        else:
            surface.clear()
        p.end()
