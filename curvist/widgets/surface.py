from PySide6 import QtCore, QtGui

from curvist.core import Point
from curvist.widgets.utils import point_to_qpoint


class QPainterSurface:
    """
    Rendering surface backed by an open QPainter.
    Mirrors a 2D-context API: one current path, one current pen.
    """

    def __init__(self, painter: QtGui.QPainter, rect: QtCore.QRectF, background: QtGui.QColor | str = "#ffffff"):
        self._painter = painter
        self._rect = QtCore.QRectF(rect)
        self._background = QtGui.QColor(background)
        self._path = QtGui.QPainterPath()
        self._pen = QtGui.QPen(QtGui.QColor("#000000"), 1.0)
        self._pen.setCapStyle(QtCore.Qt.PenCapStyle.FlatCap)
        self._dash: tuple[float, ...] = ()

    def clear(self) -> None:
        self._painter.fillRect(self._rect, self._background)

    def begin_path(self) -> None:
        self._path = QtGui.QPainterPath()

    def move_to(self, p: Point) -> None:
        self._path.moveTo(point_to_qpoint(p))

    def line_to(self, p: Point) -> None:
        self._path.lineTo(point_to_qpoint(p))

    def cubic_to(self, c1: Point, c2: Point, p2: Point) -> None:
        self._path.cubicTo(point_to_qpoint(c1), point_to_qpoint(c2), point_to_qpoint(p2))

    def set_stroke(self, color: str, width: float) -> None:
        self._pen.setColor(QtGui.QColor(color))
        self._pen.setWidthF(float(width))
        self._apply_dash()

    def set_dash(self, pattern: tuple[float, ...]) -> None:
        self._dash = tuple(pattern)
        self._apply_dash()

    def stroke(self) -> None:
        self._painter.strokePath(self._path, self._pen)

    def fill_circle(self, center: Point, radius: float, color: str) -> None:
        self._painter.save()
        self._painter.setPen(QtCore.Qt.PenStyle.NoPen)
        self._painter.setBrush(QtGui.QColor(color))
        self._painter.drawEllipse(point_to_qpoint(center), radius, radius)
        self._painter.restore()

    def _apply_dash(self) -> None:
        width = self._pen.widthF()
        if not self._dash or width <= 0:
            self._pen.setStyle(QtCore.Qt.PenStyle.SolidLine)
            return
        # Qt dash lengths are in units of the pen width
        self._pen.setDashPattern([seg / width for seg in self._dash])
