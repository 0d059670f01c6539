import pytest

QtCore = pytest.importorskip("PySide6.QtCore")
QtGui = pytest.importorskip("PySide6.QtGui")

from curvist.core import Curve, CurveStore, Mode, Point, StrokeParams, render, replay  # noqa: E402
from curvist.core.interaction import Scene  # noqa: E402
from curvist.widgets import CurveCanvasWidget, CurveToolController, QPainterSurface  # noqa: E402


def _mouse(canvas, kind, x, y):
    local = QtCore.QPointF(x, y)
    return QtGui.QMouseEvent(
        kind,
        local,
        canvas.mapToGlobal(local),
        QtCore.Qt.MouseButton.LeftButton,
        QtCore.Qt.MouseButton.LeftButton,
        QtCore.Qt.KeyboardModifier.NoModifier,
    )


def _send(canvas, kind, x=0.0, y=0.0):
    QtCore.QCoreApplication.sendEvent(canvas, _mouse(canvas, kind, x, y))


PRESS = QtCore.QEvent.Type.MouseButtonPress
MOVE = QtCore.QEvent.Type.MouseMove
RELEASE = QtCore.QEvent.Type.MouseButtonRelease


def test_qpainter_surface_strokes_pixels(qapp):
    img = QtGui.QImage(100, 100, QtGui.QImage.Format.Format_ARGB32)
    painter = QtGui.QPainter(img)
    surface = QPainterSurface(painter, QtCore.QRectF(0, 0, 100, 100))
    scene = Scene(
        committed=(Curve.of([(10, 50), (90, 50)]),),
        active=None,
        selected=None,
        drag=None,
        pointer=None,
        mode=Mode.IDLE,
    )
    replay(render(scene, StrokeParams("#ff0000", 6.0)), surface)
    painter.end()

    on_line = img.pixelColor(50, 50)
    off_line = img.pixelColor(50, 10)
    assert on_line.red() > 200 and on_line.green() < 60
    assert off_line == QtGui.QColor("#ffffff")


def test_dashed_pen_pattern_in_pen_units(qapp):
    img = QtGui.QImage(10, 10, QtGui.QImage.Format.Format_ARGB32)
    painter = QtGui.QPainter(img)
    surface = QPainterSurface(painter, QtCore.QRectF(0, 0, 10, 10))
    surface.set_stroke("#000000", 2.0)
    surface.set_dash((6.0, 4.0))
    assert surface._pen.dashPattern() == [3.0, 2.0]
    surface.set_dash(())
    assert surface._pen.style() == QtCore.Qt.PenStyle.SolidLine
    painter.end()


def test_controller_draws_and_commits(qapp):
    canvas = CurveCanvasWidget()
    finished = []
    tools = []
    ctl = CurveToolController(
        canvas,
        StrokeParams("#000000", 3.0),
        set_active_tool=tools.append,
        on_finish_curve=finished.append,
    )
    emitted = []
    ctl.curveFinished.connect(emitted.append)
    ctl.attach()

    _send(canvas, PRESS, 10, 10)
    _send(canvas, RELEASE, 10, 10)
    _send(canvas, PRESS, 50, 10)
    _send(canvas, RELEASE, 50, 10)
    _send(canvas, MOVE, 70, 30)

    assert ctl.interaction.mode is Mode.DRAWING
    assert ctl.interaction.store.active == Curve.of([(10, 10), (50, 10)])
    assert ctl.interaction.pointer == Point(70, 30)

    assert ctl.key_down("Enter") is True
    expected = (Point(10, 10), Point(50, 10))
    assert finished == [expected]
    assert emitted == [expected]
    assert tools == [None]
    assert ctl.interaction.mode is Mode.IDLE
    ctl.detach()


def test_controller_select_and_drag(qapp):
    canvas = CurveCanvasWidget()
    store = CurveStore([Curve.of([(0, 0), (10, 0), (20, 0)])])
    ctl = CurveToolController(canvas, store=store)
    ctl.attach()

    _send(canvas, PRESS, 10, 0)
    _send(canvas, RELEASE, 10, 0)
    assert ctl.interaction.mode is Mode.SELECTED

    _send(canvas, PRESS, 10, 2)
    assert ctl.interaction.mode is Mode.DRAGGING
    _send(canvas, MOVE, 10, 40)
    _send(canvas, RELEASE, 10, 40)

    assert store[0].points == (Point(0, 0), Point(10, 40), Point(20, 0))
    assert ctl.interaction.mode is Mode.SELECTED
    # selected curve gets three markers in the presented frame
    assert sum(type(c).__name__ == "FillCircle" for c in canvas.commands) == 3
    ctl.detach()


def test_detached_controller_ignores_input(qapp):
    canvas = CurveCanvasWidget()
    ctl = CurveToolController(canvas)
    ctl.attach()
    ctl.detach()
    ctl.detach()

    _send(canvas, PRESS, 10, 10)
    assert ctl.interaction.mode is Mode.IDLE
    assert ctl.interaction.store.active is None
    assert ctl.key_down("Enter") is False
    assert not ctl.attached


def test_style_change_redraws(qapp):
    canvas = CurveCanvasWidget()
    store = CurveStore([Curve.of([(0, 0), (10, 0)])])
    ctl = CurveToolController(canvas, StrokeParams("#000000", 2.0), store=store)
    ctl.attach()

    ctl.set_style(StrokeParams("#00ff00", 8.0, "double"))
    strokes = [c for c in canvas.commands if type(c).__name__ == "SetStroke"]
    assert strokes[0].color == "#00ff00"
    assert strokes[0].width == 4.0
    ctl.detach()


DBLCLICK = QtCore.QEvent.Type.MouseButtonDblClick


def test_fast_second_click_still_appends_point(qapp):
    canvas = CurveCanvasWidget()
    ctl = CurveToolController(canvas)
    ctl.attach()

    _send(canvas, PRESS, 10, 10)
    _send(canvas, RELEASE, 10, 10)
    _send(canvas, DBLCLICK, 50, 10)
    _send(canvas, RELEASE, 50, 10)

    assert ctl.interaction.store.active == Curve.of([(10, 10), (50, 10)])
    ctl.detach()


def test_fast_click_on_selected_point_starts_drag(qapp):
    canvas = CurveCanvasWidget()
    store = CurveStore([Curve.of([(0, 0), (10, 0), (20, 0)])])
    ctl = CurveToolController(canvas, store=store)
    ctl.attach()

    _send(canvas, PRESS, 10, 0)
    _send(canvas, RELEASE, 10, 0)
    _send(canvas, DBLCLICK, 10, 0)
    assert ctl.interaction.mode is Mode.DRAGGING
    assert ctl.interaction.drag == 1
    ctl.detach()


def test_destroying_canvas_detaches_controller(qapp):
    shiboken6 = pytest.importorskip("shiboken6")
    canvas = CurveCanvasWidget()
    ctl = CurveToolController(canvas)
    ctl.attach()
    assert ctl.attached

    shiboken6.delete(canvas)

    assert not ctl.attached
    assert ctl.canvas is None
    ctl.redraw()
    assert ctl.key_down("Enter") is False
    ctl.detach()
