import logging
from typing import Callable

from PySide6 import QtCore, QtGui

from curvist.core import CurveInteraction, CurveStore, EditorConfig, Point, StrokeParams, render
from curvist.widgets.canvas import CurveCanvasWidget
from curvist.widgets.utils import qpoint_to_point

logger = logging.getLogger(__name__)

StyleSource = StrokeParams | Callable[[], StrokeParams]


class CurveToolController(QtCore.QObject):
    """
    Binds a CurveInteraction to a canvas.

    Pointer input comes from an event filter on the canvas, the commit key
    from window-wide shortcuts. Both are installed by `attach()` and removed
    by `detach()`; destroying the canvas detaches automatically.
    """

    curveFinished = QtCore.Signal(object)       # emitted once per commit, arg = tuple of points
    activeToolChanged = QtCore.Signal(object)   # emitted with None when a commit ends the tool

    def __init__(self,
                 canvas: CurveCanvasWidget,
                 style: StyleSource = StrokeParams(),
                 *,
                 store: CurveStore | None = None,
                 config: EditorConfig | None = None,
                 active: bool = False,
                 set_active_tool: Callable[[object], None] | None = None,
                 on_finish_curve: Callable[[tuple[Point, ...]], None] | None = None,
                 parent=None):
        super().__init__(parent)
        self._canvas: CurveCanvasWidget | None = canvas
        self._style = style
        self._config = config or EditorConfig()
        self._set_active_tool = set_active_tool
        self._on_finish_curve = on_finish_curve
        self._shortcuts: list[QtGui.QShortcut] = []
        self._attached = False

        self._interaction = CurveInteraction(
            store,
            config=self._config,
            active=active,
            set_active_tool=self._tool_cleared,
            on_finish_curve=self._curve_finished,
            on_change=self.redraw,
        )
        canvas.destroyed.connect(self._on_canvas_destroyed)

    # --- public API -------------------------
    @property
    def interaction(self) -> CurveInteraction:
        return self._interaction

    @property
    def canvas(self) -> CurveCanvasWidget | None:
        return self._canvas

    @property
    def attached(self) -> bool:
        return self._attached

    def style(self) -> StrokeParams:
        return self._style() if callable(self._style) else self._style

    def set_style(self, style: StyleSource) -> None:
        self._style = style
        self.redraw()

    def set_active(self, active: bool) -> None:
        self._interaction.set_active(active)

    def attach(self) -> None:
        if self._attached or self._canvas is None:
            return
        self._canvas.installEventFilter(self)
        for key in self._config.commit_keys:
            sc = QtGui.QShortcut(QtGui.QKeySequence(key), self._canvas)
            sc.setContext(QtCore.Qt.ShortcutContext.WindowShortcut)
            sc.activated.connect(lambda k=key: self.key_down(k))
            self._shortcuts.append(sc)
        self._attached = True
        logger.debug("curve tool attached")
        self.redraw()

    def detach(self) -> None:
        if not self._attached:
            return
        if self._canvas is not None:
            self._canvas.removeEventFilter(self)
        for sc in self._shortcuts:
            sc.setEnabled(False)
            sc.deleteLater()
        self._shortcuts = []
        self._attached = False
        logger.debug("curve tool detached")

    def key_down(self, key: str) -> bool:
        if not self._attached:
            return False
        return self._interaction.key_down(key)

    def to_local(self, e: QtGui.QSinglePointEvent) -> Point:
        """Global event position minus the canvas' on-screen offset."""
        if self._canvas is None:
            return qpoint_to_point(e.position())
        return qpoint_to_point(self._canvas.mapFromGlobal(e.globalPosition()))

    def redraw(self) -> None:
        if self._canvas is None:
            return
        self._canvas.present(render(self._interaction.scene(), self.style(), self._config))

    # --- Qt plumbing ------------------------
    def eventFilter(self, obj, event):
        if obj is self._canvas and self._attached:
            t = event.type()
            # a fast second click arrives as a double click, it is still a press
            if t in (QtCore.QEvent.Type.MouseButtonPress, QtCore.QEvent.Type.MouseButtonDblClick):
                if event.button() == QtCore.Qt.MouseButton.LeftButton:
                    self._canvas.setFocus()
                    self._interaction.pointer_down(self.to_local(event))
                    return True
            elif t == QtCore.QEvent.Type.MouseMove:
                self._interaction.pointer_move(self.to_local(event))
                return True
            elif t == QtCore.QEvent.Type.MouseButtonRelease:
                if event.button() == QtCore.Qt.MouseButton.LeftButton:
                    self._interaction.pointer_up()
                    return True
        return super().eventFilter(obj, event)

    # --- internals --------------------------
    def _tool_cleared(self, tool) -> None:
        self.activeToolChanged.emit(tool)
        if self._set_active_tool is not None:
            self._set_active_tool(tool)

    def _curve_finished(self, points: tuple[Point, ...]) -> None:
        self.curveFinished.emit(points)
        if self._on_finish_curve is not None:
            self._on_finish_curve(points)

    @QtCore.Slot()
    def _on_canvas_destroyed(self):
        # the filter and shortcuts die with the canvas
        self._shortcuts = []
        self._attached = False
        self._canvas = None
