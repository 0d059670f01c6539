from PySide6 import QtCore, QtWidgets

from curvist.menu.top_bar.style_picker import StylePickerWidget
from curvist.menu.top_bar.tools import ToolMode, ToolSelectorWidget
from curvist.widgets import CurveToolController


class Bar(QtWidgets.QToolBar):
    def __init__(self, controller: CurveToolController, style_picker: StylePickerWidget | None = None):
        super().__init__()

        self.controller = controller
        self.setObjectName("Bar")
        self.setMovable(False)
        self.setFloatable(False)
        self.setIconSize(QtCore.QSize(18, 18))
        self.tool_selector = ToolSelectorWidget()
        self.style_picker = style_picker or StylePickerWidget()

        self.addWidget(self.tool_selector)
        self.addSeparator()
        self.addWidget(self.style_picker)

        self.tool_selector.mode_changed.connect(self._on_tool_changed)
        self.style_picker.styleChanged.connect(self._on_style_changed)
        self.controller.activeToolChanged.connect(self.tool_selector.set_tool)

    @QtCore.Slot(object)
    def _on_tool_changed(self, mode: ToolMode):
        self.controller.set_active(mode is ToolMode.CURVE)

    @QtCore.Slot(object)
    def _on_style_changed(self, _params):
        self.controller.redraw()
