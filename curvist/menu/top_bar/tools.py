from enum import Enum

from PySide6 import QtWidgets
from PySide6.QtCore import Qt, Signal


class ToolMode(Enum):
    NONE = "None"
    CURVE = "Curve"


class ToolSelectorWidget(QtWidgets.QWidget):
    """
    Active-tool picker. `set_tool(None)` is the sink the curve tool calls
    when a commit ends the drawing session.
    """

    mode_changed = Signal(ToolMode)

    def __init__(self, parent=None):
        super().__init__(parent)

        self.select_box = QtWidgets.QComboBox()
        for mode in ToolMode:
            self.select_box.addItem(mode.value, mode.name)
        self.text = QtWidgets.QLabel("Tool: ")
        self.layout = QtWidgets.QHBoxLayout(self)
        self.layout.setContentsMargins(0, 0, 0, 0)

        self.layout.addWidget(self.text, alignment=Qt.AlignmentFlag.AlignLeft)
        self.layout.addWidget(self.select_box, alignment=Qt.AlignmentFlag.AlignLeft)

        self.select_box.currentTextChanged.connect(self._on_mode_changed)

    @property
    def mode(self) -> ToolMode:
        return ToolMode[self.select_box.currentData()]

    def set_tool(self, mode: ToolMode | None) -> None:
        mode = mode or ToolMode.NONE
        idx = self.select_box.findData(mode.name)
        if idx != -1 and idx != self.select_box.currentIndex():
            self.select_box.setCurrentIndex(idx)  # emits mode_changed

    def _on_mode_changed(self, text: str):
        self.mode_changed.emit(ToolMode(text))
