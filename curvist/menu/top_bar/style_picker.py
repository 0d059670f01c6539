from PySide6 import QtCore, QtGui, QtWidgets

from curvist.core import StrokeParams, StrokeStyle


class StylePickerWidget(QtWidgets.QWidget):
    """
    Color button, brush size spinbox and stroke style combobox.
    Owns the current StrokeParams; the curve tool only reads them.
    """
    styleChanged = QtCore.Signal(object)

    def __init__(self, params: StrokeParams | None = None, parent=None):
        super().__init__(parent)
        self._params = params or StrokeParams()

        self._btn_color = QtWidgets.QPushButton()
        self._btn_color.setFixedWidth(32)
        self._size = QtWidgets.QSpinBox()
        self._size.setRange(1, 64)
        self._size.setSuffix(" px")
        self._size.setValue(int(self._params.brush_size))
        self._style = QtWidgets.QComboBox()
        for s in StrokeStyle:
            self._style.addItem(s.value.capitalize(), s.value)
        self._style.setCurrentIndex(self._style.findData(self._params.style.value))

        lay = QtWidgets.QHBoxLayout(self)
        lay.setContentsMargins(0, 0, 0, 0)
        lay.addWidget(QtWidgets.QLabel("Color: "))
        lay.addWidget(self._btn_color)
        lay.addWidget(QtWidgets.QLabel("Size: "))
        lay.addWidget(self._size)
        lay.addWidget(QtWidgets.QLabel("Stroke: "))
        lay.addWidget(self._style)
        self._paint_swatch()

        self._btn_color.clicked.connect(self._on_pick_color)
        self._size.valueChanged.connect(self._on_size_changed)
        self._style.currentIndexChanged.connect(self._on_style_changed)

    @property
    def params(self) -> StrokeParams:
        return self._params

    def set_color(self, color: str) -> None:
        self._set(StrokeParams(color, self._params.brush_size, self._params.style))
        self._paint_swatch()

    # --- slots ---
    @QtCore.Slot()
    def _on_pick_color(self):
        col = QtWidgets.QColorDialog.getColor(QtGui.QColor(self._params.color), self, "Stroke color")
        if col.isValid():
            self.set_color(col.name())

    @QtCore.Slot(int)
    def _on_size_changed(self, value: int):
        self._set(StrokeParams(self._params.color, float(value), self._params.style))

    @QtCore.Slot(int)
    def _on_style_changed(self, idx: int):
        style = StrokeStyle(self._style.itemData(idx))
        self._set(StrokeParams(self._params.color, self._params.brush_size, style))

    # --- helpers ---
    def _set(self, params: StrokeParams) -> None:
        if params != self._params:
            self._params = params
            self.styleChanged.emit(params)

    def _paint_swatch(self):
        self._btn_color.setStyleSheet(f"background-color: {self._params.color};")
