from curvist.menu.top_bar.bar import Bar
from curvist.menu.top_bar.style_picker import StylePickerWidget
from curvist.menu.top_bar.tools import ToolMode, ToolSelectorWidget

__all__ = [
    "Bar",
    "StylePickerWidget",
    "ToolMode",
    "ToolSelectorWidget",
]
