from .canvas import CurveCanvasWidget
from .curve_tool import CurveToolController
from .surface import QPainterSurface

__all__ = [
    "CurveCanvasWidget",
    "CurveToolController",
    "QPainterSurface",
]
