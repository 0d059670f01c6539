from dataclasses import dataclass
from enum import StrEnum


class StrokeStyle(StrEnum):
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"
    DOUBLE = "double"


# (dash patterns in brush-size units, width factor)
_POLICY: dict[StrokeStyle, tuple[tuple[float, ...], float]] = {
    StrokeStyle.SOLID:  ((), 1.0),
    StrokeStyle.DASHED: ((3.0, 2.0), 1.0),
    StrokeStyle.DOTTED: ((1.0, 1.0), 1.0),
    StrokeStyle.DOUBLE: ((), 0.5),
}


def dash_pattern(style: StrokeStyle, brush_size: float) -> tuple[float, ...]:
    """Pixel dash pattern for a style, empty for a continuous line."""
    base, _ = _POLICY[StrokeStyle(style)]
    return tuple(seg * brush_size for seg in base)


def stroke_width(style: StrokeStyle, brush_size: float) -> float:
    _, factor = _POLICY[StrokeStyle(style)]
    return brush_size * factor


@dataclass(frozen=True)
class StrokeParams:
    """
    Current picker values. Owned by the host, read-only to the editor.
    """
    color: str = "#000000"
    brush_size: float = 4.0
    style: StrokeStyle = StrokeStyle.SOLID

    def __post_init__(self):
        if self.brush_size <= 0:
            raise ValueError(f"brush_size must be positive, got {self.brush_size}")
        # accepts plain strings ("dashed") and rejects unknown names
        object.__setattr__(self, "style", StrokeStyle(self.style))

    @property
    def dash(self) -> tuple[float, ...]:
        return dash_pattern(self.style, self.brush_size)

    @property
    def width(self) -> float:
        return stroke_width(self.style, self.brush_size)
