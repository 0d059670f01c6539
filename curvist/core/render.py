"""
Scene -> surface commands.

`render` is pure: it reads a `Scene` snapshot and the current stroke
parameters and returns the full list of drawing commands for one frame
(clear + every curve + markers + rubber band). `replay` pushes such a list
onto anything implementing `Surface`.
"""
import logging
from dataclasses import dataclass
from typing import Iterable, Protocol

from .config import EditorConfig
from .curve import Curve
from .interaction import Mode, Scene
from .math import Point
from .registries import get_spline
from .splines import Spline
from .style import StrokeParams

logger = logging.getLogger(__name__)


# ---- commands ---------------------------------------------------------------
@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class BeginPath:
    pass


@dataclass(frozen=True)
class MoveTo:
    p: Point


@dataclass(frozen=True)
class LineTo:
    p: Point


@dataclass(frozen=True)
class CubicTo:
    c1: Point
    c2: Point
    p2: Point


@dataclass(frozen=True)
class SetStroke:
    color: str
    width: float


@dataclass(frozen=True)
class SetDash:
    pattern: tuple[float, ...] = ()


@dataclass(frozen=True)
class Stroke:
    pass


@dataclass(frozen=True)
class FillCircle:
    center: Point
    radius: float
    color: str


Command = Clear | BeginPath | MoveTo | LineTo | CubicTo | SetStroke | SetDash | Stroke | FillCircle


class Surface(Protocol):
    def clear(self) -> None: ...
    def begin_path(self) -> None: ...
    def move_to(self, p: Point) -> None: ...
    def line_to(self, p: Point) -> None: ...
    def cubic_to(self, c1: Point, c2: Point, p2: Point) -> None: ...
    def set_stroke(self, color: str, width: float) -> None: ...
    def set_dash(self, pattern: tuple[float, ...]) -> None: ...
    def stroke(self) -> None: ...
    def fill_circle(self, center: Point, radius: float, color: str) -> None: ...


# ---- rendering --------------------------------------------------------------
def _curve_commands(spline: Spline, curve: Curve, style: StrokeParams) -> list[Command]:
    ops = spline.path_ops(curve.points)
    if not ops:
        return []
    out: list[Command] = [BeginPath()]
    for op, data in ops:
        if op == "M":
            out.append(MoveTo(data))
        elif op == "C":
            c1, c2, p2 = data
            out.append(CubicTo(c1, c2, p2))
    out.append(SetStroke(style.color, style.width))
    out.append(SetDash(style.dash))
    out.append(Stroke())
    out.append(SetDash())
    return out


def _marker_commands(curve: Curve, radius: float, color: str) -> list[Command]:
    return [FillCircle(p, radius, color) for p in curve]


def _preview_commands(scene: Scene, style: StrokeParams, config: EditorConfig) -> list[Command]:
    active = scene.active
    if scene.mode is not Mode.DRAWING or active is None or not len(active) or scene.pointer is None:
        return []
    return [
        BeginPath(),
        MoveTo(active.last),
        LineTo(scene.pointer),
        SetStroke(config.preview_color, style.brush_size),
        SetDash((style.brush_size, style.brush_size)),
        Stroke(),
        SetDash(),
    ]


def render(scene: Scene, style: StrokeParams, config: EditorConfig | None = None) -> list[Command]:
    config = config or EditorConfig()
    spline = get_spline(config.spline)

    commands: list[Command] = [Clear()]
    for idx, curve in enumerate(scene.committed):
        commands.extend(_curve_commands(spline, curve, style))
        if idx == scene.selected:
            commands.extend(_marker_commands(curve, config.marker_radius, style.color))

    if scene.mode is Mode.DRAWING and scene.active is not None and scene.active.is_strokable:
        commands.extend(_curve_commands(spline, scene.active, style))

    commands.extend(_preview_commands(scene, style, config))
    return commands


def replay(commands: Iterable[Command], surface: Surface | None) -> None:
    if surface is None:
        logger.debug("no surface, frame dropped")
        return
    for cmd in commands:
        match cmd:
            case Clear():
                surface.clear()
            case BeginPath():
                surface.begin_path()
            case MoveTo(p=p):
                surface.move_to(p)
            case LineTo(p=p):
                surface.line_to(p)
            case CubicTo(c1=c1, c2=c2, p2=p2):
                surface.cubic_to(c1, c2, p2)
            case SetStroke(color=color, width=width):
                surface.set_stroke(color, width)
            case SetDash(pattern=pattern):
                surface.set_dash(pattern)
            case Stroke():
                surface.stroke()
            case FillCircle(center=center, radius=radius, color=color):
                surface.fill_circle(center, radius, color)
