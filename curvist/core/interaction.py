import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .config import EditorConfig
from .curve import Curve
from .hit_test import curve_at, point_at
from .math import Point, as_point
from .store import CurveStore

logger = logging.getLogger(__name__)

FinishCallback = Callable[[tuple[Point, ...]], None]
ToolSink = Callable[[object], None]


class Mode(Enum):
    IDLE = "Idle"
    DRAWING = "Drawing"
    SELECTED = "Selected"
    DRAGGING = "Dragging"


@dataclass(frozen=True)
class Scene:
    """Read-only snapshot handed to the renderer."""
    committed: tuple[Curve, ...]
    active: Curve | None
    selected: int | None
    drag: int | None
    pointer: Point | None
    mode: Mode


class CurveInteraction:
    """
    Pointer/keyboard state machine for the curve tool.

      - Drawing: every press appends a point to the active curve, the commit
        key folds it into the store.
      - otherwise: a press on a point of the selected curve starts a drag,
        a press near any committed curve selects it, anything else starts
        a new curve.

    `on_change` is called once after every accepted transition, with the
    state already complete, so a redraw never sees a half-applied step.
    """

    def __init__(self,
                 store: CurveStore | None = None,
                 *,
                 config: EditorConfig | None = None,
                 active: bool = False,
                 set_active_tool: ToolSink | None = None,
                 on_finish_curve: FinishCallback | None = None,
                 on_change: Callable[[], None] | None = None):
        self._store = store if store is not None else CurveStore()
        self._config = config or EditorConfig()
        self._set_active_tool = set_active_tool
        self._on_finish_curve = on_finish_curve
        self._on_change = on_change

        self._drawing = False
        self._selected: int | None = None
        self._drag: int | None = None
        self._pointer: Point | None = None

        if active:
            self._drawing = True
            self._store.begin_active()

    # ---- accessors ----------------------------------------------------------
    @property
    def store(self) -> CurveStore:
        return self._store

    @property
    def mode(self) -> Mode:
        if self._drawing:
            return Mode.DRAWING
        if self.selected is None:
            return Mode.IDLE
        if self.drag is not None:
            return Mode.DRAGGING
        return Mode.SELECTED

    @property
    def selected(self) -> int | None:
        # a stale index reads as "no selection"
        return self._selected if self._store.get(self._selected) is not None else None

    @property
    def drag(self) -> int | None:
        curve = self._store.get(self.selected)
        if curve is None or self._drag is None or not (0 <= self._drag < len(curve)):
            return None
        return self._drag

    @property
    def pointer(self) -> Point | None:
        return self._pointer

    def scene(self) -> Scene:
        return Scene(
            committed=self._store.committed,
            active=self._store.active if self._drawing else None,
            selected=self.selected,
            drag=self.drag,
            pointer=self._pointer,
            mode=self.mode,
        )

    # ---- arming -------------------------------------------------------------
    def set_active(self, active: bool) -> bool:
        """
        Re-arm or disarm the tool from outside.

        Arming while not drawing starts a fresh drawing session and drops the
        selection. Disarming while drawing abandons the uncommitted curve.
        """
        if active and not self._drawing:
            self._drawing = True
            self._selected = None
            self._drag = None
            self._store.begin_active()
            logger.debug("armed: drawing with an empty curve")
        elif not active and self._drawing:
            self._drawing = False
            self._pointer = None
            self._store.abandon_active()
            logger.debug("disarmed: active curve abandoned")
        else:
            return False
        self._changed()
        return True

    # ---- pointer ------------------------------------------------------------
    def pointer_down(self, pos: Point) -> Mode:
        pos = as_point(pos)

        if self._drawing:
            self._store.append_point_to_active(pos)
            logger.debug("point %s appended (%d total)", pos, len(self._store.active))
            self._changed()
            return self.mode

        selected = self.selected
        if selected is not None:
            idx = point_at(self._store[selected], pos, self._config.point_hit_radius)
            if idx is not None:
                self._drag = idx
                logger.debug("dragging point %d of curve %d", idx, selected)
                self._changed()
                return self.mode

        hit = curve_at(self._store.committed, pos, self._config.curve_hit_radius)
        if hit is not None:
            self._selected = hit
            self._drag = None
            logger.debug("curve %d selected", hit)
            self._changed()
            return self.mode

        self._selected = None
        self._drag = None
        self._drawing = True
        self._store.begin_active(pos)
        logger.debug("new curve started at %s", pos)
        self._changed()
        return self.mode

    def pointer_move(self, pos: Point) -> None:
        pos = as_point(pos)
        self._pointer = pos

        if self.mode is Mode.DRAGGING:
            if not self._store.replace_point_in_committed(self._selected, self._drag, pos):
                self._drag = None
            self._changed()
        elif self._drawing:
            self._changed()

    def pointer_up(self) -> None:
        was_dragging = self._drag is not None
        self._drag = None
        if not self._drawing:
            self._pointer = None
        if was_dragging:
            logger.debug("drag released, curve %s stays selected", self.selected)
            self._changed()

    # ---- keyboard -----------------------------------------------------------
    def key_down(self, key: str) -> bool:
        if key not in self._config.commit_keys or not self._drawing:
            return False

        curve = self._store.commit_active()
        if curve is None:
            return False

        self._drawing = False
        self._selected = None
        self._drag = None
        self._pointer = None
        logger.info("curve %d committed with %d points", len(self._store) - 1, len(curve))
        self._changed()

        self._notify(self._set_active_tool, None)
        self._notify(self._on_finish_curve, curve.points)
        return True

    # ---- internals ----------------------------------------------------------
    def _changed(self) -> None:
        self._notify(self._on_change)

    @staticmethod
    def _notify(cb: Callable | None, *args) -> None:
        if cb is None:
            return
        try:
            cb(*args)
        except Exception:
            logger.exception("curve tool callback %r failed", cb)

