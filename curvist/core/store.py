import logging

from .curve import Curve
from .math import Point

logger = logging.getLogger(__name__)


class CurveStore:
    """
    Committed curves (insertion order is paint order) plus the single
    in-progress curve. All mutators are total: stale indices are no-ops.
    """

    def __init__(self, curves: list[Curve] | None = None):
        self._committed: tuple[Curve, ...] = tuple(curves or ())
        self._active: Curve | None = None

    # ---- read access --------------------------------------------------------
    @property
    def committed(self) -> tuple[Curve, ...]:
        return self._committed

    @property
    def active(self) -> Curve | None:
        return self._active

    def __len__(self) -> int:
        return len(self._committed)

    def __getitem__(self, idx: int) -> Curve:
        return self._committed[idx]

    def get(self, idx: int | None) -> Curve | None:
        if idx is None or not (0 <= idx < len(self._committed)):
            return None
        return self._committed[idx]

    # ---- active curve -------------------------------------------------------
    def begin_active(self, p: Point | None = None) -> Curve:
        self._active = Curve() if p is None else Curve((p,))
        return self._active

    def append_point_to_active(self, p: Point) -> bool:
        if self._active is None:
            logger.debug("append ignored: no active curve")
            return False
        self._active = self._active.appended(p)
        return True

    def commit_active(self) -> Curve | None:
        curve = self._active
        if curve is None or not curve.is_strokable:
            logger.debug("commit refused: active curve has %d point(s)",
                         0 if curve is None else len(curve))
            return None
        self._committed = self._committed + (curve,)
        self._active = None
        return curve

    def abandon_active(self) -> None:
        if self._active is not None:
            logger.debug("abandoning active curve with %d point(s)", len(self._active))
        self._active = None

    # ---- committed curves ---------------------------------------------------
    def replace_point_in_committed(self, curve_idx: int, point_idx: int, p: Point) -> bool:
        curve = self.get(curve_idx)
        if curve is None or not (0 <= point_idx < len(curve)):
            logger.debug("replace ignored: stale index (%s, %s)", curve_idx, point_idx)
            return False
        curves = list(self._committed)
        curves[curve_idx] = curve.with_point(point_idx, p)
        self._committed = tuple(curves)
        return True
