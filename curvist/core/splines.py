from abc import ABC, abstractmethod
from typing import Iterable, Sequence

from .math import Op, Point, as_point
from .registries import register_spline


class Spline(ABC):
    """
    GUI-agnostic spline interface.
    """

    @abstractmethod
    def segments(self, pts: Sequence[Point], /) -> Iterable[tuple[Point, Point, Point]]:
        """
        Yield (c1, c2, p2) for each cubic segment, assuming a moveTo at pts[0].
        """

    def path_ops(self, pts: Sequence[Point], /) -> list[Op]:
        """
        Convert control points to drawing ops:
          - ("M", (x,y))       moveTo
          - ("C", (c1,c2,p2))  cubicTo

        Fewer than two points produce no ops at all: such a curve has no stroke.
        """
        if len(pts) < 2:
            return []
        ops: list[Op] = [("M", as_point(pts[0]))]
        for c1, c2, p2 in self.segments(pts):
            ops.append(("C", (c1, c2, p2)))
        return ops


@register_spline("catmull-rom")
class CatmullRomSpline(Spline):
    """
    Open, endpoint-clamped cardinal spline with tension 1/6.
    One cubic per consecutive pair, including the two-point case.
    """

    def segments(self, pts: Sequence[Point], /) -> Iterable[tuple[Point, Point, Point]]:
        n = len(pts)
        if n < 2:
            return
        p = [pts[0]] + list(pts) + [pts[-1]]
        for i in range(1, len(p) - 2):
            p0 = p[i - 1]; p1 = p[i]; p2 = p[i + 1]; p3 = p[i + 2]
            c1 = Point(p1[0] + (p2[0] - p0[0]) / 6.0,
                       p1[1] + (p2[1] - p0[1]) / 6.0)
            c2 = Point(p2[0] - (p3[0] - p1[0]) / 6.0,
                       p2[1] - (p3[1] - p1[1]) / 6.0)
            yield c1, c2, as_point(p2)
