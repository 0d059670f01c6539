from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .math import Point, as_point


@dataclass(frozen=True)
class Curve:
    """
    Immutable, ordered sequence of control points.

    The order defines the spline parametrization and the endpoints. Every
    "edit" returns a new Curve; instances are never shared mutably between
    the active curve and the committed store.
    """
    points: tuple[Point, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "points", tuple(as_point(p) for p in self.points))

    @classmethod
    def of(cls, points: Iterable) -> "Curve":
        return cls(tuple(points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, idx: int) -> Point:
        return self.points[idx]

    @property
    def is_strokable(self) -> bool:
        return len(self.points) >= 2

    @property
    def last(self) -> Point | None:
        return self.points[-1] if self.points else None

    def appended(self, p: Point) -> "Curve":
        return Curve(self.points + (as_point(p),))

    def with_point(self, idx: int, p: Point) -> "Curve":
        if idx < 0 or idx >= len(self.points):
            return self
        pts = list(self.points)
        pts[idx] = as_point(p)
        return Curve(tuple(pts))
