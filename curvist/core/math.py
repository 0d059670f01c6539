from typing import Literal, NamedTuple


class Point(NamedTuple):
    x: float
    y: float


Op = tuple[Literal["M", "C"], tuple]


def as_point(p) -> Point:
    """Coerce any (x, y) pair into a float Point."""
    return Point(float(p[0]), float(p[1]))


def dist2(a: Point, b: Point) -> float:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def is_near(a: Point, b: Point, radius: float) -> bool:
    # squared comparison, no sqrt
    return dist2(a, b) <= radius * radius
