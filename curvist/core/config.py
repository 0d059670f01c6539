from dataclasses import dataclass

from .hit_test import CURVE_HIT_RADIUS, POINT_HIT_RADIUS


@dataclass(frozen=True)
class EditorConfig:
    curve_hit_radius: float = CURVE_HIT_RADIUS
    point_hit_radius: float = POINT_HIT_RADIUS
    marker_radius: float = 5.0
    preview_color: str = "#aaaaaa"
    commit_keys: tuple[str, ...] = ("Enter", "Return")
    spline: str = "catmull-rom"

    def __post_init__(self):
        for name in ("curve_hit_radius", "point_hit_radius", "marker_radius"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
