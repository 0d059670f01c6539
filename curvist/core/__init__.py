from .math import Point, Op, dist2, is_near
from .splines import Spline, CatmullRomSpline
from .registries import spline_registry, get_spline
from .curve import Curve
from .store import CurveStore
from .hit_test import curve_at, point_at, CURVE_HIT_RADIUS, POINT_HIT_RADIUS
from .style import StrokeStyle, StrokeParams
from .config import EditorConfig
from .interaction import CurveInteraction, Mode, Scene
from .render import render, replay, Surface
