from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from .splines import Spline

spline_registry: dict[str, type["Spline"]] = {}


def register_spline(name: str):
    def _decorator(cls: type["Spline"]) -> type["Spline"]:
        if not name or name in spline_registry:
            raise ValueError(f"Invalid or duplicate spline name '{name}'")
        spline_registry[name] = cls
        return cls
    return _decorator


def get_spline(name: str) -> "Spline":
    try:
        return spline_registry[name]()
    except KeyError:
        raise KeyError(f"Unknown spline '{name}'") from None
