from .enumeration import (
    Grid,
    GridStrategy,
    RadiusBounded,
    RectangleBounded,
    StrategyKind,
    Viewport,
    build_strategy,
    disk_size,
    fit_radius,
    hex_disk,
    rectangle_fill,
)
from .selection import SelectionState, SelectionTracker

__all__ = [
    "Grid",
    "GridStrategy",
    "RadiusBounded",
    "RectangleBounded",
    "StrategyKind",
    "Viewport",
    "build_strategy",
    "disk_size",
    "fit_radius",
    "hex_disk",
    "rectangle_fill",
    "SelectionState",
    "SelectionTracker",
]
