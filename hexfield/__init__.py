"""Interactive hexagonal grid visualizer."""

from .controller import HexGridController
from .geometry import CoordinatePolicy, CubeCoordinate, Layout, Point
from .grid import Grid, StrategyKind, Viewport

__version__ = "0.1.0"

__all__ = [
    "CoordinatePolicy",
    "CubeCoordinate",
    "Grid",
    "HexGridController",
    "Layout",
    "Point",
    "StrategyKind",
    "Viewport",
    "__version__",
]
