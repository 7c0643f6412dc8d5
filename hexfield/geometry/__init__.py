from .coords import (
    ORIGIN,
    Axial,
    CoordinatePolicy,
    CubeCoordinate,
    add,
    equals,
    from_axial,
    make,
    to_axial,
)
from .errors import HexGeometryError, InvalidCoordinate, InvalidLayout
from .layout import FLAT, ORIENTATIONS, POINTY, Layout, Orientation, Point, orientation_named
from .projection import (
    corner_offsets,
    cube_round,
    hex_corners,
    hex_to_pixel,
    pixel_to_fractional,
    pixel_to_hex,
)

__all__ = [
    "ORIGIN",
    "Axial",
    "CoordinatePolicy",
    "CubeCoordinate",
    "add",
    "equals",
    "from_axial",
    "make",
    "to_axial",
    "HexGeometryError",
    "InvalidCoordinate",
    "InvalidLayout",
    "FLAT",
    "ORIENTATIONS",
    "POINTY",
    "Layout",
    "Orientation",
    "Point",
    "orientation_named",
    "corner_offsets",
    "cube_round",
    "hex_corners",
    "hex_to_pixel",
    "pixel_to_fractional",
    "pixel_to_hex",
]
