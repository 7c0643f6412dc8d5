from __future__ import annotations

import math
from dataclasses import dataclass
from math import sqrt
from typing import NamedTuple

from .errors import InvalidLayout


class Point(NamedTuple):
    x: float
    y: float


# Orientation matrices from Red Blob (do not alter)
@dataclass(frozen=True)
class Orientation:
    name: str
    f0: float; f1: float; f2: float; f3: float  # axial(q,r) -> pixel
    b0: float; b1: float; b2: float; b3: float  # pixel -> axial
    start_angle: float                           # for polygon corners, in sixths of a turn

    def forward_determinant(self) -> float:
        return self.f0 * self.f3 - self.f1 * self.f2

    def inverse_determinant(self) -> float:
        return self.b0 * self.b3 - self.b1 * self.b2


# Pointy-top and Flat-top
POINTY = Orientation(
    name = "pointy",
    f0 =  sqrt(3.0), f1 =  sqrt(3.0)/2.0,
    f2 =  0.0,       f3 =  3.0/2.0,
    b0 =  sqrt(3.0)/3.0, b1 = -1.0/3.0,
    b2 =  0.0,            b3 =  2.0/3.0,
    start_angle = 0.5,  # 30°
)
FLAT = Orientation(
    name = "flat",
    f0 =  3.0/2.0,  f1 = 0.0,
    f2 =  sqrt(3.0)/2.0, f3 = sqrt(3.0),
    b0 =  2.0/3.0,  b1 = 0.0,
    b2 = -1.0/3.0,  b3 = sqrt(3.0)/3.0,
    start_angle = 0.0,  # 0°
)

ORIENTATIONS: dict[str, Orientation] = {"pointy": POINTY, "flat": FLAT}

_SINGULAR_EPSILON = 1e-12


def orientation_named(name: str) -> Orientation:
    try:
        return ORIENTATIONS[name]
    except KeyError:
        raise InvalidLayout(f"Unknown orientation: {name!r}") from None


@dataclass(frozen=True)
class Layout:
    """Orientation, uniform cell size and pixel origin of coordinate (0, 0, 0)."""

    orientation: Orientation
    size: float
    origin: Point = Point(0.0, 0.0)

    def __post_init__(self) -> None:
        try:
            size = float(self.size)
            origin = Point(float(self.origin[0]), float(self.origin[1]))
        except (TypeError, ValueError, IndexError) as exc:
            raise InvalidLayout(f"Invalid layout values: size={self.size!r}, origin={self.origin!r}") from exc
        if not math.isfinite(size) or size <= 0.0:
            raise InvalidLayout(f"size must be a positive number, got {self.size!r}")
        if not (math.isfinite(origin.x) and math.isfinite(origin.y)):
            raise InvalidLayout(f"origin must be finite, got {self.origin!r}")
        if (
            abs(self.orientation.forward_determinant()) < _SINGULAR_EPSILON
            or abs(self.orientation.inverse_determinant()) < _SINGULAR_EPSILON
        ):
            raise InvalidLayout(f"Orientation {self.orientation.name!r} is not invertible")
        object.__setattr__(self, "size", size)
        object.__setattr__(self, "origin", origin)

    def hex_to_pixel(self, q: float, r: float) -> tuple[float, float]:
        M = self.orientation
        x = (M.f0 * q + M.f1 * r) * self.size + self.origin.x
        y = (M.f2 * q + M.f3 * r) * self.size + self.origin.y
        return x, y

    def pixel_to_hex_fractional(self, x: float, y: float) -> tuple[float, float, float]:
        M = self.orientation
        px = (x - self.origin.x) / self.size
        py = (y - self.origin.y) / self.size
        q = M.b0 * px + M.b1 * py
        r = M.b2 * px + M.b3 * py
        s = -q - r
        return q, r, s
