"""Conversions between cube coordinates and pixel points."""

from __future__ import annotations

import math

from .coords import CubeCoordinate
from .layout import Layout, Point

Poly = list[Point]


def _round_half_up(value: float) -> int:
    # ``floor(value + 0.5)`` would lose the fraction of values just below a half.
    whole = math.floor(value)
    return whole + int(value - whole >= 0.5)


def cube_round(qf: float, rf: float, sf: float) -> CubeCoordinate:
    """Round a fractional cube triple to the nearest valid hex.

    Each component is rounded on its own; the one with the largest rounding
    error is then rebuilt from the other two.  Ties go to ``s``, then ``r``.
    """

    qi, ri, si = _round_half_up(qf), _round_half_up(rf), _round_half_up(sf)
    dq, dr, ds = abs(qi - qf), abs(ri - rf), abs(si - sf)
    if dq > dr and dq > ds:
        qi = -ri - si
    elif dr > ds:
        ri = -qi - si
    else:
        si = -qi - ri
    return CubeCoordinate(qi, ri, si)


def hex_to_pixel(coord: CubeCoordinate, layout: Layout) -> Point:
    x, y = layout.hex_to_pixel(coord.q, coord.r)
    return Point(x, y)


def pixel_to_fractional(point: Point | tuple[float, float], layout: Layout) -> tuple[float, float, float]:
    x, y = point
    return layout.pixel_to_hex_fractional(x, y)


def pixel_to_hex(point: Point | tuple[float, float], layout: Layout) -> CubeCoordinate:
    return cube_round(*pixel_to_fractional(point, layout))


def corner_offsets(layout: Layout) -> tuple[Point, ...]:
    """Return the six corner offsets of a cell, relative to its centre.

    Corner ``i`` sits at ``60° * (i + start_angle)``: 0° for flat-top and
    30° for pointy-top, at distance ``layout.size``.
    """

    offsets: list[Point] = []
    for index in range(6):
        angle = math.tau * (layout.orientation.start_angle + index) / 6.0
        offsets.append(Point(layout.size * math.cos(angle), layout.size * math.sin(angle)))
    return tuple(offsets)


def hex_corners(coord: CubeCoordinate, layout: Layout) -> Poly:
    """Return the six vertices of ``coord`` in pixel space."""

    cx, cy = hex_to_pixel(coord, layout)
    return [Point(cx + dx, cy + dy) for dx, dy in corner_offsets(layout)]
