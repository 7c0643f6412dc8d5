"""Cube and axial hex coordinates."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from numbers import Integral

from .errors import InvalidCoordinate

logger = logging.getLogger(__name__)


class CoordinatePolicy(str, Enum):
    """How :func:`make` treats a triple whose components do not sum to zero."""

    FORGIVING = "forgiving"
    STRICT = "strict"


@dataclass(frozen=True, slots=True)
class Axial:
    q: int
    r: int

    def to_cube(self) -> "CubeCoordinate":
        return CubeCoordinate(self.q, self.r, -self.q - self.r)


@dataclass(frozen=True, slots=True)
class CubeCoordinate:
    """Hex position in cube coordinates; ``q + r + s`` is always zero."""

    q: int
    r: int
    s: int

    def __post_init__(self) -> None:
        total = self.q + self.r + self.s
        if total != 0:
            raise InvalidCoordinate(
                f"Hex coordinates must sum to 0: q({self.q}) + r({self.r}) + s({self.s}) = {total}"
            )

    @property
    def key(self) -> str:
        """Identity used by grids and the UI, e.g. ``"1,-2,1"``."""

        return f"{self.q},{self.r},{self.s}"

    def __add__(self, other: object) -> "CubeCoordinate":
        if not isinstance(other, CubeCoordinate):
            return NotImplemented
        return CubeCoordinate(self.q + other.q, self.r + other.r, self.s + other.s)


ORIGIN = CubeCoordinate(0, 0, 0)


def _component(name: str, value: object) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidCoordinate(f"{name} must be an integer, got {value!r}")
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise InvalidCoordinate(f"{name} must be an integer, got {value!r}")


def make(
    q: int | float | None = None,
    r: int | float | None = None,
    s: int | float | None = None,
    *,
    policy: CoordinatePolicy | str = CoordinatePolicy.FORGIVING,
) -> CubeCoordinate:
    """Build a coordinate from two or three components.

    A missing component is always derived from the other two.  When all
    three are given but do not sum to zero, ``FORGIVING`` keeps the first
    two supplied components and derives the third (logging a warning),
    while ``STRICT`` raises :class:`InvalidCoordinate`.
    """

    policy = CoordinatePolicy(policy)
    qi, ri, si = _component("q", q), _component("r", r), _component("s", s)
    supplied = sum(value is not None for value in (qi, ri, si))
    if supplied < 2:
        raise InvalidCoordinate("At least two of q, r, s are required")

    if supplied == 3:
        total = qi + ri + si
        if total == 0:
            return CubeCoordinate(qi, ri, si)
        if policy is CoordinatePolicy.STRICT:
            raise InvalidCoordinate(
                f"Hex coordinates must sum to 0: q({qi}) + r({ri}) + s({si}) = {total}"
            )
        logger.warning(
            f"Hex coordinates do not sum to zero: {qi} + {ri} + {si} = {total}. Deriving s from q and r."
        )
        return CubeCoordinate(qi, ri, -qi - ri)

    if si is None:
        return CubeCoordinate(qi, ri, -qi - ri)
    if ri is None:
        return CubeCoordinate(qi, -qi - si, si)
    return CubeCoordinate(-ri - si, ri, si)


def from_axial(q: int, r: int) -> CubeCoordinate:
    return CubeCoordinate(q, r, -q - r)


def to_axial(c: CubeCoordinate) -> Axial:
    return Axial(c.q, c.r)


def add(a: CubeCoordinate, b: CubeCoordinate) -> CubeCoordinate:
    return a + b


def equals(a: CubeCoordinate, b: CubeCoordinate) -> bool:
    return a.q == b.q and a.r == b.r and a.s == b.s
