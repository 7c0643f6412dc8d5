"""Enumerate the coordinates that make up a grid region."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Protocol

from ..geometry.coords import CubeCoordinate, from_axial
from ..geometry.errors import InvalidLayout
from ..geometry.layout import FLAT, Layout, Orientation, Point

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..config import GridSettings

logger = logging.getLogger(__name__)

_SQRT3 = math.sqrt(3.0)


class StrategyKind(str, Enum):
    """Available grid-membership strategies."""

    RADIUS = "radius"
    RECTANGLE = "rectangle"


@dataclass(frozen=True)
class Viewport:
    """Pixel size of the drawing surface."""

    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"viewport dimensions cannot be negative: {self.width}x{self.height}")

    @property
    def center(self) -> Point:
        return Point(self.width / 2.0, self.height / 2.0)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


class Grid(Mapping[str, CubeCoordinate]):
    """Immutable set of member coordinates keyed by ``CubeCoordinate.key``."""

    __slots__ = ("_cells",)

    def __init__(self, cells: Mapping[str, CubeCoordinate] | None = None) -> None:
        self._cells: dict[str, CubeCoordinate] = dict(cells or {})

    @classmethod
    def from_coordinates(cls, coordinates: Iterable[CubeCoordinate]) -> Grid:
        cells: dict[str, CubeCoordinate] = {}
        for coord in coordinates:
            cells.setdefault(coord.key, coord)
        return cls(cells)

    def __getitem__(self, key: str) -> CubeCoordinate:
        return self._cells[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"Grid({len(self._cells)} cells)"

    def coordinates(self) -> list[CubeCoordinate]:
        return list(self._cells.values())

    def contains(self, coord: CubeCoordinate) -> bool:
        return coord.key in self._cells

    def lookup(self, coord: CubeCoordinate) -> CubeCoordinate | None:
        return self._cells.get(coord.key)


def disk_size(radius: int) -> int:
    """Number of cells in a hexagonal disk of ``radius`` rings."""

    return 3 * radius * radius + 3 * radius + 1


def hex_disk(radius: int) -> Iterator[CubeCoordinate]:
    """Yield every coordinate with ``max(|q|, |r|, |s|) <= radius``."""

    if radius < 0:
        raise ValueError("radius must be non-negative")
    for q in range(-radius, radius + 1):
        for r in range(max(-radius, -q - radius), min(radius, -q + radius) + 1):
            yield from_axial(q, r)


def rectangle_fill(layout: Layout, viewport: Viewport, *, margin: float = 2.0) -> Iterator[CubeCoordinate]:
    """Yield the coordinates whose centres fall inside the padded viewport.

    The viewport is padded by ``margin`` cell sizes on each side so that
    partially visible edge cells are kept.  The axial sweep is bounded by
    the inverse projection of the padded corners, which always covers the
    box whatever the orientation or origin.
    """

    if margin < 0:
        raise ValueError("margin cannot be negative")
    pad = margin * layout.size
    left, top = -pad, -pad
    right, bottom = viewport.width + pad, viewport.height + pad

    corners = [layout.pixel_to_hex_fractional(x, y) for x in (left, right) for y in (top, bottom)]
    q_min = math.floor(min(corner[0] for corner in corners)) - 1
    q_max = math.ceil(max(corner[0] for corner in corners)) + 1
    r_min = math.floor(min(corner[1] for corner in corners)) - 1
    r_max = math.ceil(max(corner[1] for corner in corners)) + 1

    for q in range(q_min, q_max + 1):
        for r in range(r_min, r_max + 1):
            x, y = layout.hex_to_pixel(q, r)
            if left < x < right and top < y < bottom:
                yield from_axial(q, r)


def _ring_pitch(orientation: Orientation) -> tuple[float, float]:
    # Width and height, in cell sizes, that each extra ring adds to a disk.
    if orientation == FLAT:
        return 2.0, _SQRT3
    return _SQRT3, 2.0


def fit_radius(
    viewport: Viewport,
    orientation: Orientation,
    *,
    target_radius: int = 5,
    padding: float = 0.9,
) -> tuple[int, float]:
    """Pick a cell size and disk radius that fill ``viewport``.

    First the size is chosen so that ``target_radius`` rings fit both
    dimensions (scaled by ``padding``), then the radius achievable at that
    size is recomputed and floored.  This is a heuristic, not an optimal
    packing.

    Returns:
        tuple[int, float]: ``(radius, size)``.
    """

    if target_radius < 0:
        raise ValueError("target_radius must be non-negative")
    if not 0.0 < padding <= 1.0:
        raise ValueError("padding must be in (0, 1]")
    if viewport.is_empty:
        raise InvalidLayout(f"Cannot fit a grid into an empty viewport ({viewport.width}x{viewport.height})")

    width, height = float(viewport.width), float(viewport.height)
    kx, ky = _ring_pitch(orientation)
    if target_radius > 0:
        rings = 2 * target_radius + 1
        size_for_width = width / rings / kx
        size_for_height = height / rings / ky
    else:
        size_for_width = width / 2.0
        size_for_height = height / 2.0
    size = min(size_for_width, size_for_height) * padding

    radius_from_height = (height / size / ky - 1.0) / 2.0
    radius_from_width = (width / size / kx - 1.0) / 2.0
    radius = max(0, math.floor(min(radius_from_height, radius_from_width)))
    return radius, size


class GridStrategy(Protocol):
    kind: ClassVar[StrategyKind]

    def build(self, viewport: Viewport, orientation: Orientation, size: float) -> tuple[Layout, Grid]:
        ...


@dataclass(frozen=True)
class RadiusBounded:
    """Hexagonal disk centred on the viewport.

    With ``radius=None`` both the radius and the cell size are fitted to the
    viewport and the configured size is ignored.
    """

    radius: int | None = None
    target_radius: int = 5
    padding: float = 0.9

    kind: ClassVar[StrategyKind] = StrategyKind.RADIUS

    def build(self, viewport: Viewport, orientation: Orientation, size: float) -> tuple[Layout, Grid]:
        radius = self.radius
        if radius is None:
            radius, size = fit_radius(
                viewport, orientation, target_radius=self.target_radius, padding=self.padding
            )
        layout = Layout(orientation, size, viewport.center)
        grid = Grid.from_coordinates(hex_disk(radius))
        logger.debug(f"Built radius-{radius} disk of {len(grid)} cells at size {size:.2f}")
        return layout, grid


@dataclass(frozen=True)
class RectangleBounded:
    """Every cell whose centre lies in the viewport padded by ``margin`` cells."""

    margin: float = 2.0

    kind: ClassVar[StrategyKind] = StrategyKind.RECTANGLE

    def build(self, viewport: Viewport, orientation: Orientation, size: float) -> tuple[Layout, Grid]:
        layout = Layout(orientation, size, viewport.center)
        grid = Grid.from_coordinates(rectangle_fill(layout, viewport, margin=self.margin))
        logger.debug(
            f"Built rectangle fill of {len(grid)} cells for {viewport.width}x{viewport.height}"
        )
        return layout, grid


def build_strategy(settings: GridSettings) -> GridStrategy:
    if StrategyKind(settings.strategy) is StrategyKind.RECTANGLE:
        return RectangleBounded(margin=settings.margin)
    return RadiusBounded(
        radius=settings.radius,
        target_radius=settings.target_radius,
        padding=settings.fit_padding,
    )
