"""Single-cell selection state."""

from __future__ import annotations

import logging
from enum import Enum

from ..geometry.coords import CubeCoordinate
from ..geometry.layout import Layout, Point
from ..geometry.projection import pixel_to_hex
from .enumeration import Grid

logger = logging.getLogger(__name__)


class SelectionState(str, Enum):
    UNSELECTED = "unselected"
    SELECTED = "selected"


class SelectionTracker:
    """Tracks at most one selected grid member."""

    def __init__(self) -> None:
        self._selected: CubeCoordinate | None = None

    @property
    def selected(self) -> CubeCoordinate | None:
        return self._selected

    @property
    def state(self) -> SelectionState:
        return SelectionState.UNSELECTED if self._selected is None else SelectionState.SELECTED

    def is_selected(self, coord: CubeCoordinate) -> bool:
        return self._selected is not None and self._selected.key == coord.key

    def on_point(self, point: Point | tuple[float, float], layout: Layout, grid: Grid) -> CubeCoordinate | None:
        """Select the grid member under ``point``.

        Returns the newly selected coordinate, or ``None`` when the point
        falls outside the grid; the current selection is then left as is.
        """

        member = grid.lookup(pixel_to_hex(point, layout))
        if member is None:
            logger.debug(f"No hex at ({point[0]:.1f}, {point[1]:.1f})")
            return None
        self._selected = member
        logger.info(f"Hex clicked: {member.key}")
        return member

    def select(self, coord: CubeCoordinate, grid: Grid) -> bool:
        member = grid.lookup(coord)
        if member is None:
            return False
        self._selected = member
        return True

    def on_grid_rebuilt(self, grid: Grid) -> None:
        if self._selected is None:
            return
        member = grid.lookup(self._selected)
        if member is None:
            logger.debug(f"Selection {self._selected.key} dropped after grid rebuild")
        self._selected = member

    def clear(self) -> None:
        self._selected = None
