"""State owner tying layout, grid enumeration and selection together."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .config import GridSettings, OrientationName
from .geometry.coords import CubeCoordinate, make
from .geometry.layout import Layout, Point
from .geometry.projection import corner_offsets, hex_corners, hex_to_pixel
from .grid.enumeration import Grid, GridStrategy, StrategyKind, Viewport, build_strategy
from .grid.selection import SelectionState, SelectionTracker

logger = logging.getLogger(__name__)


class HexGridController:
    """Owns the current layout, grid and selection.

    The UI shell reports viewport sizes through :meth:`resize` and pointer
    input through :meth:`click`; every call finishes its rebuild before
    returning.  Layout and grid are replaced wholesale, never patched.
    """

    def __init__(self, settings: GridSettings | None = None) -> None:
        self._settings = settings or GridSettings()
        self._strategy: GridStrategy = build_strategy(self._settings)
        self._layout: Layout | None = None
        self._grid = Grid()
        self._viewport: Viewport | None = None
        self.selection = SelectionTracker()

    # ------------------------------------------------------------------
    # Read views

    @property
    def settings(self) -> GridSettings:
        return self._settings

    @property
    def strategy(self) -> GridStrategy:
        return self._strategy

    @property
    def layout(self) -> Layout | None:
        return self._layout

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def viewport(self) -> Viewport | None:
        return self._viewport

    @property
    def selected(self) -> CubeCoordinate | None:
        return self.selection.selected

    @property
    def selection_state(self) -> SelectionState:
        return self.selection.state

    def cells(self) -> Iterator[tuple[CubeCoordinate, Point]]:
        """Yield each grid member with its pixel centre."""

        layout = self._require_layout()
        for coord in self._grid.values():
            yield coord, hex_to_pixel(coord, layout)

    def polygon(self, coord: CubeCoordinate) -> list[Point]:
        return hex_corners(coord, self._require_layout())

    def corner_offsets(self) -> tuple[Point, ...]:
        return corner_offsets(self._require_layout())

    def coordinate(self, q: int, r: int, s: int | None = None) -> CubeCoordinate:
        """Build a coordinate under the configured construction policy."""

        return make(q, r, s, policy=self._settings.coordinate_policy)

    # ------------------------------------------------------------------
    # Events

    def resize(self, width: float, height: float) -> Grid:
        return self._rebuild(self._settings, self._strategy, Viewport(width, height))

    def click(self, x: float, y: float) -> CubeCoordinate | None:
        if self._layout is None:
            return None
        return self.selection.on_point(Point(x, y), self._layout, self._grid)

    def select(self, coord: CubeCoordinate) -> bool:
        return self.selection.select(coord, self._grid)

    def clear_selection(self) -> None:
        self.selection.clear()

    def configure(self, settings: GridSettings) -> Grid | None:
        """Apply new settings, rebuilding against the last viewport if known.

        If the rebuild raises, the previous settings, layout and grid stay.
        """

        strategy = build_strategy(settings)
        if self._viewport is None:
            self._settings = settings
            self._strategy = strategy
            return None
        return self._rebuild(settings, strategy, self._viewport)

    def toggle_orientation(self) -> Grid | None:
        orientation = (
            OrientationName.FLAT
            if self._settings.orientation is OrientationName.POINTY
            else OrientationName.POINTY
        )
        return self.configure(self._settings.model_copy(update={"orientation": orientation}))

    def toggle_strategy(self) -> Grid | None:
        strategy = (
            StrategyKind.RECTANGLE
            if self._settings.strategy is StrategyKind.RADIUS
            else StrategyKind.RADIUS
        )
        return self.configure(self._settings.model_copy(update={"strategy": strategy}))

    def _rebuild(self, settings: GridSettings, strategy: GridStrategy, viewport: Viewport) -> Grid:
        # Nothing is assigned until the build has succeeded.
        layout, grid = strategy.build(viewport, settings.orientation_matrix, settings.hex_size)
        self._settings = settings
        self._strategy = strategy
        self._viewport = viewport
        self._layout = layout
        self._grid = grid
        self.selection.on_grid_rebuilt(grid)
        logger.debug(
            f"Grid rebuilt for {viewport.width}x{viewport.height}: "
            f"{len(grid)} cells, size {layout.size:.2f}"
        )
        return grid

    def _require_layout(self) -> Layout:
        if self._layout is None:
            raise RuntimeError("resize() must be called before the grid can be drawn")
        return self._layout
