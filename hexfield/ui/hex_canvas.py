"""Textual widget that draws the hex grid and forwards clicks."""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import RenderableType
from rich.text import Text
from textual import events
from textual.message import Message
from textual.widget import Widget

from ..controller import HexGridController
from ..geometry.coords import CubeCoordinate
from ..geometry.layout import Point
from ..geometry.projection import pixel_to_hex

# Terminal cells are roughly twice as tall as they are wide.
CELL_WIDTH_PX = 8.0
CELL_HEIGHT_PX = 16.0

Raster = list[list[str | None]]


@dataclass(frozen=True)
class CellVisual:
    """What the canvas draws for one grid member."""

    label: str
    fill: str


def cell_to_pixel(
    column: int,
    row: int,
    *,
    cell_width: float = CELL_WIDTH_PX,
    cell_height: float = CELL_HEIGHT_PX,
) -> Point:
    """Return the pixel position of the centre of a terminal cell."""

    return Point((column + 0.5) * cell_width, (row + 0.5) * cell_height)


def pixel_to_cell(
    x: float,
    y: float,
    *,
    cell_width: float = CELL_WIDTH_PX,
    cell_height: float = CELL_HEIGHT_PX,
) -> tuple[int, int]:
    return int(x // cell_width), int(y // cell_height)


def rasterize(
    controller: HexGridController,
    columns: int,
    rows: int,
    *,
    cell_width: float = CELL_WIDTH_PX,
    cell_height: float = CELL_HEIGHT_PX,
) -> Raster:
    """Map every terminal cell to the key of the grid member under its centre."""

    layout = controller.layout
    grid = controller.grid
    raster: Raster = []
    for row in range(rows):
        line: list[str | None] = []
        for column in range(columns):
            if layout is None:
                line.append(None)
                continue
            point = cell_to_pixel(column, row, cell_width=cell_width, cell_height=cell_height)
            key = pixel_to_hex(point, layout).key
            line.append(key if key in grid else None)
        raster.append(line)
    return raster


def build_visuals(controller: HexGridController, palette: tuple[str, str, str]) -> dict[str, CellVisual]:
    """Assign each member a label and one of three fills.

    ``(q - r) mod 3`` differs between any two neighbours, so adjacent cells
    never share a fill.
    """

    visuals: dict[str, CellVisual] = {}
    for coord in controller.grid.values():
        visuals[coord.key] = CellVisual(label=coord.key, fill=palette[(coord.q - coord.r) % 3])
    return visuals


def label_cells(
    controller: HexGridController,
    raster: Raster,
    visuals: dict[str, CellVisual],
    *,
    cell_width: float = CELL_WIDTH_PX,
    cell_height: float = CELL_HEIGHT_PX,
) -> dict[tuple[int, int], str]:
    """Place each label centred on its cell, dropping labels that do not fit."""

    placed: dict[tuple[int, int], str] = {}
    if controller.layout is None:
        return placed
    for coord, (cx, cy) in controller.cells():
        visual = visuals.get(coord.key)
        if visual is None:
            continue
        column, row = pixel_to_cell(cx, cy, cell_width=cell_width, cell_height=cell_height)
        start = column - len(visual.label) // 2
        positions = [(start + offset, row) for offset in range(len(visual.label))]
        if all(
            0 <= y < len(raster) and 0 <= x < len(raster[y]) and raster[y][x] == coord.key
            for x, y in positions
        ):
            for position, char in zip(positions, visual.label):
                placed[position] = char
    return placed


class HexGridCanvas(Widget):
    """Hex grid rasterised onto terminal cells with click selection."""

    DEFAULT_CSS = """
    HexGridCanvas {
        background: #141414;
        width: 100%;
        height: 1fr;
    }
    """

    palette: tuple[str, str, str] = ("#1b2735", "#17212c", "#2a1a1a")
    fill_selected = "#5c4a12"
    label = "#dbe2ea"
    label_selected = "#ffe082"

    def __init__(
        self,
        controller: HexGridController,
        *,
        cell_width: float = CELL_WIDTH_PX,
        cell_height: float = CELL_HEIGHT_PX,
        name: str | None = None,
        id: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id)
        self.controller = controller
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.visuals: dict[str, CellVisual] = {}

    # ------------------------------------------------------------------
    def rebuild(self, columns: int, rows: int) -> bool:
        """Regenerate the grid for a canvas of ``columns`` x ``rows`` cells."""

        if columns <= 0 or rows <= 0:
            return False
        self.controller.resize(columns * self.cell_width, rows * self.cell_height)
        self.refresh_visuals()
        return True

    def refresh_visuals(self) -> None:
        self.visuals = build_visuals(self.controller, self.palette)

    def hit(self, column: int, row: int) -> CubeCoordinate | None:
        point = cell_to_pixel(column, row, cell_width=self.cell_width, cell_height=self.cell_height)
        return self.controller.click(point.x, point.y)

    # ------------------------------------------------------------------
    def render(self) -> RenderableType:
        width, height = self.size
        raster = rasterize(
            self.controller, width, height, cell_width=self.cell_width, cell_height=self.cell_height
        )
        labels = label_cells(
            self.controller, raster, self.visuals, cell_width=self.cell_width, cell_height=self.cell_height
        )
        text = Text(no_wrap=True, overflow="crop")
        for row, line in enumerate(raster):
            if row:
                text.append("\n")
            for column, key in enumerate(line):
                char = labels.get((column, row), " ")
                if key is None:
                    text.append(char)
                else:
                    text.append(char, style=self.cell_style(key))
        return text

    def cell_style(self, key: str) -> str:
        """Return the rich style for a terminal cell inside member ``key``."""

        if self.controller.selection.is_selected(self.controller.grid[key]):
            return f"bold {self.label_selected} on {self.fill_selected}"
        visual = self.visuals.get(key)
        fill = visual.fill if visual is not None else self.palette[0]
        return f"{self.label} on {fill}"

    # ------------------------------------------------------------------
    def on_resize(self, event: events.Resize) -> None:  # pragma: no cover - UI glue
        if self.rebuild(event.size.width, event.size.height):
            self.post_message(self.GridRebuilt(len(self.controller.grid)))
            self.refresh()

    async def on_click(self, event: events.Click) -> None:  # pragma: no cover - UI glue
        coordinate = self.hit(event.x, event.y)
        if coordinate is not None:
            self.post_message(self.HexSelected(coordinate))
            self.refresh()

    class GridRebuilt(Message):
        """Message emitted after a resize regenerated the grid."""

        def __init__(self, cells: int) -> None:
            super().__init__()
            self.cells = cells

    class HexSelected(Message):
        """Message emitted when a click selects a hex."""

        def __init__(self, coordinate: CubeCoordinate) -> None:
            super().__init__()
            self.coordinate = coordinate
