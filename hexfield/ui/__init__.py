"""Terminal user interface for hexfield."""

from .hex_canvas import CellVisual, HexGridCanvas, build_visuals, label_cells, rasterize

__all__ = ["CellVisual", "HexGridCanvas", "build_visuals", "label_cells", "rasterize"]
