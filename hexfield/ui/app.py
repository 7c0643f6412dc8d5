"""Textual application hosting the hex grid canvas."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Static

from ..config import GridSettings, save_settings
from ..controller import HexGridController
from .hex_canvas import HexGridCanvas

logger = logging.getLogger(__name__)


def status_line(controller: HexGridController) -> str:
    settings = controller.settings
    selected = controller.selected
    selection = selected.key if selected is not None else "none"
    return (
        f"{settings.orientation.value}-top · {settings.strategy.value} · "
        f"{len(controller.grid)} cells · policy {settings.coordinate_policy.value} · "
        f"selected: {selection}"
    )


class HexfieldApp(App):
    """Interactive hex grid: click a hex to highlight it."""

    TITLE = "hexfield"

    CSS = """
    #status {
        height: 1;
        padding: 0 1;
        background: #1f2933;
        color: #dbe2ea;
    }
    """

    BINDINGS = [
        Binding("escape", "clear_selection", "Clear"),
        Binding("o", "toggle_orientation", "Orientation"),
        Binding("g", "toggle_strategy", "Strategy"),
        Binding("ctrl+s", "save_settings", "Save settings"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, settings: GridSettings | None = None, *, settings_path: Path | None = None) -> None:
        super().__init__()
        self.controller = HexGridController(settings)
        self.settings_path = settings_path

    def compose(self) -> ComposeResult:
        yield Header()
        yield HexGridCanvas(self.controller, id="grid")
        yield Static(status_line(self.controller), id="status")
        yield Footer()

    # ------------------------------------------------------------------
    def _canvas(self) -> HexGridCanvas:
        return self.query_one("#grid", HexGridCanvas)

    def _refresh_view(self) -> None:
        canvas = self._canvas()
        canvas.refresh_visuals()
        canvas.refresh()
        self.query_one("#status", Static).update(status_line(self.controller))

    def on_hex_grid_canvas_hex_selected(self, message: HexGridCanvas.HexSelected) -> None:
        self.query_one("#status", Static).update(status_line(self.controller))

    def on_hex_grid_canvas_grid_rebuilt(self, message: HexGridCanvas.GridRebuilt) -> None:
        self.query_one("#status", Static).update(status_line(self.controller))

    def action_clear_selection(self) -> None:
        self.controller.clear_selection()
        self._refresh_view()

    def action_toggle_orientation(self) -> None:
        self.controller.toggle_orientation()
        self._refresh_view()

    def action_toggle_strategy(self) -> None:
        self.controller.toggle_strategy()
        self._refresh_view()

    def action_save_settings(self) -> None:
        try:
            path = save_settings(self.controller.settings, self.settings_path)
        except OSError as error:
            logger.error(f"Failed to save settings: {error}")
            self.notify(f"Could not save settings: {error}", severity="error")
            return
        self.notify(f"Settings saved to {path}")
