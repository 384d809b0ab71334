"""
reelscroll TUI

A single search screen:
- Header (docked top)
- Search panel with input, status, results table and load-more footer
- Footer (docked bottom)

All state lives in the SearchController; the app only forwards user intents
and renders the state it is handed back.
"""

from typing import Optional

from loguru import logger
from textual.app import App, ComposeResult
from textual.widgets import Header, Footer, Input, DataTable

from reelscroll.modules.config import Settings
from reelscroll.modules.pagination import SearchController, SearchState
from reelscroll.tui.widgets import SearchPanel


class ReelscrollApp(App):
    """reelscroll - OMDb search with infinite scroll."""

    CSS_PATH = [
        "styles.tcss",
        "widgets/search_panel/styles.tcss",
    ]
    TITLE = "reelscroll"
    SUB_TITLE = "OMDb movie search"
    BINDINGS = [("escape", "back", "Back")]

    def __init__(self, settings: Settings, controller: Optional[SearchController] = None):
        super().__init__()
        self.settings = settings
        if controller is None:
            controller = SearchController.from_settings(settings)
        controller.on_state = self.render_state
        controller.on_back = self.handle_back
        self.controller = controller

    def compose(self) -> ComposeResult:
        """Compose the UI layout."""
        yield Header(show_clock=True)
        yield SearchPanel(id="search-panel")
        yield Footer()

    def on_mount(self) -> None:
        """Set theme, configure the table and render the initial state."""
        self.theme = "flexoki"

        search_panel = self.query_one("#search-panel", SearchPanel)
        search_panel.setup_table()
        self.render_state(self.controller.state)

        table = self.query_one("#results-table", DataTable)
        self.watch(table, "scroll_y", self._on_results_scrolled, init=False)

        self.query_one("#search-input", Input).focus()

    async def on_unmount(self) -> None:
        await self.controller.aclose()

    def render_state(self, state: SearchState) -> None:
        """State listener: called by the controller after every mutation."""
        search_panel = self.query_one("#search-panel", SearchPanel)
        search_panel.show_state(state)

    def handle_back(self) -> None:
        """Back navigation has no host screen to return to."""
        logger.debug("Back navigation requested")

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search-input":
            self.controller.change_query(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle search input submission."""
        if event.input.id == "search-input":
            self.controller.submit_search()

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        """Reaching the last row counts as hitting the scroll boundary."""
        table = event.data_table
        if table.id != "results-table" or table.row_count == 0:
            return
        if event.cursor_row >= table.row_count - 1:
            self.controller.request_more()

    def _on_results_scrolled(self, scroll_y: float) -> None:
        table = self.query_one("#results-table", DataTable)
        if table.row_count and table.max_scroll_y > 0 and scroll_y >= table.max_scroll_y:
            self.controller.request_more()

    def action_back(self) -> None:
        self.controller.navigate_back()


if __name__ == "__main__":
    from reelscroll.modules.config import load_settings

    app = ReelscrollApp(load_settings())
    app.run()
