"""
Search Panel Widget - Search OMDb and display results.

Contains:
- Search input field
- Search status display
- Results DataTable (grows as more pages load)
- Load-more / pagination error footer
"""

from textual.app import ComposeResult
from textual.containers import Center
from textual.widgets import Static, Input, DataTable

from reelscroll.modules.pagination.state import SearchState
from reelscroll.tui.utils import format_poster, format_status, styled_footer


class SearchPanel(Static):
    """Search panel widget with search input, results table, and load-more footer."""

    status_text: str = ""
    footer_text: str = ""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._rendered: tuple = ()

    def compose(self) -> ComposeResult:
        yield Static("Movie Search", id="search-label")
        yield Input(
            placeholder="Enter a movie title...",
            id="search-input",
            type="text"
        )
        yield Static("", id="search-status")
        yield DataTable(id="results-table", cursor_type="row")
        # Footer AFTER the table so it appears below results
        with Center(id="load-more-container"):
            yield Static("", id="load-more-status")

    def setup_table(self) -> None:
        """Configure the results table columns. Call from app on_mount."""
        table = self.query_one("#results-table", DataTable)
        table.zebra_stripes = True
        table.add_column("TITLE", width=50)
        table.add_column("IMDB ID", width=12)
        table.add_column("POSTER", width=80)

    def show_state(self, state: SearchState) -> None:
        """Bring status, table rows and footer in line with ``state``."""
        table = self.query_one("#results-table", DataTable)

        items = state.items
        start = len(self._rendered)
        if items[:start] != self._rendered:
            # new session: items were replaced, not appended
            table.clear()
            start = 0
        for movie in items[start:]:
            table.add_row(movie.title, movie.id, format_poster(movie.poster_url))
        self._rendered = items

        search_input = self.query_one("#search-input", Input)
        was_disabled = search_input.disabled
        search_input.disabled = state.is_initial_loading
        if was_disabled and not search_input.disabled:
            # disabling dropped focus; hand it back for the next query
            search_input.focus()

        self.status_text = format_status(state)
        self.query_one("#search-status", Static).update(self.status_text)

        footer = styled_footer(state)
        self.footer_text = footer.plain
        self.query_one("#load-more-status", Static).update(footer)
