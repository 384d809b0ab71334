"""
Utility functions for formatting search state in the TUI.

Contains:
- Status line text
- Results footer text (plain and styled)
- Poster URL cleanup
"""

from rich.text import Text

from reelscroll.modules.pagination.state import ScreenMode, SearchState

EMPTY_RESULTS_TEXT = "No movies found. Try a different search!"
IDLE_TEXT = "Search for your favorite movies above"
LOADING_MORE_TEXT = "Loading more..."


def format_status(state: SearchState) -> str:
    """Status line shown under the search input.

    Args:
        state: Current search state

    Returns:
        Searching message, empty/idle hint, or a result count
    """
    if state.is_initial_loading:
        return f"Searching for: {state.query.strip()}..."
    if not state.items:
        if state.mode is ScreenMode.EMPTY:
            return EMPTY_RESULTS_TEXT
        return IDLE_TEXT
    return f"{len(state.items)} movies loaded"


def format_footer(state: SearchState) -> str:
    """Text below the results table: load-more progress or the pagination error."""
    if state.is_loading_more:
        return LOADING_MORE_TEXT
    if state.pagination_error:
        return f"{state.pagination_error} - scroll down to retry"
    return ""


def styled_footer(state: SearchState) -> Text:
    """Footer text, in bold red while a load-more error is waiting for a retry."""
    footer = Text(format_footer(state))
    if state.pagination_error and not state.is_loading_more:
        footer.stylize("bold red")
    return footer


def format_poster(url: str) -> str:
    """OMDb uses 'N/A' for a missing poster."""
    if not url or url == "N/A":
        return "-"
    return url
