"""Tests for the TUI text helpers."""

from reelscroll.modules.pagination import PAGINATION_ERROR_MESSAGE, SearchState
from reelscroll.tui.utils import LOADING_MORE_TEXT, format_footer, format_poster, styled_footer


class TestFooter:

    def test_blank_when_idle(self):
        assert format_footer(SearchState()) == ""
        assert styled_footer(SearchState()).spans == []

    def test_loading_more(self):
        state = SearchState(is_loading_more=True)

        assert format_footer(state) == LOADING_MORE_TEXT

    def test_pagination_error_asks_for_retry(self):
        state = SearchState(pagination_error=PAGINATION_ERROR_MESSAGE)

        assert format_footer(state) == "Failed to load more movies - scroll down to retry"

    def test_pagination_error_is_bold_red(self):
        footer = styled_footer(SearchState(pagination_error=PAGINATION_ERROR_MESSAGE))

        assert footer.plain.startswith(PAGINATION_ERROR_MESSAGE)
        assert [str(span.style) for span in footer.spans] == ["bold red"]


def test_missing_poster_shows_dash():
    assert format_poster("N/A") == "-"
    assert format_poster("") == "-"
    assert format_poster("https://img/x.jpg") == "https://img/x.jpg"
