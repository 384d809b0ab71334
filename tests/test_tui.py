"""Tests for the Textual search screen.

The app is driven through Textual's pilot; the controller gets a FakeSearch
so every page is delivered when the test says so.
"""

import pytest
from textual.widgets import DataTable, Input

from reelscroll.modules.config import Settings
from reelscroll.modules.pagination import PAGINATION_ERROR_MESSAGE, SearchController
from reelscroll.modules.search import HttpError
from reelscroll.tui import ReelscrollApp
from reelscroll.tui.utils import EMPTY_RESULTS_TEXT, IDLE_TEXT, LOADING_MORE_TEXT
from reelscroll.tui.widgets import SearchPanel

from conftest import FakeSearch, make_response, settle


def make_app(search):
    settings = Settings(api_key="key")
    controller = SearchController.from_settings(settings, search=search)
    return ReelscrollApp(settings, controller=controller)


async def search_for(pilot, text):
    pilot.app.query_one("#search-input", Input).value = text
    await pilot.pause()
    await pilot.press("enter")
    await settle()


class TestReelscrollApp:

    @pytest.mark.asyncio
    async def test_idle_screen(self):
        app = make_app(FakeSearch())
        async with app.run_test() as pilot:
            await pilot.pause()
            panel = app.query_one("#search-panel", SearchPanel)

            assert panel.status_text == IDLE_TEXT
            assert app.query_one("#results-table", DataTable).row_count == 0

    @pytest.mark.asyncio
    async def test_submit_shows_first_page(self):
        search = FakeSearch()
        app = make_app(search)
        async with app.run_test() as pilot:
            await search_for(pilot, "spider")
            panel = app.query_one("#search-panel", SearchPanel)
            assert panel.status_text == "Searching for: spider..."

            search.succeed(0, make_response(10))
            await app.controller.wait_idle()
            await pilot.pause()

            table = app.query_one("#results-table", DataTable)
            assert table.row_count == 10
            assert search.calls == [("spider", 1)]
            assert panel.status_text == "10 movies loaded"

    @pytest.mark.asyncio
    async def test_blank_submit_does_nothing(self):
        search = FakeSearch()
        app = make_app(search)
        async with app.run_test() as pilot:
            await search_for(pilot, "   ")

            assert search.calls == []
            assert not app.controller.state.is_initial_loading

    @pytest.mark.asyncio
    async def test_no_results_message(self):
        search = FakeSearch()
        app = make_app(search)
        async with app.run_test() as pilot:
            await search_for(pilot, "qwertyuiop")
            search.succeed(0, make_response(0))
            await app.controller.wait_idle()
            await pilot.pause()

            panel = app.query_one("#search-panel", SearchPanel)
            assert panel.status_text == EMPTY_RESULTS_TEXT

    @pytest.mark.asyncio
    async def test_last_row_loads_next_page(self):
        search = FakeSearch()
        app = make_app(search)
        async with app.run_test() as pilot:
            await search_for(pilot, "spider")
            search.succeed(0, make_response(3))
            await app.controller.wait_idle()
            await pilot.pause()

            table = app.query_one("#results-table", DataTable)
            table.focus()
            table.move_cursor(row=table.row_count - 1)
            await pilot.pause()
            await settle()

            assert search.calls[-1] == ("spider", 2)
            panel = app.query_one("#search-panel", SearchPanel)
            assert panel.footer_text == LOADING_MORE_TEXT

            search.succeed(1, make_response(3, start=3))
            await app.controller.wait_idle()
            await pilot.pause()

            assert table.row_count == 6
            assert panel.footer_text == ""

    @pytest.mark.asyncio
    async def test_new_search_replaces_rows(self):
        search = FakeSearch()
        app = make_app(search)
        async with app.run_test() as pilot:
            await search_for(pilot, "spider")
            search.succeed(0, make_response(5))
            await app.controller.wait_idle()

            await search_for(pilot, "batman")
            search.succeed(1, make_response(2, "batman"))
            await app.controller.wait_idle()
            await pilot.pause()

            table = app.query_one("#results-table", DataTable)
            assert table.row_count == 2
            assert table.get_row_at(0)[1] == "ttbatman0000"

    @pytest.mark.asyncio
    async def test_escape_forwards_back_navigation(self):
        app = make_app(FakeSearch())
        backs = []
        async with app.run_test() as pilot:
            app.controller.on_back = lambda: backs.append(True)
            await pilot.press("escape")
            await pilot.pause()

            assert backs == [True]

    @pytest.mark.asyncio
    async def test_failed_next_page_shows_retry_footer(self):
        search = FakeSearch()
        app = make_app(search)
        async with app.run_test() as pilot:
            await search_for(pilot, "spider")
            search.succeed(0, make_response(3))
            await app.controller.wait_idle()
            await pilot.pause()

            table = app.query_one("#results-table", DataTable)
            table.focus()
            table.move_cursor(row=table.row_count - 1)
            await pilot.pause()
            await settle()
            assert search.calls[-1] == ("spider", 2)

            search.fail(1, HttpError(500, "Internal Server Error"))
            await app.controller.wait_idle()
            await pilot.pause()

            panel = app.query_one("#search-panel", SearchPanel)
            assert PAGINATION_ERROR_MESSAGE in panel.footer_text
            assert "retry" in panel.footer_text
            assert table.row_count == 3

    @pytest.mark.asyncio
    async def test_input_disabled_while_first_page_loads(self):
        search = FakeSearch()
        app = make_app(search)
        async with app.run_test() as pilot:
            await search_for(pilot, "spider")
            search_input = app.query_one("#search-input", Input)
            assert search_input.disabled

            search.succeed(0, make_response(3))
            await app.controller.wait_idle()
            await pilot.pause()

            assert not search_input.disabled
            assert app.focused is search_input
