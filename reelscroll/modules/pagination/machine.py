"""
Pagination state machine.

``transition(model, event)`` is a pure function returning the next model and
the effects the controller has to run. Every fetch carries the generation of
the session that launched it; a completion whose generation is no longer
current is dropped without touching the model.
"""

from dataclasses import replace
from typing import List, Tuple

from reelscroll.modules.pagination.events import (
    CancelFetch,
    Effect,
    Event,
    FetchFailed,
    FetchPage,
    FetchSucceeded,
    NavigateBack,
    NotifyBack,
    QueryChanged,
    ReachedScrollBoundary,
    SubmitSearch,
)
from reelscroll.modules.pagination.state import (
    ControllerModel,
    FetchMode,
    PageCursor,
    PendingFetch,
    ScreenMode,
)
from reelscroll.modules.search.mapper import to_movie_summaries

PAGINATION_ERROR_MESSAGE = "Failed to load more movies"

Transition = Tuple[ControllerModel, List[Effect]]


def transition(model: ControllerModel, event: Event) -> Transition:
    """Apply one event. Unknown event types raise TypeError."""
    if isinstance(event, QueryChanged):
        return change_query(model, event.text)
    if isinstance(event, SubmitSearch):
        return submit_search(model)
    if isinstance(event, ReachedScrollBoundary):
        return request_more(model)
    if isinstance(event, NavigateBack):
        return model, [NotifyBack()]
    if isinstance(event, FetchSucceeded):
        return fetch_succeeded(model, event)
    if isinstance(event, FetchFailed):
        return fetch_failed(model, event)
    raise TypeError(f"Unsupported event: {event!r}")


def change_query(model: ControllerModel, text: str) -> Transition:
    return replace(model, state=replace(model.state, query=text)), []


def submit_search(model: ControllerModel) -> Transition:
    """Start a new session for the current query; blank queries are ignored."""
    query = model.state.query
    if not query.strip():
        return model, []

    generation = model.generation + 1
    effects: List[Effect] = [FetchPage(generation, query, 1, FetchMode.REPLACE)]
    if model.pending is not None:
        effects.append(CancelFetch(model.pending.generation))

    state = replace(
        model.state,
        is_initial_loading=True,
        is_loading_more=False,
        items=(),
        pagination_error=None,
    )
    new_model = ControllerModel(
        state=state,
        cursor=PageCursor(page=1, has_more=True, query=query),
        pending=PendingFetch(generation, 1, FetchMode.REPLACE),
        generation=generation,
    )
    return new_model, effects


def request_more(model: ControllerModel) -> Transition:
    """Ask for the page after the cursor, unless a guard says otherwise."""
    # generation 0: nothing has been searched yet
    if (
        model.generation == 0
        or model.pending is not None
        or not model.cursor.has_more
        or model.state.is_loading_more
    ):
        return model, []

    page = model.cursor.page + 1
    state = replace(model.state, is_loading_more=True, pagination_error=None)
    new_model = replace(
        model,
        state=state,
        pending=PendingFetch(model.generation, page, FetchMode.APPEND),
    )
    # the session query, not the input text, which may have been edited since
    return new_model, [FetchPage(model.generation, model.cursor.query, page, FetchMode.APPEND)]


def is_stale(model: ControllerModel, generation: int) -> bool:
    return model.pending is None or generation != model.generation


def fetch_succeeded(model: ControllerModel, event: FetchSucceeded) -> Transition:
    if is_stale(model, event.generation):
        return model, []

    appending = model.pending.mode is FetchMode.APPEND
    movies = tuple(to_movie_summaries(event.response.movie_list))

    cursor = model.cursor
    if not movies:
        cursor = replace(cursor, has_more=False)
    if appending:
        cursor = replace(cursor, page=cursor.page + 1)

    state = replace(
        model.state,
        items=model.state.items + movies if appending else movies,
        mode=ScreenMode.EMPTY if not appending and not movies else ScreenMode.DEFAULT,
        is_initial_loading=False,
        is_loading_more=False,
        pagination_error=None,
    )
    return replace(model, state=state, cursor=cursor, pending=None), []


def fetch_failed(model: ControllerModel, event: FetchFailed) -> Transition:
    if is_stale(model, event.generation):
        return model, []

    if model.pending.mode is FetchMode.APPEND:
        # items and cursor stay put so the next boundary retries the same page
        state = replace(
            model.state,
            is_loading_more=False,
            pagination_error=PAGINATION_ERROR_MESSAGE,
        )
    else:
        state = replace(
            model.state,
            mode=ScreenMode.EMPTY,
            is_initial_loading=False,
        )
    return replace(model, state=state, pending=None), []
