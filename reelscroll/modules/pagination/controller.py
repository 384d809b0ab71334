"""
Pagination controller.

Owns the controller model, feeds events through ``transition`` and carries
out the returned effects on the running asyncio loop. State mutation only
ever happens inside ``dispatch``.
"""

import asyncio
from typing import Callable, Dict, Optional

import httpx
from loguru import logger

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
from reelscroll.modules.pagination.machine import transition
from reelscroll.modules.pagination.state import ControllerModel, SearchState
from reelscroll.modules.search.errors import SearchError
from reelscroll.modules.search.search_omdb import OMDB_BASE_URL, search_movies

StateListener = Callable[[SearchState], None]


class SearchController:
    """Drives one search screen: sessions, page requests, cancellation."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = OMDB_BASE_URL,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
        on_state: Optional[StateListener] = None,
        on_back: Optional[Callable[[], None]] = None,
        search=search_movies,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.on_state = on_state
        self.on_back = on_back
        self._client = client
        self._search = search
        self._model = ControllerModel()
        self._tasks: Dict[int, asyncio.Task] = {}

    @classmethod
    def from_settings(cls, settings, **kwargs) -> "SearchController":
        return cls(
            settings.api_key,
            base_url=settings.base_url,
            timeout=settings.timeout,
            **kwargs,
        )

    @property
    def state(self) -> SearchState:
        return self._model.state

    @property
    def model(self) -> ControllerModel:
        return self._model

    # --- intents

    def change_query(self, text: str) -> None:
        self.dispatch(QueryChanged(text))

    def submit_search(self) -> None:
        self.dispatch(SubmitSearch())

    def request_more(self) -> None:
        self.dispatch(ReachedScrollBoundary())

    def navigate_back(self) -> None:
        self.dispatch(NavigateBack())

    # --- core loop

    def dispatch(self, event: Event) -> None:
        """Apply ``event``, run its effects, re-emit state if it changed."""
        before = self._model.state
        self._model, effects = transition(self._model, event)
        logger.debug("{} -> {} effect(s)", type(event).__name__, len(effects))

        for effect in effects:
            self._run_effect(effect)

        if self._model.state is not before and self.on_state is not None:
            self.on_state(self._model.state)

    def _run_effect(self, effect: Effect) -> None:
        if isinstance(effect, FetchPage):
            task = asyncio.get_running_loop().create_task(self._fetch(effect))
            self._tasks[effect.generation] = task
            task.add_done_callback(lambda t, g=effect.generation: self._forget(g, t))
        elif isinstance(effect, CancelFetch):
            task = self._tasks.pop(effect.generation, None)
            if task is not None and not task.done():
                logger.debug("Cancelling fetch for generation {}", effect.generation)
                task.cancel()
        elif isinstance(effect, NotifyBack):
            if self.on_back is not None:
                self.on_back()

    async def _fetch(self, effect: FetchPage) -> None:
        try:
            response = await self._search(
                self.api_key,
                effect.query,
                effect.page,
                client=self._client,
                base_url=self.base_url,
                timeout=self.timeout,
            )
        except SearchError as e:
            logger.warning(
                "Search {!r} page {} failed ({}): {}", effect.query, effect.page, e.kind, e
            )
            self.dispatch(FetchFailed(effect.generation, e))
            return

        if effect.generation != self._model.generation:
            logger.debug("Discarding stale page {} of generation {}", effect.page, effect.generation)
        else:
            count = len(response.movie_list or [])
            logger.info(
                "Loaded {!r} page {}: {} result(s) of {}",
                effect.query, effect.page, count, response.total_results,
            )
        self.dispatch(FetchSucceeded(effect.generation, response))

    def _forget(self, generation: int, task: asyncio.Task) -> None:
        if self._tasks.get(generation) is task:
            del self._tasks[generation]
        if not task.cancelled() and task.exception() is not None:
            logger.opt(exception=task.exception()).error("Fetch task crashed")

    async def wait_idle(self) -> None:
        """Wait until no fetch task is left running."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks.values()), return_exceptions=True)

    async def aclose(self) -> None:
        """Cancel every running fetch."""
        for task in list(self._tasks.values()):
            task.cancel()
        await self.wait_idle()
