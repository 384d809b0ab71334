"""Incremental pagination for one search screen."""

from .state import (
    ControllerModel,
    FetchMode,
    PageCursor,
    PendingFetch,
    ScreenMode,
    SearchState,
)
from .events import (
    CancelFetch,
    FetchFailed,
    FetchPage,
    FetchSucceeded,
    NavigateBack,
    NotifyBack,
    QueryChanged,
    ReachedScrollBoundary,
    SubmitSearch,
)
from .machine import PAGINATION_ERROR_MESSAGE, transition
from .controller import SearchController

__all__ = [
    "ControllerModel",
    "FetchMode",
    "PageCursor",
    "PendingFetch",
    "ScreenMode",
    "SearchState",
    "CancelFetch",
    "FetchFailed",
    "FetchPage",
    "FetchSucceeded",
    "NavigateBack",
    "NotifyBack",
    "QueryChanged",
    "ReachedScrollBoundary",
    "SubmitSearch",
    "PAGINATION_ERROR_MESSAGE",
    "transition",
    "SearchController",
]
