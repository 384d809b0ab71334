"""
Inputs and outputs of the pagination transition function.

Events come from the presentation surface (QueryChanged, SubmitSearch,
ReachedScrollBoundary, NavigateBack) or from a finished fetch
(FetchSucceeded, FetchFailed). Effects are instructions for the controller
to carry out; the transition function itself never performs I/O.
"""

from dataclasses import dataclass
from typing import Union

from reelscroll.modules.pagination.state import FetchMode
from reelscroll.modules.search.errors import SearchError
from reelscroll.modules.search.models import MovieListResponse


# --- presentation events

@dataclass(frozen=True)
class QueryChanged:
    text: str


@dataclass(frozen=True)
class SubmitSearch:
    pass


@dataclass(frozen=True)
class ReachedScrollBoundary:
    pass


@dataclass(frozen=True)
class NavigateBack:
    pass


# --- fetch completions

@dataclass(frozen=True)
class FetchSucceeded:
    generation: int
    response: MovieListResponse


@dataclass(frozen=True)
class FetchFailed:
    generation: int
    error: SearchError


Event = Union[
    QueryChanged,
    SubmitSearch,
    ReachedScrollBoundary,
    NavigateBack,
    FetchSucceeded,
    FetchFailed,
]


# --- effects

@dataclass(frozen=True)
class FetchPage:
    generation: int
    query: str
    page: int
    mode: FetchMode


@dataclass(frozen=True)
class CancelFetch:
    """Cancel the fetch task launched for ``generation``."""
    generation: int


@dataclass(frozen=True)
class NotifyBack:
    pass


Effect = Union[FetchPage, CancelFetch, NotifyBack]
