from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from reelscroll.modules.search.models import MovieSummary

# =============================================================================
# Screen state (rendered) and controller bookkeeping (not rendered)
# =============================================================================


class ScreenMode(Enum):
    DEFAULT = "default"
    EMPTY = "empty"


class FetchMode(Enum):
    """REPLACE overwrites the item list, APPEND concatenates onto it."""
    REPLACE = "replace"
    APPEND = "append"


@dataclass(frozen=True)
class SearchState:
    """Snapshot handed to the presentation surface after every mutation."""
    mode: ScreenMode = ScreenMode.DEFAULT
    is_initial_loading: bool = False
    is_loading_more: bool = False
    query: str = ""
    items: Tuple[MovieSummary, ...] = ()
    pagination_error: Optional[str] = None


@dataclass(frozen=True)
class PageCursor:
    """Position within the current session; ``query`` is the text that was submitted."""
    page: int = 1
    has_more: bool = True
    query: str = ""


@dataclass(frozen=True)
class PendingFetch:
    """The one outstanding fetch, tagged with the session that launched it."""
    generation: int
    page: int
    mode: FetchMode


@dataclass(frozen=True)
class ControllerModel:
    state: SearchState = field(default_factory=SearchState)
    cursor: PageCursor = field(default_factory=PageCursor)
    pending: Optional[PendingFetch] = None
    generation: int = 0
