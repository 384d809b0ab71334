"""OMDb Search Module"""

from .errors import SearchError, NetworkError, HttpError, UnknownError
from .models import MovieSummary, MovieRecord, MovieListResponse
from .mapper import to_movie_summaries
from .search_omdb import (
    OMDB_BASE_URL,
    search_movies,
    search_movies_sync,
    format_results_text,
)

__all__ = [
    'SearchError',
    'NetworkError',
    'HttpError',
    'UnknownError',
    'MovieSummary',
    'MovieRecord',
    'MovieListResponse',
    'to_movie_summaries',
    'OMDB_BASE_URL',
    'search_movies',
    'search_movies_sync',
    'format_results_text',
]
