"""OMDb Search Module"""

from typing import List, Optional

import httpx
import requests
from loguru import logger
from pydantic import ValidationError

from reelscroll.modules.search.errors import HttpError, NetworkError, UnknownError
from reelscroll.modules.search.models import MovieListResponse, MovieSummary

OMDB_BASE_URL = "https://www.omdbapi.com/"


def build_params(api_key: str, query: str, page: int) -> dict:
    """Query string for one OMDb search page."""
    return {"apikey": api_key, "s": query, "page": page}


def parse_response(status_code: int, reason: str, body: str) -> MovieListResponse:
    """
    Classify a finished HTTP exchange.

    Raises:
        HttpError: status outside 2xx
        UnknownError: empty body or a payload that is not an OMDb reply
    """
    if not 200 <= status_code < 300:
        raise HttpError(status_code, reason or "")
    if not body or not body.strip():
        raise UnknownError("Response body is empty")
    try:
        return MovieListResponse.model_validate_json(body)
    except ValidationError as e:
        raise UnknownError(f"Malformed search response: {e.error_count()} error(s)") from e


async def search_movies(
    api_key: str,
    query: str,
    page: int = 1,
    *,
    client: Optional[httpx.AsyncClient] = None,
    base_url: str = OMDB_BASE_URL,
    timeout: float = 30.0,
) -> MovieListResponse:
    """
    Search OMDb for titles matching ``query``.

    Args:
        api_key: OMDb API key
        query: Search term
        page: Page number (default 1)
        client: Shared AsyncClient; a throwaway one is opened when omitted
        base_url: Endpoint root
        timeout: Per-request timeout in seconds

    Returns:
        Parsed search reply. An empty page has ``movie_list`` set to None.
    """
    params = build_params(api_key, query, page)
    logger.debug("GET {} q={!r} page={}", base_url, query, page)

    try:
        if client is None:
            async with httpx.AsyncClient() as own_client:
                response = await own_client.get(base_url, params=params, timeout=timeout)
        else:
            response = await client.get(base_url, params=params, timeout=timeout)
    except httpx.RequestError as e:
        raise NetworkError(f"Request error: {e}") from e
    except Exception as e:
        raise UnknownError(str(e)) from e

    return parse_response(response.status_code, response.reason_phrase, response.text)


def search_movies_sync(
    api_key: str,
    query: str,
    page: int = 1,
    base_url: str = OMDB_BASE_URL,
    timeout: float = 30.0,
) -> MovieListResponse:
    """Blocking variant of :func:`search_movies` for one-shot CLI use."""
    params = build_params(api_key, query, page)
    try:
        response = requests.get(base_url, params=params, timeout=timeout)
    except requests.exceptions.RequestException as e:
        raise NetworkError(f"Request error: {e}") from e

    return parse_response(response.status_code, response.reason, response.text)


def format_results_text(items: List[MovieSummary], total: int, page: int = 1) -> str:
    """Format results as text table string."""
    lines = []
    lines.append(f"\nTotal: {total} results (page {page})\n")
    lines.append(f"{'IMDB ID':<12} {'TITLE':<50} POSTER")
    lines.append("-" * 100)

    for m in items:
        title = m.title if len(m.title) <= 50 else m.title[:47] + "..."
        poster = "" if m.poster_url == "N/A" else m.poster_url
        lines.append(f"{m.id:<12} {title:<50} {poster}")

    return '\n'.join(lines)
