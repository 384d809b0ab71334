"""Shared fixtures and payload builders."""

import asyncio

import pytest

from reelscroll.modules.search.models import MovieListResponse


def make_payload(count: int, prefix: str = "spider", start: int = 0) -> dict:
    """OMDb-shaped search reply with ``count`` records (``count == 0`` -> not found)."""
    if count == 0:
        return {"Response": "False", "Error": "Movie not found!"}
    return {
        "Search": [
            {
                "Title": f"{prefix.title()} Movie {start + i}",
                "Year": str(2000 + i),
                "imdbID": f"tt{prefix}{start + i:04d}",
                "Type": "movie",
                "Poster": f"https://img.example.com/{prefix}/{start + i}.jpg",
            }
            for i in range(count)
        ],
        "totalResults": "42",
        "Response": "True",
    }


def make_response(count: int, prefix: str = "spider", start: int = 0) -> MovieListResponse:
    return MovieListResponse.model_validate(make_payload(count, prefix, start))


class FakeSearch:
    """
    Stand-in for ``search_movies``.

    Each call is parked until the test resolves it with ``succeed``/``fail``,
    so tests decide the order in which fetches complete.
    """

    def __init__(self, stubborn=False):
        self.calls = []
        self.cancelled = []
        self.stubborn = stubborn
        self._futures = []

    async def __call__(self, api_key, query, page, **kwargs):
        future = asyncio.get_running_loop().create_future()
        self.calls.append((query, page))
        self._futures.append(future)
        try:
            result = await asyncio.shield(future)
        except asyncio.CancelledError:
            self.cancelled.append((query, page))
            if not self.stubborn:
                raise
            # a transport that ignores cancellation still delivers its result
            result = await future
        if isinstance(result, Exception):
            raise result
        return result

    def succeed(self, index, response):
        self._futures[index].set_result(response)

    def fail(self, index, error):
        self._futures[index].set_result(error)


async def settle():
    """Let freshly created tasks run up to their next await."""
    for _ in range(5):
        await asyncio.sleep(0)


@pytest.fixture
def fake_search():
    return FakeSearch()
