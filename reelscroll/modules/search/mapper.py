from typing import List, Optional

from reelscroll.modules.search.models import MovieRecord, MovieSummary


def to_movie_summaries(records: Optional[List[MovieRecord]]) -> List[MovieSummary]:
    """Normalize a raw result list; an absent list maps to an empty one."""
    if records is None:
        return []
    return [
        MovieSummary(
            id=r.imdb_id,
            title=r.title,
            description="",
            poster_url=r.poster,
        )
        for r in records
    ]
