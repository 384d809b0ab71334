from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class MovieSummary:
    """Normalized display item for one search hit."""
    id: str
    title: str
    description: str
    poster_url: str


class MovieRecord(BaseModel):
    """One entry of the OMDb ``Search`` array."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(alias="Title")
    year: str = Field(default="", alias="Year")
    imdb_id: str = Field(alias="imdbID")
    type: str = Field(default="", alias="Type")
    poster: str = Field(default="", alias="Poster")


class MovieListResponse(BaseModel):
    """
    OMDb search reply.

    ``Search`` is absent (or null) when nothing matched; OMDb then answers
    ``{"Response": "False", "Error": "Movie not found!"}``. That is a valid
    empty page, not a failure.
    """

    model_config = ConfigDict(populate_by_name=True)

    movie_list: Optional[List[MovieRecord]] = Field(default=None, alias="Search")
    total_count: Optional[str] = Field(default=None, alias="totalResults")
    response: str = Field(default="False", alias="Response")
    error: Optional[str] = Field(default=None, alias="Error")

    @property
    def total_results(self) -> int:
        """``totalResults`` as an int, 0 when absent or not numeric."""
        try:
            return int(self.total_count or 0)
        except ValueError:
            return 0
