"""
Search-related Pydantic schemas.
"""

from typing import List

from pydantic import BaseModel

from moviedb_api.schemas.common import SuccessEnvelope
from moviedb_api.schemas.movie import MovieOut
from moviedb_api.schemas.person import PersonOut
from moviedb_api.schemas.producer import ProducerOut


class SearchResults(BaseModel):
    """Matches per collection; collections not searched are empty."""

    movies: List[MovieOut] = []
    persons: List[PersonOut] = []
    producers: List[ProducerOut] = []


class SearchResponse(SuccessEnvelope):
    """Response for the search endpoint."""

    query: str
    total_results: int
    results: SearchResults
