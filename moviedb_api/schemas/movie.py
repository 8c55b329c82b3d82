"""
Movie-related Pydantic schemas.
"""

from typing import List, Optional

from pydantic import BaseModel

from moviedb_api.schemas.common import PaginationMeta, SuccessEnvelope


class MovieOut(BaseModel):
    """Complete movie record."""

    id: int
    title: str
    overview: str = ""
    release_date: Optional[str] = None
    runtime: Optional[int] = None
    genres: List[str] = []
    spoken_languages: List[str] = []
    poster_url: Optional[str] = None
    backdrop_url: Optional[str] = None
    cast_ids: List[int] = []
    crew_ids: List[int] = []
    production_company_ids: List[int] = []
    trailer_url: Optional[str] = None
    imdb_rating: Optional[float] = None
    vote_count: Optional[int] = None
    seo_title: Optional[str] = None
    seo_description: Optional[str] = None
    seo_focus_keywords: Optional[str] = None


class MovieListResponse(SuccessEnvelope):
    """Response for the movie list endpoint."""

    data: List[MovieOut]
    pagination: PaginationMeta


class MovieResponse(SuccessEnvelope):
    """Response for the movie detail endpoint."""

    data: MovieOut
