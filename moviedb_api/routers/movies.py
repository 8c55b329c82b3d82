"""
Movie endpoints for the public API.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from moviedb.engine import QueryEngine
from moviedb_api.dependencies import get_engine
from moviedb_api.exceptions import envelope_response
from moviedb_api.schemas.common import error_responses
from moviedb_api.schemas.movie import MovieListResponse, MovieResponse

router = APIRouter()


@router.get(
    "/movies",
    responses={200: {"model": MovieListResponse}, **error_responses(400, 503)},
)
async def list_movies(
    limit: Optional[str] = Query(None, description="Items per page (default 10)"),
    offset: Optional[str] = Query(None, description="Items to skip"),
    genre: Optional[str] = Query(None, description="Case-insensitive genre substring"),
    engine: QueryEngine = Depends(get_engine),
):
    """
    Browse movies with optional genre filter and offset/limit pagination.
    """
    return envelope_response(
        engine.list_records("movies", limit=limit, offset=offset, genre=genre)
    )


@router.get(
    "/movies/{movie_id}",
    responses={200: {"model": MovieResponse}, **error_responses(400, 404, 503)},
)
async def get_movie(
    movie_id: str,
    engine: QueryEngine = Depends(get_engine),
):
    """
    Get a single movie by id.
    """
    return envelope_response(engine.get_by_id("movies", movie_id))
