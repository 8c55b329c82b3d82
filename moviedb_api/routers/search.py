"""
Search endpoint for the public API.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from moviedb.engine import QueryEngine
from moviedb_api.dependencies import get_engine
from moviedb_api.exceptions import envelope_response
from moviedb_api.schemas.common import error_responses
from moviedb_api.schemas.search import SearchResponse

router = APIRouter()


@router.get(
    "/search",
    responses={200: {"model": SearchResponse}, **error_responses(400, 503)},
)
async def search(
    q: Optional[str] = Query(None, description="Search text (required)"),
    type: Optional[str] = Query(
        None, description="Restrict to one collection: movies, persons or producers"
    ),
    engine: QueryEngine = Depends(get_engine),
):
    """
    Case-insensitive substring search across movies, persons and producers.

    Movies match on title, overview and genres; persons on name;
    producers on name and origin country. Results are not ranked.
    """
    return envelope_response(engine.search(q, type))
