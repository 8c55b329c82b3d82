"""
Person endpoints for the public API.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from moviedb.engine import QueryEngine
from moviedb_api.dependencies import get_engine
from moviedb_api.exceptions import envelope_response
from moviedb_api.schemas.common import error_responses
from moviedb_api.schemas.person import PersonListResponse, PersonResponse

router = APIRouter()


@router.get(
    "/persons",
    responses={200: {"model": PersonListResponse}, **error_responses(400, 503)},
)
async def list_persons(
    limit: Optional[str] = Query(None, description="Items per page (default 10)"),
    offset: Optional[str] = Query(None, description="Items to skip"),
    engine: QueryEngine = Depends(get_engine),
):
    """
    Browse persons (actors and crew) with offset/limit pagination.
    """
    return envelope_response(engine.list_records("persons", limit=limit, offset=offset))


@router.get(
    "/persons/{person_id}",
    responses={200: {"model": PersonResponse}, **error_responses(400, 404, 503)},
)
async def get_person(
    person_id: str,
    engine: QueryEngine = Depends(get_engine),
):
    """
    Get a single person, including acting and crew roles.
    """
    return envelope_response(engine.get_by_id("persons", person_id))
