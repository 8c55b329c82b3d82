"""
Production company endpoints for the public API.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from moviedb.engine import QueryEngine
from moviedb_api.dependencies import get_engine
from moviedb_api.exceptions import envelope_response
from moviedb_api.schemas.common import error_responses
from moviedb_api.schemas.producer import ProducerListResponse, ProducerResponse

router = APIRouter()


@router.get(
    "/producers",
    responses={200: {"model": ProducerListResponse}, **error_responses(400, 503)},
)
async def list_producers(
    limit: Optional[str] = Query(None, description="Items per page (default 10)"),
    offset: Optional[str] = Query(None, description="Items to skip"),
    engine: QueryEngine = Depends(get_engine),
):
    """
    Browse production companies with offset/limit pagination.
    """
    return envelope_response(engine.list_records("producers", limit=limit, offset=offset))


@router.get(
    "/producers/{producer_id}",
    responses={200: {"model": ProducerResponse}, **error_responses(400, 404, 503)},
)
async def get_producer(
    producer_id: str,
    engine: QueryEngine = Depends(get_engine),
):
    """
    Get a single production company by id.
    """
    return envelope_response(engine.get_by_id("producers", producer_id))
