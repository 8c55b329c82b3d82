"""
Exception handlers for the API.

Every error leaves the API as a response envelope whose "status" matches
the HTTP status code.
"""

from typing import Any, Dict

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from moviedb.envelope import create_error_response, error_from_exception
from moviedb.exceptions import QueryError
from moviedb_api.logging_config import logger


def envelope_response(envelope: Dict[str, Any]) -> JSONResponse:
    """Render an envelope with its status as the HTTP status code."""
    return JSONResponse(status_code=envelope["status"], content=envelope)


async def query_error_handler(request: Request, exc: QueryError) -> JSONResponse:
    """Handle QueryError exceptions raised outside the query engine."""
    return envelope_response(error_from_exception(exc))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle routing errors (unknown path, wrong method)."""
    if exc.status_code == 404:
        message = "Endpoint not found"
    else:
        message = str(exc.detail)
    return envelope_response(create_error_response(exc.status_code, message))


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return envelope_response(create_error_response(500, "An unexpected error occurred"))
