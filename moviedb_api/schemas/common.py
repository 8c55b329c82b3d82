"""
Common schemas shared across API endpoints.
"""

from pydantic import BaseModel, Field


class PaginationMeta(BaseModel):
    """Offset/limit pagination metadata."""

    total: int = Field(..., ge=0, description="Total matching records")
    limit: int = Field(..., ge=1, description="Page size")
    offset: int = Field(..., ge=0, description="Records skipped")
    has_more: bool = Field(..., description="Whether offset + limit < total")


class ErrorBody(BaseModel):
    """Error details inside an error envelope."""

    message: str = Field(..., description="Human-readable error message")
    timestamp: str = Field(..., description="ISO-8601 UTC time of the error")


class ErrorEnvelope(BaseModel):
    """Standard error response."""

    status: int = Field(..., description="HTTP status code")
    success: bool = False
    error: ErrorBody


class SuccessEnvelope(BaseModel):
    """Fields common to every success response."""

    status: int = 200
    success: bool = True
    timestamp: str = Field(..., description="ISO-8601 UTC time of the response")


ERROR_RESPONSES = {
    400: {"model": ErrorEnvelope, "description": "Missing or invalid parameter"},
    404: {"model": ErrorEnvelope, "description": "Unknown endpoint or id"},
    503: {"model": ErrorEnvelope, "description": "Data not loaded yet"},
}


def error_responses(*codes: int) -> dict:
    """OpenAPI error response entries for the given status codes."""
    return {code: ERROR_RESPONSES[code] for code in codes}
