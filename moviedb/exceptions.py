"""
Exceptions raised by the query engine and the loader.

Every query failure carries the status code used in the error envelope.
"""

from typing import Dict, Optional


class QueryError(Exception):
    """Base query error with the status code of its error envelope."""

    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(QueryError):
    """Unknown endpoint or entity id."""

    status_code = 404


class BadRequestError(QueryError):
    """Missing or invalid request parameter."""

    status_code = 400


class ServiceUnavailableError(QueryError):
    """Collection data is still loading or failed to load."""

    status_code = 503


class InternalError(QueryError):
    """Unexpected failure while answering a query."""


class DataLoadError(Exception):
    """Raised when no collection could be loaded."""

    def __init__(self, message: str, errors: Optional[Dict[str, str]] = None):
        self.errors = errors or {}
        super().__init__(message)
