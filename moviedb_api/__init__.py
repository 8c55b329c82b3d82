"""
Movie Database Mock REST API.

This module provides a FastAPI-based REST API over the in-memory record
store: list, get-by-id and search endpoints that answer with uniform
response envelopes, plus loader status endpoints.
"""

from moviedb_api.main import app

__all__ = ["app"]
