"""Pydantic schemas for API responses."""

from moviedb_api.schemas.common import (
    ErrorBody,
    ErrorEnvelope,
    PaginationMeta,
    SuccessEnvelope,
    error_responses,
)
from moviedb_api.schemas.movie import MovieListResponse, MovieOut, MovieResponse
from moviedb_api.schemas.person import (
    ActingRoleOut,
    CrewRoleOut,
    PersonListResponse,
    PersonOut,
    PersonResponse,
)
from moviedb_api.schemas.producer import ProducerListResponse, ProducerOut, ProducerResponse
from moviedb_api.schemas.search import SearchResponse, SearchResults
from moviedb_api.schemas.status import LoadStatus, LoadStatusResponse

__all__ = [
    # Common
    "ErrorBody",
    "ErrorEnvelope",
    "PaginationMeta",
    "SuccessEnvelope",
    "error_responses",
    # Movie
    "MovieListResponse",
    "MovieOut",
    "MovieResponse",
    # Person
    "ActingRoleOut",
    "CrewRoleOut",
    "PersonListResponse",
    "PersonOut",
    "PersonResponse",
    # Producer
    "ProducerListResponse",
    "ProducerOut",
    "ProducerResponse",
    # Search
    "SearchResponse",
    "SearchResults",
    # Status
    "LoadStatus",
    "LoadStatusResponse",
]
