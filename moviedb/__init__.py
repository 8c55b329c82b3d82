"""
Movie Database - in-memory mock of a read-only movie lookup API.

This package provides:
- Record models and the in-memory record store
- An asynchronous loader for the JSON resources
- The query engine (list, get-by-id, search) with response envelopes
- Request URL construction for the demo endpoints
"""

from .config import Config
from .models import Movie, Person, Producer, ActingRole, CrewRole
from .store import RecordStore, CollectionStatus
from .loader import DataLoader, LoadReport, build_store
from .engine import QueryEngine
from .exceptions import (
    QueryError,
    NotFoundError,
    BadRequestError,
    ServiceUnavailableError,
    InternalError,
    DataLoadError,
)

__version__ = "1.0.0"
__all__ = [
    "Config",
    "Movie",
    "Person",
    "Producer",
    "ActingRole",
    "CrewRole",
    "RecordStore",
    "CollectionStatus",
    "DataLoader",
    "LoadReport",
    "build_store",
    "QueryEngine",
    "QueryError",
    "NotFoundError",
    "BadRequestError",
    "ServiceUnavailableError",
    "InternalError",
    "DataLoadError",
]
