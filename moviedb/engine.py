"""
Query engine over the in-memory record store.

Answers list, get-by-id and search queries and wraps every answer in a
response envelope. Errors never escape: QueryError subclasses become
error envelopes with their status code, anything else becomes a 500.
"""

import functools
import logging
import re
from typing import Any, Dict, List, Mapping, Optional

from .config import Config
from .envelope import create_error_response, create_success_response, error_from_exception
from .exceptions import (
    BadRequestError,
    InternalError,
    NotFoundError,
    QueryError,
    ServiceUnavailableError,
)
from .models import COLLECTIONS, RECORD_LABELS
from .store import RecordStore
from .utils import setup_logger

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value: Any, default: Optional[int] = None) -> Optional[int]:
    """
    Parse the leading integer of a value.

    Integers pass through. Strings like "12abc" give 12. Missing or
    unparsable values give the default.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value))
    if not match:
        return default
    return int(match.group(1))


def enveloped(func):
    """Turn a payload-returning query method into an envelope-returning one."""

    @functools.wraps(func)
    def wrapper(self: "QueryEngine", *args, **kwargs) -> Dict[str, Any]:
        try:
            return create_success_response(func(self, *args, **kwargs))
        except QueryError as e:
            self.logger.info(f"{func.__name__} failed: {e.status_code} {e.message}")
            return error_from_exception(e)
        except Exception as e:
            self.logger.exception(f"Unexpected error in {func.__name__}")
            return error_from_exception(InternalError(str(e)))

    return wrapper


class QueryEngine:
    """
    Read-only query engine.

    Responsibilities:
    - Slice-based pagination with total/limit/offset/has_more metadata
    - Case-insensitive substring genre filter and text search
    - Path-based dispatch for /api/... request paths
    """

    def __init__(
        self,
        store: RecordStore,
        default_limit: int = 10,
        max_limit: int = 100,
        logger: Optional[logging.Logger] = None,
    ):
        self.store = store
        self.default_limit = default_limit
        self.max_limit = max_limit
        self.logger = logger or logging.getLogger("moviedb.engine")

    @classmethod
    def from_config(cls, store: RecordStore, config: Config) -> "QueryEngine":
        """Create an engine using the paging limits and log directory from config."""
        return cls(
            store,
            default_limit=config.default_limit,
            max_limit=config.max_limit,
            logger=setup_logger("query_engine", config.log_dir),
        )

    # =========================================================================
    # QUERIES
    # =========================================================================

    @enveloped
    def list_records(
        self,
        collection: str,
        limit: Any = None,
        offset: Any = None,
        genre: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Return one page of a collection.

        Args:
            collection: 'movies', 'persons' or 'producers'
            limit: Page size (missing, zero or invalid means the default)
            offset: Number of records to skip (negative means 0)
            genre: Movies only; case-insensitive substring filter on genres
        """
        records = list(self.store.get_collection(collection))

        if genre and collection == "movies":
            records = [m for m in records if m.has_genre(genre)]

        limit, offset = self._page_params(limit, offset)
        total = len(records)
        page = records[offset:offset + limit]

        return {
            "data": [r.to_dict() for r in page],
            "pagination": {
                "total": total,
                "limit": limit,
                "offset": offset,
                "has_more": offset + limit < total,
            },
        }

    @enveloped
    def get_by_id(self, collection: str, record_id: Any) -> Dict[str, Any]:
        """Return the record with the given id or raise a 404."""
        label = RECORD_LABELS.get(collection)
        if label is None:
            raise NotFoundError("Endpoint not found")

        parsed_id = parse_int(record_id)
        record = self.store.find_by_id(collection, parsed_id) if parsed_id is not None else None
        if record is None:
            raise NotFoundError(f"{label} with id {record_id} not found")
        return {"data": record.to_dict()}

    @enveloped
    def search(self, q: Optional[str], type: Optional[str] = None) -> Dict[str, Any]:
        """
        Search all collections (or one, if type is given) for a substring.

        Movies match on title, overview and genres; persons on name;
        producers on name and origin country.
        """
        if not q:
            raise BadRequestError('Search query parameter "q" is required')

        results: Dict[str, List[dict]] = {name: [] for name in COLLECTIONS}

        if type:
            targets = [type] if type in COLLECTIONS else []
        else:
            targets = [name for name in COLLECTIONS if self.store.is_available(name)]
            if not targets:
                raise ServiceUnavailableError("Data is still loading")

        for name in targets:
            results[name] = [r.to_dict() for r in self.store.get_collection(name) if r.matches(q)]

        total_results = sum(len(items) for items in results.values())
        self.logger.debug(f"search q={q!r} type={type!r} total={total_results}")

        return {
            "query": q,
            "total_results": total_results,
            "results": results,
        }

    # =========================================================================
    # DISPATCH
    # =========================================================================

    def process_request(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Answer a request path such as '/api/movies/1997' or '/api/search'.

        Args:
            path: Request path, optionally with a leading '#'
            params: Query parameters (limit, offset, genre, q, type)

        Returns:
            Success or error envelope
        """
        params = params or {}
        parts = [p for p in path.lstrip("#").split("?", 1)[0].split("/") if p]

        if len(parts) < 2 or parts[0] != "api":
            return create_error_response(404, "Endpoint not found")

        endpoint = parts[1]
        record_id = parts[2] if len(parts) > 2 else None

        try:
            if endpoint in COLLECTIONS:
                if record_id is not None:
                    return self.get_by_id(endpoint, record_id)
                return self.list_records(
                    endpoint,
                    limit=params.get("limit"),
                    offset=params.get("offset"),
                    genre=params.get("genre") if endpoint == "movies" else None,
                )
            if endpoint == "search":
                return self.search(params.get("q"), params.get("type"))
            return create_error_response(404, "Endpoint not found")
        except Exception as e:
            self.logger.exception(f"Unexpected error processing {path}")
            return create_error_response(500, str(e))

    # Helper methods
    def _page_params(self, limit: Any, offset: Any):
        limit = parse_int(limit, self.default_limit)
        if limit < 1:
            limit = self.default_limit
        limit = min(limit, self.max_limit)

        offset = parse_int(offset, 0)
        offset = max(offset, 0)
        return limit, offset
