"""
Endpoint catalogue and request URL construction.

Mirrors the demo form: pick an endpoint, fill in parameters, see the
request URL, then run it through the query engine.
"""

from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple
from urllib.parse import quote

from .exceptions import BadRequestError, NotFoundError


@dataclass(frozen=True)
class Endpoint:
    """A selectable API endpoint."""

    name: str
    collection: str
    params: Tuple[str, ...] = ()
    requires_id: bool = False
    label: str = ""

    def path(self, record_id: Optional[str] = None) -> str:
        """API path; a missing id renders as the ':id' placeholder."""
        if self.collection == "search":
            return "/api/search"
        if self.requires_id:
            return f"/api/{self.collection}/{record_id or ':id'}"
        return f"/api/{self.collection}"


ENDPOINTS: Dict[str, Endpoint] = {
    e.name: e
    for e in (
        Endpoint("movies", "movies", ("limit", "offset", "genre")),
        Endpoint("movies-id", "movies", requires_id=True, label="Movie"),
        Endpoint("persons", "persons", ("limit", "offset")),
        Endpoint("persons-id", "persons", requires_id=True, label="Person"),
        Endpoint("producers", "producers", ("limit", "offset")),
        Endpoint("producers-id", "producers", requires_id=True, label="Producer"),
        Endpoint("search", "search", ("q", "type")),
    )
}


def get_endpoint(name: str) -> Endpoint:
    endpoint = ENDPOINTS.get(name)
    if endpoint is None:
        raise NotFoundError(f"Unknown endpoint: {name}")
    return endpoint


def _query_params(params: Mapping[str, object]) -> Dict[str, str]:
    """Drop empty values and the id, keep insertion order."""
    return {
        key: str(value)
        for key, value in params.items()
        if key != "id" and value is not None and str(value) != ""
    }


def build_request_url(base_url: str, endpoint_name: str, params: Optional[Mapping[str, object]] = None) -> str:
    """
    Render the request URL shown for an endpoint.

    Example:
        >>> build_request_url("http://localhost:8000/", "movies", {"genre": "Drama", "limit": 5})
        'http://localhost:8000/#/api/movies?genre=Drama&limit=5'
    """
    params = params or {}
    endpoint = get_endpoint(endpoint_name)
    record_id = params.get("id")
    path = endpoint.path(str(record_id) if record_id not in (None, "") else None)

    url = f"{base_url}#{path}"
    query = _query_params(params)
    if query:
        url += "?" + "&".join(f"{key}={quote(value, safe='')}" for key, value in query.items())
    return url


def build_request(endpoint_name: str, params: Optional[Mapping[str, object]] = None) -> Tuple[str, Dict[str, str]]:
    """
    Build the (path, query params) pair to execute for an endpoint.

    Raises:
        NotFoundError: Unknown endpoint name
        BadRequestError: A required id or search query is missing
    """
    params = params or {}
    endpoint = get_endpoint(endpoint_name)
    record_id = params.get("id")

    if endpoint.requires_id and record_id in (None, ""):
        raise BadRequestError(f"{endpoint.label} ID is required")
    if endpoint.collection == "search" and not params.get("q"):
        raise BadRequestError("Search query is required")

    path = endpoint.path(str(record_id) if endpoint.requires_id else None)
    return path, _query_params(params)
