"""
Uniform success/error envelopes for query responses.
"""

import json
from datetime import datetime, timezone
from typing import Any, Dict

from .exceptions import QueryError


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def create_success_response(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Wrap a payload in a success envelope.

    The payload keys (data, pagination, results, ...) are merged into the
    envelope next to status, success and timestamp.
    """
    return {
        "status": 200,
        "success": True,
        "timestamp": utc_timestamp(),
        **payload,
    }


def create_error_response(status: int, message: str) -> Dict[str, Any]:
    """Build an error envelope."""
    return {
        "status": status,
        "success": False,
        "error": {
            "message": message,
            "timestamp": utc_timestamp(),
        },
    }


def error_from_exception(exc: QueryError) -> Dict[str, Any]:
    """Build an error envelope from a QueryError."""
    return create_error_response(exc.status_code, exc.message)


def is_success(envelope: Dict[str, Any]) -> bool:
    return bool(envelope.get("success")) and envelope.get("status") == 200


def to_json(envelope: Dict[str, Any], indent: int = 2) -> str:
    """Encode an envelope as pretty-printed JSON text."""
    return json.dumps(envelope, indent=indent, ensure_ascii=False)


def from_json(text: str) -> Dict[str, Any]:
    """
    Decode an envelope from JSON text.

    Raises:
        ValueError: If the text is not a JSON object with status and success.
    """
    envelope = json.loads(text)
    if not isinstance(envelope, dict) or "status" not in envelope or "success" not in envelope:
        raise ValueError("Not a response envelope")
    return envelope
