"""
Loader status schemas.
"""

from typing import Dict, Literal

from pydantic import BaseModel

from moviedb_api.schemas.common import SuccessEnvelope

CollectionState = Literal["pending", "loading", "loaded", "failed"]


class LoadStatus(BaseModel):
    """Per-collection load state."""

    data_mode: str
    ready: bool
    statuses: Dict[str, CollectionState]
    errors: Dict[str, str] = {}
    counts: Dict[str, int] = {}


class LoadStatusResponse(SuccessEnvelope):
    data: LoadStatus
