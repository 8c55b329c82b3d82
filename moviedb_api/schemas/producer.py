"""
Producer-related Pydantic schemas.
"""

from typing import List, Optional

from pydantic import BaseModel

from moviedb_api.schemas.common import PaginationMeta, SuccessEnvelope


class ProducerOut(BaseModel):
    """Production company record."""

    id: int
    name: str
    origin_country: str = ""
    logo_url: Optional[str] = None


class ProducerListResponse(SuccessEnvelope):
    data: List[ProducerOut]
    pagination: PaginationMeta


class ProducerResponse(SuccessEnvelope):
    data: ProducerOut
