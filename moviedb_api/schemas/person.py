"""
Person-related Pydantic schemas.
"""

from typing import List, Optional

from pydantic import BaseModel

from moviedb_api.schemas.common import PaginationMeta, SuccessEnvelope


class ActingRoleOut(BaseModel):
    """A character played in a movie."""

    movie_id: int
    character: Optional[str] = None


class CrewRoleOut(BaseModel):
    """A crew job on a movie."""

    movie_id: int
    job: Optional[str] = None
    department: Optional[str] = None


class PersonOut(BaseModel):
    """Complete person record."""

    id: int
    name: str
    profile_url: Optional[str] = None
    roles: List[ActingRoleOut] = []
    crew_roles: List[CrewRoleOut] = []


class PersonListResponse(SuccessEnvelope):
    """Response for the person list endpoint."""

    data: List[PersonOut]
    pagination: PaginationMeta


class PersonResponse(SuccessEnvelope):
    """Response for the person detail endpoint."""

    data: PersonOut
