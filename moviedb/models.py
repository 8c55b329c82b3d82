"""
Data models for the movie database.

Provides dataclasses for the three record collections. Conversion from raw
JSON is tolerant: missing fields fall back to defaults and cross-collection
ids are kept as-is.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Movie:
    """A movie record."""

    id: int
    title: str
    overview: str = ""
    release_date: Optional[str] = None  # YYYY-MM-DD
    runtime: Optional[int] = None
    genres: List[str] = field(default_factory=list)
    spoken_languages: List[str] = field(default_factory=list)
    poster_url: Optional[str] = None
    backdrop_url: Optional[str] = None
    trailer_url: Optional[str] = None

    # Opaque references into the other collections
    cast_ids: List[int] = field(default_factory=list)
    crew_ids: List[int] = field(default_factory=list)
    production_company_ids: List[int] = field(default_factory=list)

    imdb_rating: Optional[float] = None
    vote_count: Optional[int] = None

    # SEO metadata
    seo_title: Optional[str] = None
    seo_description: Optional[str] = None
    seo_focus_keywords: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to a JSON-ready dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "overview": self.overview,
            "release_date": self.release_date,
            "runtime": self.runtime,
            "genres": list(self.genres),
            "spoken_languages": list(self.spoken_languages),
            "poster_url": self.poster_url,
            "backdrop_url": self.backdrop_url,
            "cast_ids": list(self.cast_ids),
            "crew_ids": list(self.crew_ids),
            "production_company_ids": list(self.production_company_ids),
            "trailer_url": self.trailer_url,
            "imdb_rating": self.imdb_rating,
            "vote_count": self.vote_count,
            "seo_title": self.seo_title,
            "seo_description": self.seo_description,
            "seo_focus_keywords": self.seo_focus_keywords,
        }

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match on title, overview and genres."""
        term = term.lower()
        return (
            term in self.title.lower()
            or term in (self.overview or "").lower()
            or any(isinstance(g, str) and term in g.lower() for g in self.genres)
        )

    def has_genre(self, genre: str) -> bool:
        """Check if any genre contains the filter (case-insensitive)."""
        genre = genre.lower()
        return any(isinstance(g, str) and genre in g.lower() for g in self.genres)

    @classmethod
    def from_dict(cls, data: dict) -> "Movie":
        """Create a Movie from a raw JSON object."""
        return cls(
            id=data.get("id"),
            title=data.get("title") or "Unknown",
            overview=data.get("overview") or "",
            release_date=data.get("release_date"),
            runtime=data.get("runtime"),
            genres=list(data.get("genres") or []),
            spoken_languages=list(data.get("spoken_languages") or []),
            poster_url=data.get("poster_url"),
            backdrop_url=data.get("backdrop_url"),
            trailer_url=data.get("trailer_url"),
            cast_ids=list(data.get("cast_ids") or []),
            crew_ids=list(data.get("crew_ids") or []),
            production_company_ids=list(data.get("production_company_ids") or []),
            imdb_rating=data.get("imdb_rating"),
            vote_count=data.get("vote_count"),
            seo_title=data.get("seo_title"),
            seo_description=data.get("seo_description"),
            seo_focus_keywords=data.get("seo_focus_keywords"),
        )


@dataclass
class ActingRole:
    """A cast credit: the character a person played in a movie."""

    movie_id: int
    character: Optional[str] = None

    def to_dict(self) -> dict:
        return {"movie_id": self.movie_id, "character": self.character}

    @classmethod
    def from_dict(cls, data: dict) -> "ActingRole":
        return cls(movie_id=data.get("movie_id"), character=data.get("character"))


@dataclass
class CrewRole:
    """A crew credit: job and department on a movie."""

    movie_id: int
    job: Optional[str] = None
    department: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "movie_id": self.movie_id,
            "job": self.job,
            "department": self.department,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CrewRole":
        return cls(
            movie_id=data.get("movie_id"),
            job=data.get("job"),
            department=data.get("department"),
        )


@dataclass
class Person:
    """A person record (actor or crew member)."""

    id: int
    name: str
    profile_url: Optional[str] = None
    roles: List[ActingRole] = field(default_factory=list)
    crew_roles: List[CrewRole] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to a JSON-ready dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "profile_url": self.profile_url,
            "roles": [r.to_dict() for r in self.roles],
            "crew_roles": [r.to_dict() for r in self.crew_roles],
        }

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match on name."""
        return term.lower() in self.name.lower()

    @classmethod
    def from_dict(cls, data: dict) -> "Person":
        """Create a Person from a raw JSON object."""
        return cls(
            id=data.get("id"),
            name=data.get("name") or "Unknown",
            profile_url=data.get("profile_url"),
            roles=[ActingRole.from_dict(r) for r in data.get("roles") or []],
            crew_roles=[CrewRole.from_dict(r) for r in data.get("crew_roles") or []],
        )


@dataclass
class Producer:
    """A production company record."""

    id: int
    name: str
    origin_country: str = ""
    logo_url: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to a JSON-ready dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "origin_country": self.origin_country,
            "logo_url": self.logo_url,
        }

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match on name and origin country."""
        term = term.lower()
        return term in self.name.lower() or term in (self.origin_country or "").lower()

    @classmethod
    def from_dict(cls, data: dict) -> "Producer":
        """Create a Producer from a raw JSON object."""
        return cls(
            id=data.get("id"),
            name=data.get("name") or "Unknown",
            origin_country=data.get("origin_country") or "",
            logo_url=data.get("logo_url"),
        )


# Collection name -> record class
RECORD_TYPES = {
    "movies": Movie,
    "persons": Person,
    "producers": Producer,
}

# Collection name -> label used in messages
RECORD_LABELS = {
    "movies": "Movie",
    "persons": "Person",
    "producers": "Producer",
}

COLLECTIONS = tuple(RECORD_TYPES)
