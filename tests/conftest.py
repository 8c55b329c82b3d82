"""
Shared fixtures for movie database tests.

Provides configuration, record stores, JSON resource files and an API client.
"""

import json
import time
from pathlib import Path
from typing import Dict, List

import pytest
from fastapi.testclient import TestClient

from moviedb.config import Config
from moviedb.engine import QueryEngine
from moviedb.loader import DataLoader
from moviedb.models import COLLECTIONS
from moviedb.sample_data import SAMPLE_DATA
from moviedb.store import CollectionStatus, RecordStore


# =============================================================================
# SAMPLE DATA
# =============================================================================

def create_sample_movie(movie_id: int, title: str, genres: List[str], overview: str = "") -> dict:
    """Create a raw movie record for testing."""
    return {
        "id": movie_id,
        "title": title,
        "overview": overview or f"This is the overview for {title}.",
        "release_date": "2023-01-15",
        "runtime": 120,
        "genres": genres,
        "spoken_languages": ["English"],
        "cast_ids": [100 + movie_id],
        "crew_ids": [200 + movie_id],
        "production_company_ids": [3448],
        "imdb_rating": 7.5,
        "vote_count": 1000,
    }


# A larger catalogue for pagination tests
EXTRA_MOVIES = [
    create_sample_movie(550, "Fight Club", ["Drama", "Thriller"]),
    create_sample_movie(27205, "Inception", ["Action", "Science Fiction", "Thriller"]),
    create_sample_movie(155, "The Dark Knight", ["Action", "Crime", "Drama"]),
    create_sample_movie(680, "Pulp Fiction", ["Crime", "Thriller"]),
    create_sample_movie(157336, "Interstellar", ["Adventure", "Drama", "Science Fiction"]),
]


def write_resources(directory: Path, data: Dict[str, list]) -> Dict[str, str]:
    """Write one JSON file per collection and return the source paths."""
    directory.mkdir(parents=True, exist_ok=True)
    sources = {}
    for name in COLLECTIONS:
        path = directory / f"{name}.json"
        path.write_text(json.dumps(data.get(name, [])), encoding="utf-8")
        sources[name] = str(path)
    return sources


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def config(tmp_path):
    """Static-mode config writing logs to a temporary directory."""
    return Config(
        data_mode="static",
        data_dir=tmp_path / "data",
        load_delay_min=0.0,
        load_delay_max=0.0,
        log_dir=tmp_path / "logs",
    )


@pytest.fixture
def resource_sources(tmp_path):
    """JSON resource files holding the sample data."""
    return write_resources(tmp_path / "data", SAMPLE_DATA)


@pytest.fixture
def files_config(tmp_path, resource_sources):
    """Files-mode config pointing at the sample JSON resources."""
    return Config(
        data_mode="files",
        data_dir=tmp_path / "data",
        sources=dict(resource_sources),
        load_delay_min=0.0,
        load_delay_max=0.0,
        log_dir=tmp_path / "logs",
    )


@pytest.fixture
def store():
    """Store pre-populated with the built-in sample data."""
    return RecordStore.from_sample_data()


@pytest.fixture
def large_store():
    """Store with the sample data plus extra movies."""
    data = dict(SAMPLE_DATA)
    data["movies"] = SAMPLE_DATA["movies"] + EXTRA_MOVIES
    return RecordStore.from_records(data)


@pytest.fixture
def pending_store():
    """Store whose collections have not been loaded yet."""
    return RecordStore()


@pytest.fixture
def partial_store():
    """Store where producers failed to load."""
    store = RecordStore()
    store.set_collection("movies", RecordStore.from_sample_data().get_collection("movies"))
    store.set_collection("persons", RecordStore.from_sample_data().get_collection("persons"))
    store.set_status("producers", CollectionStatus.failed, error="HTTP 500")
    return store


@pytest.fixture
def engine(store, config):
    return QueryEngine.from_config(store, config)


def make_client(store: RecordStore, config: Config):
    """FastAPI app with the store, config and loader overridden."""
    from moviedb_api.main import app
    from moviedb_api import dependencies

    # Clear any cached config/store from previous runs
    dependencies.get_config.cache_clear()
    dependencies.get_store.cache_clear()
    dependencies.get_loader.cache_clear()

    app.dependency_overrides[dependencies.get_store] = lambda: store
    app.dependency_overrides[dependencies.get_config] = lambda: config
    loader = DataLoader(store, config)
    app.dependency_overrides[dependencies.get_loader] = lambda: loader
    return app


def wait_for_load(app, timeout: float = 5.0) -> None:
    """Block until the startup load started by the app lifespan has finished."""
    task = getattr(app.state, "load_task", None)
    deadline = time.monotonic() + timeout
    while task is not None and not task.done():
        assert time.monotonic() < deadline, "startup load did not finish"
        time.sleep(0.02)


@pytest.fixture
def api_client(store, config):
    """Provide FastAPI test client over the sample data."""
    app = make_client(store, config)
    with TestClient(app) as client:
        yield client

    # Clean up overrides
    app.dependency_overrides.clear()


@pytest.fixture
def pending_api_client(pending_store, config):
    """API client whose store is still loading."""
    app = make_client(pending_store, config)
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def partial_api_client(partial_store, config):
    """API client whose producers collection failed to load."""
    app = make_client(partial_store, config)
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
