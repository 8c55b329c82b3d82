"""
Dependency injection for the API.

Provides the shared record store, query engine and loader.
"""

from functools import lru_cache

from fastapi import Depends

from moviedb.config import Config
from moviedb.engine import QueryEngine
from moviedb.loader import DataLoader
from moviedb.store import RecordStore


@lru_cache()
def get_config() -> Config:
    """Get cached configuration instance."""
    return Config.from_env()


@lru_cache()
def get_store() -> RecordStore:
    """
    Get the process-wide record store.

    Static mode returns the sample data; files mode returns an empty store
    that the startup loader fills in.
    """
    config = get_config()
    if config.uses_loader:
        return RecordStore()
    return RecordStore.from_sample_data()


@lru_cache()
def get_loader() -> DataLoader:
    """Get cached DataLoader bound to the shared store."""
    return DataLoader(get_store(), get_config())


def get_engine(
    store: RecordStore = Depends(get_store),
    config: Config = Depends(get_config),
) -> QueryEngine:
    """Get a query engine over the shared store."""
    return QueryEngine.from_config(store, config)
