"""
Asynchronous loader for the record collections.

Fetches the movies, persons and producers JSON resources concurrently:
- Simulated network delay per resource
- Partial failure tolerance (one failed resource never cancels the others)
- Per-collection status (pending -> loading -> loaded | failed)
- Manual retry that re-runs all three fetches
"""

import asyncio
import json
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import requests

from .config import Config
from .exceptions import DataLoadError
from .models import COLLECTIONS, RECORD_TYPES
from .store import CollectionStatus, RecordStore
from .utils import Timer, format_duration, setup_logger

StatusCallback = Callable[[str, CollectionStatus], None]


@dataclass
class LoadReport:
    """Outcome of one load run."""

    statuses: Dict[str, str] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)
    counts: Dict[str, int] = field(default_factory=dict)
    elapsed: float = 0.0

    @property
    def succeeded(self) -> bool:
        """At least one collection loaded."""
        return any(s == CollectionStatus.loaded.value for s in self.statuses.values())

    @property
    def failed_collections(self) -> list:
        return [name for name, s in self.statuses.items() if s == CollectionStatus.failed.value]

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "statuses": dict(self.statuses),
            "errors": dict(self.errors),
            "counts": dict(self.counts),
            "elapsed_seconds": round(self.elapsed, 3),
        }

    def __str__(self) -> str:
        """Human-readable summary."""
        lines = []
        for name, status in self.statuses.items():
            line = f"{name}: {status}"
            if name in self.errors:
                line += f" ({self.errors[name]})"
            elif status == CollectionStatus.loaded.value:
                line += f" ({self.counts.get(name, 0)} records)"
            lines.append(line)
        lines.append(f"Elapsed: {format_duration(self.elapsed)}")
        return "\n".join(lines)


class DataLoader:
    """
    Populates a RecordStore from three JSON resources.

    Sources are local file paths or http(s) URLs. Blocking reads run in a
    worker thread so the three fetches overlap on the event loop.
    """

    def __init__(
        self,
        store: RecordStore,
        config: Config,
        on_status: Optional[StatusCallback] = None,
        session: Optional[requests.Session] = None,
    ):
        self.store = store
        self.config = config
        self.on_status = on_status
        self.session = session or self._create_session()
        self.logger = setup_logger("data_loader", config.log_dir)
        self._running = False

    @property
    def in_progress(self) -> bool:
        """Whether a load or retry is currently running."""
        return self._running

    def _create_session(self) -> requests.Session:
        """Create requests session for fetching remote resources."""
        session = requests.Session()
        session.headers.update({"Accept": "application/json"})
        return session

    async def load_all(self) -> LoadReport:
        """
        Load every collection concurrently.

        Returns:
            LoadReport with per-collection status

        Raises:
            DataLoadError: If all three collections failed
        """
        self.logger.info(f"Loading collections: {', '.join(COLLECTIONS)}")

        self._running = True
        try:
            with Timer() as timer:
                await asyncio.gather(
                    *(self._load_collection(name) for name in COLLECTIONS),
                    return_exceptions=True,
                )
        finally:
            self._running = False

        report = LoadReport(
            statuses=self.store.statuses(),
            errors=self.store.errors(),
            counts=self.store.counts(),
            elapsed=timer.elapsed,
        )

        if not report.succeeded:
            self.logger.error(f"All collections failed to load: {report.errors}")
            raise DataLoadError("All collections failed to load", errors=report.errors)

        if report.failed_collections:
            self.logger.warning(
                f"Loaded with failures: {', '.join(report.failed_collections)} "
                f"in {format_duration(report.elapsed)}"
            )
        else:
            self.logger.info(f"All collections loaded in {format_duration(report.elapsed)}")
        return report

    async def retry(self) -> LoadReport:
        """Reset every collection to pending and load again."""
        self.logger.info("Retrying data load")
        self.store.reset()
        for name in COLLECTIONS:
            self._notify(name, CollectionStatus.pending)
        return await self.load_all()

    async def _load_collection(self, name: str) -> None:
        """Fetch one collection; failures only mark this collection failed."""
        source = self.config.sources[name]
        self.store.set_status(name, CollectionStatus.loading)
        self._notify(name, CollectionStatus.loading)

        try:
            await self._simulate_delay()
            payload = await self._fetch(source)
            if not isinstance(payload, list):
                raise ValueError(f"{name} resource is not an array")

            record_type = RECORD_TYPES[name]
            self.store.set_collection(name, [record_type.from_dict(item) for item in payload])
            self.logger.info(f"Loaded {len(payload)} {name} from {source}")
            self._notify(name, CollectionStatus.loaded)

        except Exception as e:
            self.store.set_status(name, CollectionStatus.failed, error=str(e))
            self.logger.warning(f"Failed to load {name} from {source}: {e}")
            self._notify(name, CollectionStatus.failed)

    async def _simulate_delay(self) -> None:
        delay = random.uniform(self.config.load_delay_min, self.config.load_delay_max)
        if delay > 0:
            await asyncio.sleep(delay)

    async def _fetch(self, source: str) -> Any:
        if source.startswith(("http://", "https://")):
            return await asyncio.to_thread(self._fetch_url, source)
        return await asyncio.to_thread(self._read_file, source)

    def _fetch_url(self, url: str) -> Any:
        response = self.session.get(url, timeout=self.config.request_timeout)
        response.raise_for_status()
        return response.json()

    def _read_file(self, path: str) -> Any:
        return json.loads(Path(path).read_text(encoding="utf-8"))

    def _notify(self, name: str, status: CollectionStatus) -> None:
        if self.on_status:
            self.on_status(name, status)


async def build_store(
    config: Config,
    on_status: Optional[StatusCallback] = None,
) -> RecordStore:
    """
    Create a populated store for the configured data mode.

    Static mode returns the built-in sample data; files mode runs the loader.

    Raises:
        DataLoadError: If files mode could not load any collection
    """
    if not config.uses_loader:
        return RecordStore.from_sample_data()

    store = RecordStore()
    await DataLoader(store, config, on_status=on_status).load_all()
    return store
