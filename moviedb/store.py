"""
In-memory record store holding the movies, persons and producers collections.

Each collection has its own slot and status. A slot is written once by
whoever populates it (sample data or the loader) and is read-only after
that.
"""

from enum import Enum
from typing import Dict, Iterable, Mapping, Optional, Tuple

from .exceptions import NotFoundError, ServiceUnavailableError
from .models import COLLECTIONS, RECORD_TYPES
from .sample_data import SAMPLE_DATA


class CollectionStatus(str, Enum):
    """Load state of a single collection."""

    pending = "pending"
    loading = "loading"
    loaded = "loaded"
    failed = "failed"


class RecordStore:
    """Holds the three record collections and their load status."""

    def __init__(self):
        self._collections: Dict[str, Tuple] = {name: () for name in COLLECTIONS}
        self._status: Dict[str, CollectionStatus] = {
            name: CollectionStatus.pending for name in COLLECTIONS
        }
        self._errors: Dict[str, str] = {}

    @classmethod
    def from_records(cls, data: Mapping[str, Iterable[dict]]) -> "RecordStore":
        """Build a fully loaded store from raw record dictionaries."""
        store = cls()
        for name in COLLECTIONS:
            record_type = RECORD_TYPES[name]
            store.set_collection(name, [record_type.from_dict(r) for r in data.get(name, [])])
        return store

    @classmethod
    def from_sample_data(cls) -> "RecordStore":
        """Build a store pre-populated with the built-in example records."""
        return cls.from_records(SAMPLE_DATA)

    # Writers (used while populating)
    def set_collection(self, name: str, records: Iterable) -> None:
        """Store a collection's records and mark it loaded."""
        self._check_name(name)
        self._collections[name] = tuple(records)
        self._status[name] = CollectionStatus.loaded
        self._errors.pop(name, None)

    def set_status(self, name: str, status: CollectionStatus, error: Optional[str] = None) -> None:
        """Update a collection's status, recording the error for failures."""
        self._check_name(name)
        self._status[name] = status
        if error:
            self._errors[name] = error
        else:
            self._errors.pop(name, None)

    def reset(self) -> None:
        """Drop all records and return every collection to pending."""
        for name in COLLECTIONS:
            self._collections[name] = ()
            self._status[name] = CollectionStatus.pending
        self._errors.clear()

    # Readers
    def status(self, name: str) -> CollectionStatus:
        self._check_name(name)
        return self._status[name]

    def statuses(self) -> Dict[str, str]:
        """Status of every collection, keyed by collection name."""
        return {name: status.value for name, status in self._status.items()}

    def errors(self) -> Dict[str, str]:
        return dict(self._errors)

    def is_available(self, name: str) -> bool:
        return self.status(name) == CollectionStatus.loaded

    @property
    def is_ready(self) -> bool:
        """True once at least one collection is queryable."""
        return any(s == CollectionStatus.loaded for s in self._status.values())

    def get_collection(self, name: str) -> Tuple:
        """
        Get all records of a collection.

        Raises:
            NotFoundError: Unknown collection name.
            ServiceUnavailableError: Collection not loaded (yet).
        """
        status = self.status(name)
        if status != CollectionStatus.loaded:
            if status == CollectionStatus.failed:
                message = f"{name} data failed to load"
            else:
                message = f"{name} data is still loading"
            raise ServiceUnavailableError(message)
        return self._collections[name]

    def find_by_id(self, name: str, record_id: int):
        """Linear scan for an exact id match; None if absent."""
        for record in self.get_collection(name):
            if record.id == record_id:
                return record
        return None

    def counts(self) -> Dict[str, int]:
        """Number of records held per collection."""
        return {name: len(records) for name, records in self._collections.items()}

    def _check_name(self, name: str) -> None:
        if name not in self._collections:
            raise NotFoundError(f"Unknown collection: {name}")
