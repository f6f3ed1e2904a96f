"""In-memory append-only revision store."""

import copy
import threading
from typing import Any

from bson import ObjectId

from revision_recorder.errors import StoreWriteError


class InMemoryCollection:
    """Append-only collection for testing and development.

    Documents are deep-copied on the way in and out, and get an ObjectId
    under ``_id`` when they carry none, like a MongoDB insert. A repeated
    ``_id`` is rejected the way a unique index would reject it.
    Not suitable for production use.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._documents: list[dict[str, Any]] = []
        self._ids: set[Any] = set()
        self._lock = threading.Lock()

    def insert_one(self, document: dict[str, Any]) -> Any:
        """Append a copy of document and return its _id."""
        stored = copy.deepcopy(document)
        stored.setdefault("_id", ObjectId())
        with self._lock:
            if stored["_id"] in self._ids:
                raise StoreWriteError(
                    f"Duplicate _id {stored['_id']!r} in collection '{self.name}'"
                )
            self._ids.add(stored["_id"])
            self._documents.append(stored)
        return stored["_id"]

    @property
    def documents(self) -> list[dict[str, Any]]:
        """Copies of all stored documents, in insertion order."""
        with self._lock:
            return copy.deepcopy(self._documents)

    def __len__(self) -> int:
        with self._lock:
            return len(self._documents)


class InMemoryConnection:
    """Connection handing out InMemoryCollections by name."""

    def __init__(self) -> None:
        self._collections: dict[str, InMemoryCollection] = {}
        self._lock = threading.Lock()

    def get_collection(self, name: str) -> InMemoryCollection:
        """Get (creating on first use) the collection called name."""
        with self._lock:
            collection = self._collections.get(name)
            if collection is None:
                collection = InMemoryCollection(name)
                self._collections[name] = collection
            return collection

    def collection_names(self) -> list[str]:
        """Names of the collections created so far, sorted."""
        with self._lock:
            return sorted(self._collections)
