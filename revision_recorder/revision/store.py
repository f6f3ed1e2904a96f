"""Store interfaces consumed by the recorder.

Anything with a matching insert_one satisfies RevisionCollection, including
a raw pymongo Collection.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class RevisionCollection(Protocol):
    """Append-only destination for revision documents."""

    def insert_one(self, document: dict[str, Any]) -> Any:
        """Insert a single new document."""
        ...


@runtime_checkable
class RevisionConnection(Protocol):
    """A store connection exposing collections by name."""

    def get_collection(self, name: str) -> RevisionCollection:
        """Get a collection handle by name."""
        ...


@runtime_checkable
class ConnectionResolver(Protocol):
    """Resolves a configured connection binding by name."""

    def get(self, name: str) -> RevisionConnection:
        """Get the connection bound to name.

        Raises:
            ConfigurationError: If no connection is bound to name
        """
        ...
