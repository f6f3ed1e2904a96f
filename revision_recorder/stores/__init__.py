"""History store backends and connection registry."""

from revision_recorder.stores.inmemory import InMemoryCollection, InMemoryConnection
from revision_recorder.stores.mongodb import MongoConnection, MongoRevisionCollection
from revision_recorder.stores.registry import ConnectionRegistry, create_connection

__all__ = [
    "ConnectionRegistry",
    "InMemoryCollection",
    "InMemoryConnection",
    "MongoConnection",
    "MongoRevisionCollection",
    "create_connection",
]
