"""Named connection registry.

Resolves the connection binding a RevisionConfig names. Connections are
created lazily from their ConnectionConfig on first use and then reused.
"""

import threading
from collections.abc import Mapping
from typing import Any

from revision_recorder.config import Settings
from revision_recorder.config.models import ConnectionConfig
from revision_recorder.errors import ConfigurationError
from revision_recorder.observability.logging import get_logger
from revision_recorder.revision.store import RevisionConnection
from revision_recorder.stores.inmemory import InMemoryConnection
from revision_recorder.stores.mongodb import MongoConnection

logger = get_logger(__name__)


def create_connection(config: ConnectionConfig) -> RevisionConnection:
    """Create a connection for the configured backend.

    Raises:
        ConfigurationError: If the backend type is not supported
    """
    if config.backend == "inmemory":
        logger.info("creating_connection", backend="inmemory")
        return InMemoryConnection()

    if config.backend == "mongodb":
        logger.info(
            "creating_connection",
            backend="mongodb",
            database=config.database,
            pool_size=config.max_pool_size,
        )
        return MongoConnection.from_config(config)

    raise ConfigurationError(f"Unsupported store backend: {config.backend}")


class ConnectionRegistry:
    """Connections keyed by binding name."""

    def __init__(self, configs: Mapping[str, ConnectionConfig] | None = None) -> None:
        self._configs = dict(configs or {})
        self._connections: dict[str, RevisionConnection] = {}
        self._created: set[str] = set()
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "ConnectionRegistry":
        return cls(settings.connections)

    def register(self, name: str, connection: RevisionConnection) -> None:
        """Bind an existing connection handle to name."""
        with self._lock:
            self._connections[name] = connection
            self._created.discard(name)

    def get(self, name: str) -> RevisionConnection:
        """Get the connection bound to name.

        Raises:
            ConfigurationError: If name is neither registered nor configured
        """
        with self._lock:
            connection = self._connections.get(name)
            if connection is not None:
                return connection

            config = self._configs.get(name)
            if config is None:
                raise ConfigurationError(f"Unknown connection: '{name}'")

            connection = create_connection(config)
            self._connections[name] = connection
            self._created.add(name)
            return connection

    def names(self) -> list[str]:
        """All configured or registered connection names, sorted."""
        with self._lock:
            return sorted(set(self._configs) | set(self._connections))

    def close(self) -> None:
        """Close the connections this registry created.

        Handles bound with register() belong to the host and stay open.
        """
        with self._lock:
            connections = [
                (name, self._connections.pop(name)) for name in sorted(self._created)
            ]
            self._created.clear()

        for name, connection in connections:
            close: Any = getattr(connection, "close", None)
            if close is not None:
                close()
                logger.info("connection_closed", connection=name)
