"""MongoDB history store.

Uses the synchronous pymongo driver; one blocking insert per revision.
The client is thread-safe and pools its own connections.
"""

from typing import Any

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import ConfigurationError as DriverConfigurationError
from pymongo.errors import InvalidName, PyMongoError

from revision_recorder.config.models import ConnectionConfig
from revision_recorder.errors import ConfigurationError, StoreWriteError
from revision_recorder.observability.logging import get_logger

logger = get_logger(__name__)


class MongoRevisionCollection:
    """Wraps a pymongo Collection, translating driver errors."""

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    @property
    def name(self) -> str:
        return self._collection.name

    def insert_one(self, document: dict[str, Any]) -> Any:
        """Insert a single revision document.

        Raises:
            StoreWriteError: If the driver rejects or fails the insert
        """
        try:
            result = self._collection.insert_one(document)
        except PyMongoError as e:
            logger.error(
                "mongo_insert_revision_error",
                collection=self.name,
                error=str(e),
            )
            raise StoreWriteError(
                f"Failed to insert revision into '{self.name}': {e}", cause=e
            ) from e

        logger.debug(
            "revision_inserted",
            collection=self.name,
            revision_id=str(result.inserted_id),
        )
        return result.inserted_id


class MongoConnection:
    """A MongoDB client bound to the database holding revisions."""

    def __init__(self, client: MongoClient, database: str) -> None:
        self._client = client
        self._database: Database = client.get_database(database)

    @classmethod
    def from_config(cls, config: ConnectionConfig) -> "MongoConnection":
        """Create a client from connection configuration.

        The driver connects lazily, so this does not block on the server.

        Raises:
            ConfigurationError: If the URL, options or database name are invalid
        """
        options: dict[str, Any] = {
            "maxPoolSize": config.max_pool_size,
            "serverSelectionTimeoutMS": config.server_selection_timeout_ms,
            "connectTimeoutMS": config.connect_timeout_ms,
            "w": config.write_concern,
            "tz_aware": True,
        }
        if config.app_name:
            options["appname"] = config.app_name

        try:
            client: MongoClient = MongoClient(config.url, **options)
        except (DriverConfigurationError, TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid MongoDB connection settings: {e}", cause=e) from e

        try:
            return cls(client, config.database)
        except InvalidName as e:
            client.close()
            raise ConfigurationError(
                f"Invalid database name '{config.database}': {e}", cause=e
            ) from e

    @property
    def database(self) -> Database:
        return self._database

    def get_collection(self, name: str) -> MongoRevisionCollection:
        """Get a revision collection by name.

        Raises:
            ConfigurationError: If name is not a valid collection name
        """
        try:
            collection = self._database.get_collection(name)
        except InvalidName as e:
            raise ConfigurationError(
                f"Invalid collection name '{name}': {e}", cause=e
            ) from e
        return MongoRevisionCollection(collection)

    def close(self) -> None:
        self._client.close()
