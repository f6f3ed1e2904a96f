"""Tests for the MongoDB history store, using a mocked driver."""

from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId
from pymongo.errors import InvalidName, ServerSelectionTimeoutError, WriteError

from revision_recorder.config.models import ConnectionConfig
from revision_recorder.errors import ConfigurationError, StoreWriteError
from revision_recorder.revision import RevisionRecorder
from revision_recorder.stores import (
    ConnectionRegistry,
    MongoConnection,
    MongoRevisionCollection,
)


@pytest.fixture
def driver_collection() -> MagicMock:
    collection = MagicMock()
    collection.name = "revision"
    collection.insert_one.return_value = MagicMock(inserted_id=ObjectId())
    return collection


@pytest.fixture
def client(driver_collection) -> MagicMock:
    client = MagicMock()
    client.get_database.return_value.get_collection.return_value = driver_collection
    return client


class TestMongoRevisionCollection:
    """Tests for MongoRevisionCollection."""

    def test_insert_returns_inserted_id(self, driver_collection) -> None:
        """A successful insert returns the driver's id."""
        collection = MongoRevisionCollection(driver_collection)
        document = {"name": "Alice"}

        inserted_id = collection.insert_one(document)

        driver_collection.insert_one.assert_called_once_with(document)
        assert inserted_id == driver_collection.insert_one.return_value.inserted_id

    def test_driver_error_wrapped(self, driver_collection) -> None:
        """Driver failures raise StoreWriteError."""
        cause = ServerSelectionTimeoutError("no servers")
        driver_collection.insert_one.side_effect = cause

        with pytest.raises(StoreWriteError) as exc_info:
            MongoRevisionCollection(driver_collection).insert_one({"name": "Alice"})

        assert exc_info.value.cause is cause

    def test_rejected_write_wrapped(self, driver_collection) -> None:
        """Server-side rejections raise StoreWriteError."""
        driver_collection.insert_one.side_effect = WriteError("Document failed validation", 121)

        with pytest.raises(StoreWriteError):
            MongoRevisionCollection(driver_collection).insert_one({})


class TestMongoConnection:
    """Tests for MongoConnection."""

    def test_uses_configured_database(self, client) -> None:
        """The connection is bound to one database."""
        MongoConnection(client, "history")
        client.get_database.assert_called_once_with("history")

    def test_get_collection(self, client, driver_collection) -> None:
        """Collections are wrapped for error translation."""
        collection = MongoConnection(client, "history").get_collection("revision")

        assert isinstance(collection, MongoRevisionCollection)
        assert collection.name == "revision"

    def test_invalid_collection_name(self, client) -> None:
        """Invalid names raise ConfigurationError."""
        client.get_database.return_value.get_collection.side_effect = InvalidName(
            "collection names cannot be empty"
        )

        with pytest.raises(ConfigurationError):
            MongoConnection(client, "history").get_collection("")

    def test_close(self, client) -> None:
        """close() closes the client."""
        MongoConnection(client, "history").close()
        client.close.assert_called_once()

    def test_from_config(self) -> None:
        """The client is created with the configured options."""
        config = ConnectionConfig(
            url="mongodb://db.example:27017",
            database="audit",
            max_pool_size=5,
            write_concern="majority",
            app_name="billing",
        )

        with patch("revision_recorder.stores.mongodb.MongoClient") as client_cls:
            MongoConnection.from_config(config)

        client_cls.assert_called_once_with(
            "mongodb://db.example:27017",
            maxPoolSize=5,
            serverSelectionTimeoutMS=30000,
            connectTimeoutMS=20000,
            w="majority",
            tz_aware=True,
            appname="billing",
        )
        client_cls.return_value.get_database.assert_called_once_with("audit")


class TestRecorderOverMongo:
    """End-to-end capture through a mocked pymongo client."""

    def test_capture_writes_through_driver(self, client, driver_collection) -> None:
        """One insert reaches the driver with the tagged snapshot."""
        registry = ConnectionRegistry()
        registry.register("mongodb", MongoConnection(client, "app"))

        RevisionRecorder(registry).capture_revision(
            {"_id": 42, "name": "Bob"}, 42, "User", primary_key=("_id",)
        )

        driver_collection.insert_one.assert_called_once()
        (document,), _ = driver_collection.insert_one.call_args
        assert "_id" not in document
        assert document["name"] == "Bob"
        assert document["ownerId"] == 42
        assert document["ownerModel"] == "User"
        assert document["revisionUser"] is None

    def test_capture_failure_surfaces(self, client, driver_collection) -> None:
        """Driver failures reach the caller as StoreWriteError."""
        driver_collection.insert_one.side_effect = ServerSelectionTimeoutError("down")
        registry = ConnectionRegistry()
        registry.register("mongodb", MongoConnection(client, "app"))

        with pytest.raises(StoreWriteError):
            RevisionRecorder(registry).capture_revision({"name": "Bob"}, 42, "User")
