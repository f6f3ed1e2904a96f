"""Revision recorder.

Captures the pre-update state of a record as a new, immutable document in
an append-only history collection. The host's update pipeline calls it
once per committed update; the recorder never reads, updates or deletes.
"""

from collections.abc import Callable, Mapping, Sequence
from datetime import datetime
from typing import Any

from revision_recorder.config.models import RevisionConfig
from revision_recorder.errors import ConfigurationError, RevisionError, StoreWriteError
from revision_recorder.revision.models import RecordUpdate, to_milliseconds, utc_now
from revision_recorder.revision.store import ConnectionResolver, RevisionCollection

Clock = Callable[[], datetime]

DEFAULT_CONFIG = RevisionConfig()


def _strips_native_id(
    native_id_field: str, primary_key: Sequence[str] | None
) -> bool:
    # Unknown key: whatever sits in the native id field would become the
    # revision's own identity, so it never belongs in the snapshot.
    if primary_key is None:
        return True
    return native_id_field in primary_key


def build_revision(
    previous_attributes: Mapping[str, Any],
    owner_id: Any,
    owner_model: str,
    acting_user: Any | None = None,
    *,
    config: RevisionConfig = DEFAULT_CONFIG,
    primary_key: Sequence[str] | None = None,
    captured_at: datetime | None = None,
) -> dict[str, Any]:
    """Build the revision document for one update without writing it.

    Args:
        previous_attributes: Record field values before the update
        owner_id: Record identity
        owner_model: Record type name
        acting_user: Identity of the acting user, or None
        config: Field names to tag the revision with
        primary_key: Names of the record's key fields, if known
        captured_at: Capture time; defaults to now

    Returns:
        A new dict; previous_attributes is left untouched
    """
    document = dict(previous_attributes)

    document[config.owner_id_field] = owner_id
    document[config.owner_model_field] = owner_model
    document[config.revision_date_field] = to_milliseconds(
        captured_at if captured_at is not None else utc_now()
    )
    document[config.revision_user_field] = acting_user

    if _strips_native_id(config.native_id_field, primary_key):
        document.pop(config.native_id_field, None)

    return document


def capture_revision(
    previous_attributes: Mapping[str, Any],
    owner_id: Any,
    owner_model: str,
    acting_user: Any | None,
    collection: RevisionCollection,
    *,
    config: RevisionConfig | None = None,
    primary_key: Sequence[str] | None = None,
    clock: Clock = utc_now,
) -> None:
    """Append a revision of a record's pre-update state to collection.

    Exactly one insert is issued. There is no read-back, deduplication or
    retry.

    Raises:
        StoreWriteError: If the insert fails
    """
    document = build_revision(
        previous_attributes,
        owner_id,
        owner_model,
        acting_user,
        config=config or DEFAULT_CONFIG,
        primary_key=primary_key,
        captured_at=clock(),
    )

    try:
        collection.insert_one(document)
    except RevisionError:
        raise
    except Exception as e:
        raise StoreWriteError(
            f"Failed to insert revision of {owner_model} {owner_id!r}: {e}", cause=e
        ) from e


class RevisionRecorder:
    """Records revisions for one record type configuration.

    The connection and collection named in the config are resolved on
    every capture, so a recorder holds no state besides its configuration.
    A recorder is itself an after-update callback: call it with a
    RecordUpdate.
    """

    def __init__(
        self,
        connections: ConnectionResolver,
        config: RevisionConfig | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self._connections = connections
        self._config = config or DEFAULT_CONFIG
        self._clock = clock

    @property
    def config(self) -> RevisionConfig:
        """The configuration this recorder writes with."""
        return self._config

    def collection(self) -> RevisionCollection:
        """Resolve the configured history collection.

        Raises:
            ConfigurationError: If the connection or collection can't be resolved
        """
        connection = self._connections.get(self._config.connection)
        try:
            return connection.get_collection(self._config.collection)
        except RevisionError:
            raise
        except Exception as e:
            raise ConfigurationError(
                f"Cannot resolve collection '{self._config.collection}' "
                f"on connection '{self._config.connection}': {e}",
                cause=e,
            ) from e

    def capture_revision(
        self,
        previous_attributes: Mapping[str, Any],
        owner_id: Any,
        owner_model: str,
        acting_user: Any | None = None,
        *,
        primary_key: Sequence[str] | None = None,
    ) -> None:
        """Append a revision of a record's pre-update state.

        Raises:
            ConfigurationError: If the destination can't be resolved
            StoreWriteError: If the insert fails
        """
        capture_revision(
            previous_attributes,
            owner_id,
            owner_model,
            acting_user,
            self.collection(),
            config=self._config,
            primary_key=primary_key,
            clock=self._clock,
        )

    def capture(self, update: RecordUpdate) -> None:
        """Append a revision described by a RecordUpdate."""
        self.capture_revision(
            update.previous_attributes,
            update.owner_id,
            update.owner_model,
            update.acting_user,
            primary_key=update.primary_key,
        )

    __call__ = capture
