"""Append-only revision history for mutable records.

The host application calls the recorder after an update commits, handing
over the record's pre-update attributes. The recorder copies them, tags the
copy with owner, model, date and user fields, and inserts it into a MongoDB
history collection.

Usage:
    from revision_recorder import RevisionRecorder
    from revision_recorder.stores import ConnectionRegistry

    registry = ConnectionRegistry.from_settings(settings)
    recorder = RevisionRecorder(registry)
    recorder.capture_revision({"name": "Alice"}, 42, "User", acting_user=7)
"""

from revision_recorder.errors import ConfigurationError, RevisionError, StoreWriteError
from revision_recorder.revision import (
    RecordUpdate,
    RevisionHooks,
    RevisionRecorder,
    acting_user_id,
    build_revision,
    capture_revision,
)

__all__ = [
    "ConfigurationError",
    "RecordUpdate",
    "RevisionError",
    "RevisionHooks",
    "RevisionRecorder",
    "StoreWriteError",
    "acting_user_id",
    "build_revision",
    "capture_revision",
]
