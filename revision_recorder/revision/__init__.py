"""Revision capture: models, recorder and host hooks."""

from revision_recorder.revision.hooks import AfterUpdateHook, RevisionHooks, acting_user_id
from revision_recorder.revision.models import RecordUpdate, to_milliseconds, utc_now
from revision_recorder.revision.recorder import (
    RevisionRecorder,
    build_revision,
    capture_revision,
)
from revision_recorder.revision.store import (
    ConnectionResolver,
    RevisionCollection,
    RevisionConnection,
)

__all__ = [
    "AfterUpdateHook",
    "ConnectionResolver",
    "RecordUpdate",
    "RevisionCollection",
    "RevisionConnection",
    "RevisionHooks",
    "RevisionRecorder",
    "acting_user_id",
    "build_revision",
    "capture_revision",
    "to_milliseconds",
    "utc_now",
]
