"""After-update hooks for host update pipelines.

The host registers one callable with its update pipeline and calls it
after each committed update:

    hooks = RevisionHooks(settings, ConnectionRegistry.from_settings(settings))
    pipeline.on_after_update(hooks)

Creates and deletes must not be routed here.
"""

from collections.abc import Callable
from typing import Any

from revision_recorder.config import Settings
from revision_recorder.revision.models import RecordUpdate, utc_now
from revision_recorder.revision.recorder import Clock, RevisionRecorder
from revision_recorder.revision.store import ConnectionResolver

AfterUpdateHook = Callable[[RecordUpdate], None]


def acting_user_id(user: Any | None) -> Any | None:
    """Return the id of an authenticated, non-guest user, else None.

    Accepts any user object exposing ``id`` and, optionally, ``is_guest``.
    """
    if user is None or getattr(user, "is_guest", False):
        return None
    return getattr(user, "id", None)


class RevisionHooks:
    """Routes committed updates to a per-model RevisionRecorder."""

    def __init__(
        self,
        settings: Settings,
        connections: ConnectionResolver,
        clock: Clock = utc_now,
    ) -> None:
        self._settings = settings
        self._connections = connections
        self._clock = clock
        self._recorders: dict[str, RevisionRecorder] = {}

    def recorder_for(self, owner_model: str) -> RevisionRecorder:
        """Get the recorder configured for a record type."""
        recorder = self._recorders.get(owner_model)
        if recorder is None:
            recorder = RevisionRecorder(
                self._connections,
                self._settings.revisions.config_for(owner_model),
                clock=self._clock,
            )
            self._recorders[owner_model] = recorder
        return recorder

    def after_update(self, update: RecordUpdate) -> None:
        """Record a revision for a committed update.

        Raises:
            ConfigurationError: If the model's destination can't be resolved
            StoreWriteError: If the insert fails
        """
        if not self._settings.revisions.is_enabled(update.owner_model):
            return
        self.recorder_for(update.owner_model).capture(update)

    __call__ = after_update
