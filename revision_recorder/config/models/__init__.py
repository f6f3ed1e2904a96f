"""Configuration models."""

from revision_recorder.config.models.observability import (
    LoggingConfig,
    ObservabilityConfig,
)
from revision_recorder.config.models.revision import (
    RevisionConfig,
    RevisionOverride,
    RevisionSettings,
)
from revision_recorder.config.models.storage import ConnectionConfig

__all__ = [
    "ConnectionConfig",
    "LoggingConfig",
    "ObservabilityConfig",
    "RevisionConfig",
    "RevisionOverride",
    "RevisionSettings",
]
