"""Logging for revision capture backends."""

from revision_recorder.observability.logging import (
    configure_from,
    get_logger,
    setup_logging,
)

__all__ = ["configure_from", "get_logger", "setup_logging"]
