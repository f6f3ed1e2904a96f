"""Error hierarchy for revision capture.

Store backends wrap driver-specific failures in one of these so the host's
update pipeline only has to handle a single family of exceptions.
"""


class RevisionError(Exception):
    """Base exception for all revision errors."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConfigurationError(RevisionError):
    """Raised when the configured connection or collection cannot be resolved.

    Examples:
        - Connection name missing from settings
        - Unsupported backend type
        - Invalid collection name
    """

    pass


class StoreWriteError(RevisionError):
    """Raised when inserting a revision into the history store fails.

    Examples:
        - Store unreachable
        - Write rejected (permissions, duplicate key, document validation)
    """

    pass
