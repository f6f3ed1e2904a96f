"""Root settings model for revision capture."""

from pydantic import BaseModel, Field

from revision_recorder.config.models import (
    ConnectionConfig,
    ObservabilityConfig,
    RevisionSettings,
)


def _default_connections() -> dict[str, ConnectionConfig]:
    return {"mongodb": ConnectionConfig()}


class Settings(BaseModel):
    """Root configuration object.

    Values come from, lowest to highest priority:
    1. Pydantic model defaults (in code)
    2. The base TOML file passed by the host
    3. The optional environment overlay next to it
    """

    app_name: str = Field(
        default="revision-recorder",
        description="Application name for logging",
    )
    connections: dict[str, ConnectionConfig] = Field(
        default_factory=_default_connections,
        description="Store connections keyed by binding name",
    )
    revisions: RevisionSettings = Field(
        default_factory=RevisionSettings,
        description="Revision capture configuration",
    )
    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Observability configuration",
    )
