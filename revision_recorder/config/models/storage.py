"""Storage connection configuration models."""

from typing import Literal

from pydantic import BaseModel, Field

BackendType = Literal["mongodb", "inmemory"]


class ConnectionConfig(BaseModel):
    """Configuration for a single named store connection.

    Credentials belong in the URL and should come from a secrets file,
    never from a committed config.
    """

    backend: BackendType = Field(
        default="mongodb",
        description="Backend type",
    )
    url: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection URL",
    )
    database: str = Field(
        default="app",
        min_length=1,
        description="Database holding the revision collections",
    )
    max_pool_size: int = Field(
        default=10,
        gt=0,
        description="Maximum connections in the driver pool",
    )
    server_selection_timeout_ms: int = Field(
        default=30000,
        gt=0,
        description="How long to wait for a usable server (milliseconds)",
    )
    connect_timeout_ms: int = Field(
        default=20000,
        gt=0,
        description="Socket connect timeout (milliseconds)",
    )
    write_concern: int | Literal["majority"] = Field(
        default=1,
        description="Write concern 'w' applied to inserts",
    )
    app_name: str | None = Field(
        default=None,
        description="Client application name reported to the server",
    )
