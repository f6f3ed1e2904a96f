"""Revision capture configuration models."""

from typing import Any

from pydantic import BaseModel, Field, model_validator


class RevisionConfig(BaseModel):
    """Where revisions of one record type go and how they are tagged."""

    connection: str = Field(
        default="mongodb",
        min_length=1,
        description="Name of the connection binding to write through",
    )
    collection: str = Field(
        default="revision",
        min_length=1,
        description="Collection that receives revision documents",
    )
    owner_id_field: str = Field(
        default="ownerId",
        min_length=1,
        description="Field receiving the record's identity",
    )
    owner_model_field: str = Field(
        default="ownerModel",
        min_length=1,
        description="Field receiving the record's type name",
    )
    revision_date_field: str = Field(
        default="revisionDate",
        min_length=1,
        description="Field receiving the capture timestamp (UTC)",
    )
    revision_user_field: str = Field(
        default="revisionUser",
        min_length=1,
        description="Field receiving the acting user's identity",
    )
    native_id_field: str = Field(
        default="_id",
        min_length=1,
        description="Identity field reserved by the history store",
    )

    @model_validator(mode="after")
    def _check_distinct_fields(self) -> "RevisionConfig":
        names = self.enrichment_fields()
        if len(set(names)) != len(names):
            raise ValueError(f"Enrichment field names must be distinct: {names}")
        if self.native_id_field in names:
            raise ValueError(
                f"Enrichment field cannot use the native id field '{self.native_id_field}'"
            )
        return self

    def enrichment_fields(self) -> list[str]:
        """Return the four enrichment field names in write order."""
        return [
            self.owner_id_field,
            self.owner_model_field,
            self.revision_date_field,
            self.revision_user_field,
        ]


class RevisionOverride(BaseModel):
    """Partial RevisionConfig for a single record type.

    Only the fields set here replace the defaults.
    """

    connection: str | None = None
    collection: str | None = None
    owner_id_field: str | None = None
    owner_model_field: str | None = None
    revision_date_field: str | None = None
    revision_user_field: str | None = None
    native_id_field: str | None = None


class RevisionSettings(BaseModel):
    """Revision defaults plus per-model overrides."""

    defaults: RevisionConfig = Field(
        default_factory=RevisionConfig,
        description="Configuration used by every record type",
    )
    models: dict[str, RevisionOverride] = Field(
        default_factory=dict,
        description="Per-model overrides keyed by record type name",
    )
    disabled_models: list[str] = Field(
        default_factory=list,
        description="Record types whose updates are not recorded",
    )

    def config_for(self, model: str) -> RevisionConfig:
        """Resolve the effective configuration for a record type."""
        override = self.models.get(model)
        if override is None:
            return self.defaults

        merged: dict[str, Any] = self.defaults.model_dump()
        merged.update(override.model_dump(exclude_none=True))
        return RevisionConfig.model_validate(merged)

    def is_enabled(self, model: str) -> bool:
        """Whether updates of this record type should be recorded."""
        return model not in self.disabled_models
