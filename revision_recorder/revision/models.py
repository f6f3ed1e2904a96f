"""RecordUpdate model and capture-time helpers."""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


def to_milliseconds(moment: datetime) -> datetime:
    """Truncate a datetime to whole milliseconds in UTC.

    BSON datetimes carry millisecond precision; truncating with integer
    arithmetic keeps the stored value identical to the one we built.
    Naive datetimes are taken to be UTC already.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    else:
        moment = moment.astimezone(UTC)
    return moment.replace(microsecond=moment.microsecond // 1000 * 1000)


class RecordUpdate(BaseModel):
    """One committed update, as handed over by the host's update pipeline.

    The recorder only ever sees the record's pre-update values; the live
    record is never read.
    """

    model_config = ConfigDict(frozen=True)

    previous_attributes: dict[str, Any] = Field(
        ..., description="Field values before the update was applied"
    )
    owner_id: Any = Field(..., description="Record identity (scalar or composite)")
    owner_model: str = Field(..., min_length=1, description="Record type name")
    primary_key: tuple[str, ...] | None = Field(
        default=None, description="Names of the record's key fields, if known"
    )
    acting_user: Any | None = Field(
        default=None, description="Authenticated non-guest user, if any"
    )
