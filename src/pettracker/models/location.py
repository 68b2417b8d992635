"""
Pet location data model for the PetTracker application.

Classes:
    LocationUpdate: Immutable Pydantic model for one location/status ping
"""

from datetime import datetime
from typing import Any, ClassVar, Tuple

from pydantic import Field, field_validator

from .base import TrackedRecord, resolve_id, to_utc, utcnow

DEFAULT_STATUS = "Active"


class LocationUpdate(TrackedRecord):
    """
    Pydantic model representing where a pet currently is.

    ``status`` is free-form operational text ("Active", "Resting",
    "Left area", ...) rather than an enum.

    Attributes:
        id: Unique identifier (random UUID4 string when not supplied)
        pet_id: Identifier of the pet, never empty
        area: Free-text area or zone label
        timestamp: When the update was taken (defaults to now, UTC)
        status: Operational status text (defaults to "Active")
    """

    exchange_keys: ClassVar[Tuple[str, ...]] = ("id", "timestamp", "status")

    id: str = Field(
        default=None,
        validate_default=True,
        min_length=1,
        description="Unique update identifier",
    )
    pet_id: str = Field(..., alias="petId", min_length=1, description="Pet identifier")
    area: str = Field(..., description="Area or zone label")
    timestamp: datetime = Field(default_factory=utcnow, description="Update time")
    status: str = Field(DEFAULT_STATUS, description="Operational status")

    @field_validator("id", mode="before")
    @classmethod
    def generate_id(cls, v: Any) -> Any:
        """Generate a UUID4 id if one was not provided."""
        return resolve_id(v)

    @field_validator("timestamp")
    @classmethod
    def normalize_timestamp(cls, v: datetime) -> datetime:
        """Store the timestamp as UTC, treating naive values as UTC."""
        return to_utc(v)
