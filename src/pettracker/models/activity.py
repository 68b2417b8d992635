"""
Pet activity data model for the PetTracker application.

This module defines the ActivityRecord model and the closed set of activity
kinds it can carry. Each kind has fixed display metadata (an SF Symbol icon
name and a palette color token) that the presentation layer reads to render
activity badges.

Classes:
    ActivityKind: Enum of the pet activities that can be logged
    ActivityRecord: Immutable Pydantic model for one logged activity

Functions:
    icon_for: Icon name for an activity kind
    color_for: Color token for an activity kind
    color_hex_for: Palette hex value for an activity kind
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import Field, field_validator

from .base import TrackedRecord, resolve_id, to_utc, utcnow


class ActivityKind(str, Enum):
    """
    Enumeration of the pet activities that can be logged.

    The values are the stable tags written to the exchange format and to
    storage, so they must never change.
    """

    FEEDING = "Feeding"
    PLAYING = "Playing"
    RESTING = "Resting"
    GROOMING = "Grooming"
    WALKING = "Walking"
    SOCIALIZING = "Socializing"

    @property
    def icon(self) -> str:
        """SF Symbol name used for this kind's badge."""
        return icon_for(self)

    @property
    def color(self) -> str:
        """Palette color token used for this kind's badge."""
        return color_for(self)


ACTIVITY_ICONS: Dict[ActivityKind, str] = {
    ActivityKind.FEEDING: "fork.knife",
    ActivityKind.PLAYING: "figure.run",
    ActivityKind.RESTING: "moon.zzz.fill",
    ActivityKind.GROOMING: "shower.fill",
    ActivityKind.WALKING: "figure.walk",
    ActivityKind.SOCIALIZING: "person.2.fill",
}

ACTIVITY_COLORS: Dict[ActivityKind, str] = {
    ActivityKind.FEEDING: "primary-600",
    ActivityKind.PLAYING: "success",
    ActivityKind.RESTING: "info",
    ActivityKind.GROOMING: "primary",
    ActivityKind.WALKING: "warning",
    ActivityKind.SOCIALIZING: "primary-700",
}

# App palette, keyed by color token
PALETTE: Dict[str, str] = {
    "primary": "#D4A5A5",
    "primary-600": "#C08B8B",
    "primary-700": "#A67373",
    "success": "#7A9A82",
    "warning": "#D4A574",
    "info": "#8FA5B8",
}


def icon_for(kind: Union[ActivityKind, str]) -> str:
    """
    Return the icon name for an activity kind.

    Args:
        kind: ActivityKind member or its string tag

    Returns:
        SF Symbol name, e.g. ``"figure.walk"``

    Raises:
        ValueError: If a string tag is not one of the known kinds
    """
    return ACTIVITY_ICONS[ActivityKind(kind)]


def color_for(kind: Union[ActivityKind, str]) -> str:
    """
    Return the color token for an activity kind.

    Args:
        kind: ActivityKind member or its string tag

    Returns:
        Palette token, e.g. ``"warning"``

    Raises:
        ValueError: If a string tag is not one of the known kinds
    """
    return ACTIVITY_COLORS[ActivityKind(kind)]


def color_hex_for(kind: Union[ActivityKind, str]) -> str:
    """Return the palette hex value behind an activity kind's color token."""
    return PALETTE[color_for(kind)]


class ActivityRecord(TrackedRecord):
    """
    Pydantic model representing one logged pet activity.

    Records are frozen once built. Construction performs type checks only;
    content rules such as non-empty names are left to the caller.

    Attributes:
        id: Unique identifier (random UUID4 string when not supplied)
        pet_id: Identifier of the pet the activity belongs to
        pet_name: Display name of the pet at logging time
        activity_type: Kind of activity (ActivityKind enum)
        timestamp: When the activity happened (defaults to now, UTC)
        location: Optional free-text place name
        notes: Optional free-text notes
        media_url: Optional photo or video reference

    Example:
        >>> record = ActivityRecord(
        ...     pet_id="cat-1",
        ...     pet_name="Bibi",
        ...     activity_type=ActivityKind.PLAYING,
        ...     location="Cat Play Room",
        ... )
        >>> record.activity_type.icon
        'figure.run'
    """

    id: str = Field(
        default=None, validate_default=True, description="Unique activity identifier"
    )
    pet_id: str = Field(..., alias="petId", description="Pet identifier")
    pet_name: str = Field(..., alias="petName", description="Pet display name")
    activity_type: ActivityKind = Field(
        ..., alias="activityType", description="Type of activity"
    )
    timestamp: datetime = Field(default_factory=utcnow, description="Activity time")
    location: Optional[str] = Field(None, description="Where the activity happened")
    notes: Optional[str] = Field(None, description="Free-text notes")
    media_url: Optional[str] = Field(
        None, alias="mediaURL", description="Photo or video reference"
    )

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
