"""
Data models for the PetTracker application.

This module contains the Pydantic models for the records the app logs about
pets: activity records with their fixed display metadata and location updates.

Classes:
    ActivityKind: Enum for the kinds of pet activity
    ActivityRecord: Model representing a logged pet activity
    LocationUpdate: Model representing a pet location/status ping
    MalformedRecordError: Raised when an exchange payload cannot be decoded
"""

from .activity import ActivityKind, ActivityRecord, color_for, color_hex_for, icon_for
from .base import MalformedRecordError
from .location import LocationUpdate

__all__ = [
    "ActivityKind",
    "ActivityRecord",
    "LocationUpdate",
    "MalformedRecordError",
    "color_for",
    "color_hex_for",
    "icon_for",
]
