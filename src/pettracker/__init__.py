"""
PetTracker: pet activity and location records for a pet-care app.

This package provides the immutable records the app logs about pets, their
JSON exchange format, and a DynamoDB-backed activity feed.

Modules:
    models: Data models and serialization using Pydantic
    services: Activity tracking and DynamoDB persistence
"""

__version__ = "0.1.0"

from .models import (
    ActivityKind,
    ActivityRecord,
    LocationUpdate,
    MalformedRecordError,
    color_for,
    color_hex_for,
    icon_for,
)
from .services import ActivityTrackingService, DynamoDBService

__all__ = [
    "ActivityKind",
    "ActivityRecord",
    "LocationUpdate",
    "MalformedRecordError",
    "color_for",
    "color_hex_for",
    "icon_for",
    "ActivityTrackingService",
    "DynamoDBService",
]
