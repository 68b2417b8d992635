"""
Activity tracking service for the PetTracker application.

This service keeps the app's live view of pet activity: the activity feed
(newest first, backed by DynamoDB) and the latest location update for each
pet (held in memory only).

Classes:
    ActivityTrackingService: Live activity feed and pet location tracking
"""

import logging
from datetime import timedelta
from typing import List, Optional

from ..models.activity import ActivityKind, ActivityRecord
from ..models.base import utcnow
from ..models.location import DEFAULT_STATUS, LocationUpdate
from .dynamodb_service import DynamoDBService

logger = logging.getLogger(__name__)


class ActivityTrackingService:
    """
    Live activity feed and pet location tracking.

    Attributes:
        db_service: DynamoDB service for activity persistence
        activities: Activity records, newest first
        location_updates: Latest location update per pet, newest first

    Example:
        >>> tracker = ActivityTrackingService()
        >>> tracker.load_activities()
        >>> tracker.add_activity("cat-1", "Bibi", ActivityKind.FEEDING)
        >>> tracker.update_location("cat-1", "Cat Suite")
        >>> tracker.current_location("cat-1").area
        'Cat Suite'
    """

    def __init__(self, db_service: Optional[DynamoDBService] = None):
        """
        Initialize the tracking service.

        Args:
            db_service: Optional DynamoDB service instance
        """
        self.db_service = db_service or DynamoDBService()
        self.activities: List[ActivityRecord] = []
        self.location_updates: List[LocationUpdate] = []

    def load_activities(self) -> List[ActivityRecord]:
        """
        Load the activity feed from storage.

        Seeds the sample activities when storage holds none, so a fresh
        install shows a populated feed.

        Returns:
            The loaded activity records, newest first
        """
        self.activities = self.db_service.get_all_activities()

        if not self.activities:
            logger.info("No stored activities, seeding sample activities")
            self.setup_sample_activities()

        return self.activities

    def setup_sample_activities(self) -> None:
        """Replace the feed with the sample activities and persist them."""
        now = utcnow()
        samples = [
            ActivityRecord(
                pet_id="cat-1",
                pet_name="Bibi",
                activity_type=ActivityKind.PLAYING,
                timestamp=now - timedelta(hours=1),
                location="Cat Play Room",
            ),
            ActivityRecord(
                pet_id="cat-1",
                pet_name="Bibi",
                activity_type=ActivityKind.FEEDING,
                timestamp=now - timedelta(hours=2),
                location="Gourmet Kitchen",
            ),
            ActivityRecord(
                pet_id="cat-2",
                pet_name="Dudu",
                activity_type=ActivityKind.RESTING,
                timestamp=now - timedelta(minutes=30),
                location="Cat Suite",
            ),
        ]

        for record in samples:
            self.db_service.save_activity(record)

        samples.sort(key=lambda r: r.timestamp, reverse=True)
        self.activities = samples

    def add_activity(
        self,
        pet_id: str,
        pet_name: str,
        activity_type: ActivityKind,
        location: Optional[str] = None,
        notes: Optional[str] = None,
        media_url: Optional[str] = None,
    ) -> ActivityRecord:
        """
        Log a new activity at the current time.

        The record is put at the front of the feed and saved. A failed save
        is logged; the record stays in the feed.

        Args:
            pet_id: Pet identifier
            pet_name: Pet display name
            activity_type: Kind of activity
            location: Optional place name
            notes: Optional notes
            media_url: Optional photo or video reference

        Returns:
            The new ActivityRecord
        """
        record = ActivityRecord(
            pet_id=pet_id,
            pet_name=pet_name,
            activity_type=activity_type,
            location=location,
            notes=notes,
            media_url=media_url,
        )
        self.activities.insert(0, record)

        if not self.db_service.save_activity(record):
            logger.error("Activity %s for pet %s was not persisted", record.id, pet_id)

        return record

    def activities_for_pet(self, pet_id: str) -> List[ActivityRecord]:
        """Return the feed entries for one pet, in feed order."""
        return [a for a in self.activities if a.pet_id == pet_id]

    def recent_activities(self, limit: int = 20) -> List[ActivityRecord]:
        """Return the first ``limit`` entries of the feed."""
        return self.activities[:limit]

    def update_location(
        self, pet_id: str, area: str, status: str = DEFAULT_STATUS
    ) -> LocationUpdate:
        """
        Record a new location for a pet.

        Any earlier update for the same pet is dropped, so the list holds at
        most one update per pet.

        Args:
            pet_id: Pet identifier
            area: Area or zone label
            status: Operational status text

        Returns:
            The new LocationUpdate
        """
        update = LocationUpdate(pet_id=pet_id, area=area, status=status)
        self.location_updates = [
            u for u in self.location_updates if u.pet_id != pet_id
        ]
        self.location_updates.insert(0, update)
        return update

    def current_location(self, pet_id: str) -> Optional[LocationUpdate]:
        """Return the latest location update for a pet, if any."""
        return next((u for u in self.location_updates if u.pet_id == pet_id), None)
