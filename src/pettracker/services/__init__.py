"""
Service layer for the PetTracker application.

Classes:
    ActivityTrackingService: Live activity feed and pet location tracking
    DynamoDBService: DynamoDB integration for activity persistence
"""

from .activity_tracking_service import ActivityTrackingService
from .dynamodb_service import DynamoDBService

__all__ = ["ActivityTrackingService", "DynamoDBService"]
