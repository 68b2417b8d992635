"""
DynamoDB service for the PetTracker application.

This service stores and retrieves pet activity records in DynamoDB. Items are
written in the exchange format so the table can be shared with other clients
of the app.

Classes:
    DynamoDBService: Service for DynamoDB operations and data persistence
"""

import logging
import os
from typing import List, Optional

import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError, NoCredentialsError

from ..models.activity import ActivityRecord
from ..models.base import MalformedRecordError

logger = logging.getLogger(__name__)

TABLE_ENV_VAR = "PET_ACTIVITIES_TABLE"
PET_INDEX_NAME = "PetIdTimestampIndex"


class DynamoDBService:
    """
    Service for managing PetTracker activity records in DynamoDB.

    The table is keyed by ``id`` and has a global secondary index on
    ``petId`` / ``timestamp`` for per-pet history queries.

    Attributes:
        table_name: Name of the DynamoDB table
        dynamodb: Boto3 DynamoDB resource
        table: DynamoDB table resource

    Example:
        >>> db_service = DynamoDBService()
        >>> record = ActivityRecord(...)
        >>> db_service.save_activity(record)
        >>> retrieved = db_service.get_activity(record.id)
    """

    def __init__(self, table_name: Optional[str] = None):
        """
        Initialize the DynamoDB service.

        Args:
            table_name: Optional table name override, uses env var if not provided

        Raises:
            ValueError: If no table name is configured or the table is missing
            NoCredentialsError: If AWS credentials are not configured
        """
        self.table_name = table_name or os.getenv(TABLE_ENV_VAR)

        if not self.table_name:
            raise ValueError(
                f"Table name must be provided either as parameter or {TABLE_ENV_VAR} environment variable"
            )

        try:
            self.dynamodb = boto3.resource("dynamodb")
            self.table = self.dynamodb.Table(self.table_name)

            # Fails fast if the table does not exist
            self.table.load()

        except NoCredentialsError:
            logger.error("AWS credentials not found for table %s", self.table_name)
            raise
        except ClientError as e:
            if e.response["Error"]["Code"] == "ResourceNotFoundException":
                raise ValueError(
                    f"DynamoDB table '{self.table_name}' not found"
                ) from e
            raise

    def save_activity(self, record: ActivityRecord) -> bool:
        """
        Save an activity record to DynamoDB.

        Saving a record whose id already exists replaces the stored item,
        which is how record updates are persisted.

        Args:
            record: Activity record to save

        Returns:
            True if save successful, False otherwise
        """
        try:
            response = self.table.put_item(Item=record.to_dynamodb_item())
            return response["ResponseMetadata"]["HTTPStatusCode"] == 200

        except ClientError as e:
            logger.error("Error saving activity %s: %s", record.id, e)
            return False

    def get_activity(self, activity_id: str) -> Optional[ActivityRecord]:
        """
        Retrieve an activity record by ID.

        Args:
            activity_id: Unique activity identifier

        Returns:
            ActivityRecord if found, None otherwise

        Raises:
            MalformedRecordError: If the stored item is not a valid record
        """
        try:
            response = self.table.get_item(Key={"id": activity_id})
        except ClientError as e:
            logger.error("Error retrieving activity %s: %s", activity_id, e)
            return None

        if "Item" not in response:
            return None

        return ActivityRecord.from_dynamodb_item(response["Item"])

    def get_activities_for_pet(
        self, pet_id: str, limit: int = 50
    ) -> List[ActivityRecord]:
        """
        Retrieve activity records for one pet, newest first.

        Args:
            pet_id: Pet identifier to query
            limit: Maximum number of records to return

        Returns:
            List of ActivityRecord objects
        """
        try:
            response = self.table.query(
                IndexName=PET_INDEX_NAME,
                KeyConditionExpression=Key("petId").eq(pet_id),
                ScanIndexForward=False,
                Limit=limit,
            )
        except ClientError as e:
            logger.error("Error querying activities for pet %s: %s", pet_id, e)
            return []

        return self._items_to_records(response.get("Items", []))

    def get_all_activities(self) -> List[ActivityRecord]:
        """
        Retrieve every stored activity record, newest first.

        Follows scan pagination until the whole table has been read.

        Returns:
            List of ActivityRecord objects
        """
        items = []
        scan_kwargs = {}

        try:
            while True:
                response = self.table.scan(**scan_kwargs)
                items.extend(response.get("Items", []))

                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                scan_kwargs["ExclusiveStartKey"] = last_key

        except ClientError as e:
            logger.error("Error scanning activities: %s", e)
            return []

        records = self._items_to_records(items)
        records.sort(key=lambda r: r.timestamp, reverse=True)
        return records

    def delete_activity(self, activity_id: str) -> bool:
        """
        Delete an activity record.

        Args:
            activity_id: ID of record to delete

        Returns:
            True if an item existed and was deleted, False otherwise
        """
        try:
            response = self.table.delete_item(
                Key={"id": activity_id}, ReturnValues="ALL_OLD"
            )
            return "Attributes" in response

        except ClientError as e:
            logger.error("Error deleting activity %s: %s", activity_id, e)
            return False

    @staticmethod
    def _items_to_records(items) -> List[ActivityRecord]:
        records = []
        for item in items:
            try:
                records.append(ActivityRecord.from_dynamodb_item(item))
            except MalformedRecordError as e:
                logger.warning("Skipping malformed activity item %s: %s", item.get("id"), e)
        return records
