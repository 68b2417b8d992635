"""
Pytest configuration and shared fixtures for PetTracker tests.

This module sets up mocked AWS services and common test data used across the
test modules.

Fixtures:
    mock_dynamodb_table: Mocked DynamoDB activity table
    dynamodb_service: DynamoDBService bound to the mocked table
    tracking_service: ActivityTrackingService backed by the mocked table
    sample_records: Collection of test activity records
"""

import os
from datetime import datetime, timedelta, timezone
from typing import List

import boto3
import pytest
from moto import mock_aws

from pettracker.models.activity import ActivityKind, ActivityRecord
from pettracker.services.activity_tracking_service import ActivityTrackingService
from pettracker.services.dynamodb_service import DynamoDBService


# Test configuration constants
TEST_TABLE_NAME = "test-pet-activities-table"
TEST_PET_ID = "cat-1"


@pytest.fixture(scope="session")
def aws_credentials():
    """
    Fixture to set up AWS credentials for testing.

    These are fake credentials picked up by moto; nothing reaches AWS.
    """
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"


@pytest.fixture
def mock_dynamodb_table(aws_credentials):
    """
    Fixture that creates a mocked DynamoDB activity table.

    The table is keyed by ``id`` with a ``petId``/``timestamp`` index, the
    same layout DynamoDBService expects.

    Returns:
        boto3.resource.Table: Mocked DynamoDB table resource
    """
    with mock_aws():
        dynamodb = boto3.resource("dynamodb", region_name="us-east-1")

        table = dynamodb.create_table(
            TableName=TEST_TABLE_NAME,
            KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
            AttributeDefinitions=[
                {"AttributeName": "id", "AttributeType": "S"},
                {"AttributeName": "petId", "AttributeType": "S"},
                {"AttributeName": "timestamp", "AttributeType": "S"},
            ],
            GlobalSecondaryIndexes=[
                {
                    "IndexName": "PetIdTimestampIndex",
                    "KeySchema": [
                        {"AttributeName": "petId", "KeyType": "HASH"},
                        {"AttributeName": "timestamp", "KeyType": "RANGE"},
                    ],
                    "Projection": {"ProjectionType": "ALL"},
                }
            ],
            BillingMode="PAY_PER_REQUEST",
        )

        table.wait_until_exists()
        yield table


@pytest.fixture
def dynamodb_service(mock_dynamodb_table):
    """Fixture that provides a DynamoDBService bound to the mocked table."""
    return DynamoDBService(table_name=TEST_TABLE_NAME)


@pytest.fixture
def tracking_service(dynamodb_service):
    """Fixture that provides an ActivityTrackingService backed by the mocked table."""
    return ActivityTrackingService(db_service=dynamodb_service)


@pytest.fixture
def sample_records() -> List[ActivityRecord]:
    """
    Fixture that provides a collection of sample activity records.

    Two pets, distinct kinds and timestamps an hour apart.

    Returns:
        List[ActivityRecord]: Sample records, oldest first
    """
    base_time = datetime(2024, 1, 15, 8, 0, 0, tzinfo=timezone.utc)

    return [
        ActivityRecord(
            pet_id=TEST_PET_ID,
            pet_name="Bibi",
            activity_type=ActivityKind.FEEDING,
            timestamp=base_time,
            location="Gourmet Kitchen",
        ),
        ActivityRecord(
            pet_id=TEST_PET_ID,
            pet_name="Bibi",
            activity_type=ActivityKind.PLAYING,
            timestamp=base_time + timedelta(hours=1),
            location="Cat Play Room",
            notes="Chased the feather wand",
        ),
        ActivityRecord(
            pet_id="dog-1",
            pet_name="Rex",
            activity_type=ActivityKind.WALKING,
            timestamp=base_time + timedelta(hours=2),
            media_url="media/rex-walk.mp4",
        ),
    ]


def create_test_record(**kwargs) -> ActivityRecord:
    """
    Create a test activity record with default values.

    Args:
        **kwargs: ActivityRecord field overrides

    Returns:
        ActivityRecord: Test record
    """
    defaults = {
        "pet_id": TEST_PET_ID,
        "pet_name": "Bibi",
        "activity_type": ActivityKind.GROOMING,
    }

    defaults.update(kwargs)
    return ActivityRecord(**defaults)
