"""
Shared base model for the PetTracker records.

Both activity records and location updates are immutable, id-bearing value
types that travel between the app and its storage layer as JSON. This module
holds the pieces they have in common: id and timestamp defaults, the exchange
format helpers and the error raised when an exchange payload is malformed.

Classes:
    MalformedRecordError: Raised when a payload cannot be decoded into a record
    TrackedRecord: Frozen Pydantic base model for id-bearing records
"""

import json
import uuid
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, Tuple, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

RecordT = TypeVar("RecordT", bound="TrackedRecord")


class MalformedRecordError(ValueError):
    """
    Raised when an exchange-format payload does not describe a valid record.

    The original decoding error (JSON syntax error, Pydantic validation error,
    missing key) is chained as ``__cause__``.
    """


def generate_id() -> str:
    """Return a fresh random UUID4 string."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Return the current instant as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def resolve_id(v: Any) -> Any:
    """Return ``v`` unless it is None, in which case generate a new id."""
    if v is None:
        return generate_id()
    return v


def to_utc(v: datetime) -> datetime:
    """
    Convert a datetime to timezone-aware UTC.

    Naive values are taken to already be UTC. Stored timestamps are compared
    and sorted as ISO strings, so every record must carry the same offset.
    """
    if v.tzinfo is None or v.utcoffset() is None:
        return v.replace(tzinfo=timezone.utc)
    return v.astimezone(timezone.utc)


class TrackedRecord(BaseModel):
    """
    Frozen base model for records that carry an ``id`` and a ``timestamp``.

    Subclasses declare their fields with camelCase aliases; the aliases are the
    keys used in the exchange format while the snake_case names are used in
    Python code. Either spelling is accepted at construction time.

    Attributes:
        exchange_keys: Keys that must be present when decoding a payload.
            Keys with a construction default are listed here so decoding never
            fills a stored record with fresh defaults.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    exchange_keys: ClassVar[Tuple[str, ...]] = ("id", "timestamp")

    def replace(self: RecordT, **changes: Any) -> RecordT:
        """
        Build a replacement record carrying the same id.

        Records are never mutated in place; an update is a new record with the
        changed fields. The result is validated like any freshly built record.

        Args:
            **changes: Field values to change, by Python field name

        Returns:
            New record of the same type

        Raises:
            ValueError: If the changes try to assign a different id
        """
        if "id" in changes and changes["id"] != self.id:
            raise ValueError("A replacement record must keep the original id")

        data = self.model_dump()
        data.update(changes)
        return type(self).model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the record to its exchange-format dictionary.

        Keys are the camelCase exchange keys, the timestamp is an ISO 8601
        string and enum members are written as their string tags.
        """
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        """Serialize the record to exchange-format JSON text."""
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls: Type[RecordT], data: Any) -> RecordT:
        """
        Create a record from an exchange-format dictionary.

        Args:
            data: Mapping produced by ``to_dict`` or an equivalent source

        Returns:
            Record instance

        Raises:
            MalformedRecordError: If the payload is not a mapping, lacks a key
                listed in ``exchange_keys`` or fails validation
        """
        if not isinstance(data, Mapping):
            raise MalformedRecordError(
                f"{cls.__name__} payload must be an object, got {type(data).__name__}"
            )

        missing = [key for key in cls.exchange_keys if key not in data]
        if missing:
            raise MalformedRecordError(
                f"{cls.__name__} payload is missing {', '.join(missing)}"
            )

        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise MalformedRecordError(f"Invalid {cls.__name__} payload: {e}") from e

    @classmethod
    def from_json(cls: Type[RecordT], text: str) -> RecordT:
        """Create a record from exchange-format JSON text."""
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as e:
            raise MalformedRecordError(f"Invalid {cls.__name__} JSON: {e}") from e

        return cls.from_dict(data)

    def to_dynamodb_item(self) -> Dict[str, Any]:
        """
        Convert the record to a DynamoDB item.

        Items use the exchange keys so the table can be read by any client
        that understands the exchange format.
        """
        return self.to_dict()

    @classmethod
    def from_dynamodb_item(cls: Type[RecordT], item: Dict[str, Any]) -> RecordT:
        """
        Create a record from a DynamoDB item.

        Raises:
            MalformedRecordError: If the stored item is not a valid record
        """
        return cls.from_dict(item)
