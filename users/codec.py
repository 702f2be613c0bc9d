"""
Conversion between wire, model and stored representations of a user.

Wire format is a JSON object with ``email``, ``firstName`` and ``lastName``.
Stored format is a DynamoDB attribute-value map, e.g.::

    {"email": {"S": "a@b.co"}, "firstName": {"S": "A"}, "lastName": {"S": "B"}}
"""

from __future__ import annotations

from typing import Any

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer
from pydantic import ValidationError

from users.schemas import User

USER_KEY = "email"

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()


class RecordCodecError(ValueError):
    """Raised when a user cannot be converted to or from a stored item."""


def decode_user_body(body: str | bytes | None) -> User:
    """Decode a JSON request body into a User."""
    if not body:
        raise RecordCodecError("Request body is empty")
    try:
        return User.model_validate_json(body)
    except ValidationError as exc:
        raise RecordCodecError(str(exc)) from exc


def marshal_user(user: User) -> dict[str, dict[str, Any]]:
    """Encode a User as a DynamoDB attribute-value map."""
    try:
        return {
            name: _serializer.serialize(value)
            for name, value in user.to_payload().items()
        }
    except (TypeError, ValueError) as exc:
        raise RecordCodecError(f"Cannot marshal user: {exc}") from exc


def unmarshal_user(item: dict[str, Any] | None) -> User:
    """
    Decode a DynamoDB attribute-value map into a User.

    An empty or missing item decodes to a User with an empty email, which
    callers treat as "record absent".
    """
    if not item:
        return User()
    try:
        plain = {name: _deserializer.deserialize(value) for name, value in item.items()}
        return User.model_validate(plain)
    except (TypeError, ValueError, AttributeError) as exc:
        raise RecordCodecError(f"Cannot unmarshal user: {exc}") from exc


def unmarshal_users(items: list[dict[str, Any]]) -> list[User]:
    return [unmarshal_user(item) for item in items]


def user_key(email: str) -> dict[str, dict[str, str]]:
    """Build the store key for a user email."""
    return {USER_KEY: {"S": email}}
