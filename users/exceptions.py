"""User resource exceptions."""

from __future__ import annotations

from enum import StrEnum


class UserErrorKind(StrEnum):
    """Classified failures of the user resource operations."""

    INVALID_USER_DATA = "invalid user data"
    INVALID_EMAIL = "invalid email"
    USER_ALREADY_EXISTS = "user already exists"
    USER_DOES_NOT_EXIST = "user does not exist"

    FETCH_FAILED = "failed to fetch record"
    UNMARSHAL_FAILED = "failed to unmarshal record"
    MARSHAL_FAILED = "could not marshal item"
    PUT_FAILED = "could not dynamo put item"
    DELETE_FAILED = "could not delete item"


class UserException(Exception):
    """User operation failure with its kind and optional data."""

    def __init__(self, kind: UserErrorKind, data: dict | None = None):
        self.kind = kind
        self.message = str(kind)
        self.data = data or {}
        super().__init__(self.message)


class StoreError(Exception):
    """Raised by a store when the underlying table call fails."""


class ConditionFailedError(StoreError):
    """Raised by a store when a conditional write is rejected."""
