"""User resource service."""

from __future__ import annotations

import logging

from users.codec import (
    RecordCodecError,
    decode_user_body,
    marshal_user,
    unmarshal_user,
    unmarshal_users,
    user_key,
)
from users.exceptions import ConditionFailedError, StoreError, UserErrorKind, UserException
from users.interfaces.user_store import UserStore, WriteCondition
from users.schemas import User
from users.validators import is_email_valid

logger = logging.getLogger(__name__)


class UserService:
    """
    Fetch, list, create, update and delete users in one table.

    The service keeps no state between calls beyond its store and table name.
    Create and update check existence with a read, then write with a store
    condition so a concurrent writer cannot slip in between the two calls.
    """

    def __init__(self, user_store: UserStore, table_name: str) -> None:
        if not table_name:
            raise ValueError("table_name must not be empty")
        self._users = user_store
        self._table_name = table_name

    async def fetch_user(self, email: str) -> User | None:
        """Return the user stored under email, or None when absent."""
        try:
            item = await self._users.get_item(self._table_name, user_key(email))
        except StoreError as exc:
            raise UserException(UserErrorKind.FETCH_FAILED, data={"email": email}) from exc

        try:
            user = unmarshal_user(item)
        except RecordCodecError as exc:
            logger.error(f"Stored record for {email} is malformed: {exc}")
            raise UserException(UserErrorKind.UNMARSHAL_FAILED, data={"email": email}) from exc

        return user if user.email else None

    async def fetch_users(self) -> list[User]:
        try:
            items = await self._users.scan(self._table_name)
        except StoreError as exc:
            raise UserException(UserErrorKind.FETCH_FAILED) from exc

        try:
            return unmarshal_users(items)
        except RecordCodecError as exc:
            logger.error(f"Scan of {self._table_name} returned a malformed record: {exc}")
            raise UserException(UserErrorKind.UNMARSHAL_FAILED) from exc

    async def create_user(self, body: str | bytes | None) -> User:
        user = self._decode(body)

        if not is_email_valid(user.email):
            raise UserException(UserErrorKind.INVALID_EMAIL, data={"email": user.email})

        if await self.fetch_user(user.email) is not None:
            raise UserException(UserErrorKind.USER_ALREADY_EXISTS, data={"email": user.email})

        try:
            await self._put(user, WriteCondition.ABSENT)
        except ConditionFailedError as exc:
            raise UserException(UserErrorKind.USER_ALREADY_EXISTS, data={"email": user.email}) from exc

        logger.info(f"Created user {user.email}")
        return user

    async def update_user(self, body: str | bytes | None) -> User:
        user = self._decode(body)
        if not user.email:
            raise UserException(UserErrorKind.INVALID_USER_DATA)

        if await self.fetch_user(user.email) is None:
            raise UserException(UserErrorKind.USER_DOES_NOT_EXIST, data={"email": user.email})

        try:
            await self._put(user, WriteCondition.PRESENT)
        except ConditionFailedError as exc:
            raise UserException(UserErrorKind.USER_DOES_NOT_EXIST, data={"email": user.email}) from exc

        logger.info(f"Updated user {user.email}")
        return user

    async def delete_user(self, email: str) -> None:
        """Delete the user stored under email. Deleting an absent user succeeds."""
        if not email:
            raise UserException(UserErrorKind.INVALID_USER_DATA)
        try:
            await self._users.delete_item(self._table_name, user_key(email))
        except StoreError as exc:
            raise UserException(UserErrorKind.DELETE_FAILED, data={"email": email}) from exc
        logger.info(f"Deleted user {email}")

    def _decode(self, body: str | bytes | None) -> User:
        try:
            return decode_user_body(body)
        except RecordCodecError as exc:
            logger.warning(f"Rejected user body: {exc}")
            raise UserException(UserErrorKind.INVALID_USER_DATA) from exc

    async def _put(self, user: User, condition: WriteCondition) -> None:
        try:
            item = marshal_user(user)
        except RecordCodecError as exc:
            raise UserException(UserErrorKind.MARSHAL_FAILED, data={"email": user.email}) from exc

        try:
            await self._users.put_item(self._table_name, item, condition)
        except ConditionFailedError:
            raise
        except StoreError as exc:
            raise UserException(UserErrorKind.PUT_FAILED, data={"email": user.email}) from exc
