"""User service wiring."""

from __future__ import annotations

from users.config import Settings, settings
from users.interfaces.user_store import UserStore
from users.services.user_service import UserService
from users.stores.dynamodb_store import DynamoDBUserStore
from users.stores.memory_store import MemoryUserStore


_memory_user_store = MemoryUserStore()
_dynamodb_user_store: DynamoDBUserStore | None = None


def get_user_store(config: Settings = settings) -> UserStore:
    """Get the user store selected by USER_STORE config."""
    if config.USER_STORE == "dynamodb":
        global _dynamodb_user_store
        if _dynamodb_user_store is None:
            _dynamodb_user_store = DynamoDBUserStore(
                region_name=config.AWS_REGION,
                endpoint_url=config.DYNAMODB_ENDPOINT_URL,
            )
        return _dynamodb_user_store
    # Fallback to memory store for development/testing
    return _memory_user_store


def get_user_service() -> UserService:
    return UserService(user_store=get_user_store(), table_name=settings.USERS_TABLE)
