"""AWS Lambda entry point for the users API."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from users.config import settings
from users.dependencies import get_user_service
from users.handlers import dispatch
from users.logging_config import configure_logging
from users.services.user_service import UserService

logger = logging.getLogger(__name__)

_service: UserService | None = None
_loop: asyncio.AbstractEventLoop | None = None


def _get_service() -> UserService:
    global _service
    if _service is None:
        configure_logging(settings.LOG_LEVEL)
        _service = get_user_service()
        logger.info(
            f"User service ready (store={settings.USER_STORE}, table={settings.USERS_TABLE}, "
            f"region={settings.AWS_REGION})"
        )
    return _service


def _get_loop() -> asyncio.AbstractEventLoop:
    """Return the container event loop, reused across invocations."""
    global _loop
    if _loop is None or _loop.is_closed():
        _loop = asyncio.new_event_loop()
    return _loop


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Lambda handler for API Gateway proxy integration."""
    return _get_loop().run_until_complete(dispatch(event, _get_service()))
