"""
Request dispatch for API Gateway proxy events.

Routes an event to a UserService operation by HTTP method and wraps the
result, or the classified failure, in a JSON response envelope.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from users.exceptions import UserErrorKind, UserException
from users.schemas import ErrorResponse
from users.services.user_service import UserService

logger = logging.getLogger(__name__)

ERROR_METHOD_NOT_ALLOWED = "method not allowed"

STATUS_BY_KIND: dict[UserErrorKind, int] = {
    UserErrorKind.INVALID_USER_DATA: 400,
    UserErrorKind.INVALID_EMAIL: 400,
    UserErrorKind.USER_DOES_NOT_EXIST: 404,
    UserErrorKind.USER_ALREADY_EXISTS: 409,
    UserErrorKind.FETCH_FAILED: 500,
    UserErrorKind.UNMARSHAL_FAILED: 500,
    UserErrorKind.MARSHAL_FAILED: 500,
    UserErrorKind.PUT_FAILED: 500,
    UserErrorKind.DELETE_FAILED: 500,
}


def status_for(kind: UserErrorKind) -> int:
    return STATUS_BY_KIND.get(kind, 500)


def api_response(status: int, body: Any) -> dict[str, Any]:
    """Build an API Gateway proxy response with a JSON body."""
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def error_response(exc: UserException) -> dict[str, Any]:
    return api_response(status_for(exc.kind), ErrorResponse(error=exc.message).model_dump())


def _query_param(event: dict[str, Any], name: str) -> str | None:
    params = event.get("queryStringParameters") or {}
    return params.get(name)


async def get_user(event: dict[str, Any], service: UserService) -> dict[str, Any]:
    email = _query_param(event, "email")
    if email:
        user = await service.fetch_user(email)
        if user is None:
            raise UserException(UserErrorKind.USER_DOES_NOT_EXIST, data={"email": email})
        return api_response(200, user.to_payload())

    users = await service.fetch_users()
    return api_response(200, [user.to_payload() for user in users])


async def create_user(event: dict[str, Any], service: UserService) -> dict[str, Any]:
    user = await service.create_user(event.get("body"))
    return api_response(201, user.to_payload())


async def update_user(event: dict[str, Any], service: UserService) -> dict[str, Any]:
    user = await service.update_user(event.get("body"))
    return api_response(200, user.to_payload())


async def delete_user(event: dict[str, Any], service: UserService) -> dict[str, Any]:
    await service.delete_user(_query_param(event, "email") or "")
    return api_response(200, None)


_ROUTES = {
    "GET": get_user,
    "POST": create_user,
    "PUT": update_user,
    "DELETE": delete_user,
}


async def dispatch(event: dict[str, Any], service: UserService) -> dict[str, Any]:
    """Handle one API Gateway proxy event."""
    method = (event.get("httpMethod") or "").upper()
    route = _ROUTES.get(method)
    if route is None:
        logger.warning(f"Unhandled method: {method or '<missing>'}")
        return api_response(405, ErrorResponse(error=ERROR_METHOD_NOT_ALLOWED).model_dump())

    try:
        return await route(event, service)
    except UserException as exc:
        logger.info(f"{method} failed: {exc.message}")
        return error_response(exc)
