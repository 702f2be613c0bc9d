"""User API routes."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query, Request, Response, status

from users.dependencies import get_user_service
from users.exceptions import UserErrorKind, UserException
from users.services.user_service import UserService

router = APIRouter()


@router.get("", status_code=status.HTTP_200_OK)
async def get_users(
    email: str | None = Query(default=None),
    user_service: UserService = Depends(get_user_service),
) -> Any:
    """Get one user by email, or every user when no email is given."""
    if email:
        user = await user_service.fetch_user(email)
        if user is None:
            raise UserException(UserErrorKind.USER_DOES_NOT_EXIST, data={"email": email})
        return user.to_payload()

    users = await user_service.fetch_users()
    return [user.to_payload() for user in users]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    request: Request,
    user_service: UserService = Depends(get_user_service),
) -> dict[str, str]:
    user = await user_service.create_user(await request.body())
    return user.to_payload()


@router.put("", status_code=status.HTTP_200_OK)
async def update_user(
    request: Request,
    user_service: UserService = Depends(get_user_service),
) -> dict[str, str]:
    user = await user_service.update_user(await request.body())
    return user.to_payload()


@router.delete("", status_code=status.HTTP_200_OK)
async def delete_user(
    email: str = Query(default=""),
    user_service: UserService = Depends(get_user_service),
) -> Response:
    await user_service.delete_user(email)
    return Response(content="null", media_type="application/json")
