"""
FastAPI application for the users resource.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.users import router as users_router
from users.config import settings
from users.exceptions import UserException
from users.handlers import status_for
from users.logging_config import configure_logging
from users.schemas import ErrorResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown."""
    configure_logging(settings.LOG_LEVEL)
    logger.info(f"Serving users table {settings.USERS_TABLE} from {settings.USER_STORE} store")
    yield


async def user_exception_handler(request: Request, exc: UserException) -> JSONResponse:
    """Map classified user failures to their HTTP status and an error body."""
    status_code = status_for(exc.kind)
    if status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc.message}",
            exc_info=exc.__cause__,
        )
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=exc.message).model_dump())


app = FastAPI(
    title="Users API",
    description="CRUD API for user records",
    lifespan=lifespan,
)

app.add_exception_handler(UserException, user_exception_handler)

app.include_router(users_router, prefix="/api/v1/users", tags=["users"])
