"""
User resource module.

Provides the User model, the store Protocol with DynamoDB and in-memory
implementations, and the service that enforces the resource lifecycle.
"""

from users.exceptions import UserErrorKind, UserException
from users.schemas import User
from users.services.user_service import UserService

__all__ = ["User", "UserErrorKind", "UserException", "UserService"]
