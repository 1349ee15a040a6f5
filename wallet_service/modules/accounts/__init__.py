"""Account domain services and models."""

from .exceptions import AccountError, UserAlreadyExistsError
from .models import AccessToken, User, UserSummary
from .repository import UserRepository
from .service import AuthService

__all__ = [
    "AccessToken",
    "AccountError",
    "AuthService",
    "User",
    "UserAlreadyExistsError",
    "UserRepository",
    "UserSummary",
]
