"""Reusable FastAPI dependencies."""

from .database import get_db_session
from .services import get_auth_service, get_wallet_service

__all__ = [
    "get_db_session",
    "get_auth_service",
    "get_wallet_service",
]
