"""SQLAlchemy-backed repository implementations."""

from .user_repository import SqlUserRepository
from .wallet_repository import SqlWalletRepository

__all__ = [
    "SqlUserRepository",
    "SqlWalletRepository",
]
