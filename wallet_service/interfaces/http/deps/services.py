"""Service dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from wallet_service.modules.accounts import AuthService
from wallet_service.modules.wallets import WalletService

from .database import get_db_session


def get_auth_service(db: AsyncSession = Depends(get_db_session)) -> AuthService:
    return AuthService.with_session(db)


def get_wallet_service(db: AsyncSession = Depends(get_db_session)) -> WalletService:
    return WalletService.with_session(db)


__all__ = [
    "get_auth_service",
    "get_wallet_service",
]
