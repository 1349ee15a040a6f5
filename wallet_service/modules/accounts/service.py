"""Registration and login use cases."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from wallet_service.core.config import get_settings
from wallet_service.core.crypto import hash_password, password_too_long, verify_password
from wallet_service.core.security import create_access_token
from wallet_service.db.models import generate_uuid
from wallet_service.modules.common import ErrorKind, ServiceResult

from .exceptions import UserAlreadyExistsError
from .models import AccessToken, User, UserSummary
from .repository import UserRepository

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class AuthService:
    """Issues credentials and session tokens."""

    def __init__(self, repository: UserRepository, bcrypt_rounds: int = 12) -> None:
        self._repository = repository
        self._bcrypt_rounds = bcrypt_rounds

    @classmethod
    def with_session(cls, session: AsyncSession) -> "AuthService":
        # Deferred: the SQL repositories import this package's models.
        from wallet_service.infrastructure.database.repositories import SqlUserRepository

        settings = get_settings()
        return cls(SqlUserRepository(session), bcrypt_rounds=settings.security.bcrypt_rounds)

    async def register_user(self, phone_number: str, password: str) -> ServiceResult[UserSummary]:
        logger.info("Registering user %s", phone_number)
        if not phone_number or not phone_number.strip():
            logger.warning("Registration rejected: empty phone number")
            return ServiceResult.failure(ErrorKind.INVALID_INPUT, "Phone number is required")

        try:
            if await self._repository.find_by_phone_number(phone_number) is not None:
                logger.warning("Registration rejected, phone number already registered: %s", phone_number)
                return ServiceResult.failure(
                    ErrorKind.CONFLICT, "User with the same phone number already exists"
                )

            if len(password or "") < MIN_PASSWORD_LENGTH:
                logger.warning("Registration rejected, password too short: %s", phone_number)
                return ServiceResult.failure(
                    ErrorKind.INVALID_INPUT, "Password length should be at least 6 characters"
                )
            if password_too_long(password):
                logger.warning("Registration rejected, password too long: %s", phone_number)
                return ServiceResult.failure(
                    ErrorKind.INVALID_INPUT, "Password length should be at most 72 bytes"
                )

            user = User(
                id=generate_uuid(),
                phone_number=phone_number,
                password_hash=hash_password(password, rounds=self._bcrypt_rounds),
                created_at=datetime.now(timezone.utc),
            )
            await self._repository.insert(user)
        except UserAlreadyExistsError:
            logger.warning("Registration lost a race on phone number %s", phone_number)
            return ServiceResult.failure(ErrorKind.CONFLICT, "User with the same phone number already exists")
        except Exception:
            logger.exception("Unexpected failure while registering user %s", phone_number)
            return ServiceResult.failure(ErrorKind.INTERNAL_ERROR, "An error occurred while registering user")

        logger.info("User registered: %s", phone_number)
        return ServiceResult.success(
            "User registered successfully",
            UserSummary(id=user.id, phone_number=user.phone_number),
        )

    async def login(self, phone_number: str, password: str) -> ServiceResult[AccessToken]:
        logger.info("Login attempt for %s", phone_number)
        try:
            user = await self._repository.find_by_phone_number(phone_number)
            if user is None:
                logger.warning("Login rejected, unknown user: %s", phone_number)
                return ServiceResult.failure(ErrorKind.NOT_FOUND, "User not found")

            if not verify_password(password or "", user.password_hash):
                logger.warning("Login rejected, invalid password for %s", phone_number)
                return ServiceResult.failure(ErrorKind.INVALID_INPUT, "Invalid password")

            token = create_access_token(user.phone_number)
        except Exception:
            logger.exception("Unexpected failure while logging in %s", phone_number)
            return ServiceResult.failure(ErrorKind.INTERNAL_ERROR, "An error occurred while logging in user")

        logger.info("User logged in: %s", phone_number)
        expires_in = get_settings().access_token_expire_minutes * 60
        return ServiceResult.success(
            "User logged in successfully",
            AccessToken(access_token=token, expires_in=expires_in),
        )
