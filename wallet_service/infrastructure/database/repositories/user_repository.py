"""SQLAlchemy implementation of the credential store."""

from __future__ import annotations

from datetime import timezone

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from wallet_service.db.models import User as UserModel
from wallet_service.modules.accounts.exceptions import UserAlreadyExistsError
from wallet_service.modules.accounts.models import User
from wallet_service.modules.accounts.repository import UserRepository


class SqlUserRepository(UserRepository):
    """User repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_phone_number(self, phone_number: str) -> User | None:
        stmt = select(UserModel).where(UserModel.phone_number == phone_number)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def insert(self, user: User) -> None:
        model = UserModel(
            id=user.id,
            phone_number=user.phone_number,
            password_hash=user.password_hash,
            created_at=user.created_at,
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._session.rollback()
            raise UserAlreadyExistsError(user.phone_number) from exc

    @staticmethod
    def _to_domain(model: UserModel | None) -> User | None:
        if model is None:
            return None
        created_at = model.created_at
        if created_at is not None and created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return User(
            id=str(model.id),
            phone_number=model.phone_number,
            password_hash=model.password_hash,
            created_at=created_at,
        )
