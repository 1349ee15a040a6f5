"""SQLAlchemy implementation of the wallet store."""

from __future__ import annotations

from datetime import timezone

from sqlalchemy import delete, exists, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from wallet_service.db.models import Wallet as WalletModel
from wallet_service.modules.wallets.exceptions import WalletAlreadyExistsError
from wallet_service.modules.wallets.models import AccountScheme, Wallet, WalletType
from wallet_service.modules.wallets.repository import WalletRepository


class SqlWalletRepository(WalletRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert(self, wallet: Wallet) -> Wallet:
        model = WalletModel(
            id=wallet.id,
            name=wallet.name,
            type=wallet.type.value,
            account_number=wallet.account_number,
            account_scheme=wallet.account_scheme.value,
            owner=wallet.owner,
            created_at=wallet.created_at,
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._session.rollback()
            raise WalletAlreadyExistsError(wallet.account_number) from exc
        await self._session.refresh(model)
        return self._to_domain(model)

    async def find_by_id(self, wallet_id: str) -> Wallet | None:
        stmt = select(WalletModel).where(WalletModel.id == wallet_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def delete_by_id(self, wallet_id: str) -> int:
        stmt = delete(WalletModel).where(WalletModel.id == wallet_id)
        result = await self._session.execute(stmt)
        return result.rowcount or 0

    async def exists_by_account_number(self, account_number: str) -> bool:
        stmt = select(exists().where(WalletModel.account_number == account_number))
        return bool(await self._session.scalar(stmt))

    async def exists_by_name(self, name: str) -> bool:
        stmt = select(exists().where(WalletModel.name == name))
        return bool(await self._session.scalar(stmt))

    async def count_by_owner(self, owner: str) -> int:
        stmt = select(func.count()).select_from(WalletModel).where(WalletModel.owner == owner)
        return int(await self._session.scalar(stmt) or 0)

    async def count_all(self) -> int:
        stmt = select(func.count()).select_from(WalletModel)
        return int(await self._session.scalar(stmt) or 0)

    async def list_page(self, offset: int, limit: int) -> list[Wallet]:
        stmt = (
            select(WalletModel)
            .order_by(WalletModel.created_at, WalletModel.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_page_by_owner(self, owner: str, offset: int, limit: int) -> list[Wallet]:
        stmt = (
            select(WalletModel)
            .where(WalletModel.owner == owner)
            .order_by(WalletModel.created_at, WalletModel.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    @staticmethod
    def _to_domain(model: WalletModel) -> Wallet:
        created_at = model.created_at
        if created_at is not None and created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return Wallet(
            id=str(model.id),
            name=model.name,
            type=WalletType(model.type),
            account_number=model.account_number,
            account_scheme=AccountScheme(model.account_scheme),
            owner=model.owner,
            created_at=created_at,
        )
