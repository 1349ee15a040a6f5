"""Wallet provisioning service: validation pipeline, ownership and listings."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from wallet_service.core.config import get_settings
from wallet_service.db.models import generate_uuid
from wallet_service.modules.common import ErrorKind, PaginatedResult, ServiceResult

from .exceptions import WalletAlreadyExistsError
from .models import SCHEMES_BY_TYPE, AccountScheme, Wallet, WalletCreateInput, WalletType
from .repository import WalletRepository

logger = logging.getLogger(__name__)

# Largest row offset a store can address (signed 64-bit).
MAX_OFFSET = 2**63 - 1


def _is_valid_id(wallet_id: str) -> bool:
    try:
        uuid.UUID(wallet_id)
    except (TypeError, ValueError, AttributeError):
        return False
    return True


@dataclass(slots=True)
class WalletService:
    repository: WalletRepository
    max_wallets_per_owner: int = 5
    card_prefix_length: int = 6
    default_page_size: int = 10
    max_page_size: int = 100

    @classmethod
    def with_session(cls, session: AsyncSession) -> "WalletService":
        # Deferred: the SQL repositories import this package's models.
        from wallet_service.infrastructure.database.repositories import SqlWalletRepository

        settings = get_settings()
        return cls(
            SqlWalletRepository(session),
            max_wallets_per_owner=settings.wallets.max_wallets_per_owner,
            card_prefix_length=settings.wallets.card_prefix_length,
            default_page_size=settings.pagination.default_page_size,
            max_page_size=settings.pagination.max_page_size,
        )

    async def create_wallet(self, payload: WalletCreateInput, caller_identity: str) -> ServiceResult[Wallet]:
        if not caller_identity or payload.owner != caller_identity:
            logger.warning("Unauthorized attempt to create wallet for %s by %s", payload.owner, caller_identity)
            return ServiceResult.failure(ErrorKind.UNAUTHORIZED, "Unauthorized attempt to create wallet")

        wallet_type = WalletType.parse(payload.type)
        if wallet_type is None:
            logger.warning("Invalid wallet type: %s", payload.type)
            return ServiceResult.failure(ErrorKind.INVALID_INPUT, "Invalid wallet type")

        scheme = AccountScheme.parse(payload.account_scheme)
        if scheme is None:
            logger.warning("Invalid account scheme: %s", payload.account_scheme)
            return ServiceResult.failure(ErrorKind.INVALID_INPUT, "Invalid account scheme")

        if scheme not in SCHEMES_BY_TYPE[wallet_type]:
            logger.warning("Account scheme %s does not match wallet type %s", scheme.value, wallet_type.value)
            label = "card" if wallet_type is WalletType.CARD else "momo"
            return ServiceResult.failure(ErrorKind.INVALID_INPUT, f"Invalid account scheme for {label} wallet")

        name = (payload.name or "").strip()
        account_number = (payload.account_number or "").strip()
        if not name:
            return ServiceResult.failure(ErrorKind.INVALID_INPUT, "Wallet name is required")
        if not account_number:
            return ServiceResult.failure(ErrorKind.INVALID_INPUT, "Account number is required")
        if wallet_type is WalletType.CARD and len(account_number) < self.card_prefix_length:
            logger.warning("Card number shorter than %d characters", self.card_prefix_length)
            return ServiceResult.failure(ErrorKind.INVALID_INPUT, "Invalid card number")

        stored_number = (
            account_number[: self.card_prefix_length] if wallet_type is WalletType.CARD else account_number
        )

        try:
            if await self.repository.exists_by_account_number(account_number):
                logger.warning("Wallet with account number already exists (owner %s)", payload.owner)
                return ServiceResult.failure(
                    ErrorKind.CONFLICT, "Wallet with the same account number already exists"
                )

            if await self.repository.exists_by_name(name):
                logger.warning("Wallet with the same name already exists: %s", name)
                return ServiceResult.failure(ErrorKind.CONFLICT, "Wallet with the same name already exists")

            if wallet_type is WalletType.CARD and await self.repository.exists_by_account_number(stored_number):
                logger.warning("Wallet with the same card prefix already exists: %s", stored_number)
                return ServiceResult.failure(ErrorKind.CONFLICT, "Wallet with the same card number already exists")

            # Best effort: concurrent creations may both pass this count.
            if await self.repository.count_by_owner(payload.owner) >= self.max_wallets_per_owner:
                logger.warning("Owner %s reached the wallet limit", payload.owner)
                return ServiceResult.failure(
                    ErrorKind.CONFLICT,
                    f"A user cannot have more than {self.max_wallets_per_owner} wallets",
                )

            wallet = await self.repository.insert(
                Wallet(
                    id=generate_uuid(),
                    name=name,
                    type=wallet_type,
                    account_number=stored_number,
                    account_scheme=scheme,
                    owner=payload.owner,
                    created_at=datetime.now(timezone.utc),
                )
            )
        except WalletAlreadyExistsError:
            logger.warning("Wallet insert hit a unique constraint (owner %s)", payload.owner)
            return ServiceResult.failure(ErrorKind.CONFLICT, "Wallet with the same account number or name already exists")
        except Exception:
            logger.exception("Unexpected failure while adding wallet for %s", payload.owner)
            return ServiceResult.failure(ErrorKind.INTERNAL_ERROR, "An error occurred while adding wallet")

        logger.info("Wallet %s added for %s", wallet.id, wallet.owner)
        return ServiceResult.created("Wallet added successfully", wallet)

    async def get_wallet(self, wallet_id: str, caller_identity: str) -> ServiceResult[Wallet]:
        invalid = self._check_id(wallet_id)
        if invalid is not None:
            return invalid

        try:
            wallet = await self.repository.find_by_id(wallet_id)
        except Exception:
            logger.exception("Unexpected failure while getting wallet %s", wallet_id)
            return ServiceResult.failure(ErrorKind.INTERNAL_ERROR, "An error occurred while getting wallet")

        # A missing wallet answers the same as a foreign one.
        if wallet is None or wallet.owner != caller_identity:
            logger.warning("Unauthorized attempt to get wallet %s by %s", wallet_id, caller_identity)
            return ServiceResult.failure(ErrorKind.UNAUTHORIZED, "Unauthorized attempt to get wallet")

        return ServiceResult.success("Wallet retrieved successfully", wallet)

    async def remove_wallet(self, wallet_id: str, caller_identity: str) -> ServiceResult[bool]:
        invalid = self._check_id(wallet_id)
        if invalid is not None:
            return invalid

        try:
            wallet = await self.repository.find_by_id(wallet_id)
            if wallet is None:
                logger.warning("Wallet not found: %s", wallet_id)
                return ServiceResult.failure(ErrorKind.NOT_FOUND, "Wallet not found")
            if wallet.owner != caller_identity:
                logger.warning("Unauthorized attempt to remove wallet %s by %s", wallet_id, caller_identity)
                return ServiceResult.failure(ErrorKind.UNAUTHORIZED, "Unauthorized attempt to remove wallet")

            deleted = await self.repository.delete_by_id(wallet_id)
        except Exception:
            logger.exception("Unexpected failure while removing wallet %s", wallet_id)
            return ServiceResult.failure(ErrorKind.INTERNAL_ERROR, "An error occurred while removing wallet")

        if deleted == 0:
            logger.warning("Wallet removal failed: %s", wallet_id)
            return ServiceResult.failure(ErrorKind.NOT_FOUND, "Wallet removal failed")

        logger.info("Wallet %s removed by %s", wallet_id, caller_identity)
        return ServiceResult.success("Wallet removed successfully", True)

    async def list_wallets(
        self, page_number: int = 1, page_size: Optional[int] = None
    ) -> ServiceResult[PaginatedResult[Wallet]]:
        if page_size is None:
            page_size = self.default_page_size
        invalid = self._check_page(page_number, page_size)
        if invalid is not None:
            return invalid

        offset = (page_number - 1) * page_size
        try:
            wallets = [] if offset > MAX_OFFSET else list(await self.repository.list_page(offset, page_size))
            if not wallets:
                logger.warning("No wallets found on page %d", page_number)
                return ServiceResult.failure(ErrorKind.NOT_FOUND, "No wallets found")
            total = await self.repository.count_all()
        except Exception:
            logger.exception("Unexpected failure while listing wallets")
            return ServiceResult.failure(ErrorKind.INTERNAL_ERROR, "An error occurred while getting wallets")

        return ServiceResult.success(
            "Wallets retrieved successfully",
            PaginatedResult(total_count=total, page_number=page_number, page_size=page_size, data=wallets),
        )

    async def list_user_wallets(
        self, caller_identity: str, page_number: int = 1, page_size: Optional[int] = None
    ) -> ServiceResult[PaginatedResult[Wallet]]:
        if not caller_identity:
            logger.warning("Unauthorized attempt to list user wallets")
            return ServiceResult.failure(ErrorKind.UNAUTHORIZED, "Unauthorized attempt to get wallets")

        if page_size is None:
            page_size = self.default_page_size
        invalid = self._check_page(page_number, page_size)
        if invalid is not None:
            return invalid

        offset = (page_number - 1) * page_size
        try:
            wallets = (
                []
                if offset > MAX_OFFSET
                else list(await self.repository.list_page_by_owner(caller_identity, offset, page_size))
            )
            if not wallets:
                logger.warning("No wallets found for %s on page %d", caller_identity, page_number)
                return ServiceResult.failure(ErrorKind.NOT_FOUND, "No wallets found for this user")
            total = await self.repository.count_by_owner(caller_identity)
        except Exception:
            logger.exception("Unexpected failure while listing wallets for %s", caller_identity)
            return ServiceResult.failure(
                ErrorKind.INTERNAL_ERROR, "An error occurred while getting wallets for this user"
            )

        return ServiceResult.success(
            "Wallets retrieved successfully",
            PaginatedResult(total_count=total, page_number=page_number, page_size=page_size, data=wallets),
        )

    @staticmethod
    def _check_id(wallet_id: str) -> Optional[ServiceResult]:
        if not wallet_id:
            logger.warning("No wallet id provided")
            return ServiceResult.failure(ErrorKind.INVALID_INPUT, "No wallet id provided")
        if not _is_valid_id(wallet_id):
            logger.warning("Invalid wallet id: %s", wallet_id)
            return ServiceResult.failure(ErrorKind.INVALID_INPUT, "Invalid wallet id")
        return None

    def _check_page(self, page_number: int, page_size: int) -> Optional[ServiceResult]:
        if page_number < 1:
            logger.warning("Invalid page number: %s", page_number)
            return ServiceResult.failure(ErrorKind.INVALID_INPUT, "Invalid page number")
        if page_size < 1 or page_size > self.max_page_size:
            logger.warning("Invalid page size: %s", page_size)
            return ServiceResult.failure(ErrorKind.INVALID_INPUT, "Invalid page size")
        return None
