"""Repository protocol for wallet records."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import Wallet


class WalletRepository(Protocol):
    async def insert(self, wallet: Wallet) -> Wallet:
        ...

    async def find_by_id(self, wallet_id: str) -> Wallet | None:
        ...

    async def delete_by_id(self, wallet_id: str) -> int:
        ...

    async def exists_by_account_number(self, account_number: str) -> bool:
        ...

    async def exists_by_name(self, name: str) -> bool:
        ...

    async def count_by_owner(self, owner: str) -> int:
        ...

    async def count_all(self) -> int:
        ...

    async def list_page(self, offset: int, limit: int) -> Sequence[Wallet]:
        ...

    async def list_page_by_owner(self, owner: str, offset: int, limit: int) -> Sequence[Wallet]:
        ...
