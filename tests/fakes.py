"""In-memory store doubles honouring the repository protocols."""

from __future__ import annotations

from wallet_service.modules.accounts import User, UserAlreadyExistsError
from wallet_service.modules.wallets import Wallet, WalletAlreadyExistsError


class InMemoryUserRepository:
    def __init__(self) -> None:
        self.users: dict[str, User] = {}

    async def find_by_phone_number(self, phone_number: str) -> User | None:
        return self.users.get(phone_number)

    async def insert(self, user: User) -> None:
        if user.phone_number in self.users:
            raise UserAlreadyExistsError(user.phone_number)
        self.users[user.phone_number] = user


class InMemoryWalletRepository:
    """Keeps insertion order, like the SQL store ordered by creation time."""

    def __init__(self) -> None:
        self.wallets: list[Wallet] = []
        self.inserts = 0

    async def insert(self, wallet: Wallet) -> Wallet:
        for existing in self.wallets:
            if existing.account_number == wallet.account_number or existing.name == wallet.name:
                raise WalletAlreadyExistsError(wallet.account_number)
        self.wallets.append(wallet)
        self.inserts += 1
        return wallet

    async def find_by_id(self, wallet_id: str) -> Wallet | None:
        return next((wallet for wallet in self.wallets if wallet.id == wallet_id), None)

    async def delete_by_id(self, wallet_id: str) -> int:
        before = len(self.wallets)
        self.wallets = [wallet for wallet in self.wallets if wallet.id != wallet_id]
        return before - len(self.wallets)

    async def exists_by_account_number(self, account_number: str) -> bool:
        return any(wallet.account_number == account_number for wallet in self.wallets)

    async def exists_by_name(self, name: str) -> bool:
        return any(wallet.name == name for wallet in self.wallets)

    async def count_by_owner(self, owner: str) -> int:
        return sum(1 for wallet in self.wallets if wallet.owner == owner)

    async def count_all(self) -> int:
        return len(self.wallets)

    async def list_page(self, offset: int, limit: int) -> list[Wallet]:
        return self.wallets[offset : offset + limit]

    async def list_page_by_owner(self, owner: str, offset: int, limit: int) -> list[Wallet]:
        owned = [wallet for wallet in self.wallets if wallet.owner == owner]
        return owned[offset : offset + limit]


class RacingWalletRepository(InMemoryWalletRepository):
    """Every pre-check passes, then the insert hits the unique constraint."""

    async def exists_by_account_number(self, account_number: str) -> bool:
        return False

    async def exists_by_name(self, name: str) -> bool:
        return False

    async def insert(self, wallet: Wallet) -> Wallet:
        raise WalletAlreadyExistsError(wallet.account_number)


class UnreachableWalletRepository(InMemoryWalletRepository):
    async def _fail(self, *args, **kwargs):
        raise ConnectionError("database unreachable")

    exists_by_account_number = _fail
    find_by_id = _fail
    list_page = _fail
    list_page_by_owner = _fail


class UnreachableUserRepository(InMemoryUserRepository):
    async def find_by_phone_number(self, phone_number: str) -> User | None:
        raise ConnectionError("database unreachable")
