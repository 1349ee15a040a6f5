"""Repository protocol for user credentials."""

from __future__ import annotations

from typing import Protocol

from .models import User


class UserRepository(Protocol):
    """Credential store keyed by phone number."""

    async def find_by_phone_number(self, phone_number: str) -> User | None:
        ...

    async def insert(self, user: User) -> None:
        ...
