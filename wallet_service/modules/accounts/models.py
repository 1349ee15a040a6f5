"""Domain models for user credentials."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(slots=True)
class User:
    id: str
    phone_number: str
    password_hash: str = field(repr=False)
    created_at: datetime | None = None


@dataclass(slots=True)
class UserSummary:
    id: str
    phone_number: str


@dataclass(slots=True)
class AccessToken:
    access_token: str
    expires_in: int
    token_type: str = "bearer"
