"""Domain models for wallet metadata."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Union


class _LookupEnum(str, Enum):
    @classmethod
    def parse(cls, value: Union[str, "_LookupEnum", None]):
        """Return the member matching ``value`` (case-insensitive), or None."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        wanted = value.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        return None


class WalletType(_LookupEnum):
    MOMO = "Momo"
    CARD = "Card"


class AccountScheme(_LookupEnum):
    MTN = "MTN"
    VODAFONE = "Vodafone"
    AIRTELTIGO = "AirtelTigo"
    VISA = "Visa"
    MASTERCARD = "Mastercard"


SCHEMES_BY_TYPE: dict[WalletType, frozenset[AccountScheme]] = {
    WalletType.CARD: frozenset({AccountScheme.VISA, AccountScheme.MASTERCARD}),
    WalletType.MOMO: frozenset({AccountScheme.MTN, AccountScheme.VODAFONE, AccountScheme.AIRTELTIGO}),
}


@dataclass(slots=True)
class Wallet:
    id: str
    name: str
    type: WalletType
    account_number: str
    account_scheme: AccountScheme
    owner: str
    created_at: Optional[datetime] = None


@dataclass(slots=True)
class WalletCreateInput:
    """Raw creation request; type and scheme are validated by the service."""

    name: str
    type: Union[str, WalletType]
    account_number: str
    account_scheme: Union[str, AccountScheme]
    owner: str
