"""Domain modules and their public exports."""

from . import accounts, common, wallets

__all__ = [
    "accounts",
    "common",
    "wallets",
]
