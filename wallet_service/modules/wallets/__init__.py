"""Wallet domain exports"""

from .exceptions import WalletAlreadyExistsError, WalletError
from .models import SCHEMES_BY_TYPE, AccountScheme, Wallet, WalletCreateInput, WalletType
from .repository import WalletRepository
from .service import WalletService

__all__ = [
    "SCHEMES_BY_TYPE",
    "AccountScheme",
    "Wallet",
    "WalletAlreadyExistsError",
    "WalletCreateInput",
    "WalletError",
    "WalletRepository",
    "WalletService",
    "WalletType",
]
