"""Wallet domain specific exceptions."""


class WalletError(Exception):
    """Base class for wallet domain errors."""


class WalletAlreadyExistsError(WalletError):
    """Raised by the store when an account number or name is already taken."""
