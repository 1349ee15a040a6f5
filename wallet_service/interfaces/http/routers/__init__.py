"""HTTP routers."""

from . import auth, health, wallets

__all__ = ["auth", "health", "wallets"]
